"""Typed configuration loading and access.

Configuration lives in an optional `npmrel.toml` next to the package being
released. Every key has a default, so a missing file is not an error.

Example:
    [npm]
    bin = "npm"
    reference_package = "react-native"
    main_tag = "next"

    [git]
    bin = "git"

    [release]
    tag_env = "CIRCLE_TAG"
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_table

__all__ = [
    "CONFIG_FILENAME",
    "Config",
    "ConfigFileError",
    "GitConfig",
    "NpmConfig",
    "ReleaseConfig",
    "load_config",
]

CONFIG_FILENAME = "npmrel.toml"

DEFAULT_NPM_BIN = "npm"
DEFAULT_GIT_BIN = "git"
# Package whose `next` tag defines the upcoming minor for nightlies.
DEFAULT_REFERENCE_PACKAGE = "react-native"
DEFAULT_MAIN_TAG = "next"
# Set by CircleCI on tag-triggered jobs.
DEFAULT_TAG_ENV = "CIRCLE_TAG"


@dataclass(frozen=True, slots=True)
class ConfigFileError:
    """Error when the config file cannot be read or parsed."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class NpmConfig:
    bin: str = DEFAULT_NPM_BIN
    reference_package: str = DEFAULT_REFERENCE_PACKAGE
    main_tag: str = DEFAULT_MAIN_TAG


@dataclass(frozen=True, slots=True)
class GitConfig:
    bin: str = DEFAULT_GIT_BIN


@dataclass(frozen=True, slots=True)
class ReleaseConfig:
    """Where the release identifier comes from."""

    tag_env: str = DEFAULT_TAG_ENV


@dataclass(frozen=True, slots=True)
class Config:
    """Main configuration container."""

    npm: NpmConfig = field(default_factory=NpmConfig)
    git: GitConfig = field(default_factory=GitConfig)
    release: ReleaseConfig = field(default_factory=ReleaseConfig)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        npm: StrDict = get_table(data, "npm") or {}
        git: StrDict = get_table(data, "git") or {}
        release: StrDict = get_table(data, "release") or {}

        return cls(
            npm=NpmConfig(
                bin=get_str(npm, "bin") or DEFAULT_NPM_BIN,
                reference_package=get_str(npm, "reference_package") or DEFAULT_REFERENCE_PACKAGE,
                main_tag=get_str(npm, "main_tag") or DEFAULT_MAIN_TAG,
            ),
            git=GitConfig(bin=get_str(git, "bin") or DEFAULT_GIT_BIN),
            release=ReleaseConfig(tag_env=get_str(release, "tag_env") or DEFAULT_TAG_ENV),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigFileError]:
    import tomllib

    try:
        data_obj: object = tomllib.loads(path.read_bytes().decode("utf-8"))
    except FileNotFoundError:
        return Err(ConfigFileError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigFileError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigFileError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigFileError(f"Error reading config: {e}", path=path))

    data = as_str_dict(data_obj)
    if data is None:
        return Err(ConfigFileError("Config root must be a TOML table", path=path))
    return Ok(data)


def load_config(path: Path) -> Result[Config, ConfigFileError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to npmrel.toml

    Returns:
        Ok(Config) on success, Err(ConfigFileError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return Ok(Config.from_dict(result.value))
