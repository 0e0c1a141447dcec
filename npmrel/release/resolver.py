"""Version and dist-tag resolution per build type.

`get_npm_info` is pure apart from the capabilities carried by `ResolveEnv`:
the clock, the environment mapping, git and the registry lookup. Tests pass
fakes; `default_env` wires the real ones.
"""

from __future__ import annotations

import os
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import UTC, datetime
from functools import partial
from pathlib import Path
from typing import Protocol

from npmrel.core.config import Config
from npmrel.core.errors import ConfigurationError, SourceControlError, UnsupportedBuildTypeError
from npmrel.core.result import Err, Result
from npmrel.git.repository import GitError, Repository
from npmrel.registry.npm import get_package_version_str_by_tag
from npmrel.release.model import NpmInfo
from npmrel.release.version import MAIN_MAJOR, parse_version

__all__ = ["ResolveEnv", "SourceControl", "default_env", "get_main_version", "get_npm_info"]

SHORT_COMMIT_LENGTH = 9


class SourceControl(Protocol):
    def is_inside_work_tree(self) -> bool: ...

    def head_commit(self) -> Result[str, GitError]: ...

    def is_tagged_latest(self, commit: str) -> bool: ...


@dataclass(frozen=True, slots=True)
class ResolveEnv:
    now: Callable[[], datetime]
    environ: Mapping[str, str]
    scm: SourceControl
    # (package name, dist-tag) -> version currently published under that tag
    view_version: Callable[[str, str | None], str]
    reference_package: str = "react-native"
    main_tag: str = "next"
    tag_env: str = "CIRCLE_TAG"


def default_env(config: Config, workspace_root: Path) -> ResolveEnv:
    """Resolution environment backed by the real clock, os.environ, git and npm."""
    return ResolveEnv(
        now=partial(datetime.now, UTC),
        environ=os.environ,
        scm=Repository(workspace_root, git=config.git.bin),
        view_version=partial(
            get_package_version_str_by_tag, npm=config.npm.bin, cwd=workspace_root
        ),
        reference_package=config.npm.reference_package,
        main_tag=config.npm.main_tag,
        tag_env=config.release.tag_env,
    )


def get_main_version(env: ResolveEnv) -> str:
    """Version `main` is heading towards: the reference package's `next` with minor + 1."""
    next_version = env.view_version(env.reference_package, env.main_tag)
    parsed = parse_version(next_version, "release")
    return f"{parsed.major}.{parsed.minor + 1}.0"


def _utc(env: ResolveEnv) -> datetime:
    now = env.now()
    if now.tzinfo is None:
        return now.replace(tzinfo=UTC)
    return now.astimezone(UTC)


def _current_commit(env: ResolveEnv) -> str:
    result = env.scm.head_commit()
    if isinstance(result, Err):
        raise SourceControlError(f"Unable to read current commit: {result.error.message}")
    return result.value


def get_npm_info(build_type: str, env: ResolveEnv) -> NpmInfo:
    """Version and dist-tag to publish for `build_type`.

    Raises:
        ConfigurationError: release build without a release tag in the environment.
        SourceControlError: release build outside git, or HEAD unreadable.
        UnsupportedBuildTypeError: unknown build type.
    """
    if build_type == "dry-run":
        short_commit = _current_commit(env)[:SHORT_COMMIT_LENGTH]
        # Never published; the 1000 major makes a leak obvious.
        return NpmInfo(version=f"{MAIN_MAJOR}.0.0-{short_commit}", tag=None)

    if build_type == "nightly":
        short_commit = _current_commit(env)[:SHORT_COMMIT_LENGTH]
        main_version = get_main_version(env)
        date_identifier = _utc(env).strftime("%Y%m%d")
        return NpmInfo(
            version=f"{main_version}-nightly-{date_identifier}-{short_commit}",
            tag="nightly",
        )

    if build_type == "prealpha":
        # YYYYMMDDHH stays below 2**32 - 1. Prealphas are at most hourly since
        # a nightly takes about an hour to complete.
        date_identifier = _utc(env).strftime("%Y%m%d%H")
        return NpmInfo(version=f"0.0.0-prealpha-{date_identifier}", tag="prealpha")

    if build_type == "release":
        release_tag = env.environ.get(env.tag_env)
        if not release_tag:
            raise ConfigurationError(
                f"{env.tag_env} is not set for release. This should only be run in CI, "
                f"where {env.tag_env} holds the tag that triggered the release."
            )

        parsed = parse_version(release_tag, "release")

        if not env.scm.is_inside_work_tree():
            raise SourceControlError("Not in git. We do not want to publish anything")
        # The release trigger moves the `latest` git tag when this should become npm `latest`.
        is_latest = env.scm.is_tagged_latest(_current_commit(env))

        # npm tags an untagged publish as `latest`; older lines get `X.Y-stable` instead.
        if parsed.prerelease is not None:
            tag = "next"
        elif is_latest:
            tag = "latest"
        else:
            tag = f"{parsed.major}.{parsed.minor}-stable"

        return NpmInfo(version=parsed.version, tag=tag)

    raise UnsupportedBuildTypeError(build_type)
