from __future__ import annotations

from dataclasses import dataclass
from typing import Literal


BuildType = Literal["dry-run", "release", "nightly", "prealpha"]

BUILD_TYPES: tuple[BuildType, ...] = ("dry-run", "release", "nightly", "prealpha")


@dataclass(frozen=True, slots=True)
class ParsedVersion:
    """A version string split into its semver parts.

    `version` is the input without a leading `v`.
    """

    version: str
    major: int
    minor: int
    patch: int
    prerelease: str | None = None


@dataclass(frozen=True, slots=True)
class NpmInfo:
    """Version to publish and the dist-tag to publish it under."""

    version: str
    # None means "do not tag"; the dry-run version is never published.
    tag: str | None
