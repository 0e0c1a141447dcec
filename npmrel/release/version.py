from __future__ import annotations

import re

from npmrel.core.errors import InvalidVersionError, UnsupportedBuildTypeError
from npmrel.release.model import BUILD_TYPES, ParsedVersion


_VERSION_RE = re.compile(
    r"^v?((0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)(?:-([^+]+))?(?:\+[0-9A-Za-z.-]+)?)$"
)
_RC_RE = re.compile(r"^rc[.-](0|[1-9]\d*)$")
_PREALPHA_RE = re.compile(r"^prealpha-\d+$")

# Placeholder major used for builds that must never be mistaken for a release.
MAIN_MAJOR = 1000


def is_main(v: ParsedVersion) -> bool:
    return v.major == MAIN_MAJOR and v.minor == 0 and v.patch == 0


def is_stable_release(v: ParsedVersion) -> bool:
    return v.prerelease is None and not is_main(v)


def is_release_candidate(v: ParsedVersion) -> bool:
    return v.prerelease is not None and _RC_RE.match(v.prerelease) is not None and not is_main(v)


def is_nightly(v: ParsedVersion) -> bool:
    return v.prerelease is not None and v.prerelease.startswith("nightly-")


def is_prealpha(v: ParsedVersion) -> bool:
    return (
        v.major == 0
        and v.minor == 0
        and v.patch == 0
        and v.prerelease is not None
        and _PREALPHA_RE.match(v.prerelease) is not None
    )


def _is_valid_for(v: ParsedVersion, build_type: str) -> bool:
    match build_type:
        case "release":
            return is_stable_release(v) or is_release_candidate(v)
        case "dry-run":
            return is_main(v) or is_nightly(v) or is_stable_release(v) or is_release_candidate(v)
        case "nightly":
            return is_nightly(v)
        case "prealpha":
            return is_prealpha(v)
        case _:
            raise AssertionError(f"unexpected build type: {build_type}")


def parse_version(version_str: str, build_type: str | None = None) -> ParsedVersion:
    """Parse `v?MAJOR.MINOR.PATCH[-PRERELEASE]`.

    When `build_type` is given the version must also be one that build type
    may produce, e.g. `release` accepts `0.72.3` and `0.72.0-rc.1` only.

    Raises:
        InvalidVersionError: malformed, or not valid for `build_type`.
        UnsupportedBuildTypeError: `build_type` is not a known build type.
    """
    if build_type is not None and build_type not in BUILD_TYPES:
        raise UnsupportedBuildTypeError(build_type)

    m = _VERSION_RE.match(version_str.strip())
    if m is None:
        raise InvalidVersionError(
            f"You must pass a correctly formatted version; couldn't parse {version_str}"
        )

    parsed = ParsedVersion(
        version=m.group(1),
        major=int(m.group(2)),
        minor=int(m.group(3)),
        patch=int(m.group(4)),
        prerelease=m.group(5),
    )

    if build_type is not None and not _is_valid_for(parsed, build_type):
        raise InvalidVersionError(f"Version {parsed.version} is not valid for {build_type}")

    return parsed
