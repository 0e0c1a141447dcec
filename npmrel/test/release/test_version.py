from __future__ import annotations

import pytest

from npmrel.core.errors import InvalidVersionError, UnsupportedBuildTypeError
from npmrel.release.model import ParsedVersion
from npmrel.release.version import (
    is_main,
    is_nightly,
    is_prealpha,
    is_release_candidate,
    is_stable_release,
    parse_version,
)


def test_parse_stable() -> None:
    assert parse_version("0.72.3") == ParsedVersion("0.72.3", 0, 72, 3, None)


def test_parse_strips_v_prefix() -> None:
    parsed = parse_version("v0.72.0-rc.1")
    assert parsed.version == "0.72.0-rc.1"
    assert (parsed.major, parsed.minor, parsed.patch) == (0, 72, 0)
    assert parsed.prerelease == "rc.1"


def test_parse_keeps_dashes_in_prerelease() -> None:
    parsed = parse_version("0.74.0-nightly-20231018-abcdef123")
    assert parsed.prerelease == "nightly-20231018-abcdef123"


@pytest.mark.parametrize("raw", ["", "0.72", "v0.72.x", "01.2.3", "0.72.3-", "latest"])
def test_parse_rejects_malformed(raw: str) -> None:
    with pytest.raises(InvalidVersionError):
        parse_version(raw)


def test_release_mode_accepts_stable_and_rc() -> None:
    assert parse_version("0.72.3", "release").prerelease is None
    assert parse_version("0.72.0-rc.4", "release").prerelease == "rc.4"


@pytest.mark.parametrize(
    "raw",
    ["0.72.0-nightly-20231018-abcdef123", "1000.0.0-abcdef123", "0.72.0-beta.1", "1000.0.0"],
)
def test_release_mode_rejects_other_builds(raw: str) -> None:
    with pytest.raises(InvalidVersionError, match="not valid for release"):
        parse_version(raw, "release")


def test_dry_run_mode_accepts_main_and_nightly() -> None:
    parse_version("1000.0.0-abcdef123", "dry-run")
    parse_version("0.74.0-nightly-20231018-abcdef123", "dry-run")
    parse_version("0.72.3", "dry-run")


def test_nightly_and_prealpha_modes() -> None:
    parse_version("0.74.0-nightly-20231018-abcdef123", "nightly")
    parse_version("0.0.0-prealpha-2023101814", "prealpha")
    with pytest.raises(InvalidVersionError):
        parse_version("0.72.3", "nightly")
    with pytest.raises(InvalidVersionError):
        parse_version("0.1.0-prealpha-2023101814", "prealpha")


def test_unknown_mode() -> None:
    with pytest.raises(UnsupportedBuildTypeError):
        parse_version("0.72.3", "weekly")


def test_predicates() -> None:
    assert is_main(parse_version("1000.0.0-abcdef123"))
    assert not is_stable_release(parse_version("1000.0.0"))
    assert is_stable_release(parse_version("0.72.3"))
    assert is_release_candidate(parse_version("0.72.0-rc.0"))
    assert not is_release_candidate(parse_version("0.72.0-rc.01"))
    assert is_nightly(parse_version("0.74.0-nightly-20231018-abcdef123"))
    assert is_prealpha(parse_version("0.0.0-prealpha-2023101814"))


def test_build_metadata_is_not_prerelease() -> None:
    parsed = parse_version("1.2.3+build.5")
    assert parsed == ParsedVersion("1.2.3+build.5", 1, 2, 3, None)
    assert is_stable_release(parsed)

    rc = parse_version("v0.72.0-rc.1+sha.abcdef1", "release")
    assert rc.prerelease == "rc.1"
    assert rc.version == "0.72.0-rc.1+sha.abcdef1"


@pytest.mark.parametrize("raw", ["1.2.3+", "1.2.3+build!"])
def test_malformed_build_metadata(raw: str) -> None:
    with pytest.raises(InvalidVersionError):
        parse_version(raw)


def test_release_candidate_dash_form() -> None:
    parsed = parse_version("0.72.0-rc-2", "release")
    assert parsed.prerelease == "rc-2"
    assert is_release_candidate(parsed)
