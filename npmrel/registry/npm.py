"""npm CLI wrappers.

Every call shells out to `npm` synchronously through the process runner.
`publish_package` hands back the raw result; the other operations raise
`CommandError` (or `NotFoundError`) when npm exits non-zero.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from npmrel.core.errors import CommandError, NotFoundError
from npmrel.core.result import Err, Result
from npmrel.core.structured import as_str_dict, get_table, str_list
from npmrel.platform.process import ProcessError
from npmrel.platform.process import run as run_process

__all__ = [
    "NpmPackageOptions",
    "diff_packages",
    "get_package_version_str_by_tag",
    "get_versions_by_spec",
    "pack",
    "publish_package",
]

# npm 6-9 prefix every log line with `npm ERR!`, npm 10+ with `npm error`.
_E404_MARKERS = ("npm ERR! code E404", "npm error code E404")
_LOG_LINE_MARKERS = ("npm ERR", "npm error")


@dataclass(frozen=True, slots=True)
class NpmPackageOptions:
    tags: tuple[str, ...] | None = None
    otp: str | None = None


def publish_package(
    package_path: Path,
    options: NpmPackageOptions,
    env: dict[str, str] | None = None,
    *,
    npm: str = "npm",
) -> Result[str, ProcessError]:
    """Run `npm publish` in `package_path`.

    The result is returned as-is: a failed publish is an `Err`, not an
    exception, and the caller decides what to do with it.
    """
    cmd = [npm, "publish"]
    for tag in options.tags or ():
        cmd += ["--tag", tag]
    if options.otp is not None:
        cmd += ["--otp", options.otp]
    return run_process(cmd, cwd=package_path, env=env)


def diff_packages(spec_a: str, spec_b: str, cwd: Path, *, npm: str = "npm") -> str:
    """Names of the files that differ between two package specs."""
    result = run_process(
        [npm, "diff", f"--diff={spec_a}", f"--diff={spec_b}", "--diff-name-only"],
        cwd=cwd,
    )
    if isinstance(result, Err):
        raise CommandError(
            f"Failed to diff {spec_a} and {spec_b}\n{result.error.stderr}",
            stderr=result.error.stderr,
            returncode=result.error.returncode,
        )
    return result.value


def pack(package_path: Path, *, npm: str = "npm") -> None:
    """Run `npm pack` in `package_path`, leaving the tarball there."""
    result = run_process([npm, "pack"], cwd=package_path)
    if isinstance(result, Err):
        raise CommandError(
            result.error.stderr,
            stderr=result.error.stderr,
            returncode=result.error.returncode,
        )


def get_package_version_str_by_tag(
    package_name: str,
    tag: str | None = None,
    *,
    npm: str = "npm",
    cwd: Path | None = None,
) -> str:
    """Version that `package_name@tag` currently resolves to.

    Without a tag this is whatever npm resolves the bare name to (`latest`).
    """
    spec = f"{package_name}@{tag}" if tag is not None else package_name
    cmd = [npm, "view", spec, "version"]
    result = run_process(cmd, cwd=cwd or Path.cwd())
    if isinstance(result, Err):
        raise CommandError(
            f"Failed to run '{' '.join(cmd)}'\n{result.error.stderr}",
            stderr=result.error.stderr,
            returncode=result.error.returncode,
        )
    return result.value.strip()


def get_versions_by_spec(
    package_name: str,
    spec: str,
    *,
    npm: str = "npm",
    cwd: Path | None = None,
) -> list[str]:
    """All published versions of `package_name` matching the range `spec`.

    Raises:
        NotFoundError: nothing matches; the message is npm's own summary.
        CommandError: npm failed for any other reason.
    """
    cmd = [npm, "view", f"{package_name}@{spec}", "version", "--json"]
    result = run_process(cmd, cwd=cwd or Path.cwd())
    if isinstance(result, Err):
        stderr = result.error.stderr
        if any(marker in stderr for marker in _E404_MARKERS):
            raise NotFoundError(_e404_summary(stderr))
        raise CommandError(
            f"Failed: {' '.join(cmd)}",
            stderr=stderr,
            returncode=result.error.returncode,
        )

    try:
        versions: object = json.loads(result.value.strip())
    except json.JSONDecodeError as e:
        raise CommandError(f"npm view returned invalid JSON: {e}", stderr="") from e

    found = str_list(versions)
    if found is None:
        raise CommandError(f"Unexpected npm view output: {result.value.strip()}", stderr="")
    return found


def _e404_summary(stderr: str) -> str:
    # After the log lines, npm --json prints {"error": {"code", "summary", "detail"}}.
    payload = "".join(
        line for line in stderr.splitlines() if not any(m in line for m in _LOG_LINE_MARKERS)
    )
    try:
        obj: object = json.loads(payload)
    except json.JSONDecodeError as e:
        raise CommandError(f"Unreadable npm error payload: {e}", stderr=stderr) from e

    data = as_str_dict(obj)
    error = get_table(data, "error") if data is not None else None
    summary = error.get("summary") if error is not None else None
    if not isinstance(summary, str):
        raise CommandError("npm error payload has no summary", stderr=stderr)
    return summary
