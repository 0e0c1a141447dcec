"""Read-only git queries used by release resolution.

Usage:
    repo = Repository(Path("."))
    if not repo.is_inside_work_tree():
        ...
    match repo.head_commit():
        case Ok(sha):
            print(sha[:9])
        case Err(e):
            print(f"Error: {e.message}")
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from npmrel.core.result import Err, Ok, Result
from npmrel.platform.process import ProcessError
from npmrel.platform.process import run as run_process

_GIT_TIMEOUT_SECONDS = 30.0

# Tag moved by the release trigger onto the commit that should become `latest`.
LATEST_TAG = "latest"

__all__ = ["GitError", "LATEST_TAG", "Repository"]


@dataclass(frozen=True, slots=True)
class GitError:
    """Error from a git operation.

    Attributes:
        command: The git subcommand that failed
        message: Error message
        returncode: Process return code
    """

    command: str
    message: str
    returncode: int = 1


class Repository:
    """Git working tree at `path`.

    Attributes:
        path: Directory inside the working tree
        git: git executable
    """

    def __init__(self, path: Path, *, git: str = "git") -> None:
        self.path = path
        self.git = git

    def is_inside_work_tree(self) -> bool:
        """True if `path` is inside a git working tree."""
        result = self._run(["rev-parse", "--is-inside-work-tree"])
        return isinstance(result, Ok) and result.value.strip() == "true"

    def head_commit(self) -> Result[str, GitError]:
        """Full sha of HEAD.

        Returns:
            Ok(sha) on success
            Err(GitError) if git fails or HEAD does not resolve
        """
        result = self._run(["rev-parse", "HEAD"])
        match result:
            case Err(e):
                return Err(
                    GitError(
                        command="rev-parse",
                        message=e.stderr.strip() or "git rev-parse HEAD failed",
                        returncode=e.returncode,
                    )
                )
            case Ok(stdout):
                sha = stdout.strip()
                if not sha:
                    return Err(GitError(command="rev-parse", message="HEAD did not resolve"))
                return Ok(sha)

    def is_tagged_latest(self, commit: str) -> bool:
        """True if the `latest` tag points at `commit`.

        A missing tag counts as not latest.
        """
        result = self._run(["rev-list", "-1", LATEST_TAG])
        if isinstance(result, Err):
            return False
        return result.value.strip() == commit

    def _run(self, args: list[str]) -> Result[str, ProcessError]:
        return run_process(
            [self.git, "-C", str(self.path), *args],
            cwd=self.path,
            timeout=_GIT_TIMEOUT_SECONDS,
        )
