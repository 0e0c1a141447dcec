"""Error taxonomy and CLI exit codes.

Every public operation either succeeds or raises one of the exceptions below;
nothing is retried. The CLI maps them onto `ErrorCode` values which are used
as process exit codes and should remain stable.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "CommandError",
    "ConfigurationError",
    "ErrorCode",
    "InvalidVersionError",
    "NotFoundError",
    "NpmRelError",
    "SourceControlError",
    "UnsupportedBuildTypeError",
    "exit_code_for",
]


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    - 0: Success
    - 1: User error (bad input, missing release identifier, bad version)
    - 2: Environment error (not in git, git unavailable)
    - 3: Command error (npm exited non-zero, nothing matched)
    """

    OK = 0
    USER_ERROR = 1
    ENV_ERROR = 2
    COMMAND_ERROR = 3


class NpmRelError(Exception):
    """Base class for every error raised by npmrel."""


class ConfigurationError(NpmRelError):
    """A required environment input is missing."""


class UnsupportedBuildTypeError(NpmRelError):
    """The build type is not one of dry-run, release, nightly, prealpha."""

    def __init__(self, build_type: str) -> None:
        super().__init__(f"Unsupported build type: {build_type}")
        self.build_type = build_type


class InvalidVersionError(NpmRelError, ValueError):
    """A version string is malformed or not valid for the requested mode."""


class SourceControlError(NpmRelError):
    """The working tree is not under git, or a git query failed."""


class CommandError(NpmRelError):
    """An external command exited non-zero.

    Attributes:
        stderr: Captured standard error of the failed command.
        returncode: Exit code of the failed command.
    """

    def __init__(self, message: str, *, stderr: str = "", returncode: int = 1) -> None:
        super().__init__(message)
        self.stderr = stderr
        self.returncode = returncode


class NotFoundError(NpmRelError):
    """A version range query matched nothing in the registry."""


def exit_code_for(error: NpmRelError) -> ErrorCode:
    """Map an exception onto the CLI exit code."""
    match error:
        case ConfigurationError() | UnsupportedBuildTypeError() | InvalidVersionError():
            return ErrorCode.USER_ERROR
        case SourceControlError():
            return ErrorCode.ENV_ERROR
        case CommandError() | NotFoundError():
            return ErrorCode.COMMAND_ERROR
    return ErrorCode.USER_ERROR
