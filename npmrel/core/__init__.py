"""Core types: results, errors, configuration."""

from .config import Config, ConfigFileError, load_config
from .errors import (
    CommandError,
    ConfigurationError,
    ErrorCode,
    InvalidVersionError,
    NotFoundError,
    NpmRelError,
    SourceControlError,
    UnsupportedBuildTypeError,
)
from .result import Err, Ok, Result

__all__ = [
    # config
    "Config",
    "ConfigFileError",
    "load_config",
    # errors
    "CommandError",
    "ConfigurationError",
    "ErrorCode",
    "InvalidVersionError",
    "NotFoundError",
    "NpmRelError",
    "SourceControlError",
    "UnsupportedBuildTypeError",
    # result
    "Err",
    "Ok",
    "Result",
]
