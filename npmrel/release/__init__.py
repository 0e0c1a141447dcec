"""Release version and dist-tag derivation."""

from __future__ import annotations

from .model import BUILD_TYPES, BuildType, NpmInfo, ParsedVersion
from .resolver import ResolveEnv, default_env, get_main_version, get_npm_info
from .version import parse_version

__all__ = [
    "BUILD_TYPES",
    "BuildType",
    "NpmInfo",
    "ParsedVersion",
    "ResolveEnv",
    "default_env",
    "get_main_version",
    "get_npm_info",
    "parse_version",
]
