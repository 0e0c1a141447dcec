"""Info command - print the version and dist-tag for a build type."""

from __future__ import annotations

import json

import typer

from npmrel.cli.context import build_context, fail
from npmrel.core.errors import NpmRelError
from npmrel.release.model import BUILD_TYPES
from npmrel.release.resolver import default_env, get_npm_info


def info(
    build_type: str = typer.Argument(..., help=f"Build type: {'|'.join(BUILD_TYPES)}"),
    as_json: bool = typer.Option(False, "--json", help="Print {version, tag} as JSON"),
) -> None:
    """Compute the npm version and dist-tag for a build."""
    ctx = build_context()
    try:
        npm_info = get_npm_info(build_type, default_env(ctx.config, ctx.root))
    except NpmRelError as e:
        fail(ctx, e)

    if as_json:
        ctx.console.print(json.dumps({"version": npm_info.version, "tag": npm_info.tag}))
        return

    ctx.console.print(f"version: {npm_info.version}")
    ctx.console.print(f"tag: {npm_info.tag if npm_info.tag is not None else '(none)'}")
