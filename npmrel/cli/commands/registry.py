"""Registry commands - thin wrappers over the npm CLI."""

from __future__ import annotations

from pathlib import Path

import typer

from npmrel.cli.context import build_context, fail
from npmrel.core.errors import ErrorCode, NpmRelError
from npmrel.core.result import Err
from npmrel.output.console import Style
from npmrel.registry.manifest import apply_package_versions, read_manifest, write_manifest
from npmrel.registry.npm import (
    NpmPackageOptions,
    diff_packages,
    get_package_version_str_by_tag,
    get_versions_by_spec,
    pack,
    publish_package,
)


def publish(
    path: Path = typer.Argument(..., help="Package directory"),
    tags: list[str] = typer.Option([], "--tag", help="Dist-tag (repeatable)"),
    otp: str | None = typer.Option(None, "--otp", help="One-time password"),
) -> None:
    """Publish the package in PATH."""
    ctx = build_context()
    options = NpmPackageOptions(tags=tuple(tags) or None, otp=otp)
    result = publish_package(path, options, npm=ctx.config.npm.bin)
    if isinstance(result, Err):
        ctx.console.error(str(result.error))
        if result.error.stderr.strip():
            ctx.console.print(result.error.stderr.strip(), Style.DIM)
        raise typer.Exit(code=int(ErrorCode.COMMAND_ERROR))
    ctx.console.success(f"published {path}")


def pack_cmd(path: Path = typer.Argument(..., help="Package directory")) -> None:
    """Create the package tarball in PATH."""
    ctx = build_context()
    try:
        pack(path, npm=ctx.config.npm.bin)
    except NpmRelError as e:
        fail(ctx, e)
    ctx.console.success(f"packed {path}")


def diff(
    spec_a: str = typer.Argument(..., help="First package spec"),
    spec_b: str = typer.Argument(..., help="Second package spec"),
) -> None:
    """List files that differ between two package specs."""
    ctx = build_context()
    try:
        out = diff_packages(spec_a, spec_b, ctx.root, npm=ctx.config.npm.bin)
    except NpmRelError as e:
        fail(ctx, e)
    for line in out.splitlines():
        ctx.console.print(line)


def view(
    name: str = typer.Argument(..., help="Package name"),
    tag: str | None = typer.Option(None, "--tag", help="Dist-tag (default: latest)"),
) -> None:
    """Print the version a dist-tag points at."""
    ctx = build_context()
    try:
        version = get_package_version_str_by_tag(
            name, tag, npm=ctx.config.npm.bin, cwd=ctx.root
        )
    except NpmRelError as e:
        fail(ctx, e)
    ctx.console.print(version)


def versions(
    name: str = typer.Argument(..., help="Package name"),
    spec: str = typer.Argument(..., help="Semver range, e.g. ^0.72.0"),
) -> None:
    """Print every published version matching a range."""
    ctx = build_context()
    try:
        found = get_versions_by_spec(name, spec, npm=ctx.config.npm.bin, cwd=ctx.root)
    except NpmRelError as e:
        fail(ctx, e)
    for version in found:
        ctx.console.print(version)


def _parse_pins(pins: list[str]) -> dict[str, str] | None:
    out: dict[str, str] = {}
    for pin in pins:
        # rpartition keeps scoped names like @scope/pkg intact
        name, sep, version = pin.rpartition("=")
        if not sep or not name or not version:
            return None
        out[name] = version
    return out


def apply_versions(
    package_json: Path = typer.Argument(..., help="Path to package.json"),
    pins: list[str] = typer.Argument(..., help="NAME=VERSION pairs"),
) -> None:
    """Pin dependencies already declared in PACKAGE_JSON."""
    ctx = build_context()
    versions_map = _parse_pins(pins)
    if versions_map is None:
        ctx.console.error("pins must look like NAME=VERSION")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    try:
        manifest = read_manifest(package_json)
    except (OSError, ValueError) as e:
        ctx.console.error(f"cannot read {package_json}: {e}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))

    try:
        write_manifest(package_json, apply_package_versions(manifest, versions_map))
    except OSError as e:
        ctx.console.error(f"cannot write {package_json}: {e}")
        raise typer.Exit(code=int(ErrorCode.USER_ERROR))
    ctx.console.success(str(package_json))
