from __future__ import annotations

import os
from pathlib import Path

import typer

from npmrel import __version__
from npmrel.cli.commands.info import info
from npmrel.cli.commands.registry import apply_versions, diff, pack_cmd, publish, versions, view
from npmrel.cli.context import CONFIG_ENV


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
    rich_markup_mode="rich",
)


app.command()(info)
app.command()(publish)
app.command("pack")(pack_cmd)
app.command()(diff)
app.command()(view)
app.command()(versions)
app.command("apply-versions")(apply_versions)


@app.callback(invoke_without_command=True)
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(False, "--version", help="Show version and exit."),
    config: Path | None = typer.Option(
        None,
        "--config",
        help="Path to npmrel.toml (default: ./npmrel.toml if present)",
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(code=0)

    if config is not None:
        os.environ[CONFIG_ENV] = str(config.expanduser())


def main() -> None:
    app()
