from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import NoReturn

import typer

from npmrel.core.config import CONFIG_FILENAME, Config, load_config
from npmrel.core.errors import ErrorCode, NpmRelError, exit_code_for
from npmrel.core.result import Err
from npmrel.output.console import ConsoleProtocol, RichConsole

# Set by the root callback when --config is passed.
CONFIG_ENV = "NPMREL_CONFIG"


@dataclass(frozen=True, slots=True)
class CLIContext:
    root: Path
    config: Config
    console: ConsoleProtocol


def _config_path(root: Path) -> tuple[Path, bool]:
    explicit = os.environ.get(CONFIG_ENV)
    if explicit:
        return Path(explicit), True
    return root / CONFIG_FILENAME, False


def build_context() -> CLIContext:
    root = Path.cwd()
    console = RichConsole()

    path, explicit = _config_path(root)
    config = Config()
    if explicit or path.exists():
        result = load_config(path)
        if isinstance(result, Err):
            console.error(result.error.message)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        config = result.value

    return CLIContext(root=root, config=config, console=console)


def fail(ctx: CLIContext, error: NpmRelError) -> NoReturn:
    """Report `error` and exit with its mapped code."""
    ctx.console.error(str(error))
    raise typer.Exit(code=int(exit_code_for(error)))
