"""Console output for CLI commands.

Machine-readable output (versions, JSON) goes to stdout unstyled; status and
errors are decorated with rich markup, errors on stderr.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Protocol

__all__ = ["ConsoleProtocol", "RichConsole", "Style"]


class Style(Enum):
    DEFAULT = auto()
    DIM = auto()


class ConsoleProtocol(Protocol):
    def print(self, message: str, style: Style = Style.DEFAULT) -> None: ...

    def success(self, message: str) -> None: ...

    def error(self, message: str) -> None: ...


class RichConsole:
    def __init__(self) -> None:
        from rich.console import Console

        self._out = Console()
        self._err = Console(stderr=True)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        if style is Style.DIM:
            self._err.print(message, style="dim", markup=False, highlight=False)
            return
        # Raw text: npm output may contain [brackets] rich would treat as markup.
        self._out.print(message, markup=False, highlight=False, soft_wrap=True)

    def success(self, message: str) -> None:
        self._out.print(f"[green]OK[/green] {message}")

    def error(self, message: str) -> None:
        self._err.print(f"[red bold]error:[/red bold] {message}")
