"""Output abstraction layer."""

from .console import ConsoleProtocol, RichConsole, Style

__all__ = ["ConsoleProtocol", "RichConsole", "Style"]
