"""Logging utilities with colored output via Rich.

Messages are escaped, so task text containing brackets prints as-is.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
_err_console = Console(highlight=False, stderr=True)

_verbose = False


def set_verbose(enabled: bool) -> None:
    global _verbose
    _verbose = enabled


def warn(msg: str) -> None:
    console.print(f"[yellow]\\[WARN][/yellow] {escape(msg)}")


def error(msg: str) -> None:
    _err_console.print(f"[red]\\[ERROR][/red] {escape(msg)}")


def debug(msg: str) -> None:
    if _verbose:
        console.print(f"[dim]\\[DEBUG] {escape(msg)}[/dim]")


def rule() -> None:
    console.rule(style="dim")


def response(text: str) -> None:
    """Print a command response verbatim (task text may contain brackets)."""
    console.print(text, markup=False, soft_wrap=True)
