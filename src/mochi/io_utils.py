"""Wrappers for text file I/O with consistent encoding (UTF-8)."""

from __future__ import annotations

from pathlib import Path

PathLike = Path | str


def read_text(path: PathLike) -> str:
    """Read path as text with UTF-8 encoding."""
    p = path if isinstance(path, Path) else Path(path)
    return p.read_text(encoding="utf-8")


def write_text(path: PathLike, text: str) -> None:
    """Write text to path with UTF-8 encoding."""
    p = path if isinstance(path, Path) else Path(path)
    p.write_text(text, encoding="utf-8")


def read_lines(path: PathLike) -> list[str]:
    """Read path and return its lines without line terminators."""
    return read_text(path).splitlines()


def write_lines(path: PathLike, lines: list[str]) -> None:
    """Write each line followed by a newline, replacing any existing content."""
    write_text(path, "".join(f"{line}\n" for line in lines))
