"""Simple text-file helpers: read, write, append, check and remove."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path

__all__ = ["read_all_lines", "write_all_lines", "append_line", "exists", "remove_file"]

PathLike = str | os.PathLike


def read_all_lines(path: PathLike) -> list[str]:
    """Return every line of a text file without line terminators.

    Raises FileNotFoundError or another OSError if the file cannot be read.
    """
    with open(path, encoding="utf-8") as handle:
        return [line.rstrip("\n") for line in handle]


def write_all_lines(path: PathLike, lines: Iterable[str]) -> None:
    """Replace the file's content with the given lines, each newline-terminated."""
    with open(path, "w", encoding="utf-8") as handle:
        handle.writelines(f"{line}\n" for line in lines)


def append_line(path: PathLike, line: str) -> None:
    """Append one newline-terminated line, creating the file if needed."""
    with open(path, "a", encoding="utf-8") as handle:
        handle.write(f"{line}\n")


def exists(path: PathLike) -> bool:
    """True if something exists at the path."""
    return Path(path).exists()


def remove_file(path: PathLike) -> bool:
    """Delete the file; return False if there was nothing to delete."""
    try:
        Path(path).unlink()
    except FileNotFoundError:
        return False
    return True