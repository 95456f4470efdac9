"""
Input materialization.

The lexer never reads files itself. Callers hand it an ordered sequence
of lines, which is flattened here into one character buffer with exactly
one '\\n' after each line.
"""

from pathlib import Path
from typing import Iterable, Union


def into_chars(lines: Iterable[str]) -> str:
    """
    Flatten lines into a single buffer, terminating each with '\\n'.

    Lines may arrive with or without their own terminator (file iteration
    keeps it, str.splitlines() drops it); either way each line contributes
    exactly one injected '\\n'.
    """
    parts = []
    for line in lines:
        if line.endswith("\r\n"):
            line = line[:-2]
        elif line.endswith(("\n", "\r")):
            line = line[:-1]
        parts.append(line)
        parts.append("\n")
    return "".join(parts)


def read_lines(path: Union[str, Path]) -> list[str]:
    """
    Read a source file as a list of lines.

    Raises:
        OSError: If the file cannot be opened or read
    """
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.readlines()
