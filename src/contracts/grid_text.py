"""Text forms of a 9x9 grid: parsing, boxed rendering and stream splitting."""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence

from .errors import MalformedGridError

_SEPARATOR = "+------+------+------+\n"


def parse_grid(text: str) -> List[int]:
    """Read 81 cells from ``text``.

    ``.`` and ``0`` mark an unknown cell, ``1``-``9`` a given digit.  Any
    other character is skipped and everything after the 81st cell is
    ignored.
    """

    digits: List[int] = []
    for ch in text:
        if len(digits) == 81:
            break
        if ch == ".":
            digits.append(0)
        elif "0" <= ch <= "9":
            digits.append(ord(ch) - ord("0"))

    if len(digits) != 81:
        raise MalformedGridError(len(digits))
    return digits


def format_grid(digits: Sequence[int]) -> str:
    """Render ``digits`` as a framed grid, ``.`` for unknown cells."""

    parts: List[str] = []
    for cell, digit in enumerate(digits):
        if cell and cell % 9 == 0:
            parts.append("|\n")
        if cell % 27 == 0:
            parts.append(_SEPARATOR)
        if cell % 3 == 0:
            parts.append("|")
        parts.append(f"{digit} " if digit else ". ")
    parts.append("|\n")
    parts.append(_SEPARATOR)
    return "".join(parts)


def to_line(digits: Sequence[int]) -> str:
    """Compact 81-character form of ``digits``."""

    return "".join(str(d) if d else "." for d in digits)


def iter_puzzle_blocks(lines: Iterable[str]) -> Iterator[str]:
    """Group ``lines`` into puzzle descriptions separated by blank lines."""

    block: List[str] = []
    for line in lines:
        if line.strip():
            block.append(line)
        elif block:
            yield "".join(block)
            block = []
    if block:
        yield "".join(block)


__all__ = ["format_grid", "iter_puzzle_blocks", "parse_grid", "to_line"]
