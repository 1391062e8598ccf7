"""Index arithmetic for the 81 cells of a 9x9 grid.

Cells are numbered row-major, ``index = row * 9 + column``.  Every helper
excludes the cell itself from the unit it returns.
"""

from __future__ import annotations

from itertools import chain
from typing import Iterator, List, Tuple

CELLS = range(81)


def _check_cell(cell: int) -> int:
    if not 0 <= cell <= 80:
        raise ValueError(f"cell must be in [0, 80], got {cell!r}")
    return cell


def row(cell: int) -> Iterator[int]:
    """Other cells of the row containing ``cell``."""

    start = _check_cell(cell) // 9 * 9
    return (i for i in range(start, start + 9) if i != cell)


def column(cell: int) -> Iterator[int]:
    """Other cells of the column containing ``cell``."""

    col = _check_cell(cell) % 9
    return (r * 9 + col for r in range(9) if r * 9 + col != cell)


def box(cell: int) -> Iterator[int]:
    """Other cells of the 3x3 box containing ``cell``."""

    _check_cell(cell)
    top = cell // 27 * 27 + cell % 9 // 3 * 3
    return (top + n // 3 * 9 + n % 3 for n in range(9) if top + n // 3 * 9 + n % 3 != cell)


def units(cell: int) -> List[List[int]]:
    """Row, column and box index lists for ``cell``."""

    return [list(row(cell)), list(column(cell)), list(box(cell))]


def peers(cell: int) -> Iterator[int]:
    """Row, column and box cells chained together.

    Cells sharing both the box and the row (or column) appear twice; callers
    that need a set should use :data:`PEERS`.
    """

    return chain(row(cell), column(cell), box(cell))


UNITS: Tuple[Tuple[Tuple[int, ...], ...], ...] = tuple(
    tuple(tuple(unit) for unit in units(cell)) for cell in CELLS
)
PEERS: Tuple[Tuple[int, ...], ...] = tuple(tuple(sorted(set(peers(cell)))) for cell in CELLS)


__all__ = ["CELLS", "PEERS", "UNITS", "box", "column", "peers", "row", "units"]
