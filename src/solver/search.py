"""Depth-first backtracking over the candidate grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .grid_state import GridState


@dataclass
class SearchStats:
    """Counters collected while searching.

    ``nodes`` counts :func:`search` calls, ``branches`` the digits tried at
    branching cells and ``backtracks`` the nodes whose every digit failed.
    """

    nodes: int = 0
    branches: int = 0
    backtracks: int = 0

    def as_dict(self) -> dict:
        return {"nodes": self.nodes, "branches": self.branches, "backtracks": self.backtracks}


def select_branch_cell(state: GridState) -> Optional[int]:
    """Return the undecided cell with the fewest candidates.

    Ties go to the lowest index.  ``None`` means no cell has more than one
    candidate left.
    """

    best_cell: Optional[int] = None
    best_len = 10
    for cell, possible in enumerate(state.cells):
        count = len(possible)
        if 1 < count < best_len:
            best_cell, best_len = cell, count
            if count == 2:
                break
    return best_cell


def search(state: GridState, stats: SearchStats | None = None) -> Optional[GridState]:
    """Return the first completion of ``state`` or ``None`` if there is none."""

    if stats is not None:
        stats.nodes += 1

    if state.has_contradiction():
        return None
    if state.is_solved():
        return state

    cell = select_branch_cell(state)
    if cell is None:  # pragma: no cover - unreachable once the checks above pass
        return None

    for digit in state.cells[cell].values():
        if stats is not None:
            stats.branches += 1
        child = state.assign(digit, cell)
        if child is None:
            continue
        solved = search(child, stats)
        if solved is not None:
            return solved

    if stats is not None:
        stats.backtracks += 1
    return None


__all__ = ["SearchStats", "search", "select_branch_cell"]
