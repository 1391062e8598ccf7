"""Constraint propagation and backtracking solver for 9x9 Sudoku."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import List, MutableSequence, Sequence

from contracts.errors import ValidationIssue, make_error

from .candidates import CandidateSet
from .geometry import PEERS, UNITS, box, column, peers, row, units
from .grid_state import GridState, assign, eliminate
from .search import SearchStats, search, select_branch_cell

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class SolveResult:
    """Outcome of :func:`solve_grid`."""

    solved: bool
    digits: List[int]
    elapsed: float
    stats: SearchStats = field(default_factory=SearchStats)


def _check_puzzle(puzzle: Sequence[int]) -> None:
    if len(puzzle) != 81:
        raise ValueError(f"puzzle must have 81 cells, got {len(puzzle)}")
    for cell, digit in enumerate(puzzle):
        if not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValueError(f"cell {cell} must hold a digit in [0, 9], got {digit!r}")


def solve(puzzle: MutableSequence[int], stats: SearchStats | None = None) -> bool:
    """Solve ``puzzle`` in place.

    ``puzzle`` holds 81 digits in row-major order, 0 for unknown cells.  On
    success every cell is filled and ``True`` is returned.  Otherwise the
    puzzle is left exactly as given and ``False`` is returned.
    """

    _check_puzzle(puzzle)

    state = GridState.from_digits(puzzle)
    if state is None:
        _LOGGER.debug("givens contradict each other")
        return False

    solved = search(state, stats)
    if solved is None:
        _LOGGER.debug("search exhausted without a solution")
        return False

    puzzle[:] = solved.to_digits()
    return True


def solve_grid(puzzle: Sequence[int]) -> SolveResult:
    """Solve a copy of ``puzzle`` and report timing and search counters."""

    digits = list(puzzle)
    stats = SearchStats()
    started = time.perf_counter()
    solved = solve(digits, stats)
    elapsed = time.perf_counter() - started
    _LOGGER.debug("solved=%s in %.6fs (%s)", solved, elapsed, stats.as_dict())
    return SolveResult(solved=solved, digits=digits, elapsed=elapsed, stats=stats)


def validate_solution(original: Sequence[int], solved: Sequence[int]) -> List[ValidationIssue]:
    """List the problems that keep ``solved`` from being a completion of ``original``."""

    issues: List[ValidationIssue] = []
    for cell, (given, value) in enumerate(zip(original, solved)):
        if given and given != value:
            issues.append(make_error("given_changed", f"given {given} replaced by {value}", f"cell[{cell}]"))

    for name, unit_of in (("row", row), ("column", column), ("box", box)):
        seen_units = set()
        for cell in range(81):
            members = tuple(sorted((cell, *unit_of(cell))))
            if members in seen_units:
                continue
            seen_units.add(members)
            values = sorted(solved[i] for i in members)
            if values != list(range(1, 10)):
                issues.append(
                    make_error(
                        "unit_incomplete",
                        f"{name} holds {''.join(str(v) for v in values)}",
                        f"{name}[{len(seen_units) - 1}]",
                    )
                )
    return issues


__all__ = [
    "CandidateSet",
    "GridState",
    "PEERS",
    "SearchStats",
    "SolveResult",
    "UNITS",
    "assign",
    "box",
    "column",
    "eliminate",
    "peers",
    "row",
    "search",
    "select_branch_cell",
    "solve",
    "solve_grid",
    "units",
    "validate_solution",
]
