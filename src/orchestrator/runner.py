"""Batch runner: parse, solve, verify and log a stream of puzzles."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List

from contracts.errors import ValidationIssue
from contracts.grid_text import iter_puzzle_blocks, parse_grid, to_line
from solver import SolveResult, solve_grid, validate_solution

from . import log

_LOGGER = logging.getLogger(__name__)

EVENT_TYPE = "sudoku.solve.v1"


@dataclass(frozen=True)
class PuzzleOutcome:
    """Result of solving one puzzle from the stream."""

    index: int
    puzzle: List[int]
    result: SolveResult
    issues: List[ValidationIssue] = field(default_factory=list)

    @property
    def solved(self) -> bool:
        return self.result.solved

    @property
    def digits(self) -> List[int]:
        return self.result.digits

    def to_event(self) -> dict:
        return {
            "type": EVENT_TYPE,
            "index": self.index,
            "puzzle": to_line(self.puzzle),
            "solution": to_line(self.result.digits) if self.result.solved else None,
            "solved": self.result.solved,
            "elapsed_s": round(self.result.elapsed, 6),
            "search": self.result.stats.as_dict(),
            "issues": [issue.code for issue in self.issues],
        }


def solve_one(index: int, text: str, *, verify: bool = False, log_events: bool = False) -> PuzzleOutcome:
    """Parse ``text`` and solve it.

    :class:`contracts.errors.MalformedGridError` propagates to the caller.
    """

    puzzle = parse_grid(text)
    result = solve_grid(puzzle)
    issues: List[ValidationIssue] = []
    if verify and result.solved:
        issues = validate_solution(puzzle, result.digits)
        for issue in issues:
            _LOGGER.error("puzzle %d: %s at %s", index, issue.msg, issue.path)

    outcome = PuzzleOutcome(index=index, puzzle=puzzle, result=result, issues=issues)
    if log_events:
        log.append_event(outcome.to_event())
    return outcome


def run_stream(
    lines: Iterable[str],
    *,
    verify: bool = False,
    log_events: bool = False,
) -> Iterator[PuzzleOutcome]:
    """Yield one :class:`PuzzleOutcome` per blank-line separated puzzle."""

    for index, block in enumerate(iter_puzzle_blocks(lines)):
        yield solve_one(index, block, verify=verify, log_events=log_events)


__all__ = ["EVENT_TYPE", "PuzzleOutcome", "run_stream", "solve_one"]
