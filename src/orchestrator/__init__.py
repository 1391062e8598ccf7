"""Batch solving helpers and the solve event log."""

from . import log
from .runner import EVENT_TYPE, PuzzleOutcome, run_stream, solve_one

__all__ = [
    "EVENT_TYPE",
    "PuzzleOutcome",
    "log",
    "run_stream",
    "solve_one",
]
