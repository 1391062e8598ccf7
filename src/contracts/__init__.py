"""Puzzle text contracts shared by the solver tools."""

from __future__ import annotations

from .errors import MalformedGridError, ValidationIssue, make_error
from .grid_text import format_grid, iter_puzzle_blocks, parse_grid, to_line

__all__ = [
    "MalformedGridError",
    "ValidationIssue",
    "format_grid",
    "iter_puzzle_blocks",
    "make_error",
    "parse_grid",
    "to_line",
]
