"""Shared error types for puzzle parsing and solution checks."""

from __future__ import annotations


from dataclasses import dataclass

SEVERITY_ERROR = "ERROR"


class MalformedGridError(ValueError):
    """Raised when a grid description holds fewer than 81 cell tokens."""

    def __init__(self, tokens: int) -> None:
        super().__init__(f"malformed grid: expected 81 cells, found {tokens}")
        self.tokens = tokens


@dataclass(frozen=True)
class ValidationIssue:
    """Single problem found while checking a solved grid."""

    code: str
    msg: str
    path: str
    severity: str


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


__all__ = [
    "SEVERITY_ERROR",
    "MalformedGridError",
    "ValidationIssue",
    "make_error",
]
