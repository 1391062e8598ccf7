"""Candidate grid with the assign/eliminate propagation rules.

The grid is a persistent value: every step that changes a cell builds a new
:class:`GridState` and leaves the previous one untouched, so search branches
never observe each other's work.  A contradiction is reported as ``None``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .candidates import CandidateSet
from .geometry import PEERS, UNITS

_FULL = CandidateSet()


@dataclass(frozen=True, slots=True)
class GridState:
    """81 candidate sets in row-major order."""

    cells: Tuple[CandidateSet, ...]

    def __post_init__(self) -> None:
        if len(self.cells) != 81:
            raise ValueError(f"grid state needs 81 cells, got {len(self.cells)}")

    @classmethod
    def empty(cls) -> "GridState":
        """Grid where every digit is still possible everywhere."""

        return cls((_FULL,) * 81)

    @classmethod
    def from_digits(cls, digits: Iterable[int]) -> Optional["GridState"]:
        """Seed a grid by assigning every non-zero digit in ``digits``.

        Returns ``None`` as soon as one of the givens contradicts the others.
        """

        state: Optional[GridState] = cls.empty()
        for cell, digit in enumerate(digits):
            if not digit:
                continue
            state = state._assign(digit, cell)
            if state is None:
                return None
        return state

    # Queries ---------------------------------------------------------

    def candidates(self, cell: int) -> CandidateSet:
        return self.cells[cell]

    def is_solved(self) -> bool:
        return all(len(possible) == 1 for possible in self.cells)

    def has_contradiction(self) -> bool:
        return any(not possible.mask for possible in self.cells)

    def to_digits(self) -> List[int]:
        """Project every cell to its single candidate, 0 where undecided."""

        return [possible.single() for possible in self.cells]

    # Propagation -----------------------------------------------------

    def assign(self, digit: int, cell: int) -> Optional["GridState"]:
        """Make ``digit`` the only candidate of ``cell`` and propagate."""

        if self.has_contradiction():
            return None
        return self._assign(digit, cell)

    def eliminate(self, digit: int, cell: int) -> Optional["GridState"]:
        """Remove ``digit`` from ``cell`` and propagate the consequences."""

        if self.has_contradiction():
            return None
        return self._eliminate(digit, cell)

    def _replace(self, cell: int, possible: CandidateSet) -> "GridState":
        cells = self.cells
        return GridState(cells[:cell] + (possible,) + cells[cell + 1:])

    def _assign(self, digit: int, cell: int) -> Optional["GridState"]:
        state: Optional[GridState] = self
        for other in self.cells[cell].values():
            if other == digit:
                continue
            state = state._eliminate(other, cell)
            if state is None:
                return None
        if digit not in state.cells[cell]:
            # empty cell, or digit was not a candidate to begin with
            return None
        return state

    def _eliminate(self, digit: int, cell: int) -> Optional["GridState"]:
        possible = self.cells[cell]
        if digit not in possible:
            return self

        possible = possible.remove(digit)
        if not possible.mask:
            return None

        state: Optional[GridState] = self._replace(cell, possible)

        if len(possible) == 1:
            # A solved cell's digit cannot stay possible for any of its peers.
            solved = possible.single()
            for peer in PEERS[cell]:
                state = state._eliminate(solved, peer)
                if state is None:
                    return None

        # Where does ``digit`` still fit in each unit of ``cell``?
        for unit in UNITS[cell]:
            places = [other for other in unit if digit in state.cells[other]]
            if not places:
                return None
            if len(places) == 1:
                state = state._assign(digit, places[0])
                if state is None:
                    return None

        return state

    def __str__(self) -> str:
        width = 1 + max(len(possible) for possible in self.cells)
        lines = []
        for start in range(0, 81, 9):
            lines.append(
                "".join(
                    "".join(str(d) for d in self.cells[cell].values()).ljust(width)
                    for cell in range(start, start + 9)
                ).rstrip()
            )
        return "\n".join(lines)


def assign(state: GridState, digit: int, cell: int) -> Optional[GridState]:
    return state.assign(digit, cell)


def eliminate(state: GridState, digit: int, cell: int) -> Optional[GridState]:
    return state.eliminate(digit, cell)


__all__ = ["GridState", "assign", "eliminate"]
