"""Bitset of the digits still possible for a single Sudoku cell."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

DIGITS = range(1, 10)
FULL_MASK = 0x1FF


def _bit(digit: int) -> int:
    if not 1 <= digit <= 9:
        raise ValueError(f"digit must be in [1, 9], got {digit!r}")
    return 1 << (digit - 1)


@dataclass(frozen=True, slots=True)
class CandidateSet:
    """Immutable 9-bit mask; bit ``k - 1`` set means digit ``k`` is possible.

    Every operation returns a new set, so instances can be shared freely
    between grid states on different search branches.
    """

    mask: int = FULL_MASK

    def __post_init__(self) -> None:
        if not 0 <= self.mask <= FULL_MASK:
            raise ValueError(f"mask must be in [0, 0x1FF], got {self.mask!r}")

    @classmethod
    def new(cls) -> "CandidateSet":
        """Return the full set of digits 1-9."""

        return cls(FULL_MASK)

    def __len__(self) -> int:
        return self.mask.bit_count()

    def __contains__(self, digit: object) -> bool:
        if not isinstance(digit, int):
            return False
        return bool(self.mask & _bit(digit))

    def __iter__(self) -> Iterator[int]:
        return self.values()

    def contains(self, digit: int) -> bool:
        return digit in self

    def remove(self, digit: int) -> "CandidateSet":
        """Return a copy with ``digit`` cleared; unchanged if already absent."""

        bit = _bit(digit)
        if not self.mask & bit:
            return self
        return CandidateSet(self.mask & ~bit)

    def values(self) -> Iterator[int]:
        """Yield the remaining digits in ascending order."""

        mask = self.mask
        return (digit for digit in DIGITS if mask & (1 << (digit - 1)))

    def single(self) -> int:
        """Return the only remaining digit, or 0 when the cell is not solved."""

        if len(self) != 1:
            return 0
        return next(self.values())

    def __repr__(self) -> str:
        return f"CandidateSet({''.join(str(d) for d in self.values()) or '-'})"


__all__ = ["CandidateSet", "DIGITS", "FULL_MASK"]
