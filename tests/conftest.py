from __future__ import annotations

import pytest

EASY_PUZZLE = (
    "003020600"
    "900305001"
    "001806400"
    "008102900"
    "700000008"
    "006708200"
    "002609500"
    "800203009"
    "005010300"
)

EASY_SOLUTION = (
    "483921657"
    "967345821"
    "251876493"
    "548132976"
    "729564138"
    "136798245"
    "372689514"
    "814253769"
    "695417382"
)

HARD_PUZZLE = (
    "8........"
    "..36....."
    ".7..9.2.."
    ".5...7..."
    "....457.."
    "...1...3."
    "..1....68"
    "..85...1."
    ".9....4.."
)


def digits(text: str) -> list[int]:
    return [0 if ch == "." else int(ch) for ch in text]


@pytest.fixture
def easy_puzzle() -> list[int]:
    return digits(EASY_PUZZLE)


@pytest.fixture
def easy_solution() -> list[int]:
    return digits(EASY_SOLUTION)


@pytest.fixture
def hard_puzzle() -> list[int]:
    return digits(HARD_PUZZLE)
