from __future__ import annotations

import pytest

from solver.candidates import FULL_MASK, CandidateSet


def test_new_set_holds_every_digit():
    full = CandidateSet.new()
    assert full == CandidateSet()
    assert full.mask == FULL_MASK
    assert len(full) == 9
    assert list(full.values()) == list(range(1, 10))


def test_len_counts_set_bits():
    assert len(CandidateSet(0x3)) == 2
    assert len(CandidateSet(0x6)) == 2
    assert len(CandidateSet(0x1)) == 1
    assert len(CandidateSet(0x0)) == 0


def test_contains_checks_digit_bit():
    assert CandidateSet(0x6).contains(3) is True
    assert CandidateSet(0x6).contains(1) is False
    assert CandidateSet(0x8).contains(8) is False
    assert 4 in CandidateSet(0x8)


def test_remove_clears_digit():
    assert CandidateSet(0x8).remove(4) == CandidateSet(0x0)
    assert CandidateSet(0xF).remove(4) == CandidateSet(0x7)


def test_remove_absent_digit_is_a_no_op():
    possible = CandidateSet(0x7)
    assert possible.remove(4) is possible
    assert possible.remove(4).remove(4) == CandidateSet(0x7)


def test_values_are_ascending_and_restartable():
    possible = CandidateSet(0b100010101)
    assert list(possible.values()) == [1, 3, 5, 9]
    assert list(possible.values()) == [1, 3, 5, 9]
    assert list(possible) == [1, 3, 5, 9]


def test_single_returns_digit_or_zero():
    assert CandidateSet(0x10).single() == 5
    assert CandidateSet(0x11).single() == 0
    assert CandidateSet(0x0).single() == 0


@pytest.mark.parametrize("digit", [0, 10, -1])
def test_digits_outside_domain_are_rejected(digit):
    with pytest.raises(ValueError):
        CandidateSet().remove(digit)
    with pytest.raises(ValueError):
        CandidateSet().contains(digit)


def test_mask_wider_than_nine_bits_is_rejected():
    with pytest.raises(ValueError):
        CandidateSet(0x200)
