from __future__ import annotations

import pytest

from solver.candidates import CandidateSet
from solver.geometry import PEERS
from solver.grid_state import GridState, assign, eliminate


def _with_cells(**masks: int) -> GridState:
    cells = list(GridState.empty().cells)
    for key, mask in masks.items():
        cells[int(key[1:])] = CandidateSet(mask)
    return GridState(tuple(cells))


def test_empty_grid_allows_everything():
    state = GridState.empty()
    assert all(len(possible) == 9 for possible in state.cells)
    assert state.to_digits() == [0] * 81
    assert not state.is_solved()


def test_grid_needs_81_cells():
    with pytest.raises(ValueError):
        GridState((CandidateSet(),) * 80)


def test_assign_removes_digit_from_peers():
    state = GridState.empty().assign(5, 0)
    assert state is not None
    assert list(state.candidates(0).values()) == [5]
    for peer in PEERS[0]:
        assert 5 not in state.candidates(peer)
    assert 5 in state.candidates(40)


def test_assign_leaves_previous_state_untouched():
    before = GridState.empty()
    after = before.assign(3, 40)
    assert after is not None
    assert before == GridState.empty()
    assert len(before.candidates(40)) == 9


def test_assign_of_removed_digit_is_a_contradiction():
    state = GridState.empty().assign(5, 0)
    assert state.assign(5, 1) is None


def test_eliminate_is_idempotent():
    once = eliminate(GridState.empty(), 5, 0)
    assert once is not None
    twice = eliminate(once, 5, 0)
    assert twice == once
    assert 5 not in once.candidates(0)


def test_eliminate_last_candidate_is_a_contradiction():
    state = _with_cells(c0=0b1)
    assert state.eliminate(1, 0) is None


def test_eliminate_to_single_propagates_to_peers():
    state = _with_cells(c0=0b11)
    result = state.eliminate(2, 0)
    assert result is not None
    assert result.candidates(0).single() == 1
    assert all(1 not in result.candidates(peer) for peer in PEERS[0])


def test_digit_with_one_place_left_in_a_unit_is_assigned():
    state = GridState.empty()
    for cell in range(8):
        state = state.eliminate(9, cell)
        assert state is not None
    assert state.candidates(8).single() == 9
    assert 9 not in state.candidates(17)


def test_zero_candidate_cell_always_signals_contradiction():
    state = _with_cells(c10=0)
    assert state.has_contradiction()
    assert state.eliminate(1, 0) is None
    assert assign(state, 1, 0) is None


def test_from_digits_reports_conflicting_givens():
    puzzle = [0] * 81
    puzzle[0] = puzzle[5] = 7
    assert GridState.from_digits(puzzle) is None


def test_from_digits_propagates_easy_puzzle(easy_puzzle, easy_solution):
    state = GridState.from_digits(easy_puzzle)
    assert state is not None
    assert state.is_solved()
    assert state.to_digits() == easy_solution
