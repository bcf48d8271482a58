"""Tests for gamedeck.core.board – ascending placement board."""

from __future__ import annotations

import random

import pytest

from gamedeck.core.board import PlacementBoard, strictly_ascending
from gamedeck.core.errors import PlacementError, StateConflictError


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def board() -> PlacementBoard:
    return PlacementBoard()


def _assert_ascending(board: PlacementBoard) -> None:
    filled = [v for v in board.slots() if v is not None]
    assert filled == sorted(filled)
    assert len(set(filled)) == len(filled)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_default_size(self, board: PlacementBoard):
        assert board.size == 20

    def test_starts_empty(self, board: PlacementBoard):
        assert board.filled_count == 0
        assert board.slots() == (None,) * 20
        assert not board.is_full()

    def test_rejects_non_positive_size(self):
        with pytest.raises(ValueError):
            PlacementBoard(0)

    def test_slots_is_a_copy(self, board: PlacementBoard):
        board.place(5, 0)
        snapshot = board.slots()
        board.place(9, 1)
        assert snapshot[1] is None


# ---------------------------------------------------------------------------
# can_place
# ---------------------------------------------------------------------------

class TestCanPlace:
    def test_any_slot_on_empty_board(self, board: PlacementBoard):
        assert all(board.can_place(500, p) for p in range(board.size))

    @pytest.mark.parametrize("position", [-1, 20, 100])
    def test_out_of_range_is_false(self, board: PlacementBoard, position: int):
        assert board.can_place(1, position) is False

    def test_occupied_slot_is_false_for_any_value(self, board: PlacementBoard):
        board.place(500, 10)
        for value in (1, 499, 500, 501, 1000):
            assert board.can_place(value, 10) is False

    def test_smaller_value_after_is_rejected(self, board: PlacementBoard):
        board.place(500, 10)
        assert board.can_place(400, 11) is False
        assert board.can_place(400, 9) is True

    def test_larger_value_before_is_rejected(self, board: PlacementBoard):
        board.place(500, 10)
        assert board.can_place(600, 9) is False
        assert board.can_place(600, 11) is True

    def test_duplicate_never_adjacent(self, board: PlacementBoard):
        board.place(500, 10)
        assert board.can_place(500, 9) is False
        assert board.can_place(500, 11) is False


# ---------------------------------------------------------------------------
# place
# ---------------------------------------------------------------------------

class TestPlace:
    def test_out_of_order_calls_keep_ascending(self, board: PlacementBoard):
        board.place(500, 10)
        board.place(200, 5)
        board.place(800, 15)
        assert board.value_at(5) == 200
        assert board.value_at(10) == 500
        assert board.value_at(15) == 800
        assert board.can_place(600, 12) is True
        assert board.can_place(100, 12) is False
        assert board.filled_count == 3

    def test_out_of_range_raises_value_error(self, board: PlacementBoard):
        with pytest.raises(ValueError):
            board.place(1, 20)

    def test_occupied_raises_state_conflict(self, board: PlacementBoard):
        board.place(5, 3)
        with pytest.raises(PlacementError) as info:
            board.place(6, 3)
        assert info.value.position == 3
        assert isinstance(info.value, StateConflictError)

    def test_order_violation_raises(self, board: PlacementBoard):
        board.place(500, 10)
        with pytest.raises(PlacementError):
            board.place(100, 12)
        assert board.filled_count == 1

    def test_random_valid_sequences_stay_ascending(self):
        rng = random.Random(2522)
        for _ in range(25):
            board = PlacementBoard()
            for _ in range(60):
                value = rng.randint(1, 1000)
                positions = board.valid_positions(value)
                if positions:
                    board.place(value, rng.choice(positions))
                    _assert_ascending(board)
            assert board.filled_count == sum(v is not None for v in board.slots())


# ---------------------------------------------------------------------------
# has_any_valid_placement / is_full / reset
# ---------------------------------------------------------------------------

class TestQueries:
    def test_has_any_on_empty(self, board: PlacementBoard):
        assert board.has_any_valid_placement(42)

    def test_full_board_accepts_nothing(self, board: PlacementBoard):
        for position in range(board.size):
            board.place((position + 1) * 10, position)
        assert board.is_full()
        for value in (0, 5, 15, 1000):
            assert not board.has_any_valid_placement(value)

    def test_blocked_value(self):
        board = PlacementBoard(3)
        board.place(10, 0)
        board.place(11, 1)
        assert not board.has_any_valid_placement(5)
        assert board.has_any_valid_placement(12)

    def test_matches_can_place(self, board: PlacementBoard):
        board.place(300, 2)
        board.place(700, 17)
        for value in (1, 300, 301, 699, 700, 999):
            expected = any(board.can_place(value, p) for p in range(board.size))
            assert board.has_any_valid_placement(value) is expected

    def test_reset_empties_board(self, board: PlacementBoard):
        board.place(1, 0)
        board.reset()
        assert board.filled_count == 0
        assert board.value_at(0) is None


# ---------------------------------------------------------------------------
# Injected rule
# ---------------------------------------------------------------------------

class TestRule:
    def test_strictly_ascending_helper(self):
        assert strictly_ascending([None, 5, None], 6, 2)
        assert not strictly_ascending([None, 5, None], 5, 2)

    def test_custom_rule_is_used(self):
        descending = lambda slots, value, position: strictly_ascending(
            [None if v is None else -v for v in slots], -value, position
        )
        board = PlacementBoard(5, rule=descending)
        board.place(10, 2)
        assert board.can_place(20, 0)
        assert not board.can_place(5, 0)
