"""Tests for gamedeck.core.player – tier unlocking and mastery ranking."""

from __future__ import annotations

from datetime import datetime

import pytest

from gamedeck.core.errors import NoMoreTiersError, StateConflictError, TierLockedError
from gamedeck.core.mastery import MasteryTracker
from gamedeck.core.player import ALPHABET, Player, PlayerStatistics


@pytest.fixture()
def player() -> Player:
    return Player("Tester", datetime(2024, 11, 30, 9, 15, 0))


def _set_mastery(player: Player, letter: str, successful: int, total: int = 10) -> None:
    player.tracker.restore(letter, total, successful)


def _master_tier(player: Player, tier: int, count: int = 4, successful: int = 8) -> None:
    for letter in player.tier_letters(tier)[:count]:
        _set_mastery(player, letter, successful)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_first_tier_unlocked(self, player: Player):
        assert player.unlocked_letters() == ["A", "B", "C", "D", "E"]
        assert player.current_tier() == 1

    @pytest.mark.parametrize("name", ["", "   ", None])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValueError):
            Player(name)

    @pytest.mark.parametrize("name", ["../x", "a/b", "semi;colon", "dot.name"])
    def test_name_must_be_file_safe(self, name: str):
        with pytest.raises(ValueError):
            Player(name)

    def test_name_allows_spaces_dash_underscore(self):
        assert Player(" Ada Lovelace-2_b ").name == "Ada Lovelace-2_b"

    def test_unlocked_letters_is_a_copy(self, player: Player):
        letters = player.unlocked_letters()
        letters.append("Z")
        assert "Z" not in player.unlocked_letters()

    def test_created_at_drops_microseconds(self):
        p = Player("X", datetime(2024, 1, 1, 1, 1, 1, 999))
        assert p.created_at.microsecond == 0


# ---------------------------------------------------------------------------
# Letter validation
# ---------------------------------------------------------------------------

class TestLetters:
    @pytest.mark.parametrize("letter", ["a", "1", "", "AB"])
    def test_invalid_letters(self, player: Player, letter: str):
        with pytest.raises(ValueError):
            player.letter_mastery(letter)

    def test_record_attempt_goes_to_tracker(self, player: Player):
        player.record_attempt("A", True)
        player.record_attempt("A", False)
        assert player.letter_mastery("A") == 50.0


# ---------------------------------------------------------------------------
# can_unlock_next_tier
# ---------------------------------------------------------------------------

class TestCanUnlock:
    def test_false_on_fresh_player(self, player: Player):
        assert not player.can_unlock_next_tier()

    def test_four_at_threshold_is_enough(self, player: Player):
        _master_tier(player, 1, count=4, successful=8)
        assert player.can_unlock_next_tier()

    def test_three_is_not_enough(self, player: Player):
        _master_tier(player, 1, count=3, successful=10)
        assert not player.can_unlock_next_tier()

    def test_just_below_threshold_does_not_count(self, player: Player):
        _master_tier(player, 1, count=3, successful=10)
        # 7999/10000 = 79.99%
        _set_mastery(player, "D", 7999, 10000)
        assert not player.can_unlock_next_tier()
        _set_mastery(player, "D", 8000, 10000)
        assert player.can_unlock_next_tier()

    def test_recorded_attempts_reach_threshold(self, player: Player):
        for letter in "ABCD":
            for _ in range(4):
                player.record_attempt(letter, True)
            player.record_attempt(letter, False)
        assert player.letter_mastery("A") == 80.0
        assert player.can_unlock_next_tier()

    def test_only_current_tier_window_counts(self, player: Player):
        _master_tier(player, 1)
        player.unlock_next_tier()
        # mastering tier 1 does not open tier 3
        assert not player.can_unlock_next_tier()
        # regressing tier 1 does not matter once tier 2 is mastered
        for letter in "ABCDE":
            _set_mastery(player, letter, 0)
        _master_tier(player, 2)
        assert player.can_unlock_next_tier()


# ---------------------------------------------------------------------------
# unlock_next_tier
# ---------------------------------------------------------------------------

class TestUnlock:
    def test_locked_raises(self, player: Player):
        with pytest.raises(TierLockedError):
            player.unlock_next_tier()
        assert player.unlocked_letters() == list("ABCDE")

    def test_adds_exactly_five(self, player: Player):
        _master_tier(player, 1)
        added = player.unlock_next_tier()
        assert added == list("FGHIJ")
        assert len(player.unlocked_letters()) == 10
        assert player.current_tier() == 2

    def test_last_tier_adds_remainder_then_stops(self, player: Player):
        sizes = [len(player.unlocked_letters())]
        for tier in range(1, 6):
            _master_tier(player, tier)
            player.unlock_next_tier()
            sizes.append(len(player.unlocked_letters()))
        assert sizes == [5, 10, 15, 20, 25, 26]
        assert player.unlocked_letters() == list(ALPHABET)
        assert not player.has_more_tiers()
        with pytest.raises(NoMoreTiersError):
            player.unlock_next_tier()

    def test_errors_are_state_conflicts(self):
        assert issubclass(TierLockedError, StateConflictError)
        assert issubclass(NoMoreTiersError, StateConflictError)


# ---------------------------------------------------------------------------
# Totals and statistics
# ---------------------------------------------------------------------------

class TestTotals:
    def test_no_attempts_is_zero(self, player: Player):
        assert player.total_mastery_percent() == 0.0

    def test_mean_excludes_unattempted(self, player: Player):
        _set_mastery(player, "A", 9)
        _set_mastery(player, "B", 7)
        assert player.total_mastery_percent() == pytest.approx(80.0)

    def test_zero_attempt_records_excluded(self, player: Player):
        _set_mastery(player, "A", 10)
        player.tracker.restore("B", 0, 0)
        assert player.total_mastery_percent() == 100.0

    def test_record_test_completion(self, player: Player):
        player.record_test_completion(15)
        player.record_test_completion(0)
        assert player.total_tests == 2
        assert player.total_correct == 15

    def test_negative_completion_rejected(self, player: Player):
        with pytest.raises(ValueError):
            player.record_test_completion(-1)

    def test_statistics(self, player: Player):
        _set_mastery(player, "A", 9)
        player.record_test_completion(18)
        stats = player.statistics()
        assert stats == PlayerStatistics(total_tests=1, total_correct=18, average_mastery=90.0)
        assert str(stats) == "Tests: 1, Correct: 18, Avg Mastery: 90.0%"


# ---------------------------------------------------------------------------
# Ranking
# ---------------------------------------------------------------------------

class TestRanking:
    def test_higher_mastery_ranks_first(self):
        high = Player("High")
        low = Player("Low")
        equal = Player("Equal")
        for p, successful in ((high, 9), (low, 7), (equal, 9)):
            p.tracker.restore("A", 10, successful)
        assert high.compare_to(low) < 0
        assert low.compare_to(high) > 0
        assert high.compare_to(equal) == 0
        assert sorted([low, high]) == [high, low]

    def test_restore_uses_tracker(self):
        tracker: MasteryTracker[str] = MasteryTracker()
        tracker.restore("F", 10, 10)
        p = Player.restore("R", datetime(2024, 1, 1), list("ABCDEFGHIJ"), tracker, 3, 40)
        assert p.current_tier() == 2
        assert p.letter_mastery("F") == 100.0
        assert (p.total_tests, p.total_correct) == (3, 40)

    def test_restore_accepts_full_alphabet(self):
        p = Player.restore("Done", datetime(2024, 1, 1), list(ALPHABET), MasteryTracker())
        assert p.current_tier() == 6
        assert not p.has_more_tiers()

    @pytest.mark.parametrize("letters", ["AB", "FGHIJ", "ABCDEG", ALPHABET[:24]])
    def test_restore_rejects_partial_tiers(self, letters: str):
        with pytest.raises(ValueError):
            Player.restore("Bad", datetime(2024, 1, 1), list(letters), MasteryTracker())
