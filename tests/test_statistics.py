"""Tests for gamedeck.core.statistics – number game session tallies."""

from __future__ import annotations

import pytest

from gamedeck.core.statistics import SessionStatistics


@pytest.fixture()
def stats() -> SessionStatistics:
    return SessionStatistics()


# ---------------------------------------------------------------------------
# Counters
# ---------------------------------------------------------------------------

class TestCounters:
    def test_starts_empty(self, stats: SessionStatistics):
        assert stats.games_played == 0
        assert stats.total_placements == 0
        assert stats.average_placements() == 0.0

    def test_win_then_loss(self, stats: SessionStatistics):
        stats.record_win(20)
        stats.record_loss(8)
        assert stats.games_played == 2
        assert stats.wins == 1
        assert stats.losses == 1
        assert stats.total_placements == 28
        assert stats.average_placements() == 14.0

    def test_games_played_is_sum(self, stats: SessionStatistics):
        for placements in (3, 5, 0):
            stats.record_loss(placements)
        stats.record_win(20)
        assert stats.games_played == stats.wins + stats.losses == 4

    def test_negative_placements_rejected(self, stats: SessionStatistics):
        with pytest.raises(ValueError):
            stats.record_win(-1)
        with pytest.raises(ValueError):
            stats.record_loss(-3)
        assert stats.games_played == 0


# ---------------------------------------------------------------------------
# summary_message
# ---------------------------------------------------------------------------

class TestSummary:
    def test_no_games(self, stats: SessionStatistics):
        assert stats.summary_message() == "No games played yet."

    def test_single_win(self, stats: SessionStatistics):
        stats.record_win(20)
        assert stats.summary_message() == (
            "You won 1 out of 1 game, with 20 successful placements, an average of 20.00 per game"
        )

    def test_losses_only(self, stats: SessionStatistics):
        stats.record_loss(4)
        stats.record_loss(5)
        assert stats.summary_message().startswith("You lost 2 out of 2 games,")
        assert "an average of 4.50 per game" in stats.summary_message()

    def test_wins_and_losses(self, stats: SessionStatistics):
        stats.record_win(20)
        stats.record_loss(8)
        assert stats.summary_message() == (
            "You won 1 out of 2 games and you lost 1 out of 2 games, "
            "with 28 successful placements, an average of 14.00 per game"
        )
