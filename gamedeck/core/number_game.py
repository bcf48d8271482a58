from __future__ import annotations

import logging
import random
from enum import Enum
from typing import Optional

from gamedeck.core.board import DEFAULT_BOARD_SIZE, PlacementBoard
from gamedeck.core.statistics import SessionStatistics

logger = logging.getLogger(__name__)


class Outcome(Enum):
    PLACED = "placed"
    WON = "won"
    LOST = "lost"


class NumberGame:
    """Drives the number game: draw a value, place it, repeat until the board fills or blocks.

    The game is lost as soon as the freshly drawn value has no legal slot.
    Finished games are tallied into ``statistics``.
    """

    def __init__(
        self,
        board_size: int = DEFAULT_BOARD_SIZE,
        min_value: int = 1,
        max_value: int = 1000,
        rng: Optional[random.Random] = None,
        statistics: Optional[SessionStatistics] = None,
    ) -> None:
        if min_value > max_value:
            raise ValueError("min_value cannot exceed max_value")
        self._board = PlacementBoard(board_size)
        self._min_value = min_value
        self._max_value = max_value
        self._rng = rng or random.Random()
        self.statistics = statistics if statistics is not None else SessionStatistics()
        self._current: Optional[int] = None
        self._outcome: Optional[Outcome] = None
        self._placements = 0

    @property
    def board(self) -> PlacementBoard:
        return self._board

    @property
    def current_value(self) -> Optional[int]:
        return self._current

    @property
    def placements(self) -> int:
        return self._placements

    @property
    def outcome(self) -> Optional[Outcome]:
        """Final outcome of the current game, or None while it is still running."""
        return self._outcome

    def is_over(self) -> bool:
        return self._outcome is not None

    def start(self) -> Outcome:
        self._board.reset()
        self._placements = 0
        self._outcome = None
        logger.info("Number game started")
        return self._draw()

    def can_place(self, position: int) -> bool:
        return self._current is not None and not self.is_over() and self._board.can_place(self._current, position)

    def place(self, position: int) -> Outcome:
        if self._current is None or self.is_over():
            raise RuntimeError("No game in progress; call start() first")
        self._board.place(self._current, position)
        self._placements += 1
        if self._board.is_full():
            return self._finish(Outcome.WON)
        return self._draw()

    def _draw(self) -> Outcome:
        self._current = self._rng.randint(self._min_value, self._max_value)
        if not self._board.has_any_valid_placement(self._current):
            return self._finish(Outcome.LOST)
        return Outcome.PLACED

    def _finish(self, outcome: Outcome) -> Outcome:
        self._outcome = outcome
        if outcome is Outcome.WON:
            self.statistics.record_win(self._placements)
        else:
            self.statistics.record_loss(self._placements)
        logger.info("Number game %s after %d placements", outcome.value, self._placements)
        return outcome
