"""Plain data handed from the game engines to the widgets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from gamedeck.core.number_game import NumberGame
from gamedeck.core.player import ALPHABET, LETTERS_PER_TIER, Player


@dataclass
class TierState:
    """UI state for one tier of the ladder: its letters, lock status and progress."""

    tier: int
    letters: List[str]
    unlocked: bool
    mastered: int
    is_current: bool = False


@dataclass(frozen=True)
class CellView:
    position: int
    value: Optional[int]
    selectable: bool


def build_tier_states(player: Player) -> List[TierState]:
    current = player.current_tier()
    tier_count = (len(ALPHABET) + LETTERS_PER_TIER - 1) // LETTERS_PER_TIER
    states = []
    for tier in range(1, tier_count + 1):
        letters = player.tier_letters(tier)
        states.append(
            TierState(
                tier=tier,
                letters=letters,
                unlocked=all(player.is_unlocked(letter) for letter in letters),
                mastered=player.mastered_count(tier),
                is_current=tier == current,
            )
        )
    return states


def build_cell_views(game: NumberGame) -> List[CellView]:
    return [
        CellView(position=position, value=value, selectable=game.can_place(position))
        for position, value in enumerate(game.board.slots())
    ]
