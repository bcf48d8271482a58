from __future__ import annotations

from typing import Callable, List, Optional, Sequence, Tuple

from gamedeck.core.errors import PlacementError

DEFAULT_BOARD_SIZE = 20

PlacementRule = Callable[[Sequence[Optional[int]], int, int], bool]


def strictly_ascending(slots: Sequence[Optional[int]], value: int, position: int) -> bool:
    """True if ``value`` at ``position`` keeps every filled slot strictly ascending."""
    for existing in slots[:position]:
        if existing is not None and existing >= value:
            return False
    for existing in slots[position + 1:]:
        if existing is not None and existing <= value:
            return False
    return True


class PlacementBoard:
    """Fixed row of slots that only accepts values keeping the row in order.

    Slots are filled once and never overwritten. ``can_place`` is the query a
    caller uses before ``place``; ``place`` raises if that check was skipped.
    """

    def __init__(self, size: int = DEFAULT_BOARD_SIZE, rule: PlacementRule = strictly_ascending) -> None:
        if size <= 0:
            raise ValueError("Board size must be positive")
        self._slots: List[Optional[int]] = [None] * size
        self._filled = 0
        self._rule = rule

    @property
    def size(self) -> int:
        return len(self._slots)

    @property
    def filled_count(self) -> int:
        return self._filled

    def slots(self) -> Tuple[Optional[int], ...]:
        return tuple(self._slots)

    def value_at(self, position: int) -> Optional[int]:
        """Value stored at ``position``, or None for an empty slot."""
        if not self._in_range(position):
            raise ValueError(f"Position out of bounds: {position}")
        return self._slots[position]

    def is_empty_at(self, position: int) -> bool:
        return self.value_at(position) is None

    def can_place(self, value: int, position: int) -> bool:
        if not self._in_range(position):
            return False
        if self._slots[position] is not None:
            return False
        return self._rule(self._slots, value, position)

    def place(self, value: int, position: int) -> None:
        if not self._in_range(position):
            raise ValueError(f"Position out of bounds: {position}")
        if self._slots[position] is not None:
            raise PlacementError(value, position, f"Slot {position} is already occupied")
        if not self._rule(self._slots, value, position):
            raise PlacementError(value, position, f"Placing {value} at {position} violates the board order")
        self._slots[position] = value
        self._filled += 1

    def has_any_valid_placement(self, value: int) -> bool:
        return any(self.can_place(value, position) for position in range(len(self._slots)))

    def valid_positions(self, value: int) -> List[int]:
        return [p for p in range(len(self._slots)) if self.can_place(value, p)]

    def is_full(self) -> bool:
        return self._filled == len(self._slots)

    def reset(self) -> None:
        """Empty every slot so the same board can host a new game."""
        self._slots = [None] * len(self._slots)
        self._filled = 0

    def _in_range(self, position: int) -> bool:
        return 0 <= position < len(self._slots)
