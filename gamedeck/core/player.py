from __future__ import annotations

import string
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional, Set

from gamedeck.core.errors import NoMoreTiersError, TierLockedError
from gamedeck.core.mastery import MasteryTracker

ALPHABET = string.ascii_uppercase
LETTERS_PER_TIER = 5
MASTERED_LETTERS_TO_UNLOCK = 4
MASTERY_THRESHOLD_PERCENT = 80.0
NAME_PUNCTUATION = "-_ "


def validate_letter(letter: str) -> str:
    if not isinstance(letter, str) or len(letter) != 1 or letter not in ALPHABET:
        raise ValueError(f"Letter must be between A and Z, got {letter!r}")
    return letter


def is_valid_name(name: str) -> bool:
    """Names become file names, so only letters, digits, spaces, '-' and '_' are allowed."""
    name = name.strip()
    return bool(name) and all(ch.isalnum() or ch in NAME_PUNCTUATION for ch in name)


def _is_whole_tiers(letters: Set[str]) -> bool:
    count = len(letters)
    if count % LETTERS_PER_TIER and count != len(ALPHABET):
        return False
    return letters == set(ALPHABET[:count])


@dataclass(frozen=True)
class PlayerStatistics:
    total_tests: int
    total_correct: int
    average_mastery: float

    def __str__(self) -> str:
        return (
            f"Tests: {self.total_tests}, Correct: {self.total_correct}, "
            f"Avg Mastery: {self.average_mastery:.1f}%"
        )


class Player:
    """A learner on the ASL ladder.

    Letters unlock five at a time. The next tier opens once four letters of
    the most recently unlocked tier reach 80% mastery; earlier tiers are not
    re-checked.
    """

    def __init__(
        self,
        name: str,
        created_at: Optional[datetime] = None,
        tracker: Optional[MasteryTracker[str]] = None,
    ) -> None:
        if name is None or not name.strip():
            raise ValueError("Name cannot be empty")
        if not is_valid_name(name):
            raise ValueError(f"Name may only contain letters, digits, spaces, '-' and '_', got {name!r}")
        self._name = name.strip()
        self._created_at = (created_at or datetime.now()).replace(microsecond=0)
        self._tracker: MasteryTracker[str] = tracker if tracker is not None else MasteryTracker()
        self._unlocked = set(ALPHABET[:LETTERS_PER_TIER])
        self.total_tests = 0
        self.total_correct = 0

    @classmethod
    def restore(
        cls,
        name: str,
        created_at: datetime,
        unlocked_letters: Iterable[str],
        tracker: MasteryTracker[str],
        total_tests: int = 0,
        total_correct: int = 0,
    ) -> "Player":
        """Rebuild a player from persisted fields."""
        player = cls(name, created_at, tracker)
        letters = {validate_letter(letter) for letter in unlocked_letters}
        if letters:
            if not _is_whole_tiers(letters):
                raise ValueError(f"Unlocked letters must be whole tiers from A, got {','.join(sorted(letters))}")
            player._unlocked = letters
        if total_tests < 0 or total_correct < 0:
            raise ValueError("Totals cannot be negative")
        player.total_tests = total_tests
        player.total_correct = total_correct
        return player

    @property
    def name(self) -> str:
        return self._name

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def tracker(self) -> MasteryTracker[str]:
        return self._tracker

    def unlocked_letters(self) -> List[str]:
        """Unlocked letters in alphabet order (a copy)."""
        return sorted(self._unlocked)

    def is_unlocked(self, letter: str) -> bool:
        return validate_letter(letter) in self._unlocked

    def record_attempt(self, letter: str, success: bool) -> None:
        self._tracker.record_attempt(validate_letter(letter), success)

    def letter_mastery(self, letter: str) -> float:
        return self._tracker.mastery_percent(validate_letter(letter))

    def total_mastery_percent(self) -> float:
        """Mean mastery over letters that have at least one attempt."""
        percents = []
        for letter in self._tracker.keys():
            record = self._tracker.record(letter)
            if record is not None and record.total_attempts > 0:
                percents.append(record.mastery_percent)
        if not percents:
            return 0.0
        return sum(percents) / len(percents)

    def current_tier(self) -> int:
        return (len(self._unlocked) - 1) // LETTERS_PER_TIER + 1

    def tier_letters(self, tier: int) -> List[str]:
        if tier < 1:
            raise ValueError("Tier numbers start at 1")
        start = (tier - 1) * LETTERS_PER_TIER
        return list(ALPHABET[start:start + LETTERS_PER_TIER])

    def mastered_count(self, tier: int) -> int:
        return sum(
            1 for letter in self.tier_letters(tier)
            if self._tracker.mastery_percent(letter) >= MASTERY_THRESHOLD_PERCENT
        )

    def can_unlock_next_tier(self) -> bool:
        return self.mastered_count(self.current_tier()) >= MASTERED_LETTERS_TO_UNLOCK

    def has_more_tiers(self) -> bool:
        return self.current_tier() * LETTERS_PER_TIER < len(ALPHABET)

    def unlock_next_tier(self) -> List[str]:
        """Unlock the next tier and return the newly added letters."""
        if not self.has_more_tiers():
            raise NoMoreTiersError("No more tiers to unlock")
        if not self.can_unlock_next_tier():
            raise TierLockedError(
                f"Tier {self.current_tier() + 1} is locked: master {MASTERED_LETTERS_TO_UNLOCK} letters "
                f"of tier {self.current_tier()} first"
            )
        added = self.tier_letters(self.current_tier() + 1)
        self._unlocked.update(added)
        return added

    def record_test_completion(self, correct_answers: int) -> None:
        if correct_answers < 0:
            raise ValueError("Correct answers cannot be negative")
        self.total_tests += 1
        self.total_correct += correct_answers

    def statistics(self) -> PlayerStatistics:
        return PlayerStatistics(self.total_tests, self.total_correct, self.total_mastery_percent())

    def compare_to(self, other: "Player") -> int:
        """Negative if this player ranks ahead of ``other`` (higher mastery)."""
        mine = self.total_mastery_percent()
        theirs = other.total_mastery_percent()
        if mine > theirs:
            return -1
        if mine < theirs:
            return 1
        return 0

    def __lt__(self, other: "Player") -> bool:
        if not isinstance(other, Player):
            return NotImplemented
        return self.compare_to(other) < 0

    def __repr__(self) -> str:
        return f"Player(name={self._name!r}, tier={self.current_tier()})"
