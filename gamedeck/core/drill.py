from __future__ import annotations

import random
from dataclasses import dataclass
from typing import List, Optional, Sequence

from gamedeck.core.mastery import MasteryTracker

DEFAULT_QUESTION_COUNT = 20
PASS_PERCENT = 80.0


@dataclass(frozen=True)
class DrillResult:
    """Outcome of a finished speed drill."""

    total_questions: int
    correct_answers: int
    percent: float
    passed: bool

    def __str__(self) -> str:
        verdict = "PASSED" if self.passed else "FAILED"
        return f"Drill Result: {self.correct_answers}/{self.total_questions} correct ({self.percent:.1f}%) - {verdict}"


class SpeedDrill:
    """Timed letter-recognition drill over the player's unlocked letters.

    The question sequence cycles through a shuffled copy of ``letters`` so
    every letter appears before any repeats. Each answer is fed into the
    shared mastery tracker. An empty answer stands for a timeout.
    """

    def __init__(
        self,
        letters: Sequence[str],
        tracker: MasteryTracker[str],
        question_count: int = DEFAULT_QUESTION_COUNT,
        pass_percent: float = PASS_PERCENT,
        rng: Optional[random.Random] = None,
    ) -> None:
        """Build the question sequence up front."""
        if not letters:
            raise ValueError("Drill letters cannot be empty")
        if question_count <= 0:
            raise ValueError("question_count must be positive")
        pool = list(letters)
        (rng or random.Random()).shuffle(pool)
        self._questions: List[str] = [pool[i % len(pool)] for i in range(question_count)]
        self._tracker = tracker
        self._pass_percent = pass_percent
        self._index = 0
        self._correct = 0

    @property
    def index(self) -> int:
        """Index of the current question (0-based)."""
        return self._index

    @property
    def question_number(self) -> int:
        return self._index + 1

    @property
    def total_questions(self) -> int:
        return len(self._questions)

    @property
    def correct_count(self) -> int:
        return self._correct

    def questions(self) -> List[str]:
        return list(self._questions)

    def current_letter(self) -> str:
        return self._questions[self._index]

    def is_complete(self) -> bool:
        return self._index >= len(self._questions)

    def answer(self, typed: str) -> bool:
        """Grade ``typed`` against the current letter and advance. Returns True when correct."""
        if self.is_complete():
            raise RuntimeError("Drill is already complete")
        letter = self._questions[self._index]
        typed = (typed or "").strip()
        correct = bool(typed) and typed[0].upper() == letter
        if correct:
            self._correct += 1
        self._tracker.record_attempt(letter, correct)
        self._index += 1
        return correct

    def result(self) -> DrillResult:
        answered = self._index
        percent = (self._correct / answered) * 100.0 if answered else 0.0
        return DrillResult(
            total_questions=answered,
            correct_answers=self._correct,
            percent=percent,
            passed=percent >= self._pass_percent,
        )
