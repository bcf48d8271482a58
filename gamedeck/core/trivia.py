from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gamedeck.core.scores import Score
from gamedeck.core.world import World

ATTEMPTS_PER_QUESTION = 2


class QuestionKind(Enum):
    CAPITAL_TO_COUNTRY = "capital"
    COUNTRY_TO_CAPITAL = "country"
    FACT_TO_COUNTRY = "fact"


class Verdict(Enum):
    FIRST_TRY = "first_try"
    SECOND_TRY = "second_try"
    TRY_AGAIN = "try_again"
    MISSED = "missed"


@dataclass(frozen=True)
class Question:
    kind: QuestionKind
    prompt: str
    answer: str


def make_question(world: World, rng: Optional[random.Random] = None) -> Question:
    """Pick a random country and phrase one of the three question kinds about it."""
    rng = rng or random.Random()
    country = world.random_country(rng)
    kind = rng.choice(list(QuestionKind))
    if kind is QuestionKind.CAPITAL_TO_COUNTRY:
        return Question(kind, f"{country.capital} is the capital of which country?", country.name)
    if kind is QuestionKind.COUNTRY_TO_CAPITAL:
        return Question(kind, f"What is the capital of {country.name}?", country.capital)
    fact = country.fact(rng.randrange(len(country.facts)))
    return Question(kind, f"{fact} Which country is this?", country.name)


def answers_match(given: str, expected: str) -> bool:
    return given.strip().casefold() == expected.strip().casefold()


class WordGame:
    """One round of geography trivia: a fixed number of questions, two tries each.

    Results accumulate into the shared ``Score`` so several rounds played in
    one sitting end up in a single score record.
    """

    def __init__(
        self,
        world: World,
        score: Score,
        questions_per_game: int = 10,
        rng: Optional[random.Random] = None,
    ) -> None:
        if world.is_empty():
            raise ValueError("Word game needs at least one country")
        if questions_per_game <= 0:
            raise ValueError("questions_per_game must be positive")
        self._world = world
        self._score = score
        self._questions_per_game = questions_per_game
        self._rng = rng or random.Random()
        self._asked = 0
        self._attempts = 0
        self._question: Optional[Question] = None

    @property
    def score(self) -> Score:
        return self._score

    @property
    def question_number(self) -> int:
        """1-based number of the question currently being asked."""
        return self._asked

    @property
    def total_questions(self) -> int:
        return self._questions_per_game

    def start(self) -> Question:
        self._score.games_played += 1
        self._asked = 0
        return self._next_question()

    def current_question(self) -> Question:
        if self._question is None:
            raise RuntimeError("No question in progress; call start() first")
        return self._question

    def is_over(self) -> bool:
        return self._question is None and self._asked >= self._questions_per_game

    def submit(self, answer: str) -> Verdict:
        question = self.current_question()
        self._attempts += 1
        if answers_match(answer, question.answer):
            if self._attempts == 1:
                self._score.correct_first_attempt += 1
                verdict = Verdict.FIRST_TRY
            else:
                self._score.correct_second_attempt += 1
                verdict = Verdict.SECOND_TRY
        elif self._attempts < ATTEMPTS_PER_QUESTION:
            return Verdict.TRY_AGAIN
        else:
            self._score.incorrect_two_attempts += 1
            verdict = Verdict.MISSED
        self._advance()
        return verdict

    def _advance(self) -> None:
        if self._asked >= self._questions_per_game:
            self._question = None
            return
        self._next_question()

    def _next_question(self) -> Question:
        self._attempts = 0
        self._asked += 1
        self._question = make_question(self._world, self._rng)
        return self._question
