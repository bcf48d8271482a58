from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
POINTS_FIRST_ATTEMPT = 2
POINTS_SECOND_ATTEMPT = 1

_DATE_PREFIX = "Date and Time: "
_GAMES_PREFIX = "Games Played: "
_FIRST_PREFIX = "Correct First Attempts: "
_SECOND_PREFIX = "Correct Second Attempts: "
_INCORRECT_PREFIX = "Incorrect Attempts: "
_SCORE_PREFIXES = ("Total Score: ", "Score: ")


@dataclass
class Score:
    """Word game results for one sitting."""

    played_at: datetime = field(default_factory=lambda: datetime.now().replace(microsecond=0))
    games_played: int = 0
    correct_first_attempt: int = 0
    correct_second_attempt: int = 0
    incorrect_two_attempts: int = 0

    def __post_init__(self) -> None:
        for name in ("games_played", "correct_first_attempt", "correct_second_attempt", "incorrect_two_attempts"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} cannot be negative, but was: {getattr(self, name)}")

    @property
    def points(self) -> int:
        return self.correct_first_attempt * POINTS_FIRST_ATTEMPT + self.correct_second_attempt * POINTS_SECOND_ATTEMPT

    def to_record(self) -> str:
        return (
            f"{_DATE_PREFIX}{self.played_at.strftime(DATE_FORMAT)}\n"
            f"{_GAMES_PREFIX}{self.games_played}\n"
            f"{_FIRST_PREFIX}{self.correct_first_attempt}\n"
            f"{_SECOND_PREFIX}{self.correct_second_attempt}\n"
            f"{_INCORRECT_PREFIX}{self.incorrect_two_attempts}\n"
            f"Score: {self.points} points\n"
        )


def _field(line: str, prefix: str) -> str:
    if not line.startswith(prefix):
        raise ValueError(f"expected {prefix.strip()!r}, got {line!r}")
    return line[len(prefix):].strip()


def parse_score_block(lines: List[str]) -> Score:
    """Parse one six-line block. Raises ValueError when it does not fit."""
    if len(lines) < 6:
        raise ValueError("incomplete score block")
    played_at = datetime.strptime(_field(lines[0], _DATE_PREFIX), DATE_FORMAT)
    score_line = lines[5]
    if not any(score_line.startswith(prefix) for prefix in _SCORE_PREFIXES):
        raise ValueError(f"expected score line, got {score_line!r}")
    return Score(
        played_at=played_at,
        games_played=int(_field(lines[1], _GAMES_PREFIX)),
        correct_first_attempt=int(_field(lines[2], _FIRST_PREFIX)),
        correct_second_attempt=int(_field(lines[3], _SECOND_PREFIX)),
        incorrect_two_attempts=int(_field(lines[4], _INCORRECT_PREFIX)),
    )


def append_score(score: Score, path: Path) -> bool:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("a", encoding="utf-8") as handle:
            handle.write(score.to_record())
    except OSError as e:
        logger.warning("Could not append score to %s: %s", path, e)
        return False
    return True


def read_scores(path: Path) -> List[Score]:
    """Read every well-formed block; broken blocks are logged and skipped."""
    path = Path(path)
    if not path.exists():
        return []
    try:
        lines = [line.rstrip("\n") for line in path.read_text(encoding="utf-8").splitlines()]
    except OSError as e:
        logger.warning("Could not read scores from %s: %s", path, e)
        return []

    scores: List[Score] = []
    index = 0
    while index < len(lines):
        if not lines[index].startswith(_DATE_PREFIX):
            index += 1
            continue
        block = lines[index:index + 6]
        try:
            scores.append(parse_score_block(block))
        except ValueError as e:
            logger.warning("Skipping malformed score entry at line %d: %s", index + 1, e)
            index += 1
            continue
        index += 6
    return scores


def best_score(scores: Iterable[Score]) -> Optional[Score]:
    """Highest-point score; the earliest one wins a tie."""
    best: Optional[Score] = None
    for score in scores:
        if best is None or score.points > best.points:
            best = score
    return best
