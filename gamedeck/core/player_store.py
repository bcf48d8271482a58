from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

from gamedeck.core.mastery import MasteryTracker
from gamedeck.core.player import Player, is_valid_name, validate_letter

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
FILE_SUFFIX = ".txt"
REPLAY_ATTEMPTS = 10

_FIELDS = ("PlayerName", "CreationDate", "UnlockedLetters", "LetterMastery", "TotalTests", "TotalCorrect")


def format_player(player: Player) -> str:
    """Render the line-oriented player record."""
    tracker = player.tracker
    mastery = ",".join(f"{letter}:{tracker.mastery_percent(letter)!r}" for letter in tracker.keys())
    attempts = []
    for letter in tracker.keys():
        record = tracker.record(letter)
        attempts.append(f"{letter}:{record.successful_attempts}/{record.total_attempts}")
    lines = [
        f"PlayerName: {player.name}",
        f"CreationDate: {player.created_at.strftime(DATE_FORMAT)}",
        f"UnlockedLetters: {','.join(player.unlocked_letters())}",
        f"LetterMastery: {mastery}",
        f"TotalTests: {player.total_tests}",
        f"TotalCorrect: {player.total_correct}",
        f"LetterAttempts: {','.join(attempts)}",
    ]
    return "\n".join(lines) + "\n"


def parse_player(text: str) -> Player:
    """Build a player from a record. Raises ValueError on malformed content.

    Exact counters come from ``LetterAttempts`` when present. Older records
    only carry percentages, which are replayed as a ten-attempt history.
    """
    fields: Dict[str, str] = {}
    for line in text.splitlines():
        if not line.strip():
            continue
        key, sep, value = line.partition(":")
        if not sep:
            raise ValueError(f"Malformed line: {line!r}")
        fields[key.strip()] = value.strip()

    missing = [name for name in _FIELDS if name not in fields]
    if missing:
        raise ValueError(f"Missing fields: {', '.join(missing)}")

    tracker: MasteryTracker[str] = MasteryTracker()
    if fields.get("LetterAttempts"):
        for pair in fields["LetterAttempts"].split(","):
            letter, _, counts = pair.partition(":")
            successful, _, total = counts.partition("/")
            tracker.restore(validate_letter(letter.strip()), int(total), int(successful))
    elif fields["LetterMastery"]:
        for pair in fields["LetterMastery"].split(","):
            letter, _, percent_text = pair.partition(":")
            percent = float(percent_text)
            if not 0.0 <= percent <= 100.0:
                raise ValueError(f"Mastery percent out of range: {percent}")
            successful = round(percent / 100.0 * REPLAY_ATTEMPTS)
            tracker.restore(validate_letter(letter.strip()), REPLAY_ATTEMPTS, successful)

    unlocked = [item.strip() for item in fields["UnlockedLetters"].split(",") if item.strip()]
    return Player.restore(
        name=fields["PlayerName"],
        created_at=datetime.strptime(fields["CreationDate"], DATE_FORMAT),
        unlocked_letters=unlocked,
        tracker=tracker,
        total_tests=int(fields["TotalTests"]),
        total_correct=int(fields["TotalCorrect"]),
    )


class PlayerStore:
    """One text file per player under ``directory``.

    I/O and format problems are logged and reported as ``False`` / ``None``
    so the menu keeps running.
    """

    def __init__(self, directory: Path) -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def path_for(self, name: str) -> Path:
        if not is_valid_name(name):
            raise ValueError(f"Not a valid player name: {name!r}")
        return self._directory / f"{name.strip()}{FILE_SUFFIX}"

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def names(self) -> List[str]:
        if not self._directory.exists():
            return []
        return sorted(p.stem for p in self._directory.glob(f"*{FILE_SUFFIX}") if is_valid_name(p.stem))

    def save(self, player: Player) -> bool:
        path = self.path_for(player.name)
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            path.write_text(format_player(player), encoding="utf-8")
        except OSError as e:
            logger.warning("Could not save player to %s: %s", path, e)
            return False
        logger.info("Saved player %s", player.name)
        return True

    def load(self, name: str) -> Optional[Player]:
        path = self.path_for(name)
        if not path.exists():
            return None
        try:
            return parse_player(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Could not load player from %s: %s", path, e)
            return None

    def ranked(self) -> List[Player]:
        """Every readable player, highest mastery first."""
        players = [p for p in (self.load(name) for name in self.names()) if p is not None]
        return sorted(players)
