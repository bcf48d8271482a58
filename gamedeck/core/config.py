from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

HOME_ENV_VAR = "GAMEDECK_HOME"
DEFAULT_SETTINGS_PATH = Path(__file__).resolve().parent.parent / "data" / "settings.yaml"


@dataclass(frozen=True)
class GameConfig:
    board_size: int = 20
    min_value: int = 1
    max_value: int = 1000
    questions_per_game: int = 10
    questions_per_drill: int = 20
    time_limit_seconds: int = 5
    pass_percent: float = 80.0
    storage_dir: Path = Path.home() / ".gamedeck"

    @property
    def players_dir(self) -> Path:
        return self.storage_dir / "players"

    @property
    def scores_file(self) -> Path:
        return self.storage_dir / "score.txt"


def _section(raw: Dict[str, Any], name: str, source: str) -> Dict[str, Any]:
    value = raw.get(name, {})
    if value is None:
        return {}
    if not isinstance(value, dict):
        raise ValueError(f"{source}: '{name}' must be a mapping")
    return value


def _positive_int(section: Dict[str, Any], key: str, default: int, source: str) -> int:
    value = section.get(key, default)
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise ValueError(f"{source}: '{key}' must be a positive integer, got {value!r}")
    return value


def load_config(path: Optional[Path] = None) -> GameConfig:
    """Read gameplay settings from YAML; ``GAMEDECK_HOME`` wins over storage.directory."""
    settings_path = Path(path) if path is not None else DEFAULT_SETTINGS_PATH
    if not settings_path.exists():
        raise FileNotFoundError(f"Settings file not found: {settings_path}")
    source = settings_path.name
    raw = yaml.safe_load(settings_path.read_text(encoding="utf-8")) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"{source}: expected a YAML mapping")

    defaults = GameConfig()
    number = _section(raw, "number_game", source)
    word = _section(raw, "word_game", source)
    ladder = _section(raw, "ladder", source)
    storage = _section(raw, "storage", source)

    min_value = number.get("min_value", defaults.min_value)
    max_value = number.get("max_value", defaults.max_value)
    if not isinstance(min_value, int) or not isinstance(max_value, int) or min_value > max_value:
        raise ValueError(f"{source}: 'min_value' must be an integer not above 'max_value'")

    pass_percent = ladder.get("pass_percent", defaults.pass_percent)
    if not isinstance(pass_percent, (int, float)) or not 0.0 <= float(pass_percent) <= 100.0:
        raise ValueError(f"{source}: 'pass_percent' must be between 0 and 100")

    env_home = os.environ.get(HOME_ENV_VAR)
    if env_home:
        storage_dir = Path(env_home).expanduser()
    else:
        storage_dir = Path(str(storage.get("directory", defaults.storage_dir))).expanduser()

    return GameConfig(
        board_size=_positive_int(number, "board_size", defaults.board_size, source),
        min_value=min_value,
        max_value=max_value,
        questions_per_game=_positive_int(word, "questions_per_game", defaults.questions_per_game, source),
        questions_per_drill=_positive_int(ladder, "questions_per_drill", defaults.questions_per_drill, source),
        time_limit_seconds=_positive_int(ladder, "time_limit_seconds", defaults.time_limit_seconds, source),
        pass_percent=float(pass_percent),
        storage_dir=storage_dir,
    )
