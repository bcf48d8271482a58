from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

import yaml

from gamedeck.core.player import ALPHABET

DEFAULT_SIGNS_PATH = Path(__file__).resolve().parent.parent / "data" / "asl_signs.yaml"


def load_signs(path: Optional[Path] = None) -> Dict[str, str]:
    """Handshape description for every letter A-Z."""
    signs_path = Path(path) if path is not None else DEFAULT_SIGNS_PATH
    if not signs_path.exists():
        raise FileNotFoundError(f"Signs file not found: {signs_path}")
    raw = yaml.safe_load(signs_path.read_text(encoding="utf-8"))
    if not raw or not isinstance(raw, dict):
        raise ValueError(f"{signs_path.name}: expected a mapping of letter to description")

    signs: Dict[str, str] = {}
    for key, description in raw.items():
        letter = str(key).strip().upper()
        if len(letter) != 1 or letter not in ALPHABET:
            raise ValueError(f"{signs_path.name}: {key!r} is not a letter A-Z")
        if not description or not str(description).strip():
            raise ValueError(f"{signs_path.name}: empty description for {letter}")
        signs[letter] = " ".join(str(description).split())

    missing = [letter for letter in ALPHABET if letter not in signs]
    if missing:
        raise ValueError(f"{signs_path.name}: missing letters {', '.join(missing)}")
    return signs
