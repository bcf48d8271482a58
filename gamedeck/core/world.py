from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Tuple

import yaml

logger = logging.getLogger(__name__)

FACTS_PER_COUNTRY = 3
DEFAULT_COUNTRIES_PATH = Path(__file__).resolve().parent.parent / "data" / "countries.yaml"


@dataclass(frozen=True)
class Country:
    name: str
    capital: str
    facts: Tuple[str, ...]

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Country name cannot be empty")
        if not self.capital or not self.capital.strip():
            raise ValueError("Capital cannot be empty")
        facts = tuple(self.facts)
        if len(facts) != FACTS_PER_COUNTRY:
            raise ValueError(
                f"{self.name}: expected exactly {FACTS_PER_COUNTRY} facts, got {len(facts)}"
            )
        for index, fact in enumerate(facts):
            if not isinstance(fact, str) or not fact.strip():
                raise ValueError(f"{self.name}: fact {index} cannot be empty")
        object.__setattr__(self, "facts", facts)

    def fact(self, index: int) -> str:
        if not 0 <= index < FACTS_PER_COUNTRY:
            raise IndexError(f"Fact index must be between 0 and {FACTS_PER_COUNTRY - 1}, but was: {index}")
        return self.facts[index]


class World:
    """Countries keyed by name."""

    def __init__(self) -> None:
        self._countries: Dict[str, Country] = {}

    def __len__(self) -> int:
        return len(self._countries)

    def add(self, country: Country) -> None:
        self._countries[country.name] = country

    def get(self, name: str) -> Optional[Country]:
        return self._countries.get(_checked_name(name))

    def has(self, name: str) -> bool:
        return _checked_name(name) in self._countries

    def names(self) -> List[str]:
        return list(self._countries)

    def countries(self) -> List[Country]:
        return list(self._countries.values())

    def is_empty(self) -> bool:
        return not self._countries

    def random_country(self, rng: Optional[random.Random] = None) -> Country:
        if not self._countries:
            raise LookupError("Cannot pick a country from an empty world")
        return (rng or random).choice(self.countries())

    def clear(self) -> None:
        self._countries.clear()


def _checked_name(name: str) -> str:
    if not name or not name.strip():
        raise ValueError("Country name cannot be empty")
    return name


def load_world(path: Optional[Path] = None) -> World:
    """Load trivia countries from YAML. Entries that fail validation are skipped."""
    countries_path = Path(path) if path is not None else DEFAULT_COUNTRIES_PATH
    if not countries_path.exists():
        raise FileNotFoundError(f"Countries file not found: {countries_path}")
    raw = yaml.safe_load(countries_path.read_text(encoding="utf-8"))
    if not raw or not isinstance(raw, dict) or not isinstance(raw.get("countries"), list):
        raise ValueError(f"{countries_path.name}: expected YAML with a 'countries' list")

    world = World()
    for position, entry in enumerate(raw["countries"]):
        if not isinstance(entry, dict):
            logger.warning("%s: entry %d is not a mapping, skipped", countries_path.name, position)
            continue
        facts = entry.get("facts")
        if not isinstance(facts, list):
            facts = []
        try:
            world.add(
                Country(
                    name=str(entry.get("name") or "").strip(),
                    capital=str(entry.get("capital") or "").strip(),
                    facts=tuple(str(f).strip() for f in facts),
                )
            )
        except ValueError as e:
            logger.warning("%s: entry %d skipped: %s", countries_path.name, position, e)
    logger.info("Loaded %d countries from %s", len(world), countries_path.name)
    return world
