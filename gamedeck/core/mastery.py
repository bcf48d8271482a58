from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Generic, Hashable, List, Optional, TypeVar

K = TypeVar("K", bound=Hashable)


@dataclass
class SkillRecord:
    """Attempt counters for a single key."""

    total_attempts: int = 0
    successful_attempts: int = 0

    @property
    def mastery_percent(self) -> float:
        if self.total_attempts == 0:
            return 0.0
        return self.successful_attempts * 100.0 / self.total_attempts


class MasteryTracker(Generic[K]):
    """Per-key success rates.

    Keys are kept in first-seen order, which also breaks ties in the sorted
    views so results are stable within a run.
    """

    def __init__(self) -> None:
        self._records: Dict[K, SkillRecord] = {}

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def __len__(self) -> int:
        return len(self._records)

    def keys(self) -> List[K]:
        return list(self._records)

    def record_attempt(self, key: K, success: bool) -> None:
        if key is None:
            raise ValueError("Key cannot be None")
        record = self._records.setdefault(key, SkillRecord())
        record.total_attempts += 1
        if success:
            record.successful_attempts += 1

    def restore(self, key: K, total_attempts: int, successful_attempts: int) -> None:
        """Seed ``key`` with previously persisted counters, replacing any existing record."""
        if key is None:
            raise ValueError("Key cannot be None")
        if total_attempts < 0 or successful_attempts < 0:
            raise ValueError("Attempt counts cannot be negative")
        if successful_attempts > total_attempts:
            raise ValueError(
                f"Successful attempts ({successful_attempts}) exceed total attempts ({total_attempts})"
            )
        self._records[key] = SkillRecord(total_attempts, successful_attempts)

    def record(self, key: K) -> Optional[SkillRecord]:
        current = self._records.get(key)
        if current is None:
            return None
        return SkillRecord(current.total_attempts, current.successful_attempts)

    def mastery_percent(self, key: K) -> float:
        if key is None:
            raise ValueError("Key cannot be None")
        current = self._records.get(key)
        return current.mastery_percent if current is not None else 0.0

    def weak_keys(self, threshold_percent: float) -> List[K]:
        """Keys strictly below ``threshold_percent``, weakest first."""
        if threshold_percent < 0.0 or threshold_percent > 100.0:
            raise ValueError("Threshold must be between 0.0 and 100.0")
        return [key for key in self.all_keys_sorted() if self._records[key].mastery_percent < threshold_percent]

    def all_keys_sorted(self) -> List[K]:
        return sorted(self._records, key=lambda k: self._records[k].mastery_percent)

    def snapshot(self) -> Dict[K, float]:
        return {key: record.mastery_percent for key, record in self._records.items()}
