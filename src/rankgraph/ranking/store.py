from __future__ import annotations

from typing import Iterator

MIN_SCORE = 1.0
MAX_SCORE = 100.0
# Shown for items without a score and used as the sort fallback.
DEFAULT_SCORE = 50.0


class ScoreStore:
    """item id -> score. Values are stored as given (no clamping)."""

    def __init__(self) -> None:
        self._scores: dict[str, float] = {}

    def get(self, item_id: str) -> float | None:
        return self._scores.get(item_id)

    def set(self, item_id: str, value: float) -> None:
        self._scores[item_id] = float(value)

    def delete(self, item_id: str) -> None:
        self._scores.pop(item_id, None)

    def has(self, item_id: str) -> bool:
        return item_id in self._scores

    def floor(self) -> float:
        """Score a newly ranked item joins with: the current minimum, or MIN_SCORE."""
        return min(self._scores.values()) if self._scores else MIN_SCORE

    def clear(self) -> None:
        self._scores.clear()

    def as_dict(self) -> dict[str, float]:
        return dict(self._scores)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._scores

    def __len__(self) -> int:
        return len(self._scores)


class RankedSet:
    """Insertion-ordered set of ranked item ids."""

    def __init__(self) -> None:
        self._ids: dict[str, None] = {}

    def add(self, item_id: str) -> bool:
        if item_id in self._ids:
            return False
        self._ids[item_id] = None
        return True

    def discard(self, item_id: str) -> bool:
        if item_id not in self._ids:
            return False
        del self._ids[item_id]
        return True

    def clear(self) -> None:
        self._ids.clear()

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._ids))

    def __len__(self) -> int:
        return len(self._ids)
