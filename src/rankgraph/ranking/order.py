from __future__ import annotations

import logging
from collections.abc import Callable, Container, Sequence
from enum import Enum

from .store import DEFAULT_SCORE

logger = logging.getLogger(__name__)


class OrderMode(str, Enum):
    LIVE = "live"
    FROZEN = "frozen"


def sort_by_score(
    item_ids: Sequence[str],
    ranked: Container[str],
    score_of: Callable[[str], float | None],
) -> list[str]:
    """Ranked ids, highest score first. Ties keep the order of `item_ids`."""

    def key(item_id: str) -> float:
        score = score_of(item_id)
        return -(DEFAULT_SCORE if score is None else score)

    # sorted() is stable
    return sorted((i for i in item_ids if i in ranked), key=key)


class OrderStabilizer:
    """Derives the display order and holds it still during a score adjustment.

    Live: the order is a fresh descending sort on every read.
    Frozen: while one item is being adjusted, the order from just before the
    adjustment is served instead, so the list does not jump mid-gesture. The
    frozen order is a cache; reads always filter it to current membership.
    """

    def __init__(self, item_order: Sequence[str]):
        self._item_order = tuple(item_order)
        self._active: str | None = None
        self._frozen: list[str] = []

    @property
    def mode(self) -> OrderMode:
        return OrderMode.FROZEN if self._active is not None else OrderMode.LIVE

    @property
    def active_item_id(self) -> str | None:
        return self._active

    def sort(self, ranked: Container[str], score_of: Callable[[str], float | None]) -> list[str]:
        return sort_by_score(self._item_order, ranked, score_of)

    def order(self, ranked: Container[str], score_of: Callable[[str], float | None]) -> list[str]:
        if self._active is None:
            return self.sort(ranked, score_of)
        return [i for i in self._frozen if i in ranked]

    def freeze(
        self, item_id: str, ranked: Container[str], score_of: Callable[[str], float | None]
    ) -> None:
        if self._active is not None:
            self.thaw(ranked, score_of)
        self._frozen = self.sort(ranked, score_of)
        self._active = item_id
        logger.debug("order frozen for %s: %s", item_id, self._frozen)

    def thaw(self, ranked: Container[str], score_of: Callable[[str], float | None]) -> list[str]:
        self._active = None
        self._frozen = self.sort(ranked, score_of)
        logger.debug("order live: %s", self._frozen)
        return list(self._frozen)

    def refresh(self, ranked: Container[str], score_of: Callable[[str], float | None]) -> None:
        """Re-sort after membership changed. Stays frozen if an adjustment is active."""
        if self._active is not None:
            self._frozen = self.sort(ranked, score_of)
            logger.debug("frozen order refreshed: %s", self._frozen)

    def clear(self) -> None:
        self._active = None
        self._frozen = []
