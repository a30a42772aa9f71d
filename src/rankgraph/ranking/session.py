from __future__ import annotations

import logging
from collections.abc import Sequence

from rankgraph.errors import ItemNotRankedError, UnknownItemError
from rankgraph.knowledge_graph import (
    GraphStats,
    ItemEntity,
    KnowledgeGraph,
    PropertyGraph,
    RankListEntity,
    build_graph,
    to_property_graph,
)

from .order import OrderMode, OrderStabilizer
from .store import DEFAULT_SCORE, MAX_SCORE, MIN_SCORE, RankedSet, ScoreStore

logger = logging.getLogger(__name__)


class RankingSession:
    """State for ranking one list.

    The session owns the scores, the ranked set and the display order. The
    rank list and items are borrowed from the caller and never modified.
    Transitions are synchronous; every read reflects the last transition.
    """

    def __init__(self, rank_list: RankListEntity, items: Sequence[ItemEntity]):
        self.rank_list = rank_list
        self.items: tuple[ItemEntity, ...] = tuple(items)
        self._by_id = {item.id: item for item in self.items}
        self.scores = ScoreStore()
        self.ranked = RankedSet()
        self._order = OrderStabilizer([item.id for item in self.items])

    # --- transitions ---

    def insert_rank(self, item_id: str) -> bool:
        """Rank an item. Returns False if it was already ranked."""
        if item_id not in self._by_id:
            raise UnknownItemError(item_id)
        if item_id in self.ranked:
            return False

        if not self.scores.has(item_id):
            self.scores.set(item_id, self.scores.floor())
        self.ranked.add(item_id)
        self._order.refresh(self.ranked, self.scores.get)
        logger.debug("ranked %s at %s", item_id, self.scores.get(item_id))
        return True

    def remove_rank(self, item_id: str) -> bool:
        removed = self.ranked.discard(item_id)
        self.scores.delete(item_id)
        if removed:
            self._order.refresh(self.ranked, self.scores.get)
            logger.debug("unranked %s", item_id)
        return removed

    def set_score(self, item_id: str, value: float) -> None:
        if item_id not in self.ranked:
            raise ItemNotRankedError(item_id)
        if not MIN_SCORE <= value <= MAX_SCORE:
            logger.debug("score %s for %s is outside [%s, %s]", value, item_id, MIN_SCORE, MAX_SCORE)
        self.scores.set(item_id, value)

    def begin_adjustment(self, item_id: str) -> None:
        if item_id not in self.ranked:
            raise ItemNotRankedError(item_id)
        self._order.freeze(item_id, self.ranked, self.scores.get)

    def end_adjustment(self) -> list[str]:
        return self._order.thaw(self.ranked, self.scores.get)

    def reset(self) -> None:
        self.scores.clear()
        self.ranked.clear()
        self._order.clear()
        logger.debug("ranking reset")

    # --- views ---

    @property
    def mode(self) -> OrderMode:
        return self._order.mode

    @property
    def adjusting(self) -> str | None:
        return self._order.active_item_id

    @property
    def display_order(self) -> list[str]:
        return self._order.order(self.ranked, self.scores.get)

    @property
    def ranked_count(self) -> int:
        return len(self.ranked)

    def is_ranked(self, item_id: str) -> bool:
        return item_id in self.ranked

    def score_of(self, item_id: str) -> float:
        score = self.scores.get(item_id)
        return DEFAULT_SCORE if score is None else score

    def item(self, item_id: str) -> ItemEntity:
        try:
            return self._by_id[item_id]
        except KeyError:
            raise UnknownItemError(item_id) from None

    def ranked_items(self) -> list[ItemEntity]:
        return [self._by_id[i] for i in self.display_order]

    def unranked_items(self) -> list[ItemEntity]:
        return [item for item in self.items if item.id not in self.ranked]

    # --- graphs ---

    def build_graph(self) -> KnowledgeGraph:
        return build_graph(self.rank_list, self.items, self.ranked, self.scores.as_dict())

    def property_graph(self) -> PropertyGraph:
        return to_property_graph(self.build_graph())

    def stats(self) -> GraphStats:
        graph = self.build_graph()
        return GraphStats(
            entities=len(graph.entities),
            relations=len(graph.relations),
            ranked=self.ranked_count,
            total_items=len(self.items),
        )

    def prepare_description(self) -> str:
        return f"Slider ranking ({MIN_SCORE:g}-{MAX_SCORE:g}) with {self.ranked_count} ranked items"
