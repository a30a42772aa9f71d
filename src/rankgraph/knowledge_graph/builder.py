from __future__ import annotations

import uuid
from typing import Iterable, Mapping, Sequence

from .models import ItemEntity, KnowledgeGraph, RankListEntity, ScoredRelation


def new_relation_id() -> str:
    return str(uuid.uuid4())


def build_graph(
    rank_list: RankListEntity,
    items: Sequence[ItemEntity],
    ranked_ids: Iterable[str],
    scores: Mapping[str, float],
) -> KnowledgeGraph:
    """Snapshot the ranking as a knowledge graph.

    Every item is an entity whether ranked or not; only ranked items with a
    score get a relation. Relation ids are fresh on every call.
    """
    relations = []
    for item_id in ranked_ids:
        score = scores.get(item_id)
        if score is None:
            continue
        relations.append(
            ScoredRelation(id=new_relation_id(), from_id=rank_list.id, to_id=item_id, score=score)
        )

    return KnowledgeGraph(entities=(rank_list, *items), relations=tuple(relations))
