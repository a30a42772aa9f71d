from __future__ import annotations

from typing import Any

from .models import (
    ItemEntity,
    KnowledgeGraph,
    PropertyGraph,
    PropertyGraphEntity,
    PropertyGraphRelation,
    RankListEntity,
)


def entity_properties(entity: Any) -> dict[str, Any]:
    # Unrecognised entities degrade to no properties.
    match entity:
        case RankListEntity(name=name, rank_type=rank_type):
            return {"name": name, "rank_type": rank_type}
        case ItemEntity(name=name):
            return {"name": name}
        case _:
            return {}


def to_property_graph(graph: KnowledgeGraph) -> PropertyGraph:
    """Flatten a knowledge graph into the generic export shape.

    Lossy: glyphs and entity kinds are not carried over.
    """
    return PropertyGraph(
        entities=[
            PropertyGraphEntity(id=e.id, properties=entity_properties(e)) for e in graph.entities
        ],
        relations=[
            PropertyGraphRelation(
                id=r.id,
                from_id=r.from_id,
                to_id=r.to_id,
                properties={"score": r.score},
            )
            for r in graph.relations
        ],
    )
