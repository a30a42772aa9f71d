"""Knowledge graph projections of a ranking.

This module provides:
- Typed entities (rank list, item, other) and scored relations
- A builder that snapshots session state as a knowledge graph
- A converter to the generic property graph used for export
"""

from .builder import build_graph
from .models import (
    EntityKind,
    GraphStats,
    ItemEntity,
    KnowledgeGraph,
    OtherEntity,
    PropertyGraph,
    PropertyGraphEntity,
    PropertyGraphRelation,
    RankListEntity,
    ScoredRelation,
)
from .property_graph import to_property_graph

__all__ = [
    "EntityKind",
    "GraphStats",
    "ItemEntity",
    "KnowledgeGraph",
    "OtherEntity",
    "PropertyGraph",
    "PropertyGraphEntity",
    "PropertyGraphRelation",
    "RankListEntity",
    "ScoredRelation",
    "build_graph",
    "to_property_graph",
]
