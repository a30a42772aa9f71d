"""
rankgraph - slider rankings materialised as typed graphs
"""

from .knowledge_graph import ItemEntity, KnowledgeGraph, PropertyGraph, RankListEntity
from .ranking import DEFAULT_SCORE, RankingSession

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_SCORE",
    "ItemEntity",
    "KnowledgeGraph",
    "PropertyGraph",
    "RankListEntity",
    "RankingSession",
]
