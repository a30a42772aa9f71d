"""Ranking state engine: scores, ranked set and a stabilised display order."""

from .order import OrderMode, OrderStabilizer, sort_by_score
from .session import RankingSession
from .store import DEFAULT_SCORE, MAX_SCORE, MIN_SCORE, RankedSet, ScoreStore

__all__ = [
    "DEFAULT_SCORE",
    "MAX_SCORE",
    "MIN_SCORE",
    "OrderMode",
    "OrderStabilizer",
    "RankedSet",
    "RankingSession",
    "ScoreStore",
    "sort_by_score",
]
