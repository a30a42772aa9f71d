import pytest

from rankgraph.knowledge_graph import ItemEntity, RankListEntity
from rankgraph.ranking import RankingSession


@pytest.fixture
def rank_list():
    return RankListEntity(id="list-1", name="Best Fruit")


@pytest.fixture
def items():
    return (
        ItemEntity(id="a", name="Apple", glyph="🍎"),
        ItemEntity(id="b", name="Banana", glyph="🍌"),
        ItemEntity(id="c", name="Cherry", glyph="🍒"),
    )


@pytest.fixture
def session(rank_list, items):
    return RankingSession(rank_list, items)


@pytest.fixture
def catalog_data():
    return {
        "rank_list": {"id": "list-1", "name": "Best Fruit", "rank_type": "weighted_rank"},
        "items": [
            {"id": "a", "name": "Apple", "emoji": "🍎"},
            {"id": "b", "name": "Banana", "glyph": "🍌"},
            {"id": "c", "name": "Cherry"},
        ],
    }
