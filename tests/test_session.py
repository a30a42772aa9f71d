"""
Ranking session: scores, ranked set and display order.
"""
import random

import pytest

from rankgraph.errors import ItemNotRankedError, UnknownItemError
from rankgraph.ranking import DEFAULT_SCORE, OrderMode, RankingSession, ScoreStore


def assert_consistent(session):
    ranked = set(session.ranked)
    assert set(session.scores.as_dict()) == ranked
    assert sorted(session.display_order) == sorted(ranked)


def test_first_insert_scores_one(session):
    assert session.insert_rank("a") is True
    assert session.scores.get("a") == 1.0
    assert session.display_order == ["a"]


def test_insert_joins_at_minimum(session):
    session.insert_rank("a")
    session.set_score("a", 70)
    session.insert_rank("b")
    session.set_score("b", 30)

    session.insert_rank("c")

    assert session.scores.get("c") == 30.0
    assert session.display_order == ["a", "b", "c"]


def test_reinsert_is_noop(session):
    session.insert_rank("a")
    session.insert_rank("b")
    session.set_score("b", 90)
    before = (session.scores.as_dict(), list(session.ranked), session.display_order)

    assert session.insert_rank("b") is False

    assert (session.scores.as_dict(), list(session.ranked), session.display_order) == before


def test_worked_example(session):
    session.insert_rank("a")
    assert session.scores.get("a") == 1.0
    assert session.display_order == ["a"]

    session.insert_rank("b")
    assert session.scores.get("b") == 1.0
    assert session.display_order == ["a", "b"]

    session.set_score("b", 90)
    assert session.display_order == ["b", "a"]

    session.reset()
    assert len(session.ranked) == 0
    assert len(session.scores) == 0
    assert session.display_order == []


def test_ties_follow_item_sequence_not_insert_order(session):
    session.insert_rank("c")
    session.insert_rank("a")
    session.insert_rank("b")

    assert session.display_order == ["a", "b", "c"]


def test_live_order_descending(session):
    for item_id, score in (("a", 12.5), ("b", 99.99), ("c", 50)):
        session.insert_rank(item_id)
        session.set_score(item_id, score)

    assert session.display_order == ["b", "c", "a"]
    assert session.mode == OrderMode.LIVE


def test_remove_deletes_score(session):
    session.insert_rank("a")
    session.insert_rank("b")

    assert session.remove_rank("a") is True

    assert not session.is_ranked("a")
    assert "a" not in session.scores
    assert session.display_order == ["b"]
    assert session.remove_rank("a") is False


def test_removed_then_reinserted_gets_fresh_score(session):
    session.insert_rank("a")
    session.set_score("a", 80)
    session.insert_rank("b")
    session.set_score("b", 40)
    session.remove_rank("a")

    session.insert_rank("a")

    assert session.scores.get("a") == 40.0


def test_random_insert_remove_keeps_invariant(session, items):
    rng = random.Random(7)
    ids = [i.id for i in items]
    for _ in range(200):
        item_id = rng.choice(ids)
        if rng.random() < 0.6:
            session.insert_rank(item_id)
            if rng.random() < 0.5:
                session.set_score(item_id, rng.uniform(1, 100))
        else:
            session.remove_rank(item_id)
        assert_consistent(session)


def test_set_score_is_not_clamped(session):
    session.insert_rank("a")
    session.set_score("a", 250)
    session.insert_rank("b")
    session.set_score("b", -3)

    assert session.scores.get("a") == 250.0
    assert session.scores.get("b") == -3.0
    assert session.display_order == ["a", "b"]


def test_set_score_requires_ranked(session):
    with pytest.raises(ItemNotRankedError):
        session.set_score("a", 10)
    assert "a" not in session.scores


def test_unknown_item_rejected(session):
    with pytest.raises(UnknownItemError):
        session.insert_rank("zzz")
    with pytest.raises(KeyError):
        session.insert_rank("zzz")


def test_score_of_defaults_for_unranked(session):
    assert session.score_of("a") == DEFAULT_SCORE


def test_ranked_and_unranked_items(session, items):
    session.insert_rank("c")
    session.set_score("c", 60)
    session.insert_rank("a")
    session.set_score("a", 10)

    assert [i.id for i in session.ranked_items()] == ["c", "a"]
    assert [i.id for i in session.unranked_items()] == ["b"]


def test_prepare_description(session):
    session.insert_rank("a")
    session.insert_rank("b")
    assert session.prepare_description() == "Slider ranking (1-100) with 2 ranked items"


def test_borrowed_items_untouched(rank_list, items):
    session = RankingSession(rank_list, items)
    session.insert_rank("a")
    session.reset()
    assert session.items == items
    assert session.rank_list is rank_list


def test_score_store_floor():
    store = ScoreStore()
    assert store.floor() == 1.0
    store.set("x", 20)
    store.set("y", 5.5)
    assert store.floor() == 5.5
