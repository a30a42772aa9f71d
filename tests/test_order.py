"""
Display order stabilisation during score adjustment.
"""
from rankgraph.ranking import OrderMode, OrderStabilizer, sort_by_score


def ranked_abc(session):
    for item_id, score in (("a", 80), ("b", 50), ("c", 20)):
        session.insert_rank(item_id)
        session.set_score(item_id, score)


def test_frozen_order_ignores_score_changes(session):
    ranked_abc(session)
    session.begin_adjustment("c")
    assert session.mode == OrderMode.FROZEN
    assert session.adjusting == "c"

    for value in (30, 60, 95, 100, 1, 99):
        session.set_score("c", value)
        assert session.display_order == ["a", "b", "c"]


def test_end_adjustment_resorts(session):
    ranked_abc(session)
    session.begin_adjustment("c")
    session.set_score("c", 99)

    order = session.end_adjustment()

    assert order == ["c", "a", "b"]
    assert session.display_order == ["c", "a", "b"]
    assert session.mode == OrderMode.LIVE
    assert session.adjusting is None


def test_begin_freezes_current_live_order(session):
    ranked_abc(session)
    session.set_score("c", 90)

    session.begin_adjustment("b")

    assert session.display_order == ["c", "a", "b"]


def test_new_adjustment_ends_previous(session):
    ranked_abc(session)
    session.begin_adjustment("c")
    session.set_score("c", 99)
    assert session.display_order == ["a", "b", "c"]

    session.begin_adjustment("b")

    assert session.adjusting == "b"
    assert session.display_order == ["c", "a", "b"]


def test_removing_active_item_drops_it_while_frozen(session):
    ranked_abc(session)
    session.begin_adjustment("b")
    session.set_score("b", 99)

    session.remove_rank("b")

    assert session.mode == OrderMode.FROZEN
    assert session.display_order == ["a", "c"]
    session.end_adjustment()
    assert session.display_order == ["a", "c"]


def test_insert_while_frozen_resorts(session):
    session.insert_rank("a")
    session.set_score("a", 40)
    session.insert_rank("b")
    session.set_score("b", 60)
    session.begin_adjustment("a")
    session.set_score("a", 90)

    session.insert_rank("c")

    assert session.scores.get("c") == 60.0
    assert session.mode == OrderMode.FROZEN
    assert session.display_order == ["a", "b", "c"]
    session.set_score("a", 1)
    assert session.display_order == ["a", "b", "c"]
    session.end_adjustment()
    assert session.display_order == ["b", "c", "a"]


def test_insert_while_frozen_ties_follow_item_sequence(session):
    session.insert_rank("c")
    session.insert_rank("b")
    session.begin_adjustment("b")

    session.insert_rank("a")

    assert session.display_order == ["a", "b", "c"]


def test_remove_while_frozen_resorts_remaining(session):
    ranked_abc(session)
    session.begin_adjustment("c")
    session.set_score("c", 99)

    session.remove_rank("a")

    assert session.adjusting == "c"
    assert session.display_order == ["c", "b"]


def test_reset_clears_adjustment(session):
    ranked_abc(session)
    session.begin_adjustment("a")
    session.reset()
    assert session.mode == OrderMode.LIVE
    assert session.display_order == []


def test_sort_missing_score_uses_default():
    scores = {"x": 60.0, "z": 40.0}
    order = sort_by_score(["x", "y", "z"], {"x", "y", "z"}, scores.get)
    assert order == ["x", "y", "z"]


def test_stabilizer_filters_to_membership():
    stab = OrderStabilizer(["x", "y", "z"])
    scores = {"x": 1.0, "y": 2.0, "z": 3.0}
    ranked = {"x", "y", "z"}
    stab.freeze("x", ranked, scores.get)
    ranked.discard("y")
    assert stab.order(ranked, scores.get) == ["z", "x"]
