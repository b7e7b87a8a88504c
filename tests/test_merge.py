"""Tests for merging override documents into a state tree."""

from __future__ import annotations

from jsonstate.merge import WILDCARD_SOURCE, apply_override
from jsonstate.models import StateNode


def _state() -> StateNode:
    return StateNode.new("root").add(
        StateNode.new("a").set(200),
        StateNode.new("b").set(200),
    )


def _node_count(node: StateNode) -> int:
    return len(node.flatten())


def test_none_override_is_noop() -> None:
    state = _state()
    before = state.to_dict()
    apply_override(state, None)
    assert state.to_dict() == before


def test_wildcard_child_overrides_every_sibling() -> None:
    state = _state()
    override = StateNode.new("root").add(StateNode(source=WILDCARD_SOURCE, level=500, message="x"))

    state.apply(override)

    for source in ("a", "b"):
        child = state.find_by_source(source)
        assert child is not None
        assert child.level == 500
        assert child.message == "x"
        assert child.override_applied is True
    # root sources are equal, so the root itself is left untouched
    assert state.override_applied is False
    assert state.level == 0


def test_exact_source_override_is_filtered_in_but_not_applied() -> None:
    state = _state()
    override = StateNode.new("root").add(StateNode.new("a").set(600))

    state.apply(override)

    a = state.find_by_source("a")
    b = state.find_by_source("b")
    assert a is not None and b is not None
    assert a.level == 200
    assert a.override_applied is False
    assert b.level == 200
    assert b.override_applied is False


def test_differing_root_source_replaces_root_fields() -> None:
    state = _state()
    state.apply(StateNode.new("other").set(300, "maintenance"))

    assert state.level == 300
    assert state.message == "maintenance"
    assert state.override_applied is True
    # override without a tree does not descend
    assert state.find_by_source("a").override_applied is False  # type: ignore[union-attr]


def test_override_message_replaces_existing_message() -> None:
    state = StateNode.new("root").add(StateNode.new("a").set(500, "boom"))
    state.apply(StateNode.new("root").add(StateNode.new("*").set(100)))

    a = state.find_by_source("a")
    assert a is not None
    assert a.level == 100
    assert a.message == ""


def test_unmatched_override_children_are_ignored() -> None:
    state = _state()
    before = state.to_dict()
    override = StateNode.new("root").add(
        StateNode.new("zzz").set(700).add(StateNode.new("*").set(700)),
    )

    state.apply(override)

    assert state.to_dict() == before


def test_merge_never_changes_tree_shape() -> None:
    state = StateNode.new("root").add(
        StateNode.new("svc").add(StateNode.new("db").set(200)),
        StateNode.new("leaf").set(200),
    )
    count = _node_count(state)
    override = StateNode.new("root").add(
        StateNode.new("*").add(
            StateNode.new("*").set(600).add(StateNode.new("phantom").set(700)),
            StateNode.new("new-child").set(700),
        ),
    )

    state.apply(override)

    assert _node_count(state) == count
    assert state.find_by_source("leaf").tree is None  # type: ignore[union-attr]
    db = state.find_by_source("svc", "db")
    assert db is not None
    assert db.level == 600
    assert db.tree is None


def test_no_descent_into_pure_leaf() -> None:
    state = StateNode.new("root").add(StateNode.new("a").set(200))
    override = StateNode.new("root").add(
        StateNode.new("a").add(StateNode.new("*").set(700)),
    )

    state.apply(override)

    a = state.find_by_source("a")
    assert a is not None
    assert a.level == 200
    assert a.tree is None


def test_no_descent_when_override_has_no_tree() -> None:
    state = StateNode.new("root").add(StateNode.new("a").set(200))
    state.apply(StateNode.new("root").set(700))

    assert state.level == 0
    assert state.find_by_source("a").level == 200  # type: ignore[union-attr]


def test_empty_source_is_an_exact_match_not_a_wildcard() -> None:
    unnamed = StateNode.new("").add(StateNode.new("x").set(200))
    named = StateNode.new("named").add(StateNode.new("x").set(200))
    state = StateNode.new("root").add(unnamed, named)
    override = StateNode.new("root").add(
        StateNode.new("").add(StateNode.new("*").set(400, "degraded")),
    )

    state.apply(override)

    assert unnamed.override_applied is False
    assert unnamed.tree[0].level == 400  # type: ignore[index]
    assert unnamed.tree[0].message == "degraded"  # type: ignore[index]
    assert named.tree[0].level == 200  # type: ignore[index]


def test_nested_wildcards_reach_grandchildren() -> None:
    state = StateNode.new("root").add(
        StateNode.new("svc1").add(StateNode.new("db").set(200), StateNode.new("queue").set(200)),
        StateNode.new("svc2").add(StateNode.new("db").set(200)),
    )
    override = StateNode.new("root").add(
        StateNode.new("*").add(StateNode(source="db", tree=[]), StateNode.new("*").set(300, "attention")),
    )

    state.apply(override)

    for path in (("svc1", "db"), ("svc1", "queue"), ("svc2", "db")):
        node = state.find_by_source(*path)
        assert node is not None
        assert node.level == 300
        assert node.override_applied is True
    state.aggregate_levels()
    assert state.level == 300


def test_apply_returns_self() -> None:
    state = _state()
    assert state.apply(None) is state


def test_duplicate_sources_all_receive_the_override() -> None:
    first = StateNode.new("dup").add(StateNode.new("x").set(200))
    second = StateNode.new("dup").add(StateNode.new("x").set(200))
    state = StateNode.new("root").add(first, second)
    override = StateNode.new("root").add(
        StateNode.new("dup").add(StateNode.new("*").set(450, "both")),
    )

    state.apply(override)

    for duplicate in (first, second):
        assert duplicate.override_applied is False
        assert duplicate.tree[0].level == 450  # type: ignore[index]
        assert duplicate.tree[0].message == "both"  # type: ignore[index]


def test_wildcard_reaches_every_duplicate() -> None:
    state = StateNode.new("root").add(StateNode.new("dup").set(200), StateNode.new("dup").set(300))
    state.apply(StateNode.new("root").add(StateNode.new("*").set(600)))

    assert [child.level for child in state.tree] == [600, 600]  # type: ignore[union-attr]


def test_later_override_child_wins() -> None:
    state = _state()
    state.apply(StateNode.new("root").add(StateNode.new("*").set(400, "first"), StateNode.new("*").set(500, "second")))

    a = state.find_by_source("a")
    assert a is not None
    assert (a.level, a.message) == (500, "second")


def test_deep_chain_override() -> None:
    state = StateNode.new("root")
    override = StateNode.new("root")
    node, override_node = state, override
    for _ in range(5000):
        child, override_child = StateNode.new("n"), StateNode.new("*")
        node.add(child)
        override_node.add(override_child)
        node, override_node = child, override_child
    override_node.set(700, "deep")

    state.apply(override)

    assert node.level == 700
    assert node.message == "deep"
