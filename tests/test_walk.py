"""Tests for the generic ordered tree walk."""

import pytest

from cssabbr.ast import AbbreviationNode
from cssabbr.errors import WalkStateError
from cssabbr.parser import parse_abbreviation
from cssabbr.walk import WalkState, walk


def _tree() -> AbbreviationNode:
    leaf = AbbreviationNode("a1x")
    return AbbreviationNode("root", children=[
        AbbreviationNode("a", children=[AbbreviationNode("a1", children=[leaf]), AbbreviationNode("a2")]),
        AbbreviationNode("b"),
    ])


def _names(nodes):
    return [node.name for node in nodes]


def test_ancestors_hold_root_to_parent_path() -> None:
    seen = []

    def visitor(node, index, items, state, next):
        seen.append((node.name, index, _names(state.ancestors), state.parent.name))
        assert state.current is node
        assert state.parent is state.ancestors[-1]
        assert items[index] is node
        next()
        # restored after descending
        assert state.current is node
        assert state.ancestors[-1] is state.parent

    walk(_tree(), visitor, WalkState())
    assert seen == [
        ("a", 0, ["root"], "root"),
        ("a1", 0, ["root", "a"], "a"),
        ("a1x", 0, ["root", "a", "a1"], "a1"),
        ("a2", 1, ["root", "a"], "a"),
        ("b", 1, ["root"], "root"),
    ]


def test_descent_is_controlled_by_visitor() -> None:
    seen = []

    def visitor(node, index, items, state, next):
        seen.append(node.name)

    walk(_tree(), visitor)
    assert seen == ["a", "b"]


def test_visitor_can_descend_selectively() -> None:
    seen = []

    def visitor(node, index, items, state, next):
        seen.append(node.name)
        if node.children:
            last = len(node.children) - 1
            next(node.children[last], last, node.children)

    walk(_tree(), visitor)
    assert seen == ["a", "a2", "b"]


def test_visitor_can_defer_descent() -> None:
    seen = []

    def visitor(node, index, items, state, next):
        next()
        seen.append((node.name, len(state.ancestors)))

    walk(_tree(), visitor)
    assert seen == [("a1x", 3), ("a1", 2), ("a2", 2), ("a", 1), ("b", 1)]


def test_state_is_reset_after_walk() -> None:
    state = walk(_tree(), lambda *args: args[-1](), WalkState(field=4))
    assert state.ancestors == []
    assert state.current is None
    assert state.parent is None
    assert state.field == 4
    assert not state.active


def test_caller_position_is_restored() -> None:
    outer, above = AbbreviationNode("outer"), AbbreviationNode("above")
    seen = []

    def visitor(node, index, items, state, next):
        seen.append(state.parent.name)

    state = walk(_tree(), visitor, WalkState(current=outer, parent=above))
    assert seen == ["root", "root"]
    assert state.current is outer
    assert state.parent is above


def test_state_restored_when_visitor_raises() -> None:
    state = WalkState()

    def visitor(node, index, items, state, next):
        raise RuntimeError("boom")

    with pytest.raises(RuntimeError):
        walk(_tree(), visitor, state)
    assert state.ancestors == []
    assert not state.active


def test_overlapping_walks_with_one_state_are_rejected() -> None:
    state = WalkState()

    def visitor(node, index, items, inner_state, next):
        walk(_tree(), visitor, inner_state)

    with pytest.raises(WalkStateError):
        walk(_tree(), visitor, state)


def test_walks_stylesheet_abbreviation() -> None:
    abbr = parse_abbreviation("p10+m5+c#f")
    visited = []

    def visitor(node, index, items, state, next):
        visited.append((node.name, index, state.parent is abbr))
        next()

    walk(abbr, visitor)
    assert visited == [("p", 0, True), ("m", 1, True), ("c", 2, True)]
