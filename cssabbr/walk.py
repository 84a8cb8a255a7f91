"""Ordered tree walk with caller-controlled descent.

The walker calls ``visitor(node, index, items, state, next)`` for every child
of the root. Descent is up to the visitor: ``next(child, index, items)`` visits
one child of the current node, ``next()`` visits all of them. While a visitor
runs, ``state.current`` is its node, ``state.parent`` the node above it and
``state.ancestors`` the chain from the root down to that parent.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, List, Optional, Sequence

from cssabbr.errors import WalkStateError


@dataclass
class WalkState:
    """Traversal state threaded through a walk; one instance per walk."""

    current: Any = None
    parent: Any = None
    ancestors: List[Any] = field(default_factory=list)
    # Field index offset for editor tab stops emitted so far
    field: int = 0
    out: Any = None
    profile: Any = None
    active: bool = False


WalkNext = Callable[..., None]
Visitor = Callable[[Any, int, Sequence[Any], WalkState, WalkNext], None]


def walk(root: Any, visitor: Visitor, state: Optional[WalkState] = None) -> WalkState:
    """Walk the children of ``root`` depth first, in sibling order."""
    if state is None:
        state = WalkState()
    if state.active:
        raise WalkStateError(
            "Walk state is already used by another walk",
            hint="Create a new WalkState for each walk.",
        )

    def callback(node: Any, index: int, items: Sequence[Any]) -> None:
        parent, current = state.parent, state.current
        state.parent = current
        state.current = node
        try:
            visitor(node, index, items, state, next_node)
        finally:
            state.current = current
            state.parent = parent

    def next_node(node: Any = None, index: int = 0, items: Optional[Sequence[Any]] = None) -> None:
        if node is None:
            children = list(state.current.children)
            for position, child in enumerate(children):
                next_node(child, position, children)
            return
        state.ancestors.append(state.current)
        try:
            callback(node, index, items if items is not None else [node])
        finally:
            state.ancestors.pop()

    saved = state.current, state.parent
    state.active = True
    state.current = root
    state.parent = None
    try:
        next_node()
    finally:
        state.active = False
        state.current, state.parent = saved
    return state


__all__ = ["WalkState", "WalkNext", "Visitor", "walk"]
