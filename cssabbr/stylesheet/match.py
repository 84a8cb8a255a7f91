"""Best-match lookup over snippets, keyword aliases or plain strings."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

from .score import score
from .snippets import KeywordRef, RawSnippet, PropertySnippet

T = TypeVar("T")


def scoring_key(item: object) -> str:
    """Default key: the string itself, a keyword alias or a snippet key."""
    if isinstance(item, str):
        return item
    if isinstance(item, KeywordRef):
        return item.keyword
    if isinstance(item, (RawSnippet, PropertySnippet)):
        return item.key
    raise TypeError(f"Cannot score {type(item).__name__}; pass key=")


def find_best_match(
    text: str,
    items: Iterable[T],
    min_score: float = 0,
    key: Optional[Callable[[T], str]] = None,
) -> Optional[T]:
    """Return the item whose key best matches ``text``.

    A perfect score returns immediately. Among equal scores the earliest item
    wins. ``None`` when nothing scores above zero or the best score is below
    ``min_score``.
    """
    key_of = key or scoring_key
    matched: Optional[T] = None
    best = 0.0
    for item in items:
        current = score(text, key_of(item))
        if current == 1.0:
            return item
        if current > best:
            best = current
            matched = item
    if matched is None or best < min_score:
        return None
    return matched


def unmatched_part(text: str, candidate: str) -> str:
    """Return the part of ``text`` that could not be found in ``candidate``.

    ``poas`` against ``position`` leaves ``as``: ``p``, ``o`` are found in
    order, ``a`` is not.
    """
    last = 0
    for index, char in enumerate(text):
        last = candidate.find(char, last)
        if last == -1:
            return text[index:]
        last += 1
    return ""


__all__ = ["find_best_match", "unmatched_part", "scoring_key"]
