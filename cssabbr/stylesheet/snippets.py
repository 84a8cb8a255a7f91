"""Snippet table: raw snippet dictionary turned into matchable entries."""

from __future__ import annotations

import copy
import logging
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, Union

from cssabbr.ast import CSSValue, Field, FunctionCall, Literal
from cssabbr.errors import AbbreviationSyntaxError
from cssabbr.parser import parse_value

logger = logging.getLogger(__name__)

_PROPERTY_RE = re.compile(r"^([a-z-]+)(?:\s*:\s*([^\n\r;]+?);*)?$")

# Characters after which a longer key counts as a specialization of a shorter one
_NESTING_BOUNDARIES = ("-", ".")

Alternative = Tuple[CSSValue, ...]


class SnippetType(Enum):
    RAW = "raw"
    PROPERTY = "property"


@dataclass(frozen=True)
class KeywordRef:
    """Keyword alias pointing at ``PropertySnippet.alternatives[index]``."""

    keyword: str
    index: int


@dataclass(frozen=True)
class RawSnippet:
    """Snippet emitted verbatim, such as an ``@media`` block."""

    key: str
    value: str
    type: SnippetType = field(default=SnippetType.RAW, init=False)


@dataclass(frozen=True)
class PropertySnippet:
    """Snippet describing a property and its known value alternatives.

    ``value`` holds the alternatives written in the snippet itself
    (``position:relative|absolute`` has two). ``alternatives`` extends them with
    the alternatives of nested snippets for the same property, and
    ``keywords`` indexes into ``alternatives``.
    """

    key: str
    property: str
    value: Tuple[Alternative, ...] = ()
    keywords: Tuple[KeywordRef, ...] = ()
    dependencies: Tuple["PropertySnippet", ...] = ()
    alternatives: Tuple[Alternative, ...] = ()
    type: SnippetType = field(default=SnippetType.PROPERTY, init=False)

    def value_at(self, index: int) -> List[CSSValue]:
        """Return a private copy of an alternative, safe to mutate."""
        return copy.deepcopy(list(self.alternatives[index]))

    def default_value(self) -> Optional[List[CSSValue]]:
        if not self.value:
            return None
        return copy.deepcopy(list(self.value[0]))


Snippet = Union[RawSnippet, PropertySnippet]


def _collect_keywords(alternatives: Sequence[Alternative], offset: int = 0) -> List[KeywordRef]:
    refs: List[KeywordRef] = []
    seen = set()
    for index, alternative in enumerate(alternatives):
        for group in alternative:
            for token in group.value:
                if isinstance(token, Literal):
                    keyword = token.value
                elif isinstance(token, FunctionCall):
                    keyword = token.name
                elif isinstance(token, Field):
                    keyword = token.name.strip()
                else:
                    continue
                if keyword and keyword not in seen:
                    seen.add(keyword)
                    refs.append(KeywordRef(keyword, index + offset))
    return refs


def create_snippet(key: str, value: str) -> Snippet:
    """Classify a single dictionary entry as a property or a raw snippet."""
    match = _PROPERTY_RE.match(value)
    if not match:
        return RawSnippet(key, value)

    try:
        alternatives = tuple(
            tuple(parse_value(part.strip())) for part in match.group(2).split("|")
        ) if match.group(2) else ()
    except AbbreviationSyntaxError as exc:
        logger.debug("Snippet %r kept as raw text: %s", key, exc.message)
        return RawSnippet(key, value)

    return PropertySnippet(
        key=key,
        property=match.group(1),
        value=alternatives,
        keywords=tuple(_collect_keywords(alternatives)),
        alternatives=alternatives,
    )


def is_specialization(key: str, general: str) -> bool:
    """``pos-a`` specializes ``pos``; ``posa`` does not."""
    return (
        len(key) > len(general)
        and key.startswith(general)
        and key[len(general)] in _NESTING_BOUNDARIES
    )


def nest(snippets: Iterable[Snippet]) -> List[Snippet]:
    """Sort snippets by key and attach specializations to their general entry."""
    ordered = sorted(snippets, key=lambda snippet: snippet.key)
    children: Dict[str, List[PropertySnippet]] = {}
    stack: List[PropertySnippet] = []
    for current in ordered:
        if current.type is not SnippetType.PROPERTY:
            continue
        while stack:
            parent = stack[-1]
            if is_specialization(current.key, parent.key):
                children.setdefault(parent.key, []).append(current)
                stack.append(current)
                break
            stack.pop()
        if not stack:
            stack.append(current)

    finished: Dict[str, PropertySnippet] = {}

    def finish(snippet: PropertySnippet) -> PropertySnippet:
        if snippet.key in finished:
            return finished[snippet.key]
        dependencies = tuple(finish(child) for child in children.get(snippet.key, ()))
        alternatives = list(snippet.value)
        keywords = list(snippet.keywords)
        known = {ref.keyword for ref in keywords}
        for dependency in dependencies:
            if dependency.property != snippet.property:
                continue
            for ref in _collect_keywords(dependency.alternatives, offset=len(alternatives)):
                if ref.keyword not in known:
                    known.add(ref.keyword)
                    keywords.append(ref)
            alternatives.extend(dependency.alternatives)
        result = PropertySnippet(
            key=snippet.key,
            property=snippet.property,
            value=snippet.value,
            keywords=tuple(keywords),
            dependencies=dependencies,
            alternatives=tuple(alternatives),
        )
        finished[snippet.key] = result
        return result

    return [
        finish(snippet) if snippet.type is SnippetType.PROPERTY else snippet
        for snippet in ordered
    ]


def build_snippets(entries: Union[Mapping[str, str], Iterable[Tuple[str, str]]]) -> Tuple[Snippet, ...]:
    """Build the ordered, read-only snippet table from raw key/value pairs.

    Later definitions of a key replace earlier ones.
    """
    pairs = entries.items() if isinstance(entries, Mapping) else entries
    unique: Dict[str, str] = {}
    for key, value in pairs:
        unique[key] = value
    table = tuple(nest(create_snippet(key, value) for key, value in unique.items()))
    logger.debug(
        "Built snippet table: %d entries (%d properties)",
        len(table),
        sum(1 for snippet in table if snippet.type is SnippetType.PROPERTY),
    )
    return table


__all__ = [
    "SnippetType",
    "KeywordRef",
    "RawSnippet",
    "PropertySnippet",
    "Snippet",
    "create_snippet",
    "is_specialization",
    "nest",
    "build_snippets",
]
