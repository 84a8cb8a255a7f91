"""Resolve parsed abbreviation nodes against the snippet table."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Mapping, Optional, Sequence, Tuple, Union

from cssabbr.ast import CSSAbbreviation, CSSProperty, CSSValue, Literal, NumberValue, has_field, literal_value
from cssabbr.config import Config
from cssabbr.parser import parse_abbreviation

from .defaults import DEFAULT_SNIPPETS
from .fields import wrap_fields
from .match import find_best_match, unmatched_part
from .snippets import PropertySnippet, RawSnippet, Snippet, SnippetType, build_snippets

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def default_snippets() -> Tuple[Snippet, ...]:
    return build_snippets(DEFAULT_SNIPPETS)


def convert_snippets(snippets: Optional[Mapping[str, str]]) -> Tuple[Snippet, ...]:
    """Build the snippet table for a raw snippet map (built-ins when ``None``)."""
    if snippets is None:
        return default_snippets()
    return build_snippets(snippets)


def resolve_abbreviation(
    abbr: Union[str, CSSAbbreviation],
    config: Config,
    snippets: Optional[Sequence[Snippet]] = None,
) -> CSSAbbreviation:
    """Parse ``abbr`` if needed and resolve every top-level node in place."""
    if isinstance(abbr, str):
        abbr = parse_abbreviation(abbr, value=bool(config.context))
    if snippets is None:
        snippets = convert_snippets(config.snippets)
    for node in abbr:
        resolve_node(node, snippets, config)
    return abbr


def resolve_node(node: CSSProperty, snippets: Sequence[Snippet], config: Config) -> CSSProperty:
    if config.context:
        snippet = next(
            (
                item
                for item in snippets
                if item.type is SnippetType.PROPERTY and item.property == config.context
            ),
            None,
        )
        resolve_as_property_value(node, config, snippet)
    elif node.name:
        snippet = find_best_match(node.name, snippets, config.option("stylesheet.fuzzySearchMinScore"))
        if snippet is None:
            logger.debug("No snippet matches %r", node.name)
        elif snippet.type is SnippetType.PROPERTY:
            resolve_as_property(node, snippet, config)
        else:
            resolve_as_snippet(node, snippet)

    resolve_numeric_value(node, config)
    return node


def resolve_as_property(node: CSSProperty, snippet: PropertySnippet, config: Config) -> CSSProperty:
    abbr = node.name or ""
    node.name = snippet.property
    logger.debug("Resolved %r as property %r (snippet %r)", abbr, snippet.property, snippet.key)

    tail = unmatched_part(abbr, snippet.key) if not node.value else ""
    if tail.startswith("-") and tail.strip("-"):
        # ``m-a`` reads as ``m:a``
        node.value = [CSSValue([Literal(part) for part in tail.split("-") if part])]

    if not node.value:
        # No typed value: the unmatched tail of the name may be a keyword alias
        if not resolve_snippet_keyword(node, tail, snippet):
            default = snippet.default_value()
            if default:
                node.value = default if any(has_field(group) for group in default) else wrap_fields(default)
    else:
        keyword = single_keyword(node)
        if keyword is not None and not resolve_snippet_keyword(node, keyword.value, snippet):
            resolve_global_keyword(node, keyword.value, config)
    return node


def resolve_as_snippet(node: CSSProperty, snippet: RawSnippet) -> CSSProperty:
    logger.debug("Resolved %r as raw snippet %r", node.name, snippet.key)
    node.name = None
    node.value = [literal_value(snippet.value)]
    return node


def resolve_as_property_value(
    node: CSSProperty, config: Config, snippet: Optional[PropertySnippet] = None
) -> CSSProperty:
    """Resolve a bare value typed inside a ``config.context`` declaration."""
    keyword = single_keyword(node)
    if keyword is not None:
        min_score = config.option("stylesheet.fuzzySearchMinScore")
        resolved = snippet is not None and resolve_snippet_keyword(node, keyword.value, snippet, min_score)
        if not resolved:
            resolve_global_keyword(node, keyword.value, config, min_score)
    return node


def resolve_snippet_keyword(
    node: CSSProperty, keyword: str, snippet: PropertySnippet, min_score: float = 0
) -> bool:
    ref = find_best_match(keyword, snippet.keywords, min_score)
    if ref is None:
        return False
    node.value = snippet.value_at(ref.index)
    return True


def resolve_global_keyword(node: CSSProperty, keyword: str, config: Config, min_score: float = 0) -> bool:
    match = find_best_match(keyword, config.option("stylesheet.keywords"), min_score)
    if match is None:
        return False
    node.value = [literal_value(match)]
    return True


def resolve_numeric_value(node: CSSProperty, config: Config) -> CSSProperty:
    """Expand unit aliases and add default units to bare numbers."""
    aliases = config.option("stylesheet.unitAliases")
    unitless = config.option("stylesheet.unitless")
    for group in node.value:
        for token in group.value:
            if not isinstance(token, NumberValue):
                continue
            if token.unit:
                token.unit = aliases.get(token.unit, token.unit)
            elif token.value != 0 and node.name not in unitless:
                token.unit = config.option("stylesheet.intUnit") if token.is_whole() else config.option(
                    "stylesheet.floatUnit"
                )
    return node


def single_keyword(node: CSSProperty) -> Optional[Literal]:
    """Return the node's value when it is exactly one literal token."""
    if len(node.value) == 1:
        tokens = node.value[0].value
        if len(tokens) == 1 and isinstance(tokens[0], Literal):
            return tokens[0]
    return None


__all__ = [
    "convert_snippets",
    "default_snippets",
    "resolve_abbreviation",
    "resolve_node",
    "resolve_as_property",
    "resolve_as_snippet",
    "resolve_as_property_value",
    "resolve_snippet_keyword",
    "resolve_global_keyword",
    "resolve_numeric_value",
    "single_keyword",
]
