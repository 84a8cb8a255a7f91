"""Stylesheet abbreviation resolution: matching, snippets, fields and output."""

from __future__ import annotations

from .fields import FieldCounter, wrap_fields, wrap_with_field
from .format import stringify
from .match import find_best_match, unmatched_part
from .resolver import (
    convert_snippets,
    resolve_abbreviation,
    resolve_node,
    resolve_numeric_value,
)
from .score import score
from .snippets import (
    KeywordRef,
    PropertySnippet,
    RawSnippet,
    Snippet,
    SnippetType,
    build_snippets,
)

__all__ = [
    "FieldCounter",
    "wrap_fields",
    "wrap_with_field",
    "stringify",
    "find_best_match",
    "unmatched_part",
    "convert_snippets",
    "resolve_abbreviation",
    "resolve_node",
    "resolve_numeric_value",
    "score",
    "KeywordRef",
    "PropertySnippet",
    "RawSnippet",
    "Snippet",
    "SnippetType",
    "build_snippets",
]
