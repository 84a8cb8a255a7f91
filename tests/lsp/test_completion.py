"""Completion items built from abbreviation expansions."""

import pytest
from lsprotocol.types import CompletionItemKind, InsertTextFormat, MarkupKind, Position, Range

from cssabbr.lsp import abbreviation_completion


def test_numeric_abbreviation(snippets) -> None:
    item = abbreviation_completion("p10", snippets=snippets)

    assert item is not None
    assert item.label == "p10"
    assert item.insert_text == "padding: 10px;"
    assert item.kind == CompletionItemKind.Property
    assert item.insert_text_format == InsertTextFormat.Snippet
    assert item.filter_text == "p10"


def test_default_value_becomes_tab_stop(snippets) -> None:
    item = abbreviation_completion("pos", snippets=snippets)

    assert item is not None
    assert item.insert_text == "position: ${1:relative};"
    assert item.detail == "position: relative;"
    assert item.documentation.kind == MarkupKind.Markdown
    assert "position: relative;" in item.documentation.value


def test_range_produces_text_edit(snippets) -> None:
    typed = Range(start=Position(line=3, character=4), end=Position(line=3, character=7))
    item = abbreviation_completion("poa", snippets=snippets, range=typed)

    assert item is not None
    assert item.insert_text is None
    assert item.text_edit.range == typed
    assert item.text_edit.new_text == "position: absolute;"


def test_context_value_completion(config, snippets) -> None:
    item = abbreviation_completion("f", config.with_context("position"), snippets)

    assert item is not None
    assert item.insert_text == "fixed"


@pytest.mark.parametrize("abbr", ["", "   ", "kkk", "p^", "c${x}"])
def test_no_completion(abbr, snippets) -> None:
    assert abbreviation_completion(abbr, snippets=snippets) is None
