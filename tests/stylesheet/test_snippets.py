"""Tests for snippet table construction and nesting."""

from cssabbr.ast import Field, FunctionCall, Literal
from cssabbr.stylesheet.snippets import (
    KeywordRef,
    PropertySnippet,
    RawSnippet,
    SnippetType,
    build_snippets,
    create_snippet,
    is_specialization,
)


def test_property_snippet_with_alternatives() -> None:
    snippet = create_snippet("pos", "position:relative|absolute")
    assert isinstance(snippet, PropertySnippet)
    assert snippet.type is SnippetType.PROPERTY
    assert snippet.property == "position"
    assert len(snippet.value) == 2
    assert snippet.keywords == (KeywordRef("relative", 0), KeywordRef("absolute", 1))


def test_property_without_value() -> None:
    snippet = create_snippet("p", "position")
    assert snippet.type is SnippetType.PROPERTY
    assert snippet.property == "position"
    assert snippet.value == ()
    assert snippet.default_value() is None


def test_keywords_come_from_functions_and_named_fields() -> None:
    snippet = create_snippet("ct", "content:attr(${1})|${1:normal}")
    assert [ref.keyword for ref in snippet.keywords] == ["attr", "normal"]
    assert isinstance(snippet.value[0][0].value[0], FunctionCall)
    assert snippet.value[1][0].value == [Field(1, "normal")]


def test_non_declaration_values_are_raw() -> None:
    snippet = create_snippet("@m", "@media ${1:screen} {\n\t${0}\n}")
    assert isinstance(snippet, RawSnippet)
    assert snippet.type is SnippetType.RAW
    assert snippet.value.startswith("@media")


def test_unparseable_declaration_value_falls_back_to_raw() -> None:
    snippet = create_snippet("ie", "filter:progid:DXImageTransform")
    assert snippet.type is SnippetType.RAW
    assert snippet.value == "filter:progid:DXImageTransform"


def test_duplicate_keys_keep_last_definition() -> None:
    table = build_snippets([("a", "color"), ("a", "width")])
    assert len(table) == 1
    assert table[0].property == "width"


def test_specialization_boundaries() -> None:
    assert is_specialization("pos-a", "pos")
    assert is_specialization("pos.x", "pos")
    assert not is_specialization("posa", "pos")
    assert not is_specialization("pos", "pos")


def test_specializations_are_nested_under_general_entry() -> None:
    table = build_snippets({"pos-a": "position:absolute", "pos": "position:relative", "posa": "position:static"})
    assert [snippet.key for snippet in table] == ["pos", "pos-a", "posa"]
    general = table[0]
    assert [dependency.key for dependency in general.dependencies] == ["pos-a"]
    assert general.keywords == (KeywordRef("relative", 0), KeywordRef("absolute", 1))
    assert general.alternatives[1][0].value == [Literal("absolute")]
    assert general.value_at(1)[0].value == [Literal("absolute")]


def test_nesting_does_not_depend_on_input_order() -> None:
    entries = [("pos-r", "position:relative"), ("pos", "position:static"), ("pos-a", "position:absolute")]
    forward = build_snippets(entries)
    backward = build_snippets(list(reversed(entries)))
    assert [s.key for s in forward] == [s.key for s in backward] == ["pos", "pos-a", "pos-r"]
    assert forward[0].keywords == backward[0].keywords
    assert [ref.keyword for ref in forward[0].keywords] == ["static", "absolute", "relative"]


def test_nested_entry_with_other_property_adds_no_keywords() -> None:
    table = build_snippets({"bd": "border:1px", "bd-c": "border-color:red"})
    border = table[0]
    assert [dependency.key for dependency in border.dependencies] == ["bd-c"]
    assert border.keywords == ()
    assert len(border.alternatives) == 1


def test_value_at_returns_private_copy() -> None:
    snippet = build_snippets({"pos": "position:relative"})[0]
    copied = snippet.value_at(0)
    copied[0].value[0].value = "changed"
    assert snippet.value[0][0].value[0].value == "relative"
