"""Tests for the abbreviation and snippet value parser."""

import pytest

from cssabbr.ast import ColorValue, CSSValue, Field, FunctionCall, Literal, NumberValue, StringValue
from cssabbr.errors import AbbreviationSyntaxError
from cssabbr.parser import parse_abbreviation, parse_color, parse_value, tokenize
from cssabbr.parser.lexer import TokenType


def _numbers(group):
    return [(token.value, token.unit) for token in group.value]


def test_name_and_numbers() -> None:
    abbr = parse_abbreviation("p10-20")
    assert len(abbr) == 1
    prop = abbr[0]
    assert prop.name == "p"
    assert len(prop.value) == 1
    assert _numbers(prop.value[0]) == [(10, ""), (20, "")]


def test_negative_numbers() -> None:
    assert _numbers(parse_abbreviation("m-10")[0].value[0]) == [(-10, "")]
    assert _numbers(parse_abbreviation("m10--20")[0].value[0]) == [(10, ""), (-20, "")]
    assert parse_abbreviation("m-10")[0].value[0].value[0].raw_value == "-10"


def test_numbers_keep_units_and_fractions() -> None:
    group = parse_abbreviation("m1.5e-.5-10p")[0].value[0]
    assert _numbers(group) == [(1.5, "e"), (0.5, ""), (10, "p")]


def test_dashed_name() -> None:
    prop = parse_abbreviation("pos-a")[0]
    assert prop.name == "pos-a"
    assert prop.value == []


def test_name_with_colon_and_keyword() -> None:
    prop = parse_abbreviation("fw:b")[0]
    assert prop.name == "fw"
    assert prop.value == [CSSValue([Literal("b")])]


def test_at_rule_name() -> None:
    assert parse_abbreviation("@m")[0].name == "@m"


def test_color() -> None:
    color = parse_abbreviation("c#fc0")[0].value[0].value[0]
    assert isinstance(color, ColorValue)
    assert (color.r, color.g, color.b, color.alpha, color.raw) == (255, 204, 0, 1.0, "#fc0")


@pytest.mark.parametrize(
    "raw,rgba",
    [
        ("#", (0, 0, 0, 1.0)),
        ("#f", (255, 255, 255, 1.0)),
        ("#fc", (252, 252, 252, 1.0)),
        ("#102030", (16, 32, 48, 1.0)),
        ("#f.5", (255, 255, 255, 0.5)),
    ],
)
def test_parse_color(raw, rgba) -> None:
    color = parse_color(raw)
    assert (color.r, color.g, color.b, color.alpha) == rgba


def test_invalid_color() -> None:
    with pytest.raises(AbbreviationSyntaxError):
        parse_abbreviation("c#1234567")


def test_groups_properties_and_important() -> None:
    abbr = parse_abbreviation("p10,20+m5!")
    assert [prop.name for prop in abbr] == ["p", "m"]
    assert len(abbr[0].value) == 2
    assert not abbr[0].important
    assert abbr[1].important


def test_function_call_and_string() -> None:
    prop = parse_abbreviation("bgi:url('a.png')")[0]
    call = prop.value[0].value[0]
    assert isinstance(call, FunctionCall)
    assert call.name == "url"
    assert call.arguments == [CSSValue([StringValue("a.png", "single")])]


def test_value_mode_has_no_name() -> None:
    prop = parse_abbreviation("a-b", value=True)[0]
    assert prop.name is None
    assert prop.value == [CSSValue([Literal("a"), Literal("b")])]


def test_parse_snippet_value() -> None:
    groups = parse_value("1px solid ${1:#000}")
    assert groups == [CSSValue([NumberValue(1, "px", "1"), Literal("solid"), Field(1, "#000")])]


def test_snippet_value_keeps_dashed_words() -> None:
    groups = parse_value("sans-serif, -webkit-box, -10px")
    assert groups[0].value == [Literal("sans-serif")]
    assert groups[1].value == [Literal("-webkit-box")]
    assert groups[2].value == [NumberValue(-10, "px", "-10")]


def test_field_placeholder_with_braces() -> None:
    assert parse_value("${2:a{b}c}") == [CSSValue([Field(2, "a{b}c")])]
    assert parse_value("${3}") == [CSSValue([Field(3, "")])]


def test_tokens_record_spans() -> None:
    tokens = tokenize("p10")
    assert [(t.type, t.start, t.end) for t in tokens] == [
        (TokenType.LITERAL, 0, 1),
        (TokenType.NUMBER, 1, 3),
        (TokenType.EOF, 3, 3),
    ]


@pytest.mark.parametrize(
    "text,column",
    [
        ("p'abc", 1),
        ("bgi:url(a", 7),
        ("p10)", 3),
        ("p^", 1),
        ("c${x}", 1),
    ],
)
def test_syntax_errors_report_column(text: str, column: int) -> None:
    with pytest.raises(AbbreviationSyntaxError) as excinfo:
        parse_abbreviation(text)
    assert excinfo.value.column == column
    assert excinfo.value.source == text
