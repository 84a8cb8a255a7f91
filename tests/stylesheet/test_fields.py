"""Tests for tab-stop field wrapping."""

import pytest

from cssabbr.ast import ColorValue, CSSValue, Field, FunctionCall, Literal, NumberValue, StringValue
from cssabbr.errors import FieldCounterError
from cssabbr.stylesheet.fields import FieldCounter, wrap_fields, wrap_with_field


def test_leaf_tokens_become_numbered_fields() -> None:
    value = CSSValue([
        Literal("solid"),
        NumberValue(10, "px", "10"),
        ColorValue(255, 204, 0, 1.0, "#fc0"),
        StringValue("Arial", "single"),
        StringValue("Times", "double"),
    ])
    wrapped = wrap_with_field(value)
    assert wrapped.value == [
        Field(1, "solid"),
        Field(2, "10px"),
        Field(3, "#fc0"),
        Field(4, "'Arial'"),
        Field(5, '"Times"'),
    ]


def test_function_arguments_are_numbered_depth_first() -> None:
    value = CSSValue([
        FunctionCall("rgba", [
            CSSValue([NumberValue(0, "", "0")]),
            CSSValue([FunctionCall("var", [CSSValue([Literal("x")])])]),
        ]),
        Literal("b"),
    ])
    wrapped = wrap_with_field(value)
    assert wrapped.value == [
        Field(1, "rgba"),
        Literal("("),
        Field(2, "0"),
        Literal(", "),
        Field(3, "var"),
        Literal("("),
        Field(4, "x"),
        Literal(")"),
        Literal(")"),
        Field(5, "b"),
    ]
    indices = [token.index for token in wrapped.value if isinstance(token, Field)]
    assert indices == list(range(1, len(indices) + 1))


def test_groups_share_one_counter() -> None:
    groups = [CSSValue([Literal("a")]), CSSValue([Literal("b"), Literal("c")])]
    wrapped = wrap_fields(groups)
    assert [token.index for group in wrapped for token in group.value] == [1, 2, 3]


def test_existing_fields_are_kept() -> None:
    value = CSSValue([Field(7, "keep"), Literal("x")])
    assert wrap_with_field(value).value == [Field(7, "keep"), Field(1, "x")]


def test_original_value_is_not_modified() -> None:
    value = CSSValue([Literal("a")])
    wrap_with_field(value)
    assert value.value == [Literal("a")]


def test_counter_cannot_number_two_trees() -> None:
    counter = FieldCounter()
    first = CSSValue([Literal("a")])
    second = CSSValue([Literal("b")])
    wrap_with_field(first, counter)
    with pytest.raises(FieldCounterError):
        wrap_with_field(second, counter)
