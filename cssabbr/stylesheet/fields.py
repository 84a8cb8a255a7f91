"""Turn literal value trees into tab-stop fields."""

from __future__ import annotations

from typing import List, Optional, Sequence

from cssabbr.ast import (
    ColorValue,
    CSSValue,
    Field,
    FunctionCall,
    Literal,
    NumberValue,
    StringValue,
    Value,
)
from cssabbr.errors import FieldCounterError


class FieldCounter:
    """Sequential field index source, bound to the first tree it numbers."""

    def __init__(self, start: int = 1):
        self.index = start
        self._owner: Optional[object] = None

    def claim(self, tree: object) -> None:
        if self._owner is None:
            self._owner = tree
        elif self._owner is not tree:
            raise FieldCounterError(
                "Field counter already numbered another value tree",
                hint="Create a new FieldCounter for each resolution.",
            )

    def next(self) -> int:
        index = self.index
        self.index += 1
        return index


def _placeholder(token: Value) -> Optional[str]:
    if isinstance(token, ColorValue):
        return token.raw
    if isinstance(token, Literal):
        return token.value
    if isinstance(token, NumberValue):
        return f"{token.raw_value or token.value}{token.unit}"
    if isinstance(token, StringValue):
        quote = "'" if token.quote == "single" else '"'
        return f"{quote}{token.value}{quote}"
    return None


def _wrap(value: CSSValue, counter: FieldCounter) -> CSSValue:
    tokens: List[Value] = []
    for token in value.value:
        if isinstance(token, FunctionCall):
            tokens.append(Field(counter.next(), token.name))
            tokens.append(Literal("("))
            for position, argument in enumerate(token.arguments):
                if position:
                    tokens.append(Literal(", "))
                tokens.extend(_wrap(argument, counter).value)
            tokens.append(Literal(")"))
            continue
        placeholder = _placeholder(token)
        if placeholder is None:
            tokens.append(token)
        else:
            tokens.append(Field(counter.next(), placeholder))
    return CSSValue(tokens)


def wrap_with_field(value: CSSValue, counter: Optional[FieldCounter] = None) -> CSSValue:
    """Replace every leaf token of ``value`` with a numbered field."""
    counter = counter or FieldCounter()
    counter.claim(value)
    return _wrap(value, counter)


def wrap_fields(values: Sequence[CSSValue], counter: Optional[FieldCounter] = None) -> List[CSSValue]:
    """Number all groups of a property value with one shared counter."""
    counter = counter or FieldCounter()
    counter.claim(values)
    return [_wrap(value, counter) for value in values]


__all__ = ["FieldCounter", "wrap_with_field", "wrap_fields"]
