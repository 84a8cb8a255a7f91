"""Node and token definitions for parsed stylesheet abbreviations."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Union


@dataclass
class Literal:
    value: str


@dataclass
class NumberValue:
    value: float
    unit: str = ""
    raw_value: str = ""

    def is_whole(self) -> bool:
        return float(self.value).is_integer()


@dataclass
class ColorValue:
    r: int = 0
    g: int = 0
    b: int = 0
    alpha: float = 1.0
    raw: str = ""


@dataclass
class StringValue:
    value: str
    quote: str = "double"


@dataclass
class FunctionCall:
    name: str
    arguments: List["CSSValue"] = field(default_factory=list)


@dataclass
class Field:
    """Editor tab stop with an optional placeholder."""

    index: int
    name: str = ""


Value = Union[Literal, NumberValue, ColorValue, StringValue, FunctionCall, Field]


@dataclass
class CSSValue:
    """One comma-delimited value alternative of a property."""

    value: List[Value] = field(default_factory=list)


@dataclass
class CSSProperty:
    """A single abbreviation segment such as ``p10`` in ``p10+m5``."""

    name: Optional[str] = None
    value: List[CSSValue] = field(default_factory=list)
    important: bool = False

    @property
    def children(self) -> List[Any]:
        return []


@dataclass
class CSSAbbreviation:
    """Ordered list of properties; also a one-level tree for walkers."""

    properties: List[CSSProperty] = field(default_factory=list)

    @property
    def children(self) -> List[CSSProperty]:
        return self.properties

    def __iter__(self) -> Iterator[CSSProperty]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    def __getitem__(self, index: int) -> CSSProperty:
        return self.properties[index]


@dataclass
class AbbreviationNode:
    """Generic tree node: anything with ordered ``children`` can be walked."""

    name: Optional[str] = None
    attributes: Dict[str, Any] = field(default_factory=dict)
    value: List[Any] = field(default_factory=list)
    children: List["AbbreviationNode"] = field(default_factory=list)


def literal_value(text: str) -> CSSValue:
    return CSSValue(value=[Literal(text)])


def has_field(value: CSSValue) -> bool:
    """Check whether a value group contains a tab stop, at any depth."""
    for token in value.value:
        if isinstance(token, Field):
            return True
        if isinstance(token, FunctionCall) and any(has_field(arg) for arg in token.arguments):
            return True
    return False


__all__ = [
    "Literal",
    "NumberValue",
    "ColorValue",
    "StringValue",
    "FunctionCall",
    "Field",
    "Value",
    "CSSValue",
    "CSSProperty",
    "CSSAbbreviation",
    "AbbreviationNode",
    "literal_value",
    "has_field",
]
