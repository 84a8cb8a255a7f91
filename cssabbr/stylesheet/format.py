"""Render resolved stylesheet abbreviations as declaration text."""

from __future__ import annotations

import re
from typing import List, Optional, Sequence

from cssabbr.ast import (
    ColorValue,
    CSSAbbreviation,
    CSSProperty,
    CSSValue,
    Field,
    FunctionCall,
    Literal,
    NumberValue,
    StringValue,
    Value,
)
from cssabbr.config import Config, make_config
from cssabbr.walk import WalkNext, WalkState, walk

# Literals produced by the field wrapper that attach to their neighbours
_OPENERS = frozenset({"(", ", "})
_CLOSERS = frozenset({"(", ")", ", "})
# Opening of an unescaped ``${n`` tab stop inside raw text
_FIELD_MARKER = re.compile(r"(?<!\\)\$\{(\d+)")


class FieldRenderer:
    """Emits tab stops shifted past the fields of earlier properties."""

    def __init__(self, offset: int = 0, enabled: bool = True):
        self.offset = offset
        self.enabled = enabled
        self.last = 0

    def render(self, field: Field) -> str:
        if not self.enabled:
            return field.name
        self.last = max(self.last, field.index)
        index = field.index + self.offset if field.index else 0
        if field.name:
            return "${%d:%s}" % (index, escape_placeholder(field.name))
        return "${%d}" % index

    def render_text(self, text: str) -> str:
        """Shift the tab stops already written into raw snippet text."""
        if not self.enabled:
            return text

        def shift(match: re.Match) -> str:
            index = int(match.group(1))
            self.last = max(self.last, index)
            return "${%d" % (index + self.offset if index else 0)

        return _FIELD_MARKER.sub(shift, text)


def escape_placeholder(text: str) -> str:
    return text.replace("\\", "\\\\").replace("$", "\\$").replace("}", "\\}")


def format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def format_color(color: ColorValue, short_hex: bool = True) -> str:
    if color.alpha < 1:
        return f"rgba({color.r}, {color.g}, {color.b}, {format_number(color.alpha)})"
    pairs = [f"{component:02x}" for component in (color.r, color.g, color.b)]
    if short_hex and all(pair[0] == pair[1] for pair in pairs):
        return "#" + "".join(pair[0] for pair in pairs)
    return "#" + "".join(pairs)


def format_token(token: Value, config: Config, fields: FieldRenderer) -> str:
    if isinstance(token, Field):
        return fields.render(token)
    if isinstance(token, Literal):
        return fields.render_text(token.value)
    if isinstance(token, NumberValue):
        return format_number(token.value) + token.unit
    if isinstance(token, ColorValue):
        return format_color(token, config.option("stylesheet.shortHex"))
    if isinstance(token, StringValue):
        quote = "'" if token.quote == "single" else '"'
        return f"{quote}{token.value}{quote}"
    if isinstance(token, FunctionCall):
        arguments = ", ".join(format_group(argument, config, fields) for argument in token.arguments)
        return f"{token.name}({arguments})"
    raise TypeError(f"Unknown value token {type(token).__name__}")


def format_group(group: CSSValue, config: Config, fields: FieldRenderer) -> str:
    parts: List[str] = []
    previous: Optional[Value] = None
    for token in group.value:
        glued = (
            isinstance(previous, Literal) and previous.value in _OPENERS
        ) or (isinstance(token, Literal) and token.value in _CLOSERS)
        if parts and not glued:
            parts.append(" ")
        parts.append(format_token(token, config, fields))
        previous = token
    return "".join(parts)


def format_property(node: CSSProperty, config: Config, fields: FieldRenderer) -> str:
    value = ", ".join(format_group(group, config, fields) for group in node.value)
    if not node.name:
        return value
    if not value:
        # Final cursor position for the value the user still has to type
        value = fields.render(Field(0))
    if node.important:
        value = f"{value} !important" if value else "!important"
    return f"{node.name}{config.option('stylesheet.between')}{value}{config.option('stylesheet.after')}"


def _visit_property(
    node: CSSProperty, index: int, items: Sequence[CSSProperty], state: WalkState, next: WalkNext
) -> None:
    config: Config = state.profile
    fields = FieldRenderer(state.field, config.option("output.fields"))
    state.out.append(format_property(node, config, fields))
    state.field += fields.last


def stringify(abbr: CSSAbbreviation, config: Optional[Config] = None) -> str:
    """Render every property of ``abbr`` on its own line."""
    config = config or make_config()
    state = walk(abbr, _visit_property, WalkState(out=[], profile=config))
    return config.option("output.newline").join(state.out)


__all__ = [
    "FieldRenderer",
    "escape_placeholder",
    "format_color",
    "format_group",
    "format_number",
    "format_property",
    "format_token",
    "stringify",
]
