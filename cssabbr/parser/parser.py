"""Recursive descent parser producing :mod:`cssabbr.ast` trees."""

from __future__ import annotations

from typing import FrozenSet, List, Optional

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
from cssabbr.errors import AbbreviationSyntaxError

from .lexer import Lexer, Token, TokenType


_PROPERTY_END: FrozenSet[TokenType] = frozenset({TokenType.PLUS, TokenType.IMPORTANT, TokenType.EOF})
_ARGUMENTS_END: FrozenSet[TokenType] = frozenset({TokenType.RPAREN, TokenType.EOF})
_VALUE_END: FrozenSet[TokenType] = frozenset({TokenType.EOF})


class Parser:
    """Builds properties and value groups from a token list."""

    def __init__(self, tokens: List[Token], source: str = ""):
        self.tokens = tokens
        self.source = source
        self.pos = 0

    def error(self, message: str, token: Optional[Token] = None) -> AbbreviationSyntaxError:
        token = token or self.peek()
        return AbbreviationSyntaxError(message, source=self.source, column=token.start)

    def peek(self, offset: int = 0) -> Token:
        pos = min(self.pos + offset, len(self.tokens) - 1)
        return self.tokens[pos]

    def advance(self) -> Token:
        token = self.peek()
        if token.type is not TokenType.EOF:
            self.pos += 1
        return token

    def match(self, *types: TokenType) -> bool:
        return self.peek().type in types

    def skip_spaces(self) -> None:
        while self.match(TokenType.SPACE):
            self.advance()

    def parse_abbreviation(self, value: bool = False) -> CSSAbbreviation:
        properties: List[CSSProperty] = []
        while True:
            self.skip_spaces()
            if self.match(TokenType.EOF):
                break
            properties.append(self.parse_property(value))
            self.skip_spaces()
            if self.match(TokenType.PLUS):
                self.advance()
                continue
            if not self.match(TokenType.EOF):
                raise self.error(f"Unexpected {self.peek().value!r}")
        return CSSAbbreviation(properties)

    def parse_property(self, value: bool = False) -> CSSProperty:
        prop = CSSProperty()
        if (
            not value
            and self.match(TokenType.LITERAL)
            and self.peek(1).type is not TokenType.LPAREN
        ):
            prop.name = self.advance().value
            if self.match(TokenType.COLON):
                self.advance()
        prop.value = self.parse_groups(_PROPERTY_END)
        if self.match(TokenType.IMPORTANT):
            self.advance()
            prop.important = True
        return prop

    def parse_value(self) -> List[CSSValue]:
        return self.parse_groups(_VALUE_END)

    def parse_groups(self, terminators: FrozenSet[TokenType]) -> List[CSSValue]:
        groups: List[CSSValue] = []
        current = CSSValue()
        expect_sign = True
        while not self.match(*terminators):
            token = self.peek()
            if token.type is TokenType.COMMA:
                self.advance()
                if current.value:
                    groups.append(current)
                current = CSSValue()
                expect_sign = True
                continue
            if token.type is TokenType.DASH:
                self.advance()
                following = self.peek()
                if expect_sign and following.type is TokenType.NUMBER and following.start == token.end:
                    number = self.parse_number(self.advance())
                    number.value = -number.value
                    number.raw_value = "-" + number.raw_value
                    current.value.append(number)
                    expect_sign = False
                else:
                    expect_sign = True
                continue
            if token.type is TokenType.SPACE:
                self.advance()
                expect_sign = True
                continue
            current.value.append(self.parse_token())
            expect_sign = False
        if current.value:
            groups.append(current)
        return groups

    def parse_token(self) -> Value:  # noqa: C901 - one branch per token kind
        token = self.advance()
        if token.type is TokenType.NUMBER:
            return self.parse_number(token)
        if token.type is TokenType.COLOR:
            return parse_color(token.value, source=self.source, column=token.start)
        if token.type is TokenType.STRING:
            return StringValue(token.value, token.quote)
        if token.type is TokenType.FIELD:
            return Field(token.index, token.value)
        if token.type is TokenType.LITERAL:
            if self.match(TokenType.LPAREN) and self.peek().start == token.end:
                return self.parse_function(token)
            return Literal(token.value)
        if token.type in (TokenType.OPERATOR, TokenType.PLUS):
            return Literal(token.value)
        if token.type is TokenType.IMPORTANT:
            return Literal("!important")
        if token.type is TokenType.EOF:
            raise self.error("Unexpected end of abbreviation", token)
        raise self.error(f"Unexpected {token.value!r}", token)

    def parse_function(self, name: Token) -> FunctionCall:
        opening = self.advance()
        arguments = self.parse_groups(_ARGUMENTS_END)
        if not self.match(TokenType.RPAREN):
            raise self.error(f"Unclosed function call {name.value!r}", opening)
        self.advance()
        return FunctionCall(name.value, arguments)

    def parse_number(self, token: Token) -> NumberValue:
        raw = token.value
        number = float(raw)
        value = int(number) if number.is_integer() and "." not in raw else number
        return NumberValue(value, token.unit, raw)


def parse_color(raw: str, *, source: str = "", column: Optional[int] = None) -> ColorValue:
    """Parse ``#hex`` or ``#hex.alpha`` shorthand into color components."""
    body = raw[1:] if raw.startswith("#") else raw
    hex_part, _, alpha_part = body.partition(".")
    if len(hex_part) > 6:
        raise AbbreviationSyntaxError(f"Invalid color {raw!r}", source=source, column=column)
    if not hex_part:
        hex_part = "000000"
    elif len(hex_part) == 1:
        hex_part = hex_part * 6
    elif len(hex_part) == 2:
        hex_part = hex_part * 3
    elif len(hex_part) == 3:
        hex_part = "".join(ch * 2 for ch in hex_part)
    else:
        hex_part = hex_part.ljust(6, "0")
    alpha = float("0." + alpha_part) if alpha_part else 1.0
    return ColorValue(
        r=int(hex_part[0:2], 16),
        g=int(hex_part[2:4], 16),
        b=int(hex_part[4:6], 16),
        alpha=alpha,
        raw=raw,
    )


def parse_abbreviation(text: str, value: bool = False) -> CSSAbbreviation:
    """Parse a stylesheet abbreviation such as ``p10-20+c#fc0``.

    With ``value=True`` the whole text is read as property values (no names),
    which is how abbreviations typed inside an existing declaration are read.
    """
    tokens = Lexer(text, names=not value).tokenize()
    return Parser(tokens, text).parse_abbreviation(value=value)


def parse_value(text: str) -> List[CSSValue]:
    """Parse a snippet value such as ``1px solid ${1:#000}``."""
    tokens = Lexer(text, value_syntax=True).tokenize()
    return Parser(tokens, text).parse_value()


__all__ = ["Parser", "parse_abbreviation", "parse_value", "parse_color"]
