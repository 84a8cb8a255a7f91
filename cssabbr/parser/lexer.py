"""Tokenizer for stylesheet abbreviations and snippet values.

Two flavours share one scanner:

* abbreviation syntax (``p10-20+c#fc0!``), where ``-`` separates values and
  ``+`` separates properties;
* value syntax (``1px solid ${1:#000}``), used for snippet definitions, where
  ``-`` is part of words such as ``sans-serif`` or ``-webkit-box``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Optional

from cssabbr.errors import AbbreviationSyntaxError


class TokenType(Enum):
    """Token types of the abbreviation grammar."""

    LITERAL = auto()
    NUMBER = auto()
    COLOR = auto()
    STRING = auto()
    FIELD = auto()
    OPERATOR = auto()

    LPAREN = auto()
    RPAREN = auto()
    COMMA = auto()
    COLON = auto()
    DASH = auto()
    SPACE = auto()
    PLUS = auto()
    IMPORTANT = auto()

    EOF = auto()


@dataclass
class Token:
    """A single token with its source span."""

    type: TokenType
    value: str
    start: int
    end: int
    unit: str = ""
    quote: str = ""
    index: int = 0

    def __repr__(self) -> str:
        return f"Token({self.type.name}, {self.value!r}, {self.start}:{self.end})"


HEX_DIGITS = frozenset("0123456789abcdefABCDEF")
OPERATORS = frozenset("/*=")


def _is_alpha(char: Optional[str]) -> bool:
    return char is not None and (char.isalpha() or char == "_")


def _is_digit(char: Optional[str]) -> bool:
    return char is not None and char.isdigit()


class Lexer:
    """Tokenizer for one abbreviation or snippet value."""

    def __init__(self, source: str, *, value_syntax: bool = False, names: bool = True):
        self.source = source
        self.value_syntax = value_syntax
        self.names = names and not value_syntax
        self.pos = 0
        self.tokens: List[Token] = []
        self.at_property_start = self.names

    def error(self, message: str, column: Optional[int] = None) -> AbbreviationSyntaxError:
        return AbbreviationSyntaxError(
            message,
            source=self.source,
            column=self.pos if column is None else column,
        )

    def peek(self, offset: int = 0) -> Optional[str]:
        pos = self.pos + offset
        if pos < len(self.source):
            return self.source[pos]
        return None

    def advance(self) -> Optional[str]:
        if self.pos >= len(self.source):
            return None
        char = self.source[self.pos]
        self.pos += 1
        return char

    def add_token(self, token_type: TokenType, start: int, value: Optional[str] = None, **extra) -> Token:
        token = Token(
            type=token_type,
            value=self.source[start:self.pos] if value is None else value,
            start=start,
            end=self.pos,
            **extra,
        )
        self.tokens.append(token)
        return token

    def starts_number(self, offset: int = 0) -> bool:
        char = self.peek(offset)
        return _is_digit(char) or (char == "." and _is_digit(self.peek(offset + 1)))

    def read_name(self) -> str:
        """Read a property name: optional ``@``, letters and inner dashes."""
        chars = []
        if self.peek() == "@":
            chars.append(self.advance())
        while True:
            char = self.peek()
            if char is not None and char.isalpha():
                chars.append(self.advance())
            elif char == "-" and chars and self.peek(1) is not None and self.peek(1).isalpha():
                chars.append(self.advance())
            else:
                break
        return "".join(chars)

    def read_word(self) -> str:
        chars = []
        while True:
            char = self.peek()
            if char is None:
                break
            if char.isalnum() or char == "_":
                chars.append(self.advance())
            elif char == "-" and self.value_syntax:
                chars.append(self.advance())
            elif char == "$" and self.value_syntax and not chars:
                chars.append(self.advance())
            else:
                break
        return "".join(chars)

    def read_number(self) -> str:
        chars = []
        if self.peek() == "-":
            chars.append(self.advance())
        while _is_digit(self.peek()):
            chars.append(self.advance())
        if self.peek() == "." and _is_digit(self.peek(1)):
            chars.append(self.advance())
            while _is_digit(self.peek()):
                chars.append(self.advance())
        return "".join(chars)

    def read_unit(self) -> str:
        chars = []
        while True:
            char = self.peek()
            if char is not None and (char.isalpha() or char == "%"):
                chars.append(self.advance())
            else:
                break
        return "".join(chars)

    def read_string(self) -> str:
        start = self.pos
        quote = self.advance()
        chars = []
        while True:
            char = self.peek()
            if char is None:
                raise self.error("Unterminated string", column=start)
            if char == quote:
                self.advance()
                break
            if char == "\\":
                self.advance()
                escaped = self.advance()
                if escaped is None:
                    raise self.error("Unterminated string", column=start)
                chars.append(escaped)
            else:
                chars.append(self.advance())
        return "".join(chars)

    def read_field(self) -> Token:
        """Read a ``${index}`` or ``${index:placeholder}`` tab stop."""
        start = self.pos
        self.advance()  # $
        self.advance()  # {
        digits = []
        while _is_digit(self.peek()):
            digits.append(self.advance())
        if not digits:
            raise self.error("Field must start with an index", column=start)
        placeholder = []
        if self.peek() == ":":
            self.advance()
            depth = 0
            while True:
                char = self.peek()
                if char is None:
                    break
                if char == "\\":
                    self.advance()
                    escaped = self.advance()
                    if escaped is not None:
                        placeholder.append(escaped)
                    continue
                if char == "{":
                    depth += 1
                elif char == "}":
                    if depth == 0:
                        break
                    depth -= 1
                placeholder.append(self.advance())
        if self.peek() != "}":
            raise self.error("Unterminated field", column=start)
        self.advance()
        return self.add_token(TokenType.FIELD, start, value="".join(placeholder), index=int("".join(digits)))

    def read_color(self) -> Token:
        start = self.pos
        self.advance()  # #
        while self.peek() in HEX_DIGITS:
            self.advance()
        if self.peek() == "." and _is_digit(self.peek(1)):
            self.advance()
            while _is_digit(self.peek()):
                self.advance()
        return self.add_token(TokenType.COLOR, start)

    def tokenize(self) -> List[Token]:  # noqa: C901 - one branch per token kind
        while self.pos < len(self.source):
            char = self.peek()
            start = self.pos

            if char.isspace():
                while self.peek() is not None and self.peek().isspace():
                    self.advance()
                self.add_token(TokenType.SPACE, start)
                continue

            if self.at_property_start and (char == "@" or char.isalpha()):
                self.at_property_start = False
                name = self.read_name()
                self.add_token(TokenType.LITERAL, start, value=name)
                continue
            self.at_property_start = False

            if char == "+" and not self.value_syntax:
                self.advance()
                self.add_token(TokenType.PLUS, start)
                self.at_property_start = self.names
                continue

            if char == "$" and self.peek(1) == "{":
                self.read_field()
                continue

            if char == "#":
                self.read_color()
                continue

            if char in ('"', "'"):
                value = self.read_string()
                self.add_token(
                    TokenType.STRING,
                    start,
                    value=value,
                    quote="single" if char == "'" else "double",
                )
                continue

            if self.starts_number() or (
                char == "-" and self.value_syntax and self.starts_number(1)
            ):
                number = self.read_number()
                unit = self.read_unit()
                self.add_token(TokenType.NUMBER, start, value=number, unit=unit)
                continue

            if _is_alpha(char) or (
                self.value_syntax and (char == "$" or (char == "-" and (_is_alpha(self.peek(1)) or self.peek(1) == "-")))
            ):
                self.add_token(TokenType.LITERAL, start, value=self.read_word())
                continue

            if char == "!":
                self.advance()
                while self.peek() is not None and self.peek().isalpha():
                    self.advance()
                self.add_token(TokenType.IMPORTANT, start)
                continue

            simple = {
                "(": TokenType.LPAREN,
                ")": TokenType.RPAREN,
                ",": TokenType.COMMA,
                ":": TokenType.COLON,
                "-": TokenType.DASH,
                "+": TokenType.OPERATOR,
            }
            if char in simple:
                self.advance()
                self.add_token(simple[char], start)
                continue

            if char in OPERATORS:
                self.advance()
                self.add_token(TokenType.OPERATOR, start)
                continue

            raise self.error(f"Unexpected character {char!r}")

        self.tokens.append(Token(TokenType.EOF, "", self.pos, self.pos))
        return self.tokens


def tokenize(source: str, *, value_syntax: bool = False, names: bool = True) -> List[Token]:
    return Lexer(source, value_syntax=value_syntax, names=names).tokenize()


__all__ = ["TokenType", "Token", "Lexer", "tokenize"]
