"""Parser for stylesheet abbreviations and snippet values."""

from .lexer import Lexer, Token, TokenType, tokenize
from .parser import Parser, parse_abbreviation, parse_color, parse_value

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "tokenize",
    "Parser",
    "parse_abbreviation",
    "parse_color",
    "parse_value",
]
