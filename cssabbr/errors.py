"""Error types raised by cssabbr.

Every error carries a stable ``code`` and may point into the text that caused
it: ``source`` is the abbreviation, snippet value or config path, ``column``
the offending offset in an abbreviation.
"""

from __future__ import annotations

from typing import Optional


class CssAbbrError(Exception):
    """Base class for all errors surfaced by cssabbr."""

    code: str = "CSSABBR"
    hint: Optional[str] = None

    def __init__(
        self,
        message: str,
        *,
        source: Optional[str] = None,
        column: Optional[int] = None,
        code: Optional[str] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.source = source
        self.column = column
        self.code = code or self.code
        self.hint = hint or self.hint

    def where(self) -> Optional[str]:
        if self.source is None:
            return None
        if self.column is None:
            return repr(self.source)
        return f"{self.source!r}, column {self.column}"

    def excerpt(self) -> Optional[str]:
        """The offending abbreviation with a caret under ``column``."""
        if self.source is None or self.column is None:
            return None
        return f"{self.source}\n{' ' * self.column}^"

    def format(self) -> str:
        text = f"{self.code}: {self.message}"
        where = self.where()
        if where:
            text += f" [{where}]"
        if self.hint:
            text += f". Hint: {self.hint}"
        return text


class AbbreviationSyntaxError(CssAbbrError):
    """Raised when an abbreviation or snippet value cannot be tokenized."""

    code = "ABBR_SYNTAX"


class ConfigError(CssAbbrError):
    """Raised when a configuration file cannot be read or is malformed."""

    code = "CONFIG"


class ContractViolation(CssAbbrError):
    """Raised when a caller breaks a usage contract of a core primitive."""

    code = "CONTRACT"


class FieldCounterError(ContractViolation):
    """Raised when one field counter is used to number two value trees."""

    code = "FIELD_COUNTER_REUSED"


class WalkStateError(ContractViolation):
    """Raised when a walk state is shared by overlapping walks."""

    code = "WALK_STATE_REUSED"


__all__ = [
    "CssAbbrError",
    "AbbreviationSyntaxError",
    "ConfigError",
    "ContractViolation",
    "FieldCounterError",
    "WalkStateError",
]
