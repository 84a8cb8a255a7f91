"""Language Server Protocol helpers for cssabbr."""

from .completion import abbreviation_completion

__all__ = ["abbreviation_completion"]
