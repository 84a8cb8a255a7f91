"""
Stylesheet abbreviation expander.

Turns terse, hand-typed shorthand such as ``p10-20`` or ``poa`` into full
declarations (``padding: 10px 20px;``, ``position: absolute;``) by fuzzy
matching the shorthand against a snippet dictionary.

The package is organised into several modules:

* ``ast`` - dataclasses for parsed properties and value tokens.
* ``parser`` - a hand written tokenizer and parser for abbreviations and
  snippet values.
* ``stylesheet`` - the resolution engine: scoring, snippet tables,
  best-match lookup, keyword and unit resolution, tab-stop fields and the
  declaration formatter.
* ``walk`` - a generic ordered tree walk used by formatters.
* ``lsp`` - helpers that package expansions as LSP completion items.
* ``cli`` - a small command line front end.
"""

from __future__ import annotations

from typing import Optional, Sequence

from .config import Config, DEFAULT_OPTIONS, load_config, make_config
from .errors import (
    AbbreviationSyntaxError,
    ConfigError,
    ContractViolation,
    CssAbbrError,
    FieldCounterError,
    WalkStateError,
)
from .parser import parse_abbreviation, parse_value
from .stylesheet import Snippet, build_snippets, resolve_abbreviation, stringify
from .walk import WalkState, walk

__version__ = "0.1.0"


def expand(abbr: str, config: Optional[Config] = None, snippets: Optional[Sequence[Snippet]] = None) -> str:
    """Parse, resolve and render ``abbr`` as declaration text."""
    config = config or make_config()
    return stringify(resolve_abbreviation(abbr, config, snippets), config)


__all__ = [
    "__version__",
    "expand",
    "Config",
    "DEFAULT_OPTIONS",
    "load_config",
    "make_config",
    "AbbreviationSyntaxError",
    "ConfigError",
    "ContractViolation",
    "CssAbbrError",
    "FieldCounterError",
    "WalkStateError",
    "parse_abbreviation",
    "parse_value",
    "Snippet",
    "build_snippets",
    "resolve_abbreviation",
    "stringify",
    "WalkState",
    "walk",
]
