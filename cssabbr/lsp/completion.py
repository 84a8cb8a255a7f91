"""Package abbreviation expansions as LSP completion items."""

from __future__ import annotations

import copy
import logging
from typing import Optional, Sequence

from lsprotocol.types import (
    CompletionItem,
    CompletionItemKind,
    InsertTextFormat,
    MarkupContent,
    MarkupKind,
    Range,
    TextEdit,
)

from cssabbr.config import Config, make_config
from cssabbr.errors import AbbreviationSyntaxError
from cssabbr.parser import parse_abbreviation
from cssabbr.stylesheet import Snippet, resolve_abbreviation, stringify

logger = logging.getLogger(__name__)


def abbreviation_completion(
    abbr: str,
    config: Optional[Config] = None,
    snippets: Optional[Sequence[Snippet]] = None,
    range: Optional[Range] = None,  # noqa: A002 - mirrors the LSP field name
) -> Optional[CompletionItem]:
    """Expand ``abbr`` into a snippet completion, or ``None`` if nothing matched.

    When ``range`` is given the item replaces that range (the typed
    abbreviation) instead of inserting at the cursor.
    """
    config = config or make_config()
    text = abbr.strip()
    if not text:
        return None
    try:
        tree = parse_abbreviation(text, value=bool(config.context))
    except AbbreviationSyntaxError as exc:
        logger.debug("Not an abbreviation %r: %s", text, exc.format())
        return None

    typed = copy.deepcopy(tree)
    resolve_abbreviation(tree, config, snippets)
    if tree == typed:
        return None

    snippet_text = stringify(tree, config)
    preview = stringify(tree, config.with_options({"output.fields": False}))
    item = CompletionItem(
        label=text,
        kind=CompletionItemKind.Property,
        detail=preview,
        documentation=MarkupContent(kind=MarkupKind.Markdown, value=f"```css\n{preview}\n```"),
        insert_text_format=InsertTextFormat.Snippet,
        filter_text=text,
    )
    if range is not None:
        item.text_edit = TextEdit(range=range, new_text=snippet_text)
    else:
        item.insert_text = snippet_text
    return item


__all__ = ["abbreviation_completion"]
