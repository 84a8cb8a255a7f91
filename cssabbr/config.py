"""Resolution and output options for cssabbr."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - fallback for older interpreters
    tomllib = None  # type: ignore

from cssabbr.errors import ConfigError

logger = logging.getLogger(__name__)


DEFAULT_OPTIONS: Mapping[str, Any] = MappingProxyType({
    # Matching
    "stylesheet.fuzzySearchMinScore": 0.0,
    "stylesheet.keywords": ("auto", "inherit", "unset", "none"),
    # Numeric values
    "stylesheet.unitAliases": MappingProxyType({"e": "em", "p": "%", "x": "ex", "r": "rem"}),
    "stylesheet.unitless": (
        "z-index",
        "line-height",
        "opacity",
        "font-weight",
        "zoom",
        "flex",
        "flex-grow",
        "flex-shrink",
    ),
    "stylesheet.intUnit": "px",
    "stylesheet.floatUnit": "em",
    # Output
    "stylesheet.between": ": ",
    "stylesheet.after": ";",
    "stylesheet.shortHex": True,
    "output.fields": True,
    "output.newline": "\n",
})


@dataclass(frozen=True)
class Config:
    """Read-only settings shared by every resolution call.

    ``context`` names the enclosing property when the abbreviation is typed
    as a value of an existing declaration; ``snippets`` is the raw snippet
    dictionary (``None`` selects the built-in one).
    """

    options: Mapping[str, Any] = field(default_factory=lambda: DEFAULT_OPTIONS)
    context: Optional[str] = None
    snippets: Optional[Mapping[str, str]] = None

    def option(self, name: str) -> Any:
        if name in self.options:
            return self.options[name]
        return DEFAULT_OPTIONS[name]

    def with_options(self, overrides: Mapping[str, Any]) -> "Config":
        merged = dict(self.options)
        for key, value in overrides.items():
            merged[key] = _normalize_option(value)
        return replace(self, options=MappingProxyType(merged))

    def with_context(self, context: Optional[str]) -> "Config":
        return replace(self, context=context)


def make_config(
    options: Optional[Mapping[str, Any]] = None,
    *,
    context: Optional[str] = None,
    snippets: Optional[Mapping[str, str]] = None,
) -> Config:
    """Build a config with ``options`` merged over :data:`DEFAULT_OPTIONS`."""
    merged: Dict[str, Any] = dict(DEFAULT_OPTIONS)
    for key, value in (options or {}).items():
        merged[key] = _normalize_option(value)
    return Config(
        options=MappingProxyType(merged),
        context=context,
        snippets=MappingProxyType(dict(snippets)) if snippets is not None else None,
    )


def _normalize_option(value: Any) -> Any:
    if isinstance(value, list):
        return tuple(value)
    if isinstance(value, dict):
        return MappingProxyType(dict(value))
    return value


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    if tomllib is None:
        raise ConfigError("TOML parsing requires Python 3.11 or later.", source=str(path))
    with path.open("rb") as handle:
        return tomllib.load(handle)


def load_config(path: Union[str, Path], *, context: Optional[str] = None) -> Config:
    """Load options and snippets from a JSON or TOML file.

    The file may contain an ``options`` table keyed by option name, a
    ``snippets`` table mapping abbreviations to snippet text and a
    ``context`` string. ``context`` passed here overrides the file.
    """
    config_path = Path(path)
    try:
        if config_path.suffix == ".toml":
            data = _read_toml_config(config_path)
        else:
            data = _read_json_config(config_path)
    except ConfigError:
        raise
    except (OSError, ValueError) as exc:
        raise ConfigError(
            f"Unable to read config: {exc}",
            source=str(config_path),
            hint="Config files must be JSON or TOML documents.",
        ) from exc

    if not isinstance(data, dict):
        raise ConfigError("Config root must be a table", source=str(config_path))
    options = data.get("options") or {}
    snippets = data.get("snippets")
    if not isinstance(options, dict):
        raise ConfigError("'options' must be a table", source=str(config_path))
    if snippets is not None and not isinstance(snippets, dict):
        raise ConfigError("'snippets' must be a table", source=str(config_path))

    logger.info(
        "Loaded config from %s (%d options, %s snippets)",
        config_path,
        len(options),
        len(snippets) if snippets is not None else "default",
    )
    return make_config(
        options,
        context=context if context is not None else data.get("context"),
        snippets={str(key): str(value) for key, value in snippets.items()} if snippets is not None else None,
    )


__all__ = ["Config", "DEFAULT_OPTIONS", "make_config", "load_config"]
