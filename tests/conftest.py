"""Shared pytest fixtures for cssabbr tests."""

from __future__ import annotations

import pytest

from cssabbr.config import Config, make_config
from cssabbr.stylesheet import build_snippets

POSITION_SNIPPETS = {
    "pos": "position:relative|absolute|fixed",
    "p": "padding",
    "m": "margin",
    "w": "width",
    "z": "z-index",
    "lh": "line-height",
    "c": "color:${1:#000}",
    "tr": "transform:rotate(45deg)",
    "@m": "@media ${1:screen} {\n\t${0}\n}",
}


@pytest.fixture()
def config() -> Config:
    return make_config()


@pytest.fixture()
def snippets():
    return build_snippets(POSITION_SNIPPETS)
