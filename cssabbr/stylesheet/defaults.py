"""Built-in stylesheet snippet dictionary."""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

DEFAULT_SNIPPETS: Mapping[str, str] = MappingProxyType({
    # At-rules and raw text
    "@f": "@font-face {\n\tfont-family: ${1};\n\tsrc: url(${2});\n}",
    "@i": "@import url(${0});",
    "@kf": "@keyframes ${1:identifier} {\n\t${0}\n}",
    "@m": "@media ${1:screen} {\n\t${0}\n}",
    "@ff": "@font-face {\n\tfont-family: ${1:name};\n\tsrc: url(${2:path});\n}",
    "!": "!important",

    # Positioning
    "pos": "position:relative|absolute|fixed|static|sticky",
    "t": "top",
    "r": "right",
    "b": "bottom",
    "l": "left",
    "z": "z-index",
    "fl": "float:left|right|none",
    "cl": "clear:both|left|right|none",
    "d": "display:block|none|flex|inline-flex|inline|inline-block|grid|inline-grid|table|table-row|table-cell|list-item|contents",
    "v": "visibility:hidden|visible|collapse",
    "ov": "overflow:hidden|visible|scroll|auto",
    "ovx": "overflow-x:hidden|visible|scroll|auto",
    "ovy": "overflow-y:hidden|visible|scroll|auto",
    "zoo": "zoom:1",
    "cur": "cursor:pointer|auto|default|crosshair|help|move|text|wait",
    "us": "user-select:none|auto|text|all",

    # Box model
    "bxz": "box-sizing:border-box|content-box",
    "bxsh": "box-shadow:${1:0} ${2:0} ${3:0} ${4:#000}|none",
    "m": "margin",
    "mt": "margin-top",
    "mr": "margin-right",
    "mb": "margin-bottom",
    "ml": "margin-left",
    "p": "padding",
    "pt": "padding-top",
    "pr": "padding-right",
    "pb": "padding-bottom",
    "pl": "padding-left",
    "w": "width",
    "h": "height",
    "maw": "max-width",
    "mah": "max-height",
    "miw": "min-width",
    "mih": "min-height",

    # Typography
    "f": "font",
    "fz": "font-size",
    "fw": "font-weight:normal|bold|bolder|lighter",
    "fs": "font-style:italic|normal|oblique",
    "ff": "font-family:serif|sans-serif|cursive|fantasy|monospace",
    "lh": "line-height",
    "ta": "text-align:left|center|right|justify",
    "td": "text-decoration:none|underline|overline|line-through",
    "tt": "text-transform:uppercase|lowercase|capitalize|none",
    "tov": "text-overflow:ellipsis|clip",
    "va": "vertical-align:top|super|text-top|middle|baseline|bottom|text-bottom|sub",
    "ws": "white-space:nowrap|pre|pre-wrap|pre-line|normal",
    "lis": "list-style:none",
    "lst": "list-style-type:disc|circle|square|decimal|none",
    "ct": "content:normal|open-quote|no-open-quote|close-quote|no-close-quote|attr(${1})|counter(${1})",

    # Colors and backgrounds
    "c": "color:${1:#000}",
    "op": "opacity",
    "bg": "background:${1:#000}",
    "bgc": "background-color:${1:#fff}",
    "bgi": "background-image:url(${0})",
    "bgr": "background-repeat:no-repeat|repeat-x|repeat-y|space|round",
    "bgp": "background-position:${1:0} ${2:0}",
    "bgsz": "background-size:cover|contain",

    # Borders
    "bd": "border:${1:1px} ${2:solid} ${3:#000}",
    "bdt": "border-top:${1:1px} ${2:solid} ${3:#000}",
    "bdr": "border-right:${1:1px} ${2:solid} ${3:#000}",
    "bdb": "border-bottom:${1:1px} ${2:solid} ${3:#000}",
    "bdl": "border-left:${1:1px} ${2:solid} ${3:#000}",
    "bds": "border-style:none|hidden|dotted|dashed|solid|double|groove|ridge|inset|outset",
    "bdc": "border-color:${1:#000}",
    "bdw": "border-width",
    "bdrs": "border-radius",
    "ol": "outline:${1:1px} ${2:solid} ${3:#000}|none",

    # Flexbox and grid
    "fx": "flex",
    "fxd": "flex-direction:row|row-reverse|column|column-reverse",
    "fxw": "flex-wrap:nowrap|wrap|wrap-reverse",
    "fxg": "flex-grow",
    "fxsh": "flex-shrink",
    "fxb": "flex-basis:auto|content",
    "jc": "justify-content:flex-start|flex-end|center|space-between|space-around|space-evenly",
    "ai": "align-items:flex-start|flex-end|center|baseline|stretch",
    "ac": "align-content:flex-start|flex-end|center|space-between|space-around|stretch",
    "as": "align-self:auto|flex-start|flex-end|center|baseline|stretch",
    "ord": "order",
    "g": "gap",
    "gtc": "grid-template-columns:repeat(${1:2}, ${2:1fr})",
    "gtr": "grid-template-rows:repeat(${1:2}, ${2:1fr})",

    # Effects
    "trf": "transform:none",
    "trs": "transition:${1:prop} ${2:time}",
    "anim": "animation:${1:name} ${2:duration} ${3:timing-function}",
})


__all__ = ["DEFAULT_SNIPPETS"]
