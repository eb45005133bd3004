"""Map SVG presentation properties onto XAML shape properties.

Inline ``style`` declarations are applied first and the direct presentation
attributes second. Every property write overwrites, so a direct attribute beats
the inline style for the same property.
"""

from __future__ import annotations

import re
import xml.etree.ElementTree as ET
from typing import TYPE_CHECKING

from svgxaml.xaml.node import XamlNode

if TYPE_CHECKING:
    from svgxaml.engine.context import LinearGradient

# Presentation attributes read straight off the element, in application order
DIRECT_ATTRIBUTES = ("fill", "stroke", "stroke-width", "stroke-linejoin", "stroke-linecap")

_URL_REF_RE = re.compile(r"url\(\s*#([^)\s]+)\s*\)")

# Scalar SVG property -> XAML properties that receive the value verbatim
_SCALAR_PROPERTIES: dict[str, tuple[str, ...]] = {
    "stroke": ("Stroke",),
    "stroke-width": ("StrokeThickness",),
    "stroke-linejoin": ("StrokeLineJoin",),
    "stroke-linecap": ("StrokeStartLineCap", "StrokeEndLineCap"),
}


def parse_declarations(style: str) -> dict[str, str]:
    """Split ``name: value; ...`` into an ordered dict.

    Entries that do not contain exactly one ':' are dropped. A repeated name keeps
    its first position and its last value.
    """
    declarations: dict[str, str] = {}
    for entry in style.split(";"):
        pair = entry.split(":")
        if len(pair) != 2:
            continue
        declarations[pair[0].strip()] = pair[1].strip()
    return declarations


def apply_style(node: XamlNode, style: str, gradients: dict[str, LinearGradient]) -> None:
    for name, value in parse_declarations(style).items():
        apply_property(node, name, value, gradients)


def apply_direct_attributes(
    node: XamlNode, element: ET.Element, gradients: dict[str, LinearGradient]
) -> None:
    for name in DIRECT_ATTRIBUTES:
        value = element.get(name)
        if value:
            apply_property(node, name, value, gradients)


def apply_property(
    node: XamlNode, name: str, value: str, gradients: dict[str, LinearGradient]
) -> None:
    """Apply one SVG property to ``node``. Unknown names are ignored."""
    if name == "fill":
        _apply_fill(node, value, gradients)
        return

    for target in _SCALAR_PROPERTIES.get(name, ()):
        node.set(target, value)


def _apply_fill(node: XamlNode, value: str, gradients: dict[str, LinearGradient]) -> None:
    if value == "none":
        node.unset("Fill")
        return

    if value.startswith("url("):
        m = _URL_REF_RE.match(value)
        gradient = gradients.get(m.group(1)) if m else None
        if gradient is not None:
            node.set("Fill", gradient.to_brush())
        return

    node.set("Fill", value)
