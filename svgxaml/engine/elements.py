"""Builders for the supported SVG elements.

Each builder fills in the shape-specific properties of a freshly created node.
Transform and presentation attributes are handled by the converter afterwards.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from svgxaml.engine.context import ConversionContext
from svgxaml.engine.registry import element
from svgxaml.svg.values import format_number, parse_number
from svgxaml.xaml.node import XamlNode


@element("g", kind="Canvas", container=True)
def group(el: ET.Element, node: XamlNode, ctx: ConversionContext) -> None:
    pass


@element("path", kind="Path")
def path(el: ET.Element, node: XamlNode, ctx: ConversionContext) -> None:
    node.set("Data", el.get("d"))


@element("rect", kind="Rectangle")
def rect(el: ET.Element, node: XamlNode, ctx: ConversionContext) -> None:
    node.set("Width", el.get("width"))
    node.set("Height", el.get("height"))
    node.set("Canvas.Left", el.get("x"))
    node.set("Canvas.Top", el.get("y"))


@element("circle", kind="Ellipse")
def circle(el: ET.Element, node: XamlNode, ctx: ConversionContext) -> None:
    """Center + radius -> bounding box, since XAML positions ellipses by top-left."""
    r = parse_number(el.get("r"), 0.0)
    cx = parse_number(el.get("cx"), 0.0)
    cy = parse_number(el.get("cy"), 0.0)

    node.set("Width", format_number(r * 2))
    node.set("Height", format_number(r * 2))
    node.set("Canvas.Left", format_number(cx - r))
    node.set("Canvas.Top", format_number(cy - r))


@element("polygon", kind="Polygon")
def polygon(el: ET.Element, node: XamlNode, ctx: ConversionContext) -> None:
    node.set("Points", el.get("points"))
