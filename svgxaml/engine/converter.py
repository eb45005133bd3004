"""Document builder — SVG text in, XAML ControlTemplate text out.

Passes, in order:
  1. parse the SVG text
  2. index every linearGradient in the document
  3. walk the root's children, building the output tree
  4. wrap the canvas in a ControlTemplate and serialize
"""

from __future__ import annotations

import logging
import re
import xml.etree.ElementTree as ET
from dataclasses import dataclass

# Import builder module so @element decorators fire
import svgxaml.engine.elements  # noqa: F401
from svgxaml.engine.config import ConverterConfig
from svgxaml.engine.context import ConversionContext
from svgxaml.engine.registry import get_registry
from svgxaml.svg.gradients import index_gradients
from svgxaml.svg.parser import parse_svg, svg_local_name
from svgxaml.svg.styles import apply_direct_attributes, apply_style
from svgxaml.svg.transforms import parse_transform
from svgxaml.svg.values import format_number, parse_number
from svgxaml.xaml.node import XamlNode
from svgxaml.xaml.serializer import serialize_xaml

logger = logging.getLogger(__name__)

_VIEWBOX_SPLIT_RE = re.compile(r"[\s,]+")


@dataclass
class ConversionResult:
    xaml: str = ""
    element_count: int = 0
    gradient_count: int = 0


def convert_svg(svg_text: str | bytes, config: ConverterConfig | None = None) -> str:
    """Convert SVG source (text, or bytes honouring the encoding declaration) to XAML.

    A document without a root element yields "" rather than an error.
    """
    return convert_document(svg_text, config).xaml


def convert_document(svg_text: str | bytes, config: ConverterConfig | None = None) -> ConversionResult:
    """Same as convert_svg, but also reports what was converted."""
    root = parse_svg(svg_text)
    if root is None:
        return ConversionResult()

    ctx = ConversionContext(config=config or ConverterConfig())
    canvas = build_canvas(root, ctx.config)

    # Gradients must be indexed before any fill: url(#id) is resolved
    ctx.gradients = index_gradients(root)
    convert_children(root, canvas, ctx)

    template = XamlNode("ControlTemplate", {"x:Key": ctx.config.template_key}, [canvas])
    xaml = serialize_xaml(template)

    logger.info(
        "Converted SVG: %d elements, %d gradients, canvas %s×%s",
        ctx.element_count,
        len(ctx.gradients),
        canvas.get("Width"),
        canvas.get("Height"),
    )
    return ConversionResult(
        xaml=xaml,
        element_count=ctx.element_count,
        gradient_count=len(ctx.gradients),
    )


def build_canvas(root: ET.Element, config: ConverterConfig) -> XamlNode:
    """Root canvas sized by viewBox width/height, else the width/height attributes."""
    canvas = XamlNode("Canvas")

    view_box = root.get("viewBox", "")
    if view_box.strip():
        parts = [parse_number(p, 0.0) for p in _VIEWBOX_SPLIT_RE.split(view_box.strip())]
        if len(parts) >= 4:
            # min-x/min-y do not affect the canvas size
            canvas.set("Width", format_number(parts[2]))
            canvas.set("Height", format_number(parts[3]))
            return canvas
        logger.warning("Malformed viewBox %r, falling back to width/height", view_box)

    canvas.set("Width", root.get("width", config.default_width))
    canvas.set("Height", root.get("height", config.default_height))
    return canvas


def convert_children(parent: ET.Element, parent_node: XamlNode, ctx: ConversionContext) -> None:
    for child in parent:
        node = convert_element(child, ctx)
        if node is not None:
            parent_node.append(node)


def convert_element(el: ET.Element, ctx: ConversionContext) -> XamlNode | None:
    """Convert one element; unsupported elements drop their whole subtree."""
    tag = svg_local_name(el)
    spec = get_registry().get(tag) if tag else None
    if spec is None:
        logger.debug("Skipping unsupported element %s", el.tag)
        return None

    node = XamlNode(spec.kind)
    spec.fn(el, node, ctx)
    if spec.container:
        convert_children(el, node, ctx)

    transform = el.get("transform")
    if transform:
        translate = parse_transform(transform)
        if translate is not None:
            node.set("RenderTransform", translate.to_node())

    style = el.get("style")
    if style:
        apply_style(node, style, ctx.gradients)
    apply_direct_attributes(node, el, ctx.gradients)

    ctx.element_count += 1
    return node
