"""Pre-scan an SVG document for linearGradient definitions."""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET

from svgxaml.engine.context import GradientStop, LinearGradient
from svgxaml.svg.parser import SVG_NS, XLINK_NS
from svgxaml.svg.styles import parse_declarations
from svgxaml.svg.values import parse_color, parse_number, parse_percent_or_number

logger = logging.getLogger(__name__)

_LINEAR_GRADIENT = f"{{{SVG_NS}}}linearGradient"
_STOP = f"{{{SVG_NS}}}stop"
_HREF_ATTRS = (f"{{{XLINK_NS}}}href", "href")


def index_gradients(root: ET.Element) -> dict[str, LinearGradient]:
    """Build an id -> LinearGradient map from every linearGradient in the document.

    Gradients are found at any depth. A missing id indexes under "0" and a
    duplicate id replaces the earlier definition.
    """
    gradients: dict[str, LinearGradient] = {}

    for element in root.iter(_LINEAR_GRADIENT):
        gradient = LinearGradient(
            start=(
                parse_percent_or_number(element.get("x1", "0"), 0.0),
                parse_percent_or_number(element.get("y1", "0"), 0.0),
            ),
            end=(
                parse_percent_or_number(element.get("x2", "0"), 0.0),
                parse_percent_or_number(element.get("y2", "0"), 0.0),
            ),
            stops=[_read_stop(stop) for stop in element.findall(_STOP)],
            href=_read_href(element),
        )
        gradients[element.get("id", "0")] = gradient

    _resolve_links(gradients)
    logger.debug("Indexed %d gradients", len(gradients))
    return gradients


def _read_stop(stop: ET.Element) -> GradientStop:
    style = parse_declarations(stop.get("style", ""))

    color = stop.get("stop-color") or style.get("stop-color") or "#000000"
    opacity = stop.get("stop-opacity") or style.get("stop-opacity")

    rgba = parse_color(color)
    if opacity:
        rgba = rgba.with_opacity(parse_number(opacity, 1.0))

    return GradientStop(
        color=rgba,
        offset=parse_percent_or_number(stop.get("offset", "0"), 0.0),
    )


def _read_href(element: ET.Element) -> str | None:
    for attr in _HREF_ATTRS:
        value = element.get(attr)
        if value and value.startswith("#"):
            return value[1:]
    return None


def _resolve_links(gradients: dict[str, LinearGradient]) -> None:
    """Give stop-less gradients the stops of the gradient they link to."""
    for gradient in gradients.values():
        seen: set[int] = {id(gradient)}
        source = gradient
        while not source.stops and source.href in gradients:
            source = gradients[source.href]
            if id(source) in seen:
                break
            seen.add(id(source))
        if source is not gradient and source.stops:
            gradient.stops = list(source.stops)
