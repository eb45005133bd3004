"""SVG parser — facade over xml.etree.ElementTree.

Turns raw SVG text into an element tree and answers the few namespace questions
the converter asks of it.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from xml.parsers import expat

from svgxaml.errors import MalformedInputError

logger = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"
XLINK_NS = "http://www.w3.org/1999/xlink"

_NO_ELEMENTS = expat.errors.codes[expat.errors.XML_ERROR_NO_ELEMENTS]


def parse_svg(svg_source: str | bytes) -> ET.Element | None:
    """Parse SVG source into its root element.

    Bytes are decoded per the XML encoding declaration (UTF-8 when absent).
    Returns None when the source holds no root element at all (empty, whitespace,
    or only a prolog and comments). A root that was opened but never closed is
    truncated input, and like any other XML error raises MalformedInputError.
    """
    parser = ET.XMLPullParser(events=("start",))
    starts: list[ET.Element] = []
    try:
        parser.feed(svg_source)
        _collect_starts(parser, starts)
        parser.close()
    except ET.ParseError as e:
        _collect_starts(parser, starts)
        # expat reports "no element found" for empty and truncated input alike
        if e.code == _NO_ELEMENTS and not starts:
            logger.debug("SVG source has no root element")
            return None
        raise MalformedInputError(f"SVG is not well-formed XML: {e}") from e
    _collect_starts(parser, starts)
    return starts[0]


def _collect_starts(parser: ET.XMLPullParser, starts: list[ET.Element]) -> None:
    # A queued feed error is raised here, after the start events before it
    for _event, element in parser.read_events():
        starts.append(element)


def svg_local_name(element: ET.Element) -> str | None:
    """Lower-cased local tag name if the element is in the SVG namespace, else None."""
    tag = element.tag
    if not isinstance(tag, str) or not tag.startswith(f"{{{SVG_NS}}}"):
        return None
    return tag.split("}", 1)[1].lower()
