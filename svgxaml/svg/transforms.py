"""SVG transform attribute -> XAML render transform.

Only ``translate`` is understood. Rotations, scales, skews and matrices come back
as None and leave the element untransformed.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from svgxaml.xaml.node import XamlNode

logger = logging.getLogger(__name__)

_TRANSLATE_RE = re.compile(r"translate\(([-\d.]+),?\s*([-\d.]+)?\)")


@dataclass(frozen=True)
class Translate:
    """Translation offsets, kept as the literal text found in the source."""

    dx: str
    dy: str = "0"

    def to_node(self) -> XamlNode:
        return XamlNode("TranslateTransform", {"X": self.dx, "Y": self.dy})


def parse_transform(value: str) -> Translate | None:
    if not value.startswith("translate"):
        logger.debug("Dropping unsupported transform %r", value)
        return None

    m = _TRANSLATE_RE.match(value)
    if not m:
        logger.debug("Dropping unparseable translate %r", value)
        return None

    return Translate(dx=m.group(1), dy=m.group(2) if m.group(2) is not None else "0")
