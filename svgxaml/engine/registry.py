"""Element registry — every supported SVG element is a builder registered via decorator.

Usage:
    @element("rect", kind="Rectangle")
    def rect(el: ET.Element, node: XamlNode, ctx: ConversionContext) -> None:
        node.set("Width", el.get("width"))

Supporting a new SVG element = writing one builder with the decorator.
"""

from __future__ import annotations

import logging
import xml.etree.ElementTree as ET
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from svgxaml.engine.context import ConversionContext
    from svgxaml.xaml.node import XamlNode

logger = logging.getLogger(__name__)

Builder = Callable[[ET.Element, "XamlNode", "ConversionContext"], None]


@dataclass
class ElementSpec:
    tag: str
    kind: str
    fn: Builder
    # Containers have their SVG children converted into the node's children
    container: bool = False


class ElementRegistry:
    """Lookup table of element builders keyed by lower-cased SVG tag name."""

    def __init__(self) -> None:
        self._elements: dict[str, ElementSpec] = {}

    def register(self, spec: ElementSpec) -> None:
        if spec.tag in self._elements:
            raise ValueError(f"Duplicate element tag: {spec.tag}")
        self._elements[spec.tag] = spec
        logger.debug("Registered element <%s> -> %s", spec.tag, spec.kind)

    def get(self, tag: str) -> ElementSpec | None:
        return self._elements.get(tag)

    def tags(self) -> list[str]:
        return sorted(self._elements)

    @property
    def count(self) -> int:
        return len(self._elements)


# Module-level singleton
_registry = ElementRegistry()


def get_registry() -> ElementRegistry:
    return _registry


def element(tag: str, *, kind: str, container: bool = False):
    """Decorator to register an element builder."""

    def decorator(fn: Builder) -> Builder:
        _registry.register(ElementSpec(tag=tag, kind=kind, fn=fn, container=container))
        return fn

    return decorator
