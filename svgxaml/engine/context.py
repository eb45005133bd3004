"""Per-document state shared by the conversion passes.

Gradient definitions live here, keyed by id. A new context is created for every
document, so ids never leak between conversions.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from svgxaml.engine.config import ConverterConfig
from svgxaml.svg.values import Rgba, format_number
from svgxaml.xaml.node import XamlNode


@dataclass
class GradientStop:
    color: Rgba
    offset: float


@dataclass
class LinearGradient:
    """A linearGradient definition with unit-interval start/end points."""

    start: tuple[float, float] = (0.0, 0.0)
    end: tuple[float, float] = (0.0, 0.0)
    # Document order, never re-sorted by offset
    stops: list[GradientStop] = field(default_factory=list)
    # Raw href of a gradient this one borrows stops from
    href: str | None = None

    def to_brush(self) -> XamlNode:
        brush = XamlNode(
            "LinearGradientBrush",
            {
                "StartPoint": _format_point(self.start),
                "EndPoint": _format_point(self.end),
            },
        )
        for stop in self.stops:
            brush.append(
                XamlNode(
                    "GradientStop",
                    {"Color": str(stop.color), "Offset": format_number(stop.offset)},
                )
            )
        return brush


@dataclass
class ConversionContext:
    """Shared state for one SVG → XAML conversion."""

    config: ConverterConfig = field(default_factory=ConverterConfig)
    # id -> definition; duplicate ids overwrite (last wins)
    gradients: dict[str, LinearGradient] = field(default_factory=dict)
    # Number of shape/group nodes emitted below the root canvas
    element_count: int = 0


def _format_point(point: tuple[float, float]) -> str:
    return f"{format_number(point[0])},{format_number(point[1])}"
