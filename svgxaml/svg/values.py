"""Numeric and color literal parsing for SVG attribute strings."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, replace
from decimal import Decimal

from PIL import ImageColor

from svgxaml.errors import InvalidColorError, InvalidNumberError

# Culture-invariant decimal: '.' separator, optional sign and exponent, no grouping.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

# XAML hex colors put alpha first: #RGB, #ARGB, #RRGGBB, #AARRGGBB.
_HEX_COLOR_RE = re.compile(r"#([0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})")


@dataclass(frozen=True)
class Rgba:
    """An sRGB color with 8-bit channels, written as #AARRGGBB."""

    a: int
    r: int
    g: int
    b: int

    def with_opacity(self, opacity: float) -> Rgba:
        opacity = min(max(opacity, 0.0), 1.0)
        return replace(self, a=int(round(self.a * opacity)))

    def __str__(self) -> str:
        return f"#{self.a:02X}{self.r:02X}{self.g:02X}{self.b:02X}"


def parse_number(value: str | None, default: float) -> float:
    """Parse a decimal literal, returning ``default`` for a missing or empty value."""
    if value is None or not value.strip():
        return default
    text = value.strip()
    if not _NUMBER_RE.fullmatch(text):
        raise InvalidNumberError(value)
    return float(text)


def parse_percent_or_number(value: str | None, default: float) -> float:
    """Like parse_number, but a trailing '%' divides the result by 100.

    Bare numbers are returned as-is, so "50%" and "0.5" both mean the same
    unit-interval position.
    """
    if value is None or not value.strip():
        return default
    text = value.strip()
    if text.endswith("%"):
        return parse_number(text[:-1], default) / 100
    return parse_number(text, default)


def parse_color(value: str | None) -> Rgba:
    """Parse a hex or named color. Unknown syntax raises InvalidColorError."""
    text = (value or "").strip()

    m = _HEX_COLOR_RE.fullmatch(text)
    if m:
        digits = m.group(1)
        if len(digits) <= 4:
            digits = "".join(c * 2 for c in digits)
        if len(digits) == 6:
            digits = "ff" + digits
        a, r, g, b = (int(digits[i : i + 2], 16) for i in range(0, 8, 2))
        return Rgba(a, r, g, b)

    name = text.lower()
    if name == "transparent":
        return Rgba(0, 255, 255, 255)
    if name in ImageColor.colormap:
        r, g, b = ImageColor.getrgb(name)[:3]
        return Rgba(255, r, g, b)

    raise InvalidColorError(value or "")


def format_number(value: float) -> str:
    """Render a float the way invariant-culture .NET doubles print.

    Shortest round-trip digits with no trailing '.0' on integers. Magnitudes of
    1e15 and above, or below 1e-4, use exponent form with an upper-case 'E', a sign
    and at least two exponent digits (``1E-05``, ``1.5E+20``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e15:
        return str(int(value))

    text = repr(value)
    if "e" not in text and abs(value) < 1e15:
        return text
    mantissa, _, exponent = format(Decimal(text).normalize(), "E").partition("E")
    return f"{mantissa}E{int(exponent):+03d}"
