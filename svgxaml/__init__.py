"""svgxaml — SVG icon markup to XAML ControlTemplate converter."""

from svgxaml.engine.config import ConverterConfig
from svgxaml.engine.converter import ConversionResult, convert_document, convert_svg
from svgxaml.errors import (
    ConversionError,
    InvalidColorError,
    InvalidNumberError,
    MalformedInputError,
)

__version__ = "0.1.0"

__all__ = [
    "convert_svg",
    "convert_document",
    "ConversionResult",
    "ConverterConfig",
    "ConversionError",
    "MalformedInputError",
    "InvalidColorError",
    "InvalidNumberError",
]
