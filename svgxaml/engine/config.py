"""Converter configuration: knobs that shape the emitted template."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ConverterConfig:
    """Controls the template wrapper and the fallback canvas size."""

    # x:Key of the emitted ControlTemplate
    template_key: str = "Template_Name"

    # Canvas size used when the SVG root has neither viewBox nor width/height
    default_width: str = "24"
    default_height: str = "24"

    @classmethod
    def from_settings(cls, settings) -> ConverterConfig:
        return cls(
            template_key=settings.template_key,
            default_width=settings.default_canvas_width,
            default_height=settings.default_canvas_height,
        )
