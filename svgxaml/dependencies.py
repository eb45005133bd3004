"""FastAPI dependency injection."""

from __future__ import annotations

from svgxaml.config import Settings, settings
from svgxaml.engine.config import ConverterConfig


def get_settings() -> Settings:
    return settings


def get_converter_config() -> ConverterConfig:
    return ConverterConfig.from_settings(settings)
