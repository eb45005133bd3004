"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    svg: str = Field(..., description="Raw SVG code")
    template_key: str | None = Field(
        default=None,
        description="x:Key of the emitted ControlTemplate (defaults to the configured key)",
    )
