"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    supported_elements: list[str] = Field(default_factory=list)


class ConvertResponse(BaseModel):
    xaml: str
    element_count: int = 0
    gradient_count: int = 0
