"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from svgxaml import __version__
from svgxaml.engine.registry import get_registry
from svgxaml.models.responses import HealthResponse

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version=__version__,
        supported_elements=get_registry().tags(),
    )
