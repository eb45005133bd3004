"""FastAPI app factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from svgxaml import __version__
from svgxaml.config import settings
from svgxaml.errors import ConversionError

load_dotenv()

logging.basicConfig(
    level=getattr(logging, settings.svgxaml_log_level.upper(), logging.INFO),
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

logger = logging.getLogger(__name__)


def create_app() -> FastAPI:
    app = FastAPI(
        title="svgxaml",
        description="SVG icon markup to XAML ControlTemplate converter",
        version=__version__,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(ConversionError, _conversion_error_handler)

    from svgxaml.api.router import api_router

    app.include_router(api_router)

    return app


async def _conversion_error_handler(request: Request, exc: ConversionError) -> JSONResponse:
    logger.info("Conversion failed for %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


app = create_app()
