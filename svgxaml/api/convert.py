"""POST /api/convert — SVG text to XAML ControlTemplate."""

from __future__ import annotations

from dataclasses import replace

from fastapi import APIRouter, Depends

from svgxaml.dependencies import get_converter_config
from svgxaml.engine.config import ConverterConfig
from svgxaml.engine.converter import convert_document
from svgxaml.models.requests import ConvertRequest
from svgxaml.models.responses import ConvertResponse

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
def convert(
    request: ConvertRequest,
    config: ConverterConfig = Depends(get_converter_config),
) -> ConvertResponse:
    if request.template_key:
        config = replace(config, template_key=request.template_key)

    # ConversionError propagates to the app-level handler (HTTP 422)
    result = convert_document(request.svg, config)
    return ConvertResponse(
        xaml=result.xaml,
        element_count=result.element_count,
        gradient_count=result.gradient_count,
    )
