"""POST /api/convert — SVG markup in, TSX component source out."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends

from svg2tsx.config import Settings
from svg2tsx.dependencies import get_settings
from svg2tsx.models.requests import ConvertRequest
from svg2tsx.models.responses import ConvertResponse
from svg2tsx.svg.serializer import convert_svg

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/convert", response_model=ConvertResponse)
async def convert(
    req: ConvertRequest,
    settings: Settings = Depends(get_settings),
) -> ConvertResponse:
    name = req.name or settings.default_component_name
    doc = convert_svg(req.svg, name)
    logger.info("Converted %d characters of SVG into component %s", len(req.svg), name)
    return ConvertResponse(
        tsx=doc.tsx,
        component_name=doc.component_name,
        root_attributes=len(doc.root_attributes),
        body_lines=len(doc.body_lines),
    )
