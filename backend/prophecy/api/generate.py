"""GET /api/generate: quote + themed wallpaper, as JSON preview or PNG download."""

from __future__ import annotations

import asyncio
import logging

from fastapi import APIRouter
from fastapi.responses import Response

from prophecy.api.convert import error_response, png_response
from prophecy.engine.generator import MissingApiKeyError, generate_prophecy
from prophecy.models.responses import ErrorResponse, GenerateResponse
from prophecy.utils.rasterizer import svg_to_png

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get(
    "/generate",
    response_model=None,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate(
    apiKey: str = "",
    style: str = "",
    source: str = "",
    mode: str = "",
    format: str = "png",
) -> GenerateResponse | Response:
    try:
        result = await generate_prophecy(apiKey, style=style, source=source, mode=mode)

        if format == "json":
            return GenerateResponse(svg=result.svg, quote=result.quote.text)

        png = await asyncio.to_thread(svg_to_png, result.svg)
        return png_response(png)
    except MissingApiKeyError as e:
        return error_response(str(e), 400)
    except Exception as e:
        logger.error("Error generating prophecy: %s", e)
        return error_response(str(e) or "Internal Server Error", 500)
