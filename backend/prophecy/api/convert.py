"""POST /api/convert: rasterize SVG markup to a downloadable PNG."""

from __future__ import annotations

import asyncio
import logging
import time

from fastapi import APIRouter
from fastapi.responses import JSONResponse, Response

from prophecy.models.requests import ConvertRequest
from prophecy.models.responses import ErrorResponse
from prophecy.utils.rasterizer import svg_to_png

router = APIRouter()
logger = logging.getLogger(__name__)


def png_response(png: bytes) -> Response:
    filename = f"prophecy-{int(time.time() * 1000)}.png"
    return Response(
        content=png,
        media_type="image/png",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


@router.post("/convert", responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}})
async def convert(req: ConvertRequest) -> Response:
    if not req.svg:
        return error_response("SVG content is required", 400)

    try:
        png = await asyncio.to_thread(svg_to_png, req.svg)
    except Exception as e:
        logger.error("Error converting SVG to PNG: %s", e)
        return error_response(str(e) or "Internal Server Error", 500)

    return png_response(png)
