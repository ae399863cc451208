"""Health check + meta endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends

from prophecy.config import Settings
from prophecy.dependencies import get_settings
from prophecy.llm.prompts import DEFAULT_MODE, DEFAULT_SOURCE, MODES, SOURCES
from prophecy.models.responses import HealthResponse, OptionsResponse
from prophecy.svg import themes

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    return HealthResponse(
        status="ok",
        version="0.1.0",
        styles_registered=themes.registry.count,
    )


@router.get("/options", response_model=OptionsResponse)
async def options(settings: Settings = Depends(get_settings)) -> OptionsResponse:
    return OptionsResponse(
        styles=themes.registry.ids,
        sources=SOURCES,
        modes=MODES,
        default_style=themes.registry.default.id,
        default_source=DEFAULT_SOURCE,
        default_mode=DEFAULT_MODE,
        public_app_url=settings.public_app_url,
    )
