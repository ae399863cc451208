"""API response models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str = "0.1.0"
    styles_registered: int = 0


class GenerateResponse(BaseModel):
    svg: str
    quote: str


class ErrorResponse(BaseModel):
    error: str


class OptionsResponse(BaseModel):
    styles: list[str] = Field(default_factory=list)
    sources: list[str] = Field(default_factory=list)
    modes: list[str] = Field(default_factory=list)
    default_style: str = ""
    default_source: str = ""
    default_mode: str = ""
    public_app_url: str = ""
