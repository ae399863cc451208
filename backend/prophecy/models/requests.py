"""API request models."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ConvertRequest(BaseModel):
    # Missing or empty svg is rejected by the route with a 400
    svg: str | None = Field(default=None, description="SVG markup to rasterize")
