"""Quote produced for a single wallpaper."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class QuoteRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str
    author: str
