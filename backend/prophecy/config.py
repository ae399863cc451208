"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    prophecy_env: str = "development"
    prophecy_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Text generation (the API key itself always comes from the caller)
    gemini_model: str = "gemini-2.5-flash-lite"
    gemini_temperature: float = 1.2
    gemini_top_p: float = 0.95
    gemini_top_k: int = 40
    max_quote_words: int = 30

    # Only handed to clients for building share links
    public_app_url: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
