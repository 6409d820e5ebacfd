"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    anthropic_api_key: str = ""
    iconfactory_env: str = "development"
    iconfactory_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Generative model
    model_generate: str = "claude-sonnet-4-5-20250929"
    llm_max_tokens: int = 4000
    llm_temperature: float = 0.8
    llm_timeout_s: float = 300.0

    # Ingestion
    max_icons_per_request: int = 8

    # Collections: empty path keeps them in memory
    collections_file: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
