"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    patternfill_env: str = "development"
    patternfill_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Jitter seed for API fills. None = nondeterministic.
    random_seed: int | None = None

    # Requests whose grid would visit more cells than this are rejected
    max_placements: int = 250_000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
