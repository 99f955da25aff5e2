"""Application configuration from environment variables."""

from __future__ import annotations

from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    xenft_env: str = "development"
    xenft_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Gallery persistence
    gallery_dir: Path = Path(__file__).parent / "data"

    # PNG export
    png_default_size: int = 800

    # Chain (Base mainnet)
    chain_id: int = 8453

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
