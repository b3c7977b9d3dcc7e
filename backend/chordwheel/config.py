"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    chordwheel_env: str = "development"
    chordwheel_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Render default; radii derive from size in engine.scene
    canvas_size: float = 400.0

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
