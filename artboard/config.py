"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    artboard_env: str = "development"
    artboard_log_level: str = "debug"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Grid rendering budget and defaults
    grid_max_lines: int = 600
    grid_line_width_px: float = 1.0
    grid_color: str = "rgba(0,0,0,0.2)"

    # Unit bake-in
    default_dpi: int = 300

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
