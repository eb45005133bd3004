"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svgxaml_env: str = "development"
    svgxaml_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Template output
    template_key: str = "Template_Name"
    default_canvas_width: str = "24"
    default_canvas_height: str = "24"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
