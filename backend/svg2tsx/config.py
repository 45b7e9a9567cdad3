"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    svg2tsx_env: str = "development"
    svg2tsx_log_level: str = "info"

    # Conversion defaults
    default_component_name: str = "SvgIcon"
    output_extension: str = ".tsx"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
