"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    layoutrel_env: str = "development"
    layoutrel_log_level: str = "info"

    # Scroll-into-view budget for viewport checks
    layoutrel_scroll_timeout_ms: int = 5000

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "extra": "ignore"}


settings = Settings()
