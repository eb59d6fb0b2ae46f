"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings

from circlewrap.engine.config import WrapConfig


class Settings(BaseSettings):
    circlewrap_env: str = "development"
    circlewrap_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Wrap defaults, overridable per request
    filter_enclosed: bool = True
    key_precision: int | None = None
    arc_resolution: int = 128

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    def wrap_config(self) -> WrapConfig:
        return WrapConfig(
            filter_enclosed=self.filter_enclosed,
            key_precision=self.key_precision,
            arc_resolution=self.arc_resolution,
        )


settings = Settings()
