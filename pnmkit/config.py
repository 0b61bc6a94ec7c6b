"""Library configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    pnmkit_env: str = "development"
    pnmkit_log_level: str = "info"

    # True keeps ring circles and sweep triangles pixel-compatible with
    # previously written files; False switches to exact rasterizers.
    pnmkit_raster_compat: bool = True

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
