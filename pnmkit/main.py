"""Library entry points: logging setup and pipeline factory."""

from __future__ import annotations

import logging

from dotenv import load_dotenv

from pnmkit.config import settings
from pnmkit.engine.config import RasterConfig
from pnmkit.engine.pipeline import Pipeline


def configure_logging(level: str | None = None) -> None:
    """Configure root logging from ``PNMKIT_LOG_LEVEL`` unless ``level`` is given."""
    load_dotenv()
    name = level or settings.pnmkit_log_level
    logging.basicConfig(
        level=getattr(logging, name.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )


def create_pipeline(config: RasterConfig | None = None) -> Pipeline:
    """Factory for a pipeline configured from settings."""
    return Pipeline(config=config or RasterConfig.from_settings(settings))
