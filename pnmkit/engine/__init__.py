"""Netpbm image operation engine."""

from pnmkit.engine.registry import operation, OperationKind, get_registry
from pnmkit.engine.config import Polarity, RasterConfig
from pnmkit.engine.pipeline import Pipeline, PipelineResult

# Importing the operation modules fires their @operation decorators
from pnmkit.engine import conversions, drawing, transforms  # noqa: F401

__all__ = [
    "operation",
    "OperationKind",
    "get_registry",
    "Polarity",
    "RasterConfig",
    "Pipeline",
    "PipelineResult",
]
