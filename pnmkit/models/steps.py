"""Operation plan models — an ordered list of named operations to apply."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class OperationStep(BaseModel):
    """One registered operation and its keyword parameters."""

    op: str  # Registered operation name, e.g. "flip" or "filled_circle"
    params: dict[str, Any] = Field(default_factory=dict)


class OperationPlan(BaseModel):
    """Operations applied in order, each to the previous step's result."""

    steps: list[OperationStep] = Field(default_factory=list)
