"""Pipeline orchestrator — applies an OperationPlan step by step."""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from pnmkit.engine.config import RasterConfig
from pnmkit.engine.registry import OperationRegistry, get_registry
from pnmkit.models.image import NetpbmImage
from pnmkit.models.steps import OperationPlan, OperationStep

logger = logging.getLogger(__name__)


@dataclass
class PipelineResult:
    image: NetpbmImage
    completed: list[str] = field(default_factory=list)
    timings_ms: list[float] = field(default_factory=list)


class Pipeline:
    """Runs registered operations against an image in plan order."""

    def __init__(
        self,
        registry: OperationRegistry | None = None,
        config: RasterConfig | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.config = config or RasterConfig()

    def apply(self, image: NetpbmImage, step: OperationStep) -> NetpbmImage:
        """Apply a single step and return the resulting image."""
        spec = self.registry.get(step.op)
        spec.check_model(image)
        params: dict[str, Any] = dict(step.params)
        if spec.configurable:
            params.setdefault("config", self.config)
        return spec.fn(image, **params)

    def run(
        self,
        image: NetpbmImage,
        plan: OperationPlan | Iterable[OperationStep | Mapping[str, Any]],
    ) -> PipelineResult:
        """Run every step. A failing step is logged and its exception re-raised."""
        if not isinstance(plan, OperationPlan):
            plan = OperationPlan(steps=list(plan))

        start = time.perf_counter()
        logger.info("Pipeline: %d operations queued on %r", len(plan.steps), image)

        result = PipelineResult(image=image)
        for i, step in enumerate(plan.steps):
            t0 = time.perf_counter()
            try:
                result.image = self.apply(result.image, step)
            except Exception as e:
                logger.warning("  step %d (%s) FAILED: %s", i, step.op, e)
                raise
            elapsed = (time.perf_counter() - t0) * 1000
            result.completed.append(step.op)
            result.timings_ms.append(elapsed)
            logger.debug("  %s completed in %.1fms", step.op, elapsed)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline complete: %d operations in %.0fms -> %r",
            len(result.completed),
            total,
            result.image,
        )
        return result
