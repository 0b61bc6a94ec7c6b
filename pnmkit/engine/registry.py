"""Operation registry — every image operation is a standalone function registered via decorator.

Usage:
    @operation(name="flip", kind=OperationKind.TRANSFORM, description="Mirror columns")
    def flip(image: NetpbmImage) -> NetpbmImage:
        image.data = image.data[:, ::-1].copy()
        return image

Operations take the image first and keyword parameters after, and return
the resulting image (the same object for in-place operations, a new one
for conversions).
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable

from pnmkit.errors import OperationError
from pnmkit.models.header import PixelModel

if TYPE_CHECKING:
    from pnmkit.models.image import NetpbmImage

logger = logging.getLogger(__name__)

ALL_MODELS = frozenset(PixelModel)


class OperationKind(enum.Enum):
    TRANSFORM = "transform"
    CONVERSION = "conversion"
    DRAWING = "drawing"


@dataclass
class OperationSpec:
    name: str
    kind: OperationKind
    fn: Callable[..., "NetpbmImage"]
    models: frozenset[PixelModel] = field(default_factory=lambda: ALL_MODELS)
    # Receives the pipeline's RasterConfig as ``config=``
    configurable: bool = False
    description: str = ""

    def check_model(self, image: "NetpbmImage") -> None:
        if image.pixel_model not in self.models:
            raise OperationError(
                f"Operation {self.name!r} does not apply to {image.pixel_model.value} images"
            )


class OperationRegistry:
    """Name → OperationSpec lookup."""

    def __init__(self) -> None:
        self._operations: dict[str, OperationSpec] = {}

    def register(self, spec: OperationSpec) -> None:
        if spec.name in self._operations:
            raise ValueError(f"Duplicate operation name: {spec.name}")
        self._operations[spec.name] = spec
        logger.debug("Registered operation %s (%s)", spec.name, spec.kind.value)

    def get(self, name: str) -> OperationSpec:
        try:
            return self._operations[name]
        except KeyError:
            raise OperationError(f"Unknown operation {name!r}") from None

    def by_kind(self, kind: OperationKind) -> list[OperationSpec]:
        specs = [s for s in self._operations.values() if s.kind == kind]
        return sorted(specs, key=lambda s: s.name)

    def all(self) -> list[OperationSpec]:
        return sorted(self._operations.values(), key=lambda s: (s.kind.value, s.name))

    def __contains__(self, name: object) -> bool:
        return name in self._operations

    @property
    def count(self) -> int:
        return len(self._operations)


# Module-level singleton
_registry = OperationRegistry()


def get_registry() -> OperationRegistry:
    return _registry


def operation(
    *,
    name: str,
    kind: OperationKind,
    models: set[PixelModel] | frozenset[PixelModel] | None = None,
    configurable: bool = False,
    description: str = "",
):
    """Decorator to register an operation function."""

    def decorator(fn: Callable[..., Any]):
        spec = OperationSpec(
            name=name,
            kind=kind,
            fn=fn,
            models=frozenset(models) if models else ALL_MODELS,
            configurable=configurable,
            description=description,
        )
        _registry.register(spec)
        return fn

    return decorator
