"""Lossy conversions between pixel models. Each returns a new image.

The ASCII/binary flavor of the source carries over (P3 → P2, P6 → P5 and
so on). Thresholding to a bitmap compares a level against ``max // 2``
using one polarity for both greyscale and color sources; a level exactly
at the threshold is never set.
"""

from __future__ import annotations

import logging

import numpy as np
from numpy.typing import NDArray

from pnmkit.engine.config import Polarity, RasterConfig
from pnmkit.engine.registry import OperationKind, operation
from pnmkit.errors import OperationError
from pnmkit.models.header import PixelModel
from pnmkit.models.image import BitmapImage, ColorImage, GreyscaleImage, NetpbmImage

logger = logging.getLogger(__name__)


def _require(image: NetpbmImage, model: PixelModel) -> None:
    if image.pixel_model is not model:
        raise OperationError(
            f"Expected a {model.value} image, got {image.pixel_model.value}"
        )


def _average(data: NDArray[np.uint8]) -> NDArray[np.uint8]:
    # Truncating mean of R, G, B
    return (data.astype(np.uint16).sum(axis=2) // 3).astype(np.uint8)


def threshold(
    levels: NDArray[np.uint8],
    max_value: int,
    polarity: Polarity | str = Polarity.DARK_IS_SET,
) -> NDArray[np.bool_]:
    """Map levels to bitmap pixels around ``max_value // 2``."""
    half = max_value // 2
    if Polarity(polarity) is Polarity.DARK_IS_SET:
        return levels < half
    return levels > half


def _polarity(polarity: Polarity | str | None, config: RasterConfig | None) -> Polarity:
    if polarity is not None:
        return Polarity(polarity)
    return (config or RasterConfig()).polarity


@operation(
    name="color_to_greyscale",
    kind=OperationKind.CONVERSION,
    models={PixelModel.COLOR},
    description="Average R, G, B into a greyscale level",
)
def color_to_greyscale(image: NetpbmImage) -> GreyscaleImage:
    _require(image, PixelModel.COLOR)
    result = GreyscaleImage(
        data=_average(image.data),
        magic=image.magic.with_model(PixelModel.GREYSCALE),
        max_value=image.max_value,
    )
    logger.debug("Converted %r to %r", image, result)
    return result


@operation(
    name="greyscale_to_bitmap",
    kind=OperationKind.CONVERSION,
    models={PixelModel.GREYSCALE},
    configurable=True,
    description="Threshold greyscale levels at half the maximum",
)
def greyscale_to_bitmap(
    image: NetpbmImage,
    polarity: Polarity | str | None = None,
    config: RasterConfig | None = None,
) -> BitmapImage:
    _require(image, PixelModel.GREYSCALE)
    pol = _polarity(polarity, config)
    result = BitmapImage(
        data=threshold(image.data, image.max_value, pol),
        magic=image.magic.with_model(PixelModel.BITMAP),
    )
    logger.debug("Converted %r to %r (%s)", image, result, pol.value)
    return result


@operation(
    name="color_to_bitmap",
    kind=OperationKind.CONVERSION,
    models={PixelModel.COLOR},
    configurable=True,
    description="Threshold the RGB average at half the maximum",
)
def color_to_bitmap(
    image: NetpbmImage,
    polarity: Polarity | str | None = None,
    config: RasterConfig | None = None,
) -> BitmapImage:
    _require(image, PixelModel.COLOR)
    pol = _polarity(polarity, config)
    result = BitmapImage(
        data=threshold(_average(image.data), image.max_value, pol),
        magic=image.magic.with_model(PixelModel.BITMAP),
    )
    logger.debug("Converted %r to %r (%s)", image, result, pol.value)
    return result
