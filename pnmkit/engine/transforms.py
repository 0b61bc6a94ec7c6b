"""Geometric and sample-value transforms. All mutate the image in place."""

from __future__ import annotations

import logging

import numpy as np

from pnmkit.engine.registry import OperationKind, operation
from pnmkit.errors import OperationError
from pnmkit.models.header import MAX_SAMPLE_VALUE, MagicNumber, PixelModel
from pnmkit.models.image import NetpbmImage

logger = logging.getLogger(__name__)

_SAMPLED = {PixelModel.GREYSCALE, PixelModel.COLOR}


@operation(name="flip", kind=OperationKind.TRANSFORM, description="Mirror left-right")
def flip(image: NetpbmImage) -> NetpbmImage:
    image.data = image.data[:, ::-1].copy()
    return image


@operation(name="flop", kind=OperationKind.TRANSFORM, description="Mirror top-bottom")
def flop(image: NetpbmImage) -> NetpbmImage:
    image.data = image.data[::-1].copy()
    return image


@operation(name="rotate90cw", kind=OperationKind.TRANSFORM, description="Rotate 90 degrees clockwise")
def rotate90cw(image: NetpbmImage) -> NetpbmImage:
    """Pixel (x, y) moves to (height-1-y, x); width and height swap."""
    image.data = np.rot90(image.data, k=-1).copy()
    return image


@operation(name="invert", kind=OperationKind.TRANSFORM, description="Invert pixel values")
def invert(image: NetpbmImage) -> NetpbmImage:
    """Negate bitmaps; map greyscale and color samples to ``max - value``.

    Color inverts against the declared maximum too, not a fixed 255, so
    inverting twice always restores the image.
    """
    if image.pixel_model is PixelModel.BITMAP:
        image.data = ~image.data
    else:
        image.data = (image.max_value - image.data.astype(np.int16)).astype(np.uint8)
    return image


@operation(
    name="set_max_value",
    kind=OperationKind.TRANSFORM,
    models=_SAMPLED,
    description="Rescale samples to a new maximum value",
)
def set_max_value(image: NetpbmImage, max_value: int) -> NetpbmImage:
    """Rescale every sample proportionally: ``new = old * max_value // old_max``."""
    old_max = image.max_value
    if not old_max:
        raise OperationError("Cannot rescale an image whose maximum value is 0")
    max_value = int(max_value)
    if not 1 <= max_value <= MAX_SAMPLE_VALUE:
        raise OperationError(f"Maximum value must be 1..{MAX_SAMPLE_VALUE}, got {max_value}")

    scaled = image.data.astype(np.int32) * max_value // old_max
    image.data = scaled.astype(np.uint8)
    image.max_value = max_value
    if max_value < old_max:
        logger.debug("Rescale %d -> %d loses precision", old_max, max_value)
    return image


@operation(
    name="set_magic_number",
    kind=OperationKind.TRANSFORM,
    description="Switch between the ASCII and binary variant",
)
def set_magic_number(image: NetpbmImage, magic: MagicNumber | str) -> NetpbmImage:
    image.set_magic_number(magic)
    return image
