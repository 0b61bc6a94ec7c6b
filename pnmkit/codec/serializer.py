"""Netpbm encoder — image → header + body bytes."""

from __future__ import annotations

import logging
import os
from typing import BinaryIO

import numpy as np

from pnmkit.errors import OperationError
from pnmkit.models.header import MagicNumber
from pnmkit.models.image import NetpbmImage

logger = logging.getLogger(__name__)


def _ascii_body(image: NetpbmImage) -> bytes:
    # One image row per line; color rows flatten to R G B R G B ...
    rows = image.data.astype(np.uint8).reshape(image.height, -1)
    lines = [" ".join(str(v) for v in row.tolist()) for row in rows]
    return ("\n".join(lines) + "\n").encode("ascii")


def _binary_body(image: NetpbmImage, magic: MagicNumber) -> bytes:
    if magic is MagicNumber.P4:
        return np.packbits(image.data, axis=1).tobytes()
    return np.ascontiguousarray(image.data, dtype=np.uint8).tobytes()


def encode_bytes(image: NetpbmImage, magic: MagicNumber | str | None = None) -> bytes:
    """Serialize ``image``.

    ``magic`` overrides the variant written; it must belong to the image's
    pixel model. By default the image's own variant is reproduced.
    """
    target = image.magic if magic is None else MagicNumber(magic)
    if target.pixel_model is not image.pixel_model:
        raise OperationError(
            f"Cannot encode a {image.pixel_model.value} image as {target.value}"
        )

    header = image.header.model_copy(update={"magic": target})
    body = _binary_body(image, target) if target.is_binary else _ascii_body(image)
    logger.info("Encoded %s %dx%d (%d body bytes)", target.value, image.width, image.height, len(body))
    return header.to_bytes() + body


def encode(image: NetpbmImage, stream: BinaryIO, magic: MagicNumber | str | None = None) -> None:
    """Write the encoded image to a binary stream. I/O errors propagate unchanged."""
    stream.write(encode_bytes(image, magic))


def write_file(
    image: NetpbmImage,
    path: str | os.PathLike[str],
    magic: MagicNumber | str | None = None,
) -> None:
    data = encode_bytes(image, magic)
    with open(path, "wb") as fh:
        fh.write(data)
