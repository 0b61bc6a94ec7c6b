"""Netpbm decoder — raw bytes → Header → image.

The header grammar is identical for all six variants; only the body
differs. Decoding is atomic: either the whole body is read and validated
or an exception is raised and no image is produced.
"""

from __future__ import annotations

import logging
import os
import re
from itertools import islice
from typing import BinaryIO

import numpy as np
from numpy.typing import NDArray

from pnmkit.codec.tokenizer import HeaderTokenizer
from pnmkit.errors import HeaderError, PixelValueError, TruncatedBodyError
from pnmkit.models.header import MAX_SAMPLE_VALUE, Header, MagicNumber, PixelModel
from pnmkit.models.image import NetpbmImage, image_class_for

logger = logging.getLogger(__name__)

_MAGICS = {m.value.encode("ascii"): m for m in MagicNumber}
_TOKEN_RE = re.compile(rb"\S+")


def parse_header(buf: bytes) -> tuple[Header, int]:
    """Parse the header at the start of ``buf``.

    Returns the header and the offset of the first body byte.
    """
    tok = HeaderTokenizer(buf)

    token, offset = tok.next_token("magic number")
    magic = _MAGICS.get(token)
    if magic is None:
        raise HeaderError(f"Unrecognized magic number {token!r}", offset=offset)

    width = tok.next_int("width")
    height = tok.next_int("height")
    if width == 0 or height == 0:
        raise HeaderError(f"Image dimensions must be positive, got {width}x{height}")

    max_value = None
    if magic.has_max_value:
        max_value = tok.next_int("maximum value")
        if not 1 <= max_value <= MAX_SAMPLE_VALUE:
            raise HeaderError(
                f"Maximum value must be 1..{MAX_SAMPLE_VALUE}, got {max_value}"
            )

    header = Header(magic=magic, width=width, height=height, max_value=max_value)
    body_start = tok.end_header(header.body_bytes if magic.is_binary else None)
    return header, body_start


# ── Body readers ──


def _read_ascii(buf: bytes, start: int, header: Header) -> NDArray[np.uint8]:
    needed = header.sample_count
    matches = list(islice(_TOKEN_RE.finditer(buf, start), needed))
    if len(matches) < needed:
        raise TruncatedBodyError(
            f"{header.magic.value} body has {len(matches)} samples, expected {needed}",
            offset=len(buf),
        )

    bitmap = header.magic.pixel_model is PixelModel.BITMAP
    samples = np.empty(needed, dtype=np.uint8)
    for i, match in enumerate(matches):
        token = match.group()
        offset = match.start()
        if bitmap:
            if token not in (b"0", b"1"):
                raise PixelValueError(
                    f"Bitmap sample {i} must be 0 or 1, got {token!r}", offset=offset
                )
            samples[i] = token == b"1"
            continue
        if not token.isdigit():
            raise PixelValueError(f"Sample {i} is not a number: {token!r}", offset=offset)
        # Anything wider than three significant digits cannot fit a byte
        if len(token.lstrip(b"0")) > 3:
            raise PixelValueError(
                f"Sample {i} exceeds maximum {header.max_value}", offset=offset
            )
        value = int(token)
        if value > header.max_value:
            raise PixelValueError(
                f"Sample {i} = {value} exceeds maximum {header.max_value}", offset=offset
            )
        samples[i] = value
    return samples


def _read_binary(buf: bytes, start: int, header: Header) -> NDArray[np.uint8]:
    needed = header.body_bytes
    body = buf[start : start + needed]
    if len(body) < needed:
        raise TruncatedBodyError(
            f"{header.magic.value} body has {len(body)} bytes, expected {needed}",
            offset=len(buf),
        )

    raw = np.frombuffer(body, dtype=np.uint8)
    if header.magic is MagicNumber.P4:
        rows = raw.reshape(header.height, header.row_bytes)
        # MSB first; padding bits at the end of each row are dropped
        return np.unpackbits(rows, axis=1)[:, : header.width].reshape(-1)

    if raw.size and int(raw.max()) > header.max_value:
        bad = int(np.argmax(raw > header.max_value))
        raise PixelValueError(
            f"Sample {int(raw[bad])} exceeds maximum {header.max_value}",
            offset=start + bad,
        )
    return raw


def decode_bytes(buf: bytes) -> NetpbmImage:
    """Decode a complete Netpbm file held in memory."""
    header, body_start = parse_header(buf)

    if header.magic.is_binary:
        samples = _read_binary(buf, body_start, header)
    else:
        samples = _read_ascii(buf, body_start, header)

    shape: tuple[int, ...] = (header.height, header.width)
    if header.magic.channels == 3:
        shape = (header.height, header.width, 3)

    cls = image_class_for(header.magic)
    image = cls(data=samples.reshape(shape), magic=header.magic, max_value=header.max_value)
    logger.info(
        "Decoded %s %dx%d (%d body bytes)",
        header.magic.value,
        header.width,
        header.height,
        len(buf) - body_start,
    )
    return image


def decode(stream: BinaryIO) -> NetpbmImage:
    """Read the whole stream and decode it. I/O errors propagate unchanged."""
    return decode_bytes(stream.read())


def read_file(path: str | os.PathLike[str]) -> NetpbmImage:
    with open(path, "rb") as fh:
        return decode(fh)
