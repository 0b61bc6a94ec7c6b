"""Netpbm header model."""

from __future__ import annotations

import enum

from pydantic import BaseModel, Field, model_validator

# Samples are single bytes.
MAX_SAMPLE_VALUE = 255


class PixelModel(str, enum.Enum):
    BITMAP = "bitmap"
    GREYSCALE = "greyscale"
    COLOR = "color"


class MagicNumber(str, enum.Enum):
    P1 = "P1"
    P2 = "P2"
    P3 = "P3"
    P4 = "P4"
    P5 = "P5"
    P6 = "P6"

    @property
    def pixel_model(self) -> PixelModel:
        return _MODELS[self]

    @property
    def is_binary(self) -> bool:
        return self in (MagicNumber.P4, MagicNumber.P5, MagicNumber.P6)

    @property
    def has_max_value(self) -> bool:
        return self.pixel_model is not PixelModel.BITMAP

    @property
    def channels(self) -> int:
        return 3 if self.pixel_model is PixelModel.COLOR else 1

    def with_binary(self, binary: bool) -> "MagicNumber":
        """The variant of the same pixel model with the requested body encoding."""
        return variant_for(self.pixel_model, binary)

    def with_model(self, model: PixelModel) -> "MagicNumber":
        """The variant of ``model`` sharing this variant's body encoding."""
        return variant_for(model, self.is_binary)


_MODELS = {
    MagicNumber.P1: PixelModel.BITMAP,
    MagicNumber.P4: PixelModel.BITMAP,
    MagicNumber.P2: PixelModel.GREYSCALE,
    MagicNumber.P5: PixelModel.GREYSCALE,
    MagicNumber.P3: PixelModel.COLOR,
    MagicNumber.P6: PixelModel.COLOR,
}

_VARIANTS = {
    (PixelModel.BITMAP, False): MagicNumber.P1,
    (PixelModel.BITMAP, True): MagicNumber.P4,
    (PixelModel.GREYSCALE, False): MagicNumber.P2,
    (PixelModel.GREYSCALE, True): MagicNumber.P5,
    (PixelModel.COLOR, False): MagicNumber.P3,
    (PixelModel.COLOR, True): MagicNumber.P6,
}


def variant_for(model: PixelModel, binary: bool) -> MagicNumber:
    return _VARIANTS[(model, binary)]


class Header(BaseModel):
    """Decoded header fields. ``max_value`` is None for bitmaps."""

    magic: MagicNumber
    width: int = Field(..., gt=0)
    height: int = Field(..., gt=0)
    max_value: int | None = Field(default=None, ge=1, le=MAX_SAMPLE_VALUE)

    @model_validator(mode="after")
    def _max_value_matches_model(self) -> "Header":
        if self.magic.has_max_value and self.max_value is None:
            raise ValueError(f"{self.magic.value} header requires a maximum value")
        if not self.magic.has_max_value and self.max_value is not None:
            raise ValueError(f"{self.magic.value} header has no maximum value")
        return self

    @property
    def sample_count(self) -> int:
        """Number of samples (not pixels) in the body."""
        return self.width * self.height * self.magic.channels

    @property
    def row_bytes(self) -> int:
        """Bytes per row in the binary body."""
        if self.magic is MagicNumber.P4:
            return (self.width + 7) // 8
        return self.width * self.magic.channels

    @property
    def body_bytes(self) -> int:
        return self.row_bytes * self.height

    def to_bytes(self) -> bytes:
        lines = [self.magic.value, f"{self.width} {self.height}"]
        if self.max_value is not None:
            lines.append(str(self.max_value))
        return ("\n".join(lines) + "\n").encode("ascii")
