"""In-memory image models.

Each image owns a numpy grid indexed ``[row, column]`` (``[y, x]``):
- ``BitmapImage``    bool  (height, width)
- ``GreyscaleImage`` uint8 (height, width)
- ``ColorImage``     uint8 (height, width, 3), channels R, G, B
"""

from __future__ import annotations

import operator
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, ClassVar, NamedTuple

import numpy as np
from numpy.typing import NDArray

from pnmkit.errors import OperationError, PixelBoundsError, PixelValueError
from pnmkit.models.header import MAX_SAMPLE_VALUE, Header, MagicNumber, PixelModel


class Pixel(NamedTuple):
    """RGB triple of a color image."""

    r: int
    g: int
    b: int


@dataclass(eq=False)
class NetpbmImage:
    """Base for the three pixel models. Subclasses set the class variables."""

    data: NDArray[Any]
    magic: MagicNumber
    max_value: int | None = None

    pixel_model: ClassVar[PixelModel]
    dtype: ClassVar[type] = np.uint8

    def __post_init__(self) -> None:
        self.magic = MagicNumber(self.magic)
        if self.magic.pixel_model is not self.pixel_model:
            raise OperationError(
                f"{self.magic.value} is not a {self.pixel_model.value} variant"
            )
        raw = np.asarray(self.data)
        if self.dtype is not np.bool_ and raw.size and (raw.min() < 0 or raw.max() > MAX_SAMPLE_VALUE):
            raise PixelValueError(f"Samples must be 0..{MAX_SAMPLE_VALUE}")
        self.data = np.array(raw, dtype=self.dtype)
        self._check_shape()
        if 0 in self.data.shape[:2]:
            raise OperationError(
                f"{type(self).__name__} grid must not be empty, got shape {self.data.shape}"
            )
        self._check_max_value()

    # --- shape / metadata ---

    @property
    def width(self) -> int:
        return int(self.data.shape[1])

    @property
    def height(self) -> int:
        return int(self.data.shape[0])

    def size(self) -> tuple[int, int]:
        """(width, height)."""
        return self.width, self.height

    @property
    def header(self) -> Header:
        return Header(
            magic=self.magic,
            width=self.width,
            height=self.height,
            max_value=self.max_value,
        )

    def _check_shape(self) -> None:
        if self.data.ndim != 2:
            raise ValueError(f"{type(self).__name__} grid must be 2-D, got shape {self.data.shape}")

    def _check_max_value(self) -> None:
        pass

    # --- pixel access ---

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise PixelBoundsError(x, y, self.width, self.height)

    def get(self, x: int, y: int) -> Any:
        self._check_bounds(x, y)
        return self._to_value(self.data[y, x])

    def set(self, x: int, y: int, value: Any) -> None:
        self._check_bounds(x, y)
        self.data[y, x] = self.coerce(value)

    def coerce(self, value: Any) -> Any:
        """Validate a caller-supplied pixel value and convert it to grid form."""
        raise NotImplementedError

    def _to_value(self, cell: Any) -> Any:
        raise NotImplementedError

    # --- variants / copies ---

    def set_magic_number(self, magic: MagicNumber | str) -> None:
        """Switch between the ASCII and binary variant of the same pixel model."""
        magic = MagicNumber(magic)
        if magic.pixel_model is not self.pixel_model:
            raise OperationError(
                f"Cannot store a {self.pixel_model.value} image as {magic.value}"
            )
        self.magic = magic

    def copy(self) -> "NetpbmImage":
        return type(self)(data=self.data.copy(), magic=self.magic, max_value=self.max_value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, NetpbmImage) or type(other) is not type(self):
            return NotImplemented
        return (
            self.magic == other.magic
            and self.max_value == other.max_value
            and self.data.shape == other.data.shape
            and bool(np.array_equal(self.data, other.data))
        )

    def __repr__(self) -> str:
        extra = f", max={self.max_value}" if self.max_value is not None else ""
        return f"{type(self).__name__}({self.magic.value}, {self.width}x{self.height}{extra})"


class BitmapImage(NetpbmImage):
    pixel_model = PixelModel.BITMAP
    dtype = np.bool_

    def _check_max_value(self) -> None:
        if self.max_value is not None:
            raise OperationError("Bitmaps have no maximum value")

    def coerce(self, value: Any) -> bool:
        return bool(value)

    def _to_value(self, cell: Any) -> bool:
        return bool(cell)

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        magic: MagicNumber | str = MagicNumber.P1,
    ) -> "BitmapImage":
        return cls(data=np.zeros((height, width), dtype=np.bool_), magic=MagicNumber(magic))


class _SampledImage(NetpbmImage):
    """Greyscale and color images carry a declared maximum sample value."""

    def _check_max_value(self) -> None:
        if self.max_value is None:
            raise OperationError(f"{type(self).__name__} requires a maximum value")
        self.max_value = int(self.max_value)
        if not 1 <= self.max_value <= MAX_SAMPLE_VALUE:
            raise OperationError(
                f"Maximum value must be 1..{MAX_SAMPLE_VALUE}, got {self.max_value}"
            )
        if self.data.size and int(self.data.max()) > self.max_value:
            raise PixelValueError(
                f"Sample {int(self.data.max())} exceeds maximum {self.max_value}"
            )

    def _coerce_sample(self, value: Any) -> int:
        try:
            sample = operator.index(value)
        except TypeError:
            raise PixelValueError(f"Sample must be an integer, got {value!r}") from None
        if not 0 <= sample <= self.max_value:
            raise PixelValueError(f"Sample {sample} outside 0..{self.max_value}")
        return sample


class GreyscaleImage(_SampledImage):
    pixel_model = PixelModel.GREYSCALE

    def coerce(self, value: Any) -> int:
        return self._coerce_sample(value)

    def _to_value(self, cell: Any) -> int:
        return int(cell)

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        max_value: int = MAX_SAMPLE_VALUE,
        magic: MagicNumber | str = MagicNumber.P2,
        fill: int = 0,
    ) -> "GreyscaleImage":
        return cls(
            data=np.full((height, width), fill, dtype=np.uint8),
            magic=MagicNumber(magic),
            max_value=max_value,
        )


class ColorImage(_SampledImage):
    pixel_model = PixelModel.COLOR

    def _check_shape(self) -> None:
        if self.data.ndim != 3 or self.data.shape[2] != 3:
            raise ValueError(f"ColorImage grid must be (height, width, 3), got shape {self.data.shape}")

    def coerce(self, value: Sequence[int]) -> Pixel:
        if isinstance(value, (str, bytes)) or not hasattr(value, "__len__"):
            raise PixelValueError(f"Color pixel must be an (R, G, B) sequence, got {value!r}")
        if len(value) != 3:
            raise PixelValueError(f"Color pixel needs 3 channels, got {len(value)}")
        return Pixel(*(self._coerce_sample(v) for v in value))

    def _to_value(self, cell: Any) -> Pixel:
        return Pixel(int(cell[0]), int(cell[1]), int(cell[2]))

    @classmethod
    def blank(
        cls,
        width: int,
        height: int,
        max_value: int = MAX_SAMPLE_VALUE,
        magic: MagicNumber | str = MagicNumber.P3,
        fill: Sequence[int] = (0, 0, 0),
    ) -> "ColorImage":
        data = np.empty((height, width, 3), dtype=np.uint8)
        data[:, :] = np.asarray(fill, dtype=np.uint8)
        return cls(data=data, magic=MagicNumber(magic), max_value=max_value)


def image_class_for(magic: MagicNumber) -> type[NetpbmImage]:
    return {
        PixelModel.BITMAP: BitmapImage,
        PixelModel.GREYSCALE: GreyscaleImage,
        PixelModel.COLOR: ColorImage,
    }[magic.pixel_model]
