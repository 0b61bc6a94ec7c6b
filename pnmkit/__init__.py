"""pnmkit — in-memory Netpbm (PBM/PGM/PPM) codec and raster engine."""

from pnmkit.codec import decode, decode_bytes, encode, encode_bytes, read_file, write_file
from pnmkit.models.header import Header, MagicNumber, PixelModel
from pnmkit.models.image import BitmapImage, ColorImage, GreyscaleImage, NetpbmImage, Pixel

__all__ = [
    "decode",
    "decode_bytes",
    "encode",
    "encode_bytes",
    "read_file",
    "write_file",
    "Header",
    "MagicNumber",
    "PixelModel",
    "BitmapImage",
    "ColorImage",
    "GreyscaleImage",
    "NetpbmImage",
    "Pixel",
]
