"""Netpbm codec: decode bytes into images and encode them back."""

from pnmkit.codec.parser import decode, decode_bytes, parse_header, read_file
from pnmkit.codec.serializer import encode, encode_bytes, write_file

__all__ = [
    "decode",
    "decode_bytes",
    "parse_header",
    "read_file",
    "encode",
    "encode_bytes",
    "write_file",
]
