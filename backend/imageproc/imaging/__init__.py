"""Pillow backed image primitives for imageproc."""

from .buffers import has_alpha, managed, to_opaque
from .codec import decode, encode, find_encoder
from .resize import crop, resample

__all__ = [
    "crop",
    "decode",
    "encode",
    "find_encoder",
    "has_alpha",
    "managed",
    "resample",
    "to_opaque",
]
