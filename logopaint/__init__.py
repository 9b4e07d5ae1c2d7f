"""Raster engine for drawing brand logos and storing them as image blobs."""

from logopaint.brush import BrushEngine, BrushState, stamp_at, stroke_to
from logopaint.canvas import Canvas
from logopaint.codec import DecodeError, EncodeError, PaintError, decode, encode
from logopaint.compositor import load_composite
from logopaint.editor import LogoEditor

__all__ = [
    "BrushEngine", "BrushState", "Canvas", "DecodeError", "EncodeError",
    "LogoEditor", "PaintError", "decode", "encode", "load_composite",
    "stamp_at", "stroke_to",
]
