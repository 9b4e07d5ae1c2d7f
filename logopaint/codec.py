"""PNG/JPEG codec for persisting and importing logos.

Canvases are always saved as RGBA PNG, which round-trips every channel exactly.
Decoding accepts PNG (our own output) and JPEG (user imports).
"""

import io

from PIL import Image, UnidentifiedImageError

from logopaint.canvas import Canvas

ENCODE_FORMAT = "PNG"
DECODE_FORMATS = ("PNG", "JPEG")
IMPORT_EXTENSIONS = (".png", ".jpg", ".jpeg")


class PaintError(Exception):
    """Base class for logopaint failures."""


class DecodeError(PaintError):
    """Byte input could not be decoded into an image."""


class EncodeError(PaintError):
    """The canvas could not be serialized."""


def canvas_to_image(canvas: Canvas) -> Image.Image:
    """Wrap a copy of the canvas buffer in a PIL Image."""
    return Image.frombytes("RGBA", (canvas.width, canvas.height), canvas.get_buffer())


def encode(canvas: Canvas) -> bytes:
    """Serialize the canvas to PNG bytes."""
    out = io.BytesIO()
    try:
        canvas_to_image(canvas).save(out, format=ENCODE_FORMAT)
    except (OSError, ValueError) as e:
        raise EncodeError(f"could not encode canvas as {ENCODE_FORMAT}: {e}") from e
    return out.getvalue()


def decode(data: bytes) -> Image.Image:
    """Decode PNG or JPEG bytes into a fully loaded RGBA image.

    Raises DecodeError for empty, unsupported, truncated or malformed input.
    """
    if not data:
        raise DecodeError("no image data")
    try:
        with Image.open(io.BytesIO(data), formats=DECODE_FORMATS) as img:
            # convert() forces the full decode, so truncation fails here
            return img.convert("RGBA")
    except UnidentifiedImageError as e:
        raise DecodeError(f"unsupported image format (expected {' or '.join(DECODE_FORMATS)})") from e
    except (OSError, ValueError, SyntaxError, Image.DecompressionBombError) as e:
        raise DecodeError(f"malformed image data: {e}") from e
