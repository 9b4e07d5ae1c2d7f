"""Center imported logos on a freshly cleared canvas.

Images are never scaled: small ones sit in the middle of white, large ones are
cropped to whatever falls on the canvas.
"""

import numpy as np
from PIL import Image

from logopaint.canvas import WHITE, Canvas
from logopaint.codec import decode


def center_offset(canvas_size: tuple[int, int], source_size: tuple[int, int]) -> tuple[int, int]:
    """Top-left position that centers source on the canvas (may be negative)."""
    w, h = canvas_size
    sw, sh = source_size
    # Truncate toward zero, so an image one pixel too wide is cropped on the right.
    return (int((w - sw) / 2), int((h - sh) / 2))


def _flatten(img: Image.Image, background=WHITE) -> Image.Image:
    """Composite an RGBA image over an opaque background."""
    bg = Image.new("RGBA", img.size, background)
    return Image.alpha_composite(bg, img)


def composite(canvas: Canvas, img: Image.Image) -> None:
    """Draw img centered on the canvas, dropping pixels that fall outside it."""
    img = _flatten(img.convert("RGBA"))
    sw, sh = img.size
    ox, oy = center_offset(canvas.size, img.size)

    # Visible window in canvas coordinates
    x0, y0 = max(ox, 0), max(oy, 0)
    x1, y1 = min(ox + sw, canvas.width), min(oy + sh, canvas.height)
    if x0 >= x1 or y0 >= y1:
        return

    src = np.asarray(img, dtype=np.uint8)  # (sh, sw, 4)
    dst = np.frombuffer(canvas.buffer, dtype=np.uint8).reshape(canvas.height, canvas.width, 4)
    dst[y0:y1, x0:x1] = src[y0 - oy:y1 - oy, x0 - ox:x1 - ox]
    canvas.mark_dirty()


def load_composite(canvas: Canvas, data: bytes | None) -> None:
    """Reset the canvas to white, then center the decoded image on it.

    Empty or None data just leaves a blank canvas. A DecodeError propagates
    with the canvas already cleared, so nothing half-drawn is ever visible.
    """
    canvas.clear(WHITE)
    if not data:
        return
    composite(canvas, decode(data))
