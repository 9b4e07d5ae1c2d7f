"""500x500 RGBA pixel buffer that backs the logo editor."""

# Type alias for RGBA tuples
Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
BLACK: Color = (0, 0, 0, 255)

CANVAS_WIDTH = 500
CANVAS_HEIGHT = 500


def to_rgba(color) -> Color:
    """Normalize an RGB or RGBA sequence of 0-255 ints to an RGBA tuple."""
    if len(color) == 3:
        color = (*color, 255)
    if len(color) != 4:
        raise ValueError(f"expected an RGB or RGBA color, got {color!r}")
    if not all(isinstance(c, int) and 0 <= c <= 255 for c in color):
        raise ValueError(f"color channels must be ints in 0-255, got {color!r}")
    return tuple(color)


class Canvas:
    """Fixed-size RGBA pixel buffer.

    Pixels are stored as a flat bytearray in RGBA order: [R0,G0,B0,A0, R1,G1,B1,A1, ...]
    Row-major: pixel (x, y) is at index (y * width + x) * 4.

    Every mutation marks the canvas dirty. The host polls consume_dirty() to
    know when to repaint; the canvas itself knows nothing about rendering.
    """

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT,
                 background: Color = WHITE):
        if width <= 0 or height <= 0:
            raise ValueError(f"canvas size must be positive, got {width}x{height}")
        self.width = width
        self.height = height
        self.background = to_rgba(background)
        self.buffer = bytearray(width * height * 4)
        self.dirty = False
        self.clear()

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    def clear(self, color: Color | None = None) -> None:
        """Fill entire canvas with a color (default: the background)."""
        if color is None:
            color = self.background
        self.buffer[:] = bytes(to_rgba(color)) * (self.width * self.height)
        self.dirty = True

    def set(self, x: int, y: int, color: Color) -> None:
        """Set a single pixel. Out-of-bounds writes are silently ignored.

        color must be an RGBA 4-tuple wherever (x, y) lands.
        """
        r, g, b, a = color
        if 0 <= x < self.width and 0 <= y < self.height:
            idx = (y * self.width + x) * 4
            self.buffer[idx] = r
            self.buffer[idx + 1] = g
            self.buffer[idx + 2] = b
            self.buffer[idx + 3] = a
            self.dirty = True

    def get(self, x: int, y: int) -> Color:
        """Get a pixel's color. Returns the background for out-of-bounds."""
        if 0 <= x < self.width and 0 <= y < self.height:
            idx = (y * self.width + x) * 4
            return tuple(self.buffer[idx:idx + 4])
        return self.background

    def mark_dirty(self) -> None:
        """Request a redraw after writing to the buffer directly."""
        self.dirty = True

    def consume_dirty(self) -> bool:
        """Return whether a redraw is due and reset the flag."""
        dirty = self.dirty
        self.dirty = False
        return dirty

    def is_uniform(self, color: Color | None = None) -> bool:
        """True if every pixel equals color (default: the background)."""
        if color is None:
            color = self.background
        return self.buffer == bytes(to_rgba(color)) * (self.width * self.height)

    def get_buffer(self) -> bytes:
        """Get the entire pixel buffer as bytes."""
        return bytes(self.buffer)
