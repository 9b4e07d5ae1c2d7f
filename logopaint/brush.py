"""Round brush stamping and stroke interpolation.

A stamp is a solid disc: every integer offset (dx, dy) with dx*dx + dy*dy <= r*r
around the center pixel. The real radius decides membership; the loop bounds are
just floor(r), which is the largest offset that can pass the test.

A stroke joins two pointer positions with one stamp per pixel of travel, so a fast
drag never leaves gaps between dabs.
"""

import math

from logopaint.canvas import BLACK, WHITE, Canvas, Color, to_rgba

DEFAULT_RADIUS = 3.0
RADIUS_MIN = 1
RADIUS_MAX = 20

ERASER = "eraser"

# Palette offered by the editor toolbar. The eraser paints the background.
PALETTE: dict[str, Color | None] = {
    "black": BLACK,
    "red": (255, 0, 0, 255),
    "green": (0, 200, 0, 255),
    "blue": (0, 0, 255, 255),
    "yellow": (255, 255, 0, 255),
    ERASER: None,
}


def _check_radius(radius: float) -> float:
    radius = float(radius)
    if not radius > 0 or math.isinf(radius):
        raise ValueError(f"brush radius must be a positive number, got {radius!r}")
    return radius


def disc_offsets(radius: float) -> list[tuple[int, int]]:
    """Integer offsets covered by a disc of the given radius, row by row."""
    radius = _check_radius(radius)
    r = int(radius)
    r2 = radius * radius
    return [(dx, dy)
            for dy in range(-r, r + 1)
            for dx in range(-r, r + 1)
            if dx * dx + dy * dy <= r2]


def stamp_at(canvas: Canvas, cx: float, cy: float, color: Color, radius: float) -> None:
    """Paint a filled disc centered on the pixel containing (cx, cy).

    Pixels falling off the canvas are clipped by Canvas.set, so a stamp near (or
    past) an edge paints only its visible part.
    """
    ix = math.floor(cx)
    iy = math.floor(cy)
    for dx, dy in disc_offsets(radius):
        canvas.set(ix + dx, iy + dy, color)


def stroke_points(x0: float, y0: float, x1: float, y1: float):
    """Yield stamp centers from (x0, y0) to (x1, y1), both ends included.

    Uses ceil(distance) equal steps with t = i / steps, so consecutive centers
    are at most 1px apart and the endpoint is always reached.
    """
    dist = math.hypot(x1 - x0, y1 - y0)
    if dist == 0:
        yield (x0, y0)
        return
    steps = math.ceil(dist)
    for i in range(steps + 1):
        t = i / steps
        yield (x0 + t * (x1 - x0), y0 + t * (y1 - y0))


def clip_segment(x0: float, y0: float, x1: float, y1: float,
                 left: float, top: float, right: float, bottom: float):
    """Liang-Barsky clip of a segment to a rectangle.

    Returns the clipped (x0, y0, x1, y1), or None if the segment misses it.
    """
    dx = x1 - x0
    dy = y1 - y0
    t0, t1 = 0.0, 1.0
    for p, q in ((-dx, x0 - left), (dx, right - x0), (-dy, y0 - top), (dy, bottom - y0)):
        if p == 0:
            if q < 0:
                return None
            continue
        t = q / p
        if p < 0:
            if t > t1:
                return None
            t0 = max(t0, t)
        else:
            if t < t0:
                return None
            t1 = min(t1, t)
    return (x0 + t0 * dx, y0 + t0 * dy, x0 + t1 * dx, y0 + t1 * dy)


def stroke_to(canvas: Canvas, x0: float, y0: float, x1: float, y1: float,
              color: Color, radius: float) -> None:
    """Stamp along the segment from (x0, y0) to (x1, y1).

    Only the part of the segment within radius of the canvas can paint, so the
    rest is clipped away before sampling.
    """
    offsets = disc_offsets(radius)
    margin = int(radius) + 1
    clipped = clip_segment(x0, y0, x1, y1, -margin, -margin,
                           canvas.width + margin, canvas.height + margin)
    if clipped is None:
        return
    for x, y in stroke_points(*clipped):
        ix = math.floor(x)
        iy = math.floor(y)
        for dx, dy in offsets:
            canvas.set(ix + dx, iy + dy, color)


class BrushState:
    """Current draw color and radius. Changed only through the setters."""

    def __init__(self, color: Color = BLACK, radius: float = DEFAULT_RADIUS):
        self.color = to_rgba(color)
        self.radius = _check_radius(radius)

    def set_color(self, color) -> None:
        self.color = to_rgba(color)

    def set_radius(self, radius: float) -> None:
        self.radius = _check_radius(radius)

    def select_eraser(self, background: Color = WHITE) -> None:
        """The eraser is just the background color."""
        self.color = to_rgba(background)

    def select(self, name: str, background: Color = WHITE) -> None:
        """Select a palette entry by name."""
        if name not in PALETTE:
            raise ValueError(f"unknown palette color {name!r}; choose from {', '.join(PALETTE)}")
        color = PALETTE[name]
        if color is None:
            self.select_eraser(background)
        else:
            self.set_color(color)

    def __repr__(self):
        return f"BrushState(color={self.color}, radius={self.radius:g})"


class BrushEngine:
    """Turns pointer events into stamps and strokes on a canvas.

    idle --pointer_down--> drawing --pointer_up--> idle
    pointer_move only paints while drawing.
    """

    IDLE = "idle"
    DRAWING = "drawing"

    def __init__(self, canvas: Canvas, brush: BrushState | None = None):
        self.canvas = canvas
        self.brush = brush or BrushState()
        self.state = self.IDLE
        self.last_x = 0.0
        self.last_y = 0.0

    @property
    def drawing(self) -> bool:
        return self.state == self.DRAWING

    def pointer_down(self, x: float, y: float) -> None:
        self.last_x = x
        self.last_y = y
        stamp_at(self.canvas, x, y, self.brush.color, self.brush.radius)
        self.state = self.DRAWING

    def pointer_move(self, x: float, y: float) -> None:
        if self.state != self.DRAWING:
            return
        stroke_to(self.canvas, self.last_x, self.last_y, x, y,
                  self.brush.color, self.brush.radius)
        self.last_x = x
        self.last_y = y

    def pointer_up(self) -> None:
        self.state = self.IDLE
