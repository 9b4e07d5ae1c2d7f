"""Logo editing session: one canvas, one brush, and the load/save contract."""

from pathlib import Path

from logopaint.brush import BrushEngine, BrushState
from logopaint.canvas import CANVAS_HEIGHT, CANVAS_WIDTH, Canvas, Color
from logopaint.codec import IMPORT_EXTENSIONS, DecodeError, encode
from logopaint.compositor import load_composite


class LogoEditor:
    """Everything a host UI needs to edit a brand logo.

    The host forwards pointer events and tool changes, hands in whatever blob the
    database holds for the brand (possibly None), and stores the bytes returned
    by export(). canvas.consume_dirty() tells it when to repaint.
    """

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT):
        self.canvas = Canvas(width, height)
        self.brush = BrushState()
        self.engine = BrushEngine(self.canvas, self.brush)

    # --- Pointer events ---

    def pointer_down(self, x: float, y: float) -> None:
        self.engine.pointer_down(x, y)

    def pointer_move(self, x: float, y: float) -> None:
        self.engine.pointer_move(x, y)

    def pointer_up(self) -> None:
        self.engine.pointer_up()

    # --- Tools ---

    def set_color(self, color: Color) -> None:
        self.brush.set_color(color)

    def set_radius(self, radius: float) -> None:
        self.brush.set_radius(radius)

    def select_eraser(self) -> None:
        self.brush.select_eraser(self.canvas.background)

    def select(self, name: str) -> None:
        """Pick a palette entry ("black", "red", ..., "eraser")."""
        self.brush.select(name, self.canvas.background)

    # --- Load / save ---

    def load(self, data: bytes | None) -> None:
        """Replace the drawing with data, centered on white.

        None or empty bytes mean the brand has no logo yet: the result is a clean
        sheet. Raises DecodeError for unreadable data, leaving the canvas blank.
        """
        self.engine.pointer_up()
        if data:
            print(f"[editor] Loaded {len(data)} bytes")
        else:
            print("[editor] Empty image, starting from a blank canvas")
        load_composite(self.canvas, data)

    def clear(self) -> None:
        self.load(None)

    def export(self) -> bytes:
        """Encode the canvas as PNG bytes, ready to store as a blob."""
        return encode(self.canvas)

    def import_file(self, path) -> None:
        """Load a PNG or JPEG file from disk."""
        path = Path(path)
        if path.suffix.lower() not in IMPORT_EXTENSIONS:
            raise DecodeError(
                f"{path.name}: unsupported file type (expected {', '.join(IMPORT_EXTENSIONS)})")
        self.load(path.read_bytes())

    def export_file(self, path) -> Path:
        path = Path(path)
        path.write_bytes(self.export())
        return path

    def is_blank(self) -> bool:
        return self.canvas.is_uniform(self.canvas.background)
