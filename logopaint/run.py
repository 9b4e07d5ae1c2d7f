"""Main run loop - ties together LogoEditor and Simulator around a logo file.

Usage: python -m logopaint.run [logo.png]

The file plays the part of the brand's image blob: it is loaded at startup
(a missing file means "no logo yet"), S saves the canvas back to it and L
reloads it. Set LOGOPAINT_FILE to change the default path.
"""

import os
import sys
from pathlib import Path

from logopaint.codec import DecodeError, EncodeError
from logopaint.editor import LogoEditor
from logopaint.simulator import Simulator

DEFAULT_FILE = "logo.png"


def load_file(editor: LogoEditor, path: Path) -> None:
    """Load path into the editor, falling back to a blank canvas."""
    data = path.read_bytes() if path.exists() else None
    try:
        editor.load(data)
    except DecodeError as e:
        print(f"[run] Could not read {path}: {e}")


def save_file(editor: LogoEditor, path: Path) -> None:
    try:
        editor.export_file(path)
    except (EncodeError, OSError) as e:
        print(f"[run] Could not save {path}: {e}")
        return
    print(f"[run] Saved {path}")


def run(path: str | os.PathLike | None = None, fps: int = 60, title: str = "Logo Editor",
        scale: int = 1, width: int = 500, height: int = 500) -> None:
    """Main entry point. Opens the editor window on a logo file.

    Args:
        path: Logo file to edit (default: $LOGOPAINT_FILE or logo.png).
        fps: Target frames per second (default 60).
        title: Window title.
        scale: Pixel scale factor for the window (default 1).
        width: Canvas width in pixels (default 500).
        height: Canvas height in pixels (default 500).
    """
    path = Path(path or os.environ.get("LOGOPAINT_FILE", DEFAULT_FILE))
    editor = LogoEditor(width, height)
    load_file(editor, path)

    sim = Simulator(editor, scale=scale, title=f"{title} - {path.name}",
                    on_save=lambda ed: save_file(ed, path),
                    on_load=lambda ed: load_file(ed, path))

    try:
        while sim.update():
            sim.tick(fps)
    except KeyboardInterrupt:
        pass
    finally:
        sim.close()


if __name__ == "__main__":
    run(sys.argv[1] if len(sys.argv) > 1 else None)
