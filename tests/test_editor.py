import contextlib
import io
import tempfile
import unittest
from pathlib import Path

from PIL import Image

from logopaint.canvas import BLACK, WHITE
from logopaint.codec import DecodeError
from logopaint.editor import LogoEditor

RED = (255, 0, 0, 255)


def quiet(fn, *args):
    with contextlib.redirect_stdout(io.StringIO()) as out:
        fn(*args)
    return out.getvalue()


class LogoEditorTests(unittest.TestCase):
    def test_fresh_editor_is_blank(self) -> None:
        editor = LogoEditor()
        self.assertTrue(editor.is_blank())
        self.assertEqual(editor.canvas.size, (500, 500))
        self.assertEqual(editor.brush.color, BLACK)
        self.assertEqual(editor.brush.radius, 3.0)

    def test_draw_with_palette_and_eraser(self) -> None:
        editor = LogoEditor(100, 100)
        editor.select("red")
        editor.pointer_down(20, 20)
        editor.pointer_move(60, 20)
        editor.pointer_up()
        self.assertEqual(editor.canvas.get(40, 20), RED)

        editor.select_eraser()
        editor.set_radius(5)
        editor.pointer_down(40, 20)
        editor.pointer_up()
        self.assertEqual(editor.canvas.get(40, 20), WHITE)
        self.assertEqual(editor.canvas.get(20, 20), RED)

    def test_set_color_and_radius(self) -> None:
        editor = LogoEditor(50, 50)
        editor.set_color((0, 0, 255))
        editor.set_radius(1)
        editor.pointer_down(10, 10)
        self.assertEqual(editor.canvas.get(11, 10), (0, 0, 255, 255))
        self.assertEqual(editor.canvas.get(11, 11), WHITE)
        with self.assertRaises(ValueError):
            editor.set_radius(-2)

    def test_export_then_load_restores_drawing(self) -> None:
        editor = LogoEditor()
        editor.pointer_down(100, 100)
        editor.pointer_move(400, 300)
        editor.pointer_up()
        blob = editor.export()

        other = LogoEditor()
        output = quiet(other.load, blob)
        self.assertIn(f"Loaded {len(blob)} bytes", output)
        self.assertEqual(other.canvas.get_buffer(), editor.canvas.get_buffer())

    def test_load_none_means_no_logo_yet(self) -> None:
        editor = LogoEditor(30, 30)
        editor.pointer_down(15, 15)
        output = quiet(editor.load, None)
        self.assertIn("blank canvas", output)
        self.assertTrue(editor.is_blank())

    def test_clear(self) -> None:
        editor = LogoEditor(30, 30)
        editor.pointer_down(15, 15)
        quiet(editor.clear)
        self.assertTrue(editor.is_blank())

    def test_load_ends_active_stroke(self) -> None:
        editor = LogoEditor(50, 50)
        editor.pointer_down(5, 5)
        quiet(editor.load, None)
        editor.pointer_move(45, 45)
        self.assertTrue(editor.is_blank())

    def test_bad_blob_leaves_blank_canvas(self) -> None:
        editor = LogoEditor(30, 30)
        editor.pointer_down(15, 15)
        with self.assertRaises(DecodeError):
            quiet(editor.load, b"GIF89a nope")
        self.assertTrue(editor.is_blank())

    def test_import_and_export_files(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            src = Path(tmpdir) / "logo.JPG"
            Image.new("RGB", (10, 10), (0, 0, 0)).save(src, format="JPEG")
            editor = LogoEditor(20, 20)
            quiet(editor.import_file, src)
            r, g, b, a = editor.canvas.get(10, 10)
            self.assertTrue(max(r, g, b) < 16 and a == 255)
            self.assertEqual(editor.canvas.get(4, 4), WHITE)

            out = editor.export_file(Path(tmpdir) / "saved.png")
            self.assertEqual(out.read_bytes(), editor.export())

    def test_import_rejects_other_extensions_without_touching_canvas(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            src = Path(tmpdir) / "logo.bmp"
            Image.new("RGB", (10, 10), (0, 0, 0)).save(src, format="BMP")
            editor = LogoEditor(20, 20)
            editor.pointer_down(2, 2)
            with self.assertRaises(DecodeError):
                editor.import_file(src)
            self.assertFalse(editor.is_blank())


if __name__ == "__main__":
    unittest.main()
