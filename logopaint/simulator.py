"""Pygame-based editor window. Shows the canvas and feeds mouse/keyboard input to a LogoEditor."""

import pygame

from logopaint.brush import PALETTE, RADIUS_MAX, RADIUS_MIN
from logopaint.editor import LogoEditor

# Keys 1-6 pick palette entries in toolbar order (6 is the eraser)
PALETTE_KEYS = {getattr(pygame, f"K_{i + 1}"): name for i, name in enumerate(PALETTE)}
GROW_KEYS = (pygame.K_PLUS, pygame.K_EQUALS, pygame.K_KP_PLUS)
SHRINK_KEYS = (pygame.K_MINUS, pygame.K_KP_MINUS)


class Simulator:
    """Opens a window that displays the canvas, upscaled by an integer factor."""

    def __init__(self, editor: LogoEditor, scale: int = 1, title: str = "Logo Editor",
                 on_save=None, on_load=None):
        self.editor = editor
        self.canvas = editor.canvas
        self.scale = scale
        self.width = self.canvas.width * scale
        self.height = self.canvas.height * scale
        self.on_save = on_save
        self.on_load = on_load

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        self.title = title
        self.clock = pygame.time.Clock()
        self._show_tool()
        self.canvas.mark_dirty()

    def _to_canvas(self, pos) -> tuple[float, float]:
        return (pos[0] / self.scale, pos[1] / self.scale)

    def _show_tool(self) -> None:
        brush = self.editor.brush
        r, g, b, _ = brush.color
        pygame.display.set_caption(
            f"{self.title} - #{r:02x}{g:02x}{b:02x}, {brush.radius:.0f} px")

    def _change_radius(self, delta: int) -> None:
        radius = max(RADIUS_MIN, min(RADIUS_MAX, round(self.editor.brush.radius) + delta))
        self.editor.set_radius(radius)

    def handle_event(self, event) -> bool:
        """Dispatch one pygame event. Returns False if the window should close."""
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.editor.pointer_down(*self._to_canvas(event.pos))
        elif event.type == pygame.MOUSEMOTION and event.buttons[0]:
            self.editor.pointer_move(*self._to_canvas(event.pos))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            self.editor.pointer_up()
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            if event.key in PALETTE_KEYS:
                self.editor.select(PALETTE_KEYS[event.key])
            elif event.key in GROW_KEYS:
                self._change_radius(1)
            elif event.key in SHRINK_KEYS:
                self._change_radius(-1)
            elif event.key == pygame.K_c:
                self.editor.clear()
            elif event.key == pygame.K_s and self.on_save:
                self.on_save(self.editor)
            elif event.key == pygame.K_l and self.on_load:
                self.on_load(self.editor)
            self._show_tool()
        return True

    def update(self) -> bool:
        """Process input and repaint if the canvas changed. Returns False if window was closed."""
        for event in pygame.event.get():
            if not self.handle_event(event):
                return False

        if self.canvas.consume_dirty():
            surface = pygame.image.frombuffer(self.canvas.get_buffer(), self.canvas.size, "RGBA")
            if self.scale != 1:
                surface = pygame.transform.scale(surface, (self.width, self.height))
            # Translucent pixels are shown over white, as imports are composited
            self.screen.fill(self.canvas.background[:3])
            self.screen.blit(surface, (0, 0))
            pygame.display.flip()
        return True

    def tick(self, fps: int = 60) -> None:
        """Limit framerate."""
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
