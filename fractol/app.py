"""The interactive fractal viewer window and the command entry point."""

from __future__ import annotations

import sys
from typing import Optional, Sequence

from fractol.events import Key, handle_key, handle_mouse
from fractol.fractal import WINDOW_SIZE, Fractal, FractalKind, Palette, render
from fractol.image import Image
from fractol.params import Options, parse_args

__all__ = ["WINDOW_TITLE", "Viewer", "main"]

WINDOW_TITLE = "fractol"


class Viewer:
    """Holds the state of one fractal window and reacts to input.

    The view is rendered into an in-memory image; ``run`` shows that image
    in a window and feeds keyboard and mouse events back in.
    """

    def __init__(self, options: Options, size: int = WINDOW_SIZE) -> None:
        if options.kind is None:
            raise ValueError("options name no fractal to draw")
        self.kind: FractalKind = options.kind
        self.size = size
        self.fractal = Fractal.default(self.kind)
        if options.c_real is not None:
            self.fractal.c_real = options.c_real
        if options.c_imag is not None:
            self.fractal.c_imag = options.c_imag
        self.palette = Palette()
        self.image = Image(size, size)
        self.running = True
        self._dirty = False

    def redraw(self) -> None:
        """Render the current view into the image."""
        render(self.kind, self.fractal, self.palette, self.image)
        self._dirty = True

    def on_key(self, key: int) -> bool:
        """Handle a key press; return True when the image was redrawn.

        Escape stops the viewer.
        """
        if key == Key.ESC:
            self.running = False
            return False
        if handle_key(key, self.fractal, self.palette, self.kind, self.size):
            self.redraw()
            return True
        return False

    def on_mouse(self, button: int, x: int, y: int) -> bool:
        """Handle a mouse button press; return True when the image was redrawn."""
        if handle_mouse(button, x, y, self.fractal, self.size):
            self.redraw()
            return True
        return False

    def _translate_key(self, event) -> Optional[int]:
        import pygame

        keys = {
            pygame.K_ESCAPE: Key.ESC,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_UP: Key.UP,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_DOWN: Key.DOWN,
            pygame.K_KP_ENTER: Key.NUM_PAD_ENTER,
            pygame.K_KP_PLUS: Key.NUM_PAD_PLUS,
            pygame.K_KP_MINUS: Key.NUM_PAD_MINUS,
            pygame.K_KP1: Key.NUM_PAD_1,
            pygame.K_KP2: Key.NUM_PAD_2,
            pygame.K_KP3: Key.NUM_PAD_3,
            pygame.K_KP4: Key.NUM_PAD_4,
            pygame.K_KP5: Key.NUM_PAD_5,
            pygame.K_KP6: Key.NUM_PAD_6,
            pygame.K_PLUS: Key.PLUS,
            pygame.K_MINUS: Key.MINUS,
            pygame.K_b: Key.B,
            pygame.K_c: Key.C,
            pygame.K_n: Key.N,
            pygame.K_v: Key.V,
        }
        if event.key in keys:
            return int(keys[event.key])
        if getattr(event, "unicode", "") == "+":
            return int(Key.PLUS)
        if getattr(event, "unicode", "") == "-":
            return int(Key.MINUS)
        return None

    def run(self) -> None:
        """Open the window and process events until it is closed."""
        import pygame

        pygame.init()
        try:
            screen = pygame.display.set_mode((self.size, self.size))
            pygame.display.set_caption(WINDOW_TITLE)
            self.redraw()
            clock = pygame.time.Clock()
            while self.running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        self.running = False
                    elif event.type == pygame.KEYDOWN:
                        key = self._translate_key(event)
                        if key is not None:
                            self.on_key(key)
                    elif event.type == pygame.MOUSEBUTTONDOWN:
                        x, y = event.pos
                        self.on_mouse(event.button, x, y)
                    if not self.running:
                        break
                if self._dirty:
                    surface = pygame.image.frombuffer(
                        self.image.to_rgb_bytes(), (self.size, self.size), "RGB"
                    )
                    screen.blit(surface, (0, 0))
                    pygame.display.flip()
                    self._dirty = False
                clock.tick(60)
        finally:
            pygame.quit()
            print("Exiting program.")


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Parse the command line, then show the chosen fractal."""
    if argv is None:
        argv = sys.argv[1:]
    options = parse_args(list(argv))
    if options.kind is None:
        print(options.help_text, end="")
        return 1
    Viewer(options).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())