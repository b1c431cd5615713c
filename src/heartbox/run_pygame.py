"""pygame front-end for the heart demo.

Draws the same cell grid the terminal version uses into a window, for
systems without a usable curses.  Run with: `python -m heartbox.run_pygame`
"""

from __future__ import annotations

import logging
from typing import List, Optional

import pygame

from .controls import Key, key_for_char
from .game import FPS, Game
from .screen import Glyph, GridScreen, Style


LOGGER = logging.getLogger(__name__)

# Size of a single cell in pixels; roughly the shape of a terminal cell
CELL_WIDTH = 10
CELL_HEIGHT = 20
# Grid dimensions of the emulated terminal
GRID_COLS = 80
GRID_ROWS = 24

BACKGROUND = (0, 0, 0)
FOREGROUND = (200, 200, 200)
HEART_COLOR = (255, 0, 0)

ARROW_KEYS = {
    pygame.K_UP: Key.UP,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
}


def translate_event(event: pygame.event.Event) -> Optional[Key]:
    """Return the :class:`Key` for a pygame event, or ``None``."""

    if event.type == pygame.QUIT:
        return Key.QUIT
    if event.type != pygame.KEYDOWN:
        return None
    if event.key in ARROW_KEYS:
        return ARROW_KEYS[event.key]
    return key_for_char(getattr(event, "unicode", ""))


def poll_keys() -> List[Key]:
    """Drain the pygame event queue and return the bound keys."""

    keys: List[Key] = []
    for event in pygame.event.get():
        key = translate_event(event)
        if key is not None:
            keys.append(key)
    return keys


class PygameScreen(GridScreen):
    """:class:`GridScreen` that paints itself onto a surface on every flush."""

    def __init__(self, surface: pygame.Surface, rows: int, cols: int) -> None:
        super().__init__(rows, cols)
        self.surface = surface
        self.font = pygame.font.SysFont("monospace", CELL_HEIGHT - 4)

    def _draw_cell(self, y: int, x: int) -> None:
        char, style = self.get_cell(y, x)
        rect = pygame.Rect(x * CELL_WIDTH, y * CELL_HEIGHT, CELL_WIDTH, CELL_HEIGHT)
        if style is Style.BORDER:
            pygame.draw.rect(self.surface, FOREGROUND, rect)
        elif char == Glyph.DIAMOND.value:
            color = HEART_COLOR if style is Style.HEART else FOREGROUND
            cx, cy = rect.center
            half_w, half_h = CELL_WIDTH // 2 - 1, CELL_WIDTH // 2
            points = [(cx, cy - half_h), (cx + half_w, cy), (cx, cy + half_h), (cx - half_w, cy)]
            pygame.draw.polygon(self.surface, color, points)
        elif char != " ":
            text = self.font.render(char, True, FOREGROUND)
            self.surface.blit(text, text.get_rect(center=rect.center))

    def flush(self) -> None:
        super().flush()
        self.surface.fill(BACKGROUND)
        for y in range(self.rows):
            for x in range(self.cols):
                self._draw_cell(y, x)
        pygame.display.flip()


class GameRunner:
    """Open a window and run the game in it until quit."""

    def __init__(self, rows: int = GRID_ROWS, cols: int = GRID_COLS) -> None:
        self.rows = rows
        self.cols = cols
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        pygame.init()
        try:
            surface = pygame.display.set_mode(
                (self.cols * CELL_WIDTH, self.rows * CELL_HEIGHT)
            )
            pygame.display.set_caption("heartbox")
            clock = pygame.time.Clock()
            game = Game(PygameScreen(surface, self.rows, self.cols))
            game.draw_static()
            LOGGER.info("Game started")

            self._running = True
            while self._running:
                self._running = game.step(poll_keys())
                clock.tick(FPS)
            LOGGER.info("Game stopped after %d frames", game.frames)
        finally:
            self._running = False
            pygame.quit()


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    GameRunner().run()


if __name__ == "__main__":  # pragma: no cover - manual execution only
    main()
