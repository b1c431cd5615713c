"""Bordered rectangle the heart is confined to."""

from __future__ import annotations

from typing import Tuple

from .screen import Glyph, Screen, Style


class BattleBox:
    """Axis-aligned box with a thick reverse-video border.

    ``(x, y)`` is the top-left corner.  The border occupies rows ``y`` and
    ``y + height`` and the two column pairs ``x - 1, x`` and
    ``x + width, x + width + 1``; everything strictly inside is free for the
    heart.
    """

    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("Box dimensions must be positive")
        self._x = x
        self._y = y
        self._width = width
        self._height = height
        self.needs_redraw = True

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def interior(self) -> Tuple[int, int, int, int]:
        """Return ``(min_x, min_y, max_x, max_y)`` of the free area, inclusive."""

        return (
            self._x + 1,
            self._y + 1,
            self._x + self._width - 1,
            self._y + self._height - 1,
        )

    def set_needs_redraw(self) -> None:
        self.needs_redraw = True

    def draw(self, screen: Screen) -> None:
        """Draw the border if it has been invalidated."""

        if not self.needs_redraw:
            return

        x, y, w, h = self._x, self._y, self._width, self._height
        for col in range(x - 1, x + w + 2):
            screen.put(y, col, Glyph.BLANK, Style.BORDER)
            screen.put(y + h, col, Glyph.BLANK, Style.BORDER)
        for row in range(y, y + h + 1):
            for col in (x - 1, x, x + w, x + w + 1):
                screen.put(row, col, Glyph.BLANK, Style.BORDER)

        self.needs_redraw = False
