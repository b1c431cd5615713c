"""Cell-addressed display surfaces.

Game objects draw through the small :class:`Screen` interface so the same
code can target a real terminal (:mod:`heartbox.terminal`), a pygame window
(:mod:`heartbox.run_pygame`) or an in-memory grid in the tests.
"""

from __future__ import annotations

from enum import Enum
from typing import Protocol

import numpy as np
from numpy.typing import NDArray


class Glyph(str, Enum):
    """Symbols the game can place in a cell."""

    BLANK = " "
    DIAMOND = "◆"


class Style(int, Enum):
    """Display attributes for a cell."""

    PLAIN = 0
    HEART = 1  # red on black
    BORDER = 2  # reverse video


class Screen(Protocol):
    rows: int
    cols: int

    def put(self, y: int, x: int, glyph: Glyph, style: Style = Style.PLAIN) -> None:
        ...

    def write_text(self, y: int, x: int, text: str) -> None:
        ...

    def flush(self) -> None:
        ...


CharGrid = NDArray[np.str_]
StyleGrid = NDArray[np.uint8]


class GridScreen:
    """Screen backed by numpy arrays of characters and styles.

    Nothing is shown anywhere; the grid is read back by the pygame front-end
    and by the tests.  ``frames`` counts calls to :meth:`flush`.
    """

    def __init__(self, rows: int, cols: int) -> None:
        self.rows = rows
        self.cols = cols
        self.chars: CharGrid = np.full((rows, cols), " ", dtype="<U1")
        self.styles: StyleGrid = np.zeros((rows, cols), dtype=np.uint8)
        self.frames = 0

    def _in_bounds(self, y: int, x: int) -> bool:
        return 0 <= y < self.rows and 0 <= x < self.cols

    def put(self, y: int, x: int, glyph: Glyph, style: Style = Style.PLAIN) -> None:
        """Write ``glyph`` at row ``y``, column ``x``.

        Raises:
            IndexError: If the coordinates are outside the grid.
        """
        if not self._in_bounds(y, x):
            raise IndexError("Cell out of bounds")
        self.chars[y, x] = glyph.value
        self.styles[y, x] = np.uint8(style.value)

    def get_cell(self, y: int, x: int) -> tuple[str, Style]:
        """Return the ``(char, style)`` pair stored at ``(y, x)``.

        Raises:
            IndexError: If the coordinates are outside the grid.
        """
        if not self._in_bounds(y, x):
            raise IndexError("Cell out of bounds")
        return str(self.chars[y, x]), Style(int(self.styles[y, x]))

    def write_text(self, y: int, x: int, text: str) -> None:
        """Write plain ``text`` starting at ``(y, x)``, clipped at the right edge.

        Raises:
            IndexError: If the row or the starting column is negative or the
                row is past the bottom of the grid.
        """

        if not 0 <= y < self.rows:
            raise IndexError("Row out of bounds")
        if x < 0:
            raise IndexError("Column out of bounds")
        for offset, char in enumerate(text[: max(0, self.cols - x)]):
            self.chars[y, x + offset] = char
            self.styles[y, x + offset] = np.uint8(Style.PLAIN.value)

    def row_text(self, y: int) -> str:
        """Return row ``y`` as a string."""

        return "".join(self.chars[y])

    def find(self, glyph: Glyph) -> list[tuple[int, int]]:
        """Return every ``(y, x)`` cell currently showing ``glyph``."""

        ys, xs = np.nonzero(self.chars == glyph.value)
        return [(int(y), int(x)) for y, x in zip(ys, xs)]

    def flush(self) -> None:
        self.frames += 1
