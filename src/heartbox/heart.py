"""The movable heart and its behaviour."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .screen import Glyph, Screen, Style
from .utils import normalize, round_half_away


DEFAULT_SPEED = 0.3
# Terminal cells are roughly twice as tall as they are wide.
DEFAULT_ASPECT_RATIO = 2.0


@dataclass
class Heart:
    """A glyph with a continuous position moving at constant velocity.

    ``direction_x``/``direction_y`` always hold either the zero vector or a
    unit vector.  Horizontal steps are multiplied by ``aspect_ratio`` so that
    motion looks equally fast along both axes on non-square cells.
    """

    x: float
    y: float
    direction_x: float = 0.0
    direction_y: float = 0.0
    speed: float = DEFAULT_SPEED
    aspect_ratio: float = DEFAULT_ASPECT_RATIO
    moving: bool = False
    glyph: Glyph = Glyph.DIAMOND
    last_drawn: Tuple[int, int] = field(init=False)

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)
        self.last_drawn = self.cell()

    def update(self) -> None:
        """Advance one frame along the current direction if moving."""

        if self.moving:
            self.x += self.direction_x * self.speed * self.aspect_ratio
            self.y += self.direction_y * self.speed

    def set_direction(self, dx: float, dy: float) -> None:
        """Point the heart along ``(dx, dy)`` and start moving.

        A zero vector is ignored; the previous direction and moving flag are
        kept.
        """

        if dx == 0 and dy == 0:
            return
        self.direction_x, self.direction_y = normalize(dx, dy)
        self.moving = True

    def set_aspect_ratio(self, ratio: float) -> None:
        self.aspect_ratio = ratio

    def set_speed(self, speed: float) -> None:
        self.speed = speed

    def stop(self) -> None:
        self.moving = False

    def start(self) -> None:
        self.moving = True

    def toggle(self) -> None:
        self.moving = not self.moving

    def set_position(self, x: float, y: float) -> None:
        self.x = x
        self.y = y

    def cell(self) -> Tuple[int, int]:
        """Return the ``(x, y)`` terminal cell nearest to the position."""

        return round_half_away(self.x), round_half_away(self.y)

    def clear_previous(self, screen: Screen) -> None:
        """Blank the cell the heart was last drawn in."""

        x, y = self.last_drawn
        screen.put(y, x, Glyph.BLANK)

    def draw(self, screen: Screen) -> None:
        """Render the heart, erasing its old cell when it has moved.

        When the cell is unchanged the glyph is written again anyway, since
        something else (such as the box border) may have drawn over it.
        """

        current = self.cell()
        if current != self.last_drawn:
            self.clear_previous(screen)
            self.last_drawn = current
        x, y = current
        screen.put(y, x, self.glyph, Style.HEART)
