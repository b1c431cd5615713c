"""Frame loop tying the heart, the box and a screen together."""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable

from .battle_box import BattleBox
from .controls import DIRECTIONS, Key
from .heart import Heart
from .screen import Screen
from .utils import clamp


LOGGER = logging.getLogger(__name__)

# Size of the box the heart moves in, in cells
BOX_WIDTH = 40
BOX_HEIGHT = 16
# Frames per second to run the loop at
FPS = 60
FRAME_INTERVAL = 1.0 / FPS

ASPECT_RATIO_STEP = 0.2
ASPECT_RATIO_MIN = 1.0
ASPECT_RATIO_MAX = 5.0
SPEED_STEP = 0.05
SPEED_MIN = 0.05
SPEED_MAX = 1.0

INSTRUCTIONS = (
    "Arrow keys to set direction, Space to stop/start",
    "Q to quit",
)


class Game:
    """Owns the heart and its box and advances them one frame at a time.

    The heart starts at the centre of a ``rows`` x ``cols`` screen, with the
    box centred around it.
    """

    def __init__(
        self,
        screen: Screen,
        *,
        box_width: int = BOX_WIDTH,
        box_height: int = BOX_HEIGHT,
    ) -> None:
        self.screen = screen
        rows, cols = screen.rows, screen.cols
        self.box = BattleBox(
            cols // 2 - box_width // 2,
            rows // 2 - box_height // 2,
            box_width,
            box_height,
        )
        self.heart = Heart(cols // 2, rows // 2)
        self.running = True
        self.frames = 0

    def draw_static(self) -> None:
        """Draw the box and the instruction lines."""

        self.box.draw(self.screen)
        rows = self.screen.rows
        for offset, line in enumerate(INSTRUCTIONS):
            row = rows - len(INSTRUCTIONS) - 1 + offset
            if row >= 0:
                self.screen.write_text(row, 2, line)

    def set_aspect_ratio(self, ratio: float) -> None:
        """Set the heart's aspect ratio, saturating at the allowed range."""

        self.heart.set_aspect_ratio(clamp(ratio, ASPECT_RATIO_MIN, ASPECT_RATIO_MAX))
        LOGGER.debug("Aspect ratio %.2f", self.heart.aspect_ratio)

    def set_speed(self, speed: float) -> None:
        """Set the heart's speed, saturating at the allowed range."""

        self.heart.set_speed(clamp(speed, SPEED_MIN, SPEED_MAX))
        LOGGER.debug("Speed %.2f", self.heart.speed)

    def handle_key(self, key: Key) -> None:
        """Apply a single key press to the game state."""

        heart = self.heart
        if key is Key.QUIT:
            self.running = False
        elif key is Key.TOGGLE:
            heart.toggle()
            LOGGER.debug("Moving: %s", heart.moving)
        elif key is Key.ASPECT_UP:
            self.set_aspect_ratio(heart.aspect_ratio + ASPECT_RATIO_STEP)
        elif key is Key.ASPECT_DOWN:
            self.set_aspect_ratio(heart.aspect_ratio - ASPECT_RATIO_STEP)
        elif key is Key.SPEED_DOWN:
            self.set_speed(heart.speed - SPEED_STEP)
        elif key is Key.SPEED_UP:
            self.set_speed(heart.speed + SPEED_STEP)
        elif key in DIRECTIONS:
            heart.set_direction(*DIRECTIONS[key])
            LOGGER.debug("Direction %s", key.value)

    def constrain_heart(self) -> None:
        """Pin the heart inside the box interior, one axis at a time.

        Only the position changes; a heart pushing against a wall keeps its
        direction and keeps trying to move every frame.
        """

        min_x, min_y, max_x, max_y = self.box.interior()
        self.heart.set_position(
            float(clamp(self.heart.x, min_x, max_x)),
            float(clamp(self.heart.y, min_y, max_y)),
        )

    def step(self, keys: Iterable[Key] = ()) -> bool:
        """Run one frame.  Return ``False`` once the game has been quit."""

        for key in keys:
            self.handle_key(key)
            if not self.running:
                return False

        self.heart.update()
        self.constrain_heart()
        self.heart.draw(self.screen)
        self.screen.flush()
        self.frames += 1
        return True

    def run(
        self,
        poll: Callable[[], Iterable[Key]],
        *,
        sleep: Callable[[float], None] = time.sleep,
        frame_interval: float = FRAME_INTERVAL,
    ) -> None:
        """Draw the layout and loop until a quit key arrives.

        ``poll`` must return immediately with whatever keys are pending.
        """

        self.draw_static()
        LOGGER.info("Game started")
        while self.step(poll()):
            sleep(frame_interval)
        LOGGER.info("Game stopped after %d frames", self.frames)
