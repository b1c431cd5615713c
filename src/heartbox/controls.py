"""Input alphabet shared by the terminal and pygame front-ends."""

from __future__ import annotations

from enum import Enum
from typing import Dict, Optional, Tuple


class Key(str, Enum):
    """Everything the game reacts to.  Other input is dropped."""

    QUIT = "quit"
    TOGGLE = "toggle"
    ASPECT_UP = "aspect_up"
    ASPECT_DOWN = "aspect_down"
    SPEED_UP = "speed_up"
    SPEED_DOWN = "speed_down"
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"


# Printable characters bound to a key.  Arrow keys are mapped by each
# front-end from its own key codes.
CHAR_BINDINGS: Dict[str, Key] = {
    "q": Key.QUIT,
    "Q": Key.QUIT,
    " ": Key.TOGGLE,
    "+": Key.ASPECT_UP,
    "=": Key.ASPECT_UP,
    "-": Key.ASPECT_DOWN,
    "_": Key.ASPECT_DOWN,
    "[": Key.SPEED_DOWN,
    "]": Key.SPEED_UP,
}

# Cardinal direction vectors in screen coordinates (y grows downwards).
DIRECTIONS: Dict[Key, Tuple[float, float]] = {
    Key.UP: (0.0, -1.0),
    Key.DOWN: (0.0, 1.0),
    Key.LEFT: (-1.0, 0.0),
    Key.RIGHT: (1.0, 0.0),
}


def key_for_char(char: str) -> Optional[Key]:
    """Return the :class:`Key` bound to ``char`` or ``None``."""

    return CHAR_BINDINGS.get(char)
