"""A heart steered around a bordered box in the terminal."""

import logging

from .battle_box import BattleBox
from .controls import Key, key_for_char
from .errors import HeartboxError, TerminalError
from .game import Game
from .heart import Heart
from .screen import Glyph, GridScreen, Screen, Style
from .utils import clamp, normalize

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "BattleBox",
    "Game",
    "Glyph",
    "GridScreen",
    "Heart",
    "HeartboxError",
    "Key",
    "Screen",
    "Style",
    "TerminalError",
    "clamp",
    "key_for_char",
    "normalize",
]
