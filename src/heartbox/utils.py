"""Small numeric helpers shared by the game objects."""

from __future__ import annotations

import math
from typing import Tuple


def clamp(value: float, low: float, high: float) -> float:
    """Return ``value`` limited to the closed range ``[low, high]``."""

    return max(low, min(high, value))


def normalize(dx: float, dy: float) -> Tuple[float, float]:
    """Return ``(dx, dy)`` scaled to unit length.

    The zero vector is returned unchanged since it has no direction.
    """

    length = math.hypot(dx, dy)
    if length == 0.0:
        return 0.0, 0.0
    return dx / length, dy / length


def round_half_away(value: float) -> int:
    """Round to the nearest integer with halves going away from zero.

    Unlike :func:`round`, ``2.5`` gives ``3`` and ``-2.5`` gives ``-3``.
    """

    return int(math.floor(abs(value) + 0.5)) * (1 if value >= 0 else -1)
