"""Terminal demo: steer a heart around a box.

Run with: `python -m heartbox`

Set ``HEARTBOX_LOG`` to a file path to record log messages; nothing is ever
logged to the terminal the game draws on.  ``HEARTBOX_LOG_LEVEL`` picks the
level (default ``INFO``; unknown names fall back to ``INFO``).
"""

from __future__ import annotations

import logging
import os
import sys
from typing import Optional

from .errors import TerminalError
from .game import Game
from .terminal import open_terminal


def configure_logging() -> Optional[logging.Handler]:
    """Send the package's log records to ``HEARTBOX_LOG`` if it is set.

    Returns the installed handler, or ``None`` when logging stays off.
    """

    path = os.environ.get("HEARTBOX_LOG")
    if not path:
        return None
    level = logging.getLevelName(os.environ.get("HEARTBOX_LOG_LEVEL", "INFO").upper())
    if not isinstance(level, int):
        level = logging.INFO

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )
    logger = logging.getLogger("heartbox")
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler


def main() -> int:
    configure_logging()
    try:
        with open_terminal() as screen:
            Game(screen).run(screen.poll_keys)
    except TerminalError as exc:
        print(f"heartbox: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())
