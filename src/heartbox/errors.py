"""Exceptions raised by heartbox."""


class HeartboxError(Exception):
    """Base class for errors raised by this package."""


class TerminalError(HeartboxError):
    """The terminal could not be put into the mode the game needs."""
