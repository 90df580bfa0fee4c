"""Errors raised by the clock engine and its command line"""

from typing import Sequence


class ClockError(Exception):
    """Base class for every error the clock reports."""


class ConfigurationError(ClockError):
    """Invalid clock options. Reported before the render loop starts."""


class UnknownThemeError(ConfigurationError):
    def __init__(self, name: str, available: Sequence[str]):
        self.name = name
        self.available = tuple(available)
        super().__init__(f"No theme has the name of '{name}'.")


class TerminalError(ClockError):
    """The terminal cannot be driven (not a TTY, raw mode unavailable)."""


class TerminalSizeError(TerminalError):
    """The terminal size could not be determined (no TTY or unsupported)."""


class FrameMismatchError(ClockError):
    """Two frames of different dimensions were handed to the differencer."""

    def __init__(self, previous_size, new_size):
        self.previous_size = previous_size
        self.new_size = new_size
        super().__init__(
            f"Cannot diff a {previous_size[0]}x{previous_size[1]} frame "
            f"against a {new_size[0]}x{new_size[1]} frame"
        )
