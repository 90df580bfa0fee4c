"""
Raw-mode terminal driver (POSIX).

Owns the tty settings, cursor visibility and the single blocking call
of the clock: ``poll`` waits on stdin and on a self-pipe fed by
SIGWINCH, so a key press or a resize wakes the loop before its timeout.
"""

import logging
import os
import select
import signal
import sys
import termios
import tty
from typing import List, NamedTuple, Union

from colorama import Cursor, Style, just_fix_windows_console
from colorama.ansi import CSI, clear_screen

from .errors import TerminalError, TerminalSizeError

log = logging.getLogger(__name__)

HIDE_CURSOR = CSI + "?25l"
SHOW_CURSOR = CSI + "?25h"

# Delivered when stdin reaches end of file
EOF_KEY = "\x04"


class KeyEvent(NamedTuple):
    key: str


class ResizeEvent(NamedTuple):
    columns: int
    rows: int


Event = Union[KeyEvent, ResizeEvent]


class Terminal:
    """Terminal attached to ``stdin``/``stdout``, usable as a context manager."""

    def __init__(self, stdin=None, stdout=None):
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.old_settings = None
        self.wake_r = None
        self.wake_w = None
        self.previous_winch = None
        self.winch_installed = False

    def get_size(self):
        """Current (columns, rows) of the terminal"""
        try:
            columns, rows = os.get_terminal_size(self.stdout.fileno())
        except (OSError, ValueError) as e:
            raise TerminalSizeError(f"Unable to get terminal size: {e}") from e
        return columns, rows

    def write(self, text: str):
        self.stdout.write(text)
        self.stdout.flush()

    def setup(self):
        """Enter raw mode, hide the cursor and start listening for resizes"""
        just_fix_windows_console()
        try:
            self.old_settings = termios.tcgetattr(self.stdin)
            tty.setraw(self.stdin.fileno())
        except (termios.error, OSError, ValueError) as e:
            self.old_settings = None
            raise TerminalError(f"Standard input is not a terminal: {e}") from e

        try:
            self.wake_r, self.wake_w = os.pipe()
            os.set_blocking(self.wake_r, False)
            os.set_blocking(self.wake_w, False)
            if hasattr(signal, "SIGWINCH"):
                self.previous_winch = signal.signal(signal.SIGWINCH, self.on_resize)
                self.winch_installed = True

            self.write(HIDE_CURSOR + clear_screen() + Cursor.POS(1, 1))
        except BaseException:
            # __exit__ never runs when __enter__ fails
            self.restore()
            raise
        log.debug("terminal in raw mode")

    def restore(self):
        """Undo ``setup``: cursor visible, raw mode off, screen cleared"""
        if self.winch_installed:
            signal.signal(signal.SIGWINCH, self.previous_winch)
            self.winch_installed = False
        for fd in (self.wake_r, self.wake_w):
            if fd is not None:
                os.close(fd)
        self.wake_r = self.wake_w = None

        if self.old_settings is not None:
            termios.tcsetattr(self.stdin, termios.TCSADRAIN, self.old_settings)
            self.old_settings = None

        self.write(Style.RESET_ALL + SHOW_CURSOR + clear_screen() + Cursor.POS(1, 1))
        log.debug("terminal restored")

    def __enter__(self):
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.restore()
        return False

    def on_resize(self, signum, frame):
        try:
            os.write(self.wake_w, b"\0")
        except BlockingIOError:
            # A wake-up is already pending
            pass

    def drain_wakeups(self):
        while True:
            try:
                if not os.read(self.wake_r, 64):
                    break
            except BlockingIOError:
                break

    def poll(self, timeout: float) -> List[Event]:
        """Wait up to ``timeout`` seconds for input; an empty list means it timed out."""
        stdin_fd = self.stdin.fileno()
        fds = [stdin_fd]
        if self.wake_r is not None:
            fds.append(self.wake_r)

        readable, _, _ = select.select(fds, [], [], max(timeout, 0))

        events: List[Event] = []
        if self.wake_r is not None and self.wake_r in readable:
            self.drain_wakeups()
            events.append(ResizeEvent(*self.get_size()))

        if stdin_fd in readable:
            data = os.read(stdin_fd, 64)
            if not data:
                events.append(KeyEvent(EOF_KEY))
            else:
                events.extend(KeyEvent(key) for key in data.decode("utf-8", errors="ignore"))

        return events
