"""
Frame differencer and terminal renderer.

Only cells that changed since the last rendered frame are written. Each
change is a cursor move followed by either a truecolor block or a space,
and the whole batch goes out in a single write and flush.
"""

import logging
from typing import List, NamedTuple, Optional

from colorama import Cursor, Style
from colorama.ansi import CSI, clear_screen

from .errors import FrameMismatchError
from .frame import Cell, Frame

log = logging.getLogger(__name__)

BLOCK = "█"


class CellUpdate(NamedTuple):
    x: int
    y: int
    cell: Cell


def diff_frames(previous: Frame, new: Frame) -> List[CellUpdate]:
    """Every position where ``new`` differs from ``previous``, row by row."""
    if previous.size != new.size:
        raise FrameMismatchError(previous.size, new.size)

    updates = []
    for y, (old_row, new_row) in enumerate(zip(previous.cells, new.cells)):
        if old_row == new_row:
            continue
        for x, (old, cell) in enumerate(zip(old_row, new_row)):
            if old != cell:
                updates.append(CellUpdate(x, y, cell))
    return updates


def color_code(color) -> str:
    r, g, b = color
    return f"{CSI}38;2;{r};{g};{b}m"


def encode_updates(updates: List[CellUpdate]) -> str:
    """Cursor moves and glyphs for a batch, with one reset at the end."""
    parts = []
    current = None
    for x, y, cell in updates:
        # Cursor.POS is 1-based
        parts.append(Cursor.POS(x + 1, y + 1))
        if cell is None:
            parts.append(" ")
            continue
        if cell != current:
            parts.append(color_code(cell))
            current = cell
        parts.append(BLOCK)
    if current is not None:
        parts.append(Style.RESET_ALL)
    return "".join(parts)


class FrameRenderer:
    """Writes frames to ``stream``, diffing each one against the last."""

    def __init__(self, stream):
        self.stream = stream
        self.previous: Optional[Frame] = None

    def invalidate(self):
        """Forget the last frame so the next render repaints the whole screen."""
        self.previous = None

    def render(self, frame: Frame) -> int:
        """Draw ``frame`` and return the number of cells written."""
        if self.previous is None:
            updates = diff_frames(Frame(frame.width, frame.height), frame)
            output = clear_screen() + Cursor.POS(1, 1) + encode_updates(updates)
            log.debug("full repaint of %s: %d cells", frame, len(updates))
        else:
            updates = diff_frames(self.previous, frame)
            output = encode_updates(updates)
            log.debug("diff repaint of %s: %d cells", frame, len(updates))

        if output:
            self.stream.write(output)
        self.stream.flush()
        self.previous = frame
        return len(updates)
