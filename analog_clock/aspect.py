"""
Aspect-ratio correction.

Terminal cells are roughly twice as tall as they are wide, so a circle
drawn one cell per pixel comes out as a tall ellipse. The face is drawn
on a narrower logical grid (terminal width / ratio) and then stretched
back out to the terminal width with nearest-neighbour resampling. Rows
are never resampled, only columns.
"""

import logging

from PIL import Image

from .errors import ConfigurationError
from .frame import Frame

log = logging.getLogger(__name__)

DEFAULT_RATIO = 2.0
MIN_RATIO = 0.5
MAX_RATIO = 8.0
RATIO_STEP = 0.1

EMPTY_PIXEL = (0, 0, 0, 0)


def clamp_ratio(ratio: float) -> float:
    return min(MAX_RATIO, max(MIN_RATIO, round(ratio, 2)))


class AspectRatio:
    """Runtime-adjustable horizontal squeeze applied before stretching."""

    def __init__(self, ratio: float = DEFAULT_RATIO):
        if ratio <= 0:
            raise ConfigurationError(f"Aspect ratio must be greater than 0, got {ratio}")
        self.default = clamp_ratio(ratio)
        self.ratio = self.default

    def widen(self) -> float:
        """Grow the logical grid: a smaller ratio, so less horizontal stretch."""
        self.ratio = clamp_ratio(self.ratio - RATIO_STEP)
        log.info("aspect ratio -> %.2f", self.ratio)
        return self.ratio

    def narrow(self) -> float:
        """Shrink the logical grid: a larger ratio, so more horizontal stretch."""
        self.ratio = clamp_ratio(self.ratio + RATIO_STEP)
        log.info("aspect ratio -> %.2f", self.ratio)
        return self.ratio

    def reset(self) -> float:
        self.ratio = self.default
        log.info("aspect ratio reset to %.2f", self.ratio)
        return self.ratio

    def clock_width(self, terminal_width: int) -> int:
        """Logical width the face is drawn at before stretching."""
        return max(1, int(round(terminal_width / self.ratio)))


def frame_to_image(frame: Frame) -> Image.Image:
    data = bytearray()
    for row in frame.cells:
        for cell in row:
            data.extend(EMPTY_PIXEL if cell is None else (cell[0], cell[1], cell[2], 255))
    return Image.frombytes("RGBA", frame.size, bytes(data))


def image_to_frame(image: Image.Image) -> Frame:
    width, height = image.size
    data = image.convert("RGBA").tobytes()
    cells = []
    for y in range(height):
        row = []
        for x in range(width):
            i = (y * width + x) * 4
            r, g, b, a = data[i:i + 4]
            row.append((r, g, b) if a else None)
        cells.append(row)
    return Frame(width, height, cells)


def stretch_frame(frame: Frame, width: int) -> Frame:
    """Resample ``frame`` horizontally to ``width`` columns, keeping its height."""
    if width <= 0 or frame.width == 0 or frame.height == 0:
        return Frame(max(width, 0), frame.height)

    image = frame_to_image(frame)
    if width != frame.width:
        image = image.resize((width, frame.height), Image.Resampling.NEAREST)
    return image_to_frame(image)
