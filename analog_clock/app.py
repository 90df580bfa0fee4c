"""
The clock's render loop.

One thread does everything: draw a frame, then block in ``poll`` for at
most one tick interval. Keys and resizes wake it early; a timeout wakes
it on schedule.
"""

import logging
from datetime import datetime

from .aspect import AspectRatio, stretch_frame
from .clock_time import ClockAngles
from .compositor import compose_frame
from .config import ClockOptions
from .frame import Frame
from .renderer import FrameRenderer
from .terminal import EOF_KEY, KeyEvent, ResizeEvent

log = logging.getLogger(__name__)

QUIT_KEYS = {"q", "Q", "\x03", EOF_KEY}
WIDEN_KEYS = {"+", "="}
NARROW_KEYS = {"-"}
RESET_KEYS = {"0"}


class AnalogClock:
    """Draws the clock on ``terminal`` until a quit key arrives."""

    def __init__(self, options: ClockOptions, terminal, now=datetime.now):
        self.options = options
        self.terminal = terminal
        self.now = now
        self.aspect = AspectRatio(options.aspect_ratio)
        self.renderer = FrameRenderer(terminal.stdout)
        self.size = None
        self.running = False

    def build_frame(self, columns: int, rows: int, moment: datetime) -> Frame:
        angles = ClockAngles.at(moment, self.options.tick_interval_ms)
        face = compose_frame(
            self.aspect.clock_width(columns),
            rows,
            angles,
            self.options.theme,
            self.options.face,
        )
        return stretch_frame(face, columns)

    def tick(self) -> int:
        """Draw one frame; returns how many cells were written."""
        size = self.terminal.get_size()
        if size != self.size:
            if self.size is not None:
                log.info("terminal resized %dx%d -> %dx%d", *self.size, *size)
            self.size = size
            self.renderer.invalidate()

        frame = self.build_frame(size[0], size[1], self.now())
        return self.renderer.render(frame)

    def handle_key(self, key: str):
        if key in QUIT_KEYS:
            log.info("quit requested")
            self.running = False
        elif key in WIDEN_KEYS:
            self.aspect.widen()
        elif key in NARROW_KEYS:
            self.aspect.narrow()
        elif key in RESET_KEYS:
            self.aspect.reset()

    def handle_event(self, event):
        if isinstance(event, KeyEvent):
            self.handle_key(event.key)
        elif isinstance(event, ResizeEvent):
            # Never diff across sizes: the next tick repaints from scratch
            self.renderer.invalidate()
            self.size = None

    def run(self):
        # Fails before raw mode is entered when there is no usable terminal
        self.size = self.terminal.get_size()
        log.info(
            "starting clock: theme=%s tick=%dms size=%dx%d",
            self.options.theme.name, self.options.tick_interval_ms, *self.size,
        )

        self.running = True
        with self.terminal:
            while self.running:
                self.tick()
                for event in self.terminal.poll(self.options.tick_seconds):
                    self.handle_event(event)
                    if not self.running:
                        break
