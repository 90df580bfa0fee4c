"""Hand angles derived from wall-clock time"""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ClockAngles:
    """Hand angles in degrees: 0 points at 12 o'clock, growing clockwise."""

    hour: float
    minute: float
    second: float

    @classmethod
    def at(cls, moment: datetime, tick_interval_ms: int = 1000) -> "ClockAngles":
        second = float(moment.second)
        # Sub-second motion only matters when redrawing faster than once a second
        if tick_interval_ms < 1000:
            second += (moment.microsecond // 1000) / 1000.0
        minute = float(moment.minute)
        hour = float(moment.hour % 12)

        return cls(
            hour=(hour + minute / 60.0) / 12.0 * 360.0,
            minute=(minute + second / 60.0) / 60.0 * 360.0,
            second=second / 60.0 * 360.0,
        )
