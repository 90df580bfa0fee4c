"""Clock options resolved from the command line"""

from dataclasses import dataclass

from .aspect import DEFAULT_RATIO
from .compositor import FaceOptions
from .errors import ConfigurationError
from .themes import Theme, find_theme


@dataclass(frozen=True)
class ClockOptions:
    theme: Theme
    tick_interval_ms: int = 1000
    show_second_hand: bool = True
    show_hour_labels: bool = True
    show_minute_labels: bool = False
    aspect_ratio: float = DEFAULT_RATIO

    def __post_init__(self):
        if self.tick_interval_ms <= 0:
            raise ConfigurationError(
                f"Tick interval must be a positive number of milliseconds, got {self.tick_interval_ms}"
            )
        if self.aspect_ratio <= 0:
            raise ConfigurationError(f"Aspect ratio must be greater than 0, got {self.aspect_ratio}")

    @property
    def tick_seconds(self) -> float:
        return self.tick_interval_ms / 1000.0

    @property
    def face(self) -> FaceOptions:
        return FaceOptions(
            show_second_hand=self.show_second_hand,
            show_hour_labels=self.show_hour_labels,
            show_minute_labels=self.show_minute_labels,
        )

    @classmethod
    def from_args(cls, args) -> "ClockOptions":
        """Build options from an argparse namespace; unknown themes raise UnknownThemeError."""
        return cls(
            theme=find_theme(args.theme),
            tick_interval_ms=args.tick,
            show_second_hand=not args.hide_second_hand,
            show_hour_labels=not args.hide_hour_labels,
            show_minute_labels=args.show_minute_labels,
            aspect_ratio=args.aspect_ratio,
        )
