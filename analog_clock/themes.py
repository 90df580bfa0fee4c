"""Named color themes for the clock"""

from dataclasses import dataclass, field

from PIL import ImageColor

from .errors import UnknownThemeError
from .frame import Color

DEFAULT_THEME = "nord-frost"

# Neutral color for minute marks, shared by every theme
MINUTE_LABEL_COLOR = ImageColor.getrgb("#4C566A")


@dataclass(frozen=True)
class Theme:
    name: str
    hour: str
    minute: str
    second: str
    clock_face: str
    # Resolved once from the hex strings above
    hour_rgb: Color = field(init=False, repr=False, compare=False)
    minute_rgb: Color = field(init=False, repr=False, compare=False)
    second_rgb: Color = field(init=False, repr=False, compare=False)
    clock_face_rgb: Color = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        for name in ("hour", "minute", "second", "clock_face"):
            object.__setattr__(self, f"{name}_rgb", ImageColor.getrgb(getattr(self, name)))


# Nord palettes, https://www.nordtheme.com/
THEMES = (
    Theme(
        name="nord-frost",
        hour="#5E81AC",
        minute="#81A1C1",
        second="#88C0D0",
        clock_face="#8FBCBB",
    ),
    Theme(
        name="nord-aurora",
        hour="#BF616A",
        minute="#D08770",
        second="#EBCB8B",
        clock_face="#B48EAD",
    ),
)


def theme_names():
    return [theme.name for theme in THEMES]


def find_theme(name: str) -> Theme:
    """Look a theme up by name, raising UnknownThemeError if it is missing."""
    for theme in THEMES:
        if theme.name == name:
            return theme
    raise UnknownThemeError(name, theme_names())
