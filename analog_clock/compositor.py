"""
Clock-face compositor.

Builds one Frame per tick by painting, back to front:

    circle -> hour marks -> minute marks -> minute hand -> hour hand -> second hand

Every step paints over whatever an earlier step left in a cell, so the
order above is what keeps the hands on top of the face.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from .clock_time import ClockAngles
from .frame import Color, Frame
from .geometry import Point, rasterize_circle, rasterize_line, to_grid
from .themes import MINUTE_LABEL_COLOR, Theme

# Space left between the face and the terminal edge
RADIUS_DIVISOR = 1.1

# Bold strokes repeat the line from every cell of a 3x3 block around the
# anchor. This is only a visual approximation of a thicker line, widths
# are not uniform across angles.
BOLD_STENCIL = [(dx, dy) for dy in (-1, 0, 1) for dx in (-1, 0, 1)]


class Stroke(Enum):
    THIN = "thin"
    BOLD = "bold"


class Anchor(Enum):
    # Spoke from the hub out to radius * length
    FROM_CENTER = "from-center"
    # Mark from radius * (1 - length) out to the rim
    FROM_CIRCUMFERENCE = "from-circumference"


@dataclass(frozen=True)
class Hand:
    """A line segment on the face.

    ``degree`` is 0 at 12 o'clock and grows clockwise (90 = east, 180 =
    south, 270 = west). ``length`` is a fraction of the circle radius.
    """

    degree: float
    stroke: Stroke
    length: float
    anchor: Anchor
    color: Color


@dataclass(frozen=True)
class FaceOptions:
    show_second_hand: bool = True
    show_hour_labels: bool = True
    show_minute_labels: bool = False


class ClockFace:
    """Mutable drawing surface for a single frame."""

    def __init__(self, width: int, height: int):
        self.frame = Frame(width, height)
        self.midpoint_x = width / 2.0
        self.midpoint_y = height / 2.0
        self.circle_radius = min(self.midpoint_x, self.midpoint_y) / RADIUS_DIVISOR
        # Cartesian hub chosen so that to_grid puts it on row height // 2
        self.center = (int(self.midpoint_x), height - height // 2)
        # Ring and hands share one integer radius so marks end on the ring
        self.radius = int(self.circle_radius)

    def draw_circle(self, color: Color):
        points = rasterize_circle(self.center, self.radius)
        self.frame.paint_points(to_grid(points, self.frame.height), color)

    def point_at(self, degree: float, distance: float) -> Point:
        """Cartesian point ``distance`` cells from the center along ``degree``."""
        # Clock degrees run clockwise from north, math radians counter-clockwise from east
        radian = math.pi / 2.0 - math.radians(degree)
        cx, cy = self.center
        return (
            cx + int(round(distance * math.cos(radian))),
            cy + int(round(distance * math.sin(radian))),
        )

    def hand_endpoints(self, hand: Hand) -> Tuple[Point, Point]:
        if hand.anchor is Anchor.FROM_CENTER:
            start = self.center
            end = self.point_at(hand.degree, self.radius * hand.length)
        else:
            start = self.point_at(hand.degree, self.radius * (1.0 - hand.length))
            end = self.point_at(hand.degree, self.radius)
        return start, end

    def draw_hand(self, hand: Hand):
        (sx, sy), (ex, ey) = self.hand_endpoints(hand)
        offsets = BOLD_STENCIL if hand.stroke is Stroke.BOLD else [(0, 0)]
        for dx, dy in offsets:
            line = rasterize_line((sx + dx, sy + dy), (ex + dx, ey + dy))
            self.frame.paint_points(to_grid(line, self.frame.height), hand.color)


def hour_marks(theme: Theme) -> List[Hand]:
    return [
        Hand(n / 12.0 * 360.0, Stroke.THIN, 0.15, Anchor.FROM_CIRCUMFERENCE, theme.clock_face_rgb)
        for n in range(12)
    ]


def minute_marks() -> List[Hand]:
    return [
        Hand(n / 60.0 * 360.0, Stroke.THIN, 0.05, Anchor.FROM_CIRCUMFERENCE, MINUTE_LABEL_COLOR)
        for n in range(60)
    ]


def clock_hands(angles: ClockAngles, theme: Theme, show_second_hand: bool = True) -> List[Hand]:
    """Hands in paint order: minute, hour, then second on top."""
    hands = [
        Hand(angles.minute, Stroke.BOLD, 0.9, Anchor.FROM_CENTER, theme.minute_rgb),
        Hand(angles.hour, Stroke.BOLD, 0.5, Anchor.FROM_CENTER, theme.hour_rgb),
    ]
    if show_second_hand:
        hands.append(Hand(angles.second, Stroke.THIN, 0.9, Anchor.FROM_CENTER, theme.second_rgb))
    return hands


def compose_frame(width: int, height: int, angles: ClockAngles, theme: Theme,
                  options: FaceOptions = FaceOptions()) -> Frame:
    """Paint a complete clock face for one tick."""
    face = ClockFace(width, height)
    face.draw_circle(theme.clock_face_rgb)

    if options.show_hour_labels:
        for mark in hour_marks(theme):
            face.draw_hand(mark)

    if options.show_minute_labels:
        for mark in minute_marks():
            face.draw_hand(mark)

    for hand in clock_hands(angles, theme, options.show_second_hand):
        face.draw_hand(hand)

    return face.frame
