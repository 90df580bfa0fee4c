"""Tests for the clock-face compositor."""

from datetime import datetime

import pytest

from analog_clock.clock_time import ClockAngles
from analog_clock.compositor import (
    Anchor,
    ClockFace,
    FaceOptions,
    Hand,
    Stroke,
    clock_hands,
    compose_frame,
)
from analog_clock.geometry import rasterize_circle
from analog_clock.themes import MINUTE_LABEL_COLOR, find_theme

THEME = find_theme("nord-frost")
RED = (255, 0, 0)


def _angles(hour, minute, second=0):
    return ClockAngles.at(datetime(2024, 1, 1, hour, minute, second))


def _rows_with(frame, color):
    return [y for x, y, cell in frame.painted() if cell == color]


def test_frame_has_requested_size():
    frame = compose_frame(40, 24, _angles(10, 10), THEME)
    assert frame.size == (40, 24)


def test_compose_is_deterministic():
    first = compose_frame(40, 24, _angles(10, 10, 30), THEME, FaceOptions(show_minute_labels=True))
    second = compose_frame(40, 24, _angles(10, 10, 30), THEME, FaceOptions(show_minute_labels=True))
    assert first == second


def test_face_geometry():
    face = ClockFace(40, 24)
    assert face.center == (20, 12)
    assert face.circle_radius == 12 / 1.1
    assert face.radius == 10


def test_circle_painted_in_face_color():
    face = ClockFace(40, 24)
    face.draw_circle(THEME.clock_face_rgb)
    # Top and bottom of the ring, after flipping into grid rows
    assert face.frame.get(20, 2) == THEME.clock_face_rgb
    assert face.frame.get(20, 22) == THEME.clock_face_rgb
    assert face.frame.get(20, 12) is None


def test_bold_stroke_covers_more_cells_than_thin():
    thin = ClockFace(40, 24)
    thin.draw_hand(Hand(45.0, Stroke.THIN, 0.9, Anchor.FROM_CENTER, RED))
    bold = ClockFace(40, 24)
    bold.draw_hand(Hand(45.0, Stroke.BOLD, 0.9, Anchor.FROM_CENTER, RED))

    thin_cells = {(x, y) for x, y, _ in thin.frame.painted()}
    bold_cells = {(x, y) for x, y, _ in bold.frame.painted()}
    assert thin_cells < bold_cells


def test_from_center_hand_starts_at_hub():
    face = ClockFace(40, 24)
    start, end = face.hand_endpoints(Hand(90.0, Stroke.THIN, 0.5, Anchor.FROM_CENTER, RED))
    assert start == (20, 12)
    assert end == (25, 12)


def test_from_circumference_mark_stays_near_rim():
    face = ClockFace(40, 24)
    face.draw_hand(Hand(90.0, Stroke.THIN, 0.15, Anchor.FROM_CIRCUMFERENCE, RED))
    cells = list(face.frame.painted())
    assert cells
    assert all(y == 12 for _, y, _ in cells)
    assert min(x for x, _, _ in cells) >= 28
    assert max(x for x, _, _ in cells) == 30


def test_points_outside_grid_are_dropped():
    face = ClockFace(4, 4)
    face.draw_hand(Hand(0.0, Stroke.BOLD, 5.0, Anchor.FROM_CENTER, RED))
    assert all(face.frame.contains(x, y) for x, y, _ in face.frame.painted())


def test_hands_paint_order():
    hands = clock_hands(_angles(6, 0), THEME)
    assert [h.color for h in hands] == [THEME.minute_rgb, THEME.hour_rgb, THEME.second_rgb]
    assert [h.stroke for h in hands] == [Stroke.BOLD, Stroke.BOLD, Stroke.THIN]
    assert len(clock_hands(_angles(6, 0), THEME, show_second_hand=False)) == 2


def test_hour_hand_sits_on_top_at_hub():
    frame = compose_frame(40, 24, _angles(6, 0), THEME, FaceOptions(show_second_hand=False))
    assert frame.get(20, 12) == THEME.hour_rgb


def test_second_hand_is_topmost():
    frame = compose_frame(40, 24, _angles(6, 0, 0), THEME)
    assert frame.get(20, 12) == THEME.second_rgb


def test_hidden_second_hand_leaves_no_trace():
    frame = compose_frame(40, 24, _angles(6, 0, 20), THEME, FaceOptions(show_second_hand=False))
    assert not _rows_with(frame, THEME.second_rgb)


def test_hour_labels_toggle():
    options = FaceOptions(show_second_hand=False, show_hour_labels=False)
    without = compose_frame(40, 24, _angles(6, 0), THEME, options)
    with_labels = compose_frame(40, 24, _angles(6, 0), THEME, FaceOptions(show_second_hand=False))
    # Three o'clock mark, well away from both hands
    assert without.get(29, 12) is None
    assert with_labels.get(29, 12) == THEME.clock_face_rgb


def test_minute_labels_use_neutral_color():
    angles = _angles(6, 0)
    shown = compose_frame(40, 24, angles, THEME, FaceOptions(show_minute_labels=True))
    hidden = compose_frame(40, 24, angles, THEME)
    assert _rows_with(shown, MINUTE_LABEL_COLOR)
    assert not _rows_with(hidden, MINUTE_LABEL_COLOR)


def test_six_oclock_hands_point_north_and_south():
    frame = compose_frame(40, 24, _angles(6, 0), THEME)
    center_row = 12

    minute_rows = _rows_with(frame, THEME.minute_rgb)
    hour_rows = _rows_with(frame, THEME.hour_rgb)

    # Minute hand reaches up to the twelve o'clock mark
    assert min(minute_rows) <= 3
    assert max(minute_rows) <= center_row + 1
    # Hour hand hangs below the hub
    assert max(hour_rows) > center_row + 3
    assert min(hour_rows) >= center_row - 1


def _ring_rows(height):
    face = ClockFace(40, height)
    face.draw_circle(RED)
    rows = [y for _, y, _ in face.frame.painted()]
    return face, min(rows), max(rows)


@pytest.mark.parametrize("height", [3, 5, 7, 9, 25])
def test_ring_complete_on_odd_heights(height):
    face, top, bottom = _ring_rows(height)
    assert bottom - top == 2 * face.radius
    assert len(list(face.frame.painted())) == len(rasterize_circle((0, 0), face.radius))


@pytest.mark.parametrize("height", [9, 25, 31])
def test_ring_margins_match_on_odd_heights(height):
    _, top, bottom = _ring_rows(height)
    assert top == height - 1 - bottom


def test_hub_on_middle_row():
    for height in (9, 24, 25):
        face = ClockFace(40, height)
        face.draw_hand(Hand(0.0, Stroke.THIN, 0.0, Anchor.FROM_CENTER, RED))
        assert face.frame.get(20, height // 2) == RED
