"""
Integer raster primitives for the clock face.

Both rasterizers work in a Cartesian frame where y grows upward. Frames
store rows top to bottom, so every point has to pass through
``to_grid`` exactly once before it is painted.
"""

from typing import Iterable, List, Set, Tuple

Point = Tuple[int, int]


def rasterize_circle(center: Point, radius: int) -> Set[Point]:
    """Midpoint circle: the single-pixel ring around ``center``."""
    if radius < 0:
        raise ValueError(f"radius must be non-negative, got {radius}")

    cx, cy = center
    points = set()
    x, y = radius, 0
    err = 1 - radius

    while x >= y:
        # One computed point per octant, mirrored into the other seven
        for px, py in ((x, y), (y, x), (-y, x), (-x, y),
                       (-x, -y), (-y, -x), (y, -x), (x, -y)):
            points.add((cx + px, cy + py))

        y += 1
        if err < 0:
            err += 2 * y + 1
        else:
            x -= 1
            err += 2 * (y - x) + 1

    return points


def rasterize_line(p0: Point, p1: Point) -> List[Point]:
    """Bresenham line from p0 to p1, both endpoints included."""
    x0, y0 = p0
    x1, y1 = p1

    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    points = []
    while True:
        points.append((x0, y0))
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy

    return points


def to_grid(points: Iterable[Point], grid_height: int) -> List[Point]:
    """Flip Cartesian points into row-major grid coordinates (row 0 on top)."""
    return [(x, grid_height - y) for x, y in points]
