"""Frame: one tick's worth of colored terminal cells"""

from typing import Iterator, List, Optional, Tuple

Color = Tuple[int, int, int]
Cell = Optional[Color]


class Frame:
    """A width x height grid of cells addressed as (x, y), row 0 on top.

    An empty cell is ``None``; a painted cell holds an RGB triple. Painting
    over a cell replaces its color, so later draw calls win.
    """

    def __init__(self, width: int, height: int, cells: Optional[List[List[Cell]]] = None):
        if width < 0 or height < 0:
            raise ValueError(f"invalid frame size {width}x{height}")
        self.width = width
        self.height = height
        if cells is None:
            cells = [[None] * width for _ in range(height)]
        elif len(cells) != height or any(len(row) != width for row in cells):
            raise ValueError(f"cell rows do not match a {width}x{height} frame")
        self.cells = cells

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def paint(self, x: int, y: int, color: Color):
        """Set one cell; points outside the grid are dropped."""
        if self.contains(x, y):
            self.cells[y][x] = color

    def paint_points(self, points, color: Color):
        for x, y in points:
            self.paint(x, y, color)

    def get(self, x: int, y: int) -> Cell:
        return self.cells[y][x]

    def painted(self) -> Iterator[Tuple[int, int, Color]]:
        """Yield (x, y, color) for every non-empty cell, row by row."""
        for y, row in enumerate(self.cells):
            for x, cell in enumerate(row):
                if cell is not None:
                    yield x, y, cell

    def __eq__(self, other):
        if not isinstance(other, Frame):
            return NotImplemented
        return self.size == other.size and self.cells == other.cells

    def __repr__(self):
        return f"Frame({self.width}x{self.height})"
