"""A clickable grid on which a breadth-first search finds a path between two cells."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

Point = tuple[int, int]


class Cell(IntEnum):
    """Kinds of grid cell."""

    EMPTY = 0
    WALL = 1
    START = 2
    END = 3
    PATH = 4


@dataclass(frozen=True)
class Area:
    """A rectangle in pixels."""

    x: int
    y: int
    width: int
    height: int

    def contains(self, px: int, py: int) -> bool:
        """Return whether a point lies strictly inside the rectangle."""
        return self.x < px < self.x + self.width and self.y < py < self.y + self.height


class Grid:
    """Cells laid out over a screen area, with walls, a start, an end and the found path."""

    def __init__(self, columns: int, rows: int, area: Area) -> None:
        if columns < 1 or rows < 1:
            raise ValueError("a grid needs at least one column and one row")
        self.columns = columns
        self.rows = rows
        self.cell_width = area.width // columns
        self.cell_height = area.height // rows
        if self.cell_width < 1 or self.cell_height < 1:
            raise ValueError("the area is too small for the grid")
        self.area = Area(
            area.x, area.y, self.cell_width * columns, self.cell_height * rows
        )
        self.walls: set[Point] = set()
        self.start: Point = (0, 0)
        self.end: Point = (columns - 1, rows - 1)
        self.path: list[Point] = []
        self._parent: dict[Point, Point] = {}

    def _check(self, node: Point) -> None:
        x, y = node
        if not (0 <= x < self.columns and 0 <= y < self.rows):
            raise ValueError(f"cell {node} is outside the grid")

    def neighbours(self, node: Point) -> list[Point]:
        """Return the cells next to a cell: left, right, above, below."""
        self._check(node)
        x, y = node
        result = []
        if x > 0:
            result.append((x - 1, y))
        if x < self.columns - 1:
            result.append((x + 1, y))
        if y > 0:
            result.append((x, y - 1))
        if y < self.rows - 1:
            result.append((x, y + 1))
        return result

    def search(self, end: Optional[Point] = None) -> list[Point]:
        """Search from start to end and store the path.

        The path runs from the cell before the end back to the start, inclusive;
        it is empty when there is no way through, the end is a wall or equals the start.
        """
        if end is not None:
            self._check(end)
            self.end = end
        queue: deque[Point] = deque([self.start])
        if self.end in self.walls or self.end == self.start:
            queue.clear()
        visited: set[Point] = set()
        found = False
        while queue and not found:
            node = queue[0]
            if node not in visited:
                if node == self.end:
                    found = True
                else:
                    visited.add(node)
                    for neighbour in self.neighbours(node):
                        if neighbour not in visited and neighbour not in self.walls:
                            queue.append(neighbour)
                            self._parent[neighbour] = node
            queue.popleft()
        self.path = []
        if found:
            node = self._parent[self.end]
            self.path.append(node)
            while node != self.start:
                node = self._parent[node]
                self.path.append(node)
        return list(self.path)

    def cell_at(self, px: int, py: int) -> Optional[Point]:
        """Return the cell under a pixel, or None if the pixel is not inside the grid."""
        if not self.area.contains(px, py):
            return None
        return (
            (px - self.area.x) // self.cell_width,
            (py - self.area.y) // self.cell_height,
        )

    def apply(self, cell: Cell, px: int, py: int) -> None:
        """Toggle a wall or move the start to the cell under a pixel."""
        node = self.cell_at(px, py)
        if node is None:
            return
        if cell == Cell.WALL:
            self.walls.symmetric_difference_update({node})
        elif cell == Cell.START:
            self.start = node

    def track_mouse(self, px: int, py: int) -> bool:
        """Make the cell under the pointer the end and search again; return whether it did."""
        if not self.area.contains(px, py):
            return False
        x2 = px - self.area.x
        y2 = py - self.area.y
        ex, ey = self.end
        left, top = ex * self.cell_width, ey * self.cell_height
        outside_end = (
            x2 < left
            or x2 > left + self.cell_width
            or y2 < top
            or y2 > top + self.cell_height
        )
        if not outside_end:
            return False
        node = (x2 // self.cell_width, y2 // self.cell_height)
        if node == self.start:
            return False
        self.end = node
        self.search()
        return True

    def cell_rect(self, x: int, y: int) -> Area:
        """Return the pixel rectangle of a cell."""
        return Area(
            self.area.x + x * self.cell_width,
            self.area.y + y * self.cell_height,
            self.cell_width,
            self.cell_height,
        )