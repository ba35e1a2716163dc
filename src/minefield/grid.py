"""
Grid addressing for the Minesweeper board.

Maps (x, y) coordinates to flat row-major indices and enumerates
8-connected neighbours.
"""
from dataclasses import dataclass
from typing import List, Tuple


Coord = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """
    Dimensions of a rectangular tile grid.

    Attributes:
        width: Number of columns (x axis).
        height: Number of rows (y axis).
    """

    width: int
    height: int

    @property
    def size(self) -> int:
        """Total number of tiles."""
        return self.width * self.height

    def contains(self, x: int, y: int) -> bool:
        """Check if coordinates lie inside the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def index(self, x: int, y: int) -> int:
        """
        Flat index of a coordinate.

        Raises:
            IndexError: If (x, y) is outside the grid.
        """
        if not self.contains(x, y):
            raise IndexError(
                f"Coordinates ({x}, {y}) outside {self.width}x{self.height} grid"
            )
        return y * self.width + x

    def coords(self, index: int) -> Coord:
        """Inverse of ``index``."""
        if not 0 <= index < self.size:
            raise IndexError(f"Index {index} outside grid of {self.size} tiles")
        y, x = divmod(index, self.width)
        return x, y

    def neighbors(self, x: int, y: int) -> List[Coord]:
        """
        Get in-bounds neighbouring coordinates.

        Args:
            x: Column of center tile.
            y: Row of center tile.

        Returns:
            Up to 8 (x, y) tuples, in row-major order.
        """
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                new_x = x + delta_x
                new_y = y + delta_y
                if self.contains(new_x, new_y):
                    neighbors.append((new_x, new_y))
        return neighbors

    def all_coords(self) -> List[Coord]:
        """Every coordinate in row-major order."""
        return [(x, y) for y in range(self.height) for x in range(self.width)]
