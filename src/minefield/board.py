"""
Board module for Minesweeper.

Implements the board state machine: lazy mine placement on the first
uncover, cycle-marking, flood-uncover of blank regions, and win/loss
detection.
"""
import logging
from collections import deque
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Deque, Dict, Iterable, List, Optional, Set, Tuple

import numpy as np

from .grid import Coord, Grid
from .placement import place_fixed_mines, place_hints, place_mines
from .tile import Tile


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    UNPLACED = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


@dataclass(frozen=True)
class BoardConfig:
    """
    Difficulty parameters for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 8
    height: int = 8
    num_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise ValueError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise ValueError("Number of mines cannot be negative")
        # The first uncovered tile is always kept free of mines.
        max_mines = self.width * self.height - 1
        if self.num_mines > max_mines:
            raise ValueError(f"Too many mines (max {max_mines})")


# Preset difficulty levels
BEGINNER = BoardConfig(8, 8, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(30, 16, 99)

DIFFICULTIES: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Owns the tiles and the aggregate counters. Mines are placed on the
    first ``handle_uncover`` and never on the tile that was uncovered.
    Coordinates are zero-based (x, y) with x the column; coordinates
    outside ``dims()`` raise IndexError.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    rng: np.random.Generator = field(
        default_factory=np.random.default_rng, repr=False
    )
    _grid: Grid = field(init=False, repr=False)
    _tiles: List[Tile] = field(init=False, repr=False)
    _covered: int = field(init=False)
    _placed: bool = field(init=False, default=False)
    _defeat: bool = field(init=False, default=False)

    def __post_init__(self) -> None:
        """Create the empty tile grid."""
        self._grid = Grid(self.config.width, self.config.height)
        self._tiles = [Tile() for _ in range(self._grid.size)]
        self._covered = self._grid.size

    # ========================================================================
    # Construction
    # ========================================================================

    @classmethod
    def from_difficulty(
        cls, config: BoardConfig, rng: Optional[np.random.Generator] = None
    ) -> "Board":
        """Create a fresh board for ``config``."""
        if rng is None:
            return cls(config)
        return cls(config, rng)

    @classmethod
    def beginner(cls, rng: Optional[np.random.Generator] = None) -> "Board":
        return cls.from_difficulty(BEGINNER, rng)

    @classmethod
    def intermediate(cls, rng: Optional[np.random.Generator] = None) -> "Board":
        return cls.from_difficulty(INTERMEDIATE, rng)

    @classmethod
    def expert(cls, rng: Optional[np.random.Generator] = None) -> "Board":
        return cls.from_difficulty(EXPERT, rng)

    @classmethod
    def from_mines(cls, config: BoardConfig, mines: Iterable[Coord]) -> "Board":
        """
        Create a board with mines already on the given coordinates.

        The first uncover does not re-place mines, so it may hit one.

        Raises:
            ValueError: If the number of distinct positions differs from
                ``config.num_mines``.
            IndexError: If a position is outside the grid.
        """
        board = cls(config)
        indices = {board._grid.index(x, y) for x, y in mines}
        if len(indices) != config.num_mines:
            raise ValueError(
                f"Expected {config.num_mines} mine positions, got {len(indices)}"
            )
        place_fixed_mines(board._tiles, board._grid, sorted(indices))
        board._placed = True
        return board

    # ========================================================================
    # Game Actions
    # ========================================================================

    def handle_uncover(self, x: int, y: int) -> None:
        """
        Uncover the tile at (x, y).

        On the first uncover, places mines avoiding this tile. Uncovering
        a blank tile floods its blank region; uncovering a mine loses the
        game. Flagged or uncovered tiles and finished games are left as is.
        """
        index = self._grid.index(x, y)
        if self.is_over:
            return

        if not self._placed:
            self._place(index)

        tile = self._tiles[index]
        if not tile.is_uncoverable:
            return
        self._uncover_tile(tile)

        if tile.is_mine:
            self._defeat = True
            logger.info("Mine uncovered at (%d, %d), game lost", x, y)
            return
        if tile.is_blank:
            self._flood_uncover(x, y)
        if self.is_victory():
            logger.info("All safe tiles uncovered, game won")

    def handle_mark(self, x: int, y: int) -> None:
        """Cycle the mark (none -> flag -> unsure -> none) on a covered tile."""
        index = self._grid.index(x, y)
        if self.is_over:
            return
        self._tiles[index].mark()

    def _place(self, index: int) -> None:
        """Place mines and hints, keeping ``index`` free of mines."""
        place_mines(self._tiles, self._grid, self.config.num_mines, {index}, self.rng)
        place_hints(self._tiles, self._grid)
        self._placed = True

    def _uncover_tile(self, tile: Tile) -> None:
        """Uncover a tile and update the covered count."""
        tile.uncover()
        if self._covered > self.config.num_mines:
            self._covered -= 1

    def _flood_uncover(self, x: int, y: int) -> None:
        """Breadth-first uncover of the blank region around (x, y)."""
        queue: Deque[Coord] = deque(self._uncoverable_neighbors(x, y))
        visited: Set[Coord] = {(x, y)}

        while queue:
            coord = queue.popleft()
            if coord in visited:
                continue
            visited.add(coord)

            tile = self._tiles[self._grid.index(*coord)]
            if not tile.is_uncoverable or tile.is_mine:
                continue
            self._uncover_tile(tile)

            # Hints are uncovered but do not expand.
            if tile.is_blank:
                queue.extend(self._uncoverable_neighbors(*coord))

    def _uncoverable_neighbors(self, x: int, y: int) -> List[Coord]:
        """Neighbours of (x, y) that are covered and not flagged."""
        return [
            (neighbor_x, neighbor_y)
            for neighbor_x, neighbor_y in self._grid.neighbors(x, y)
            if self._tiles[self._grid.index(neighbor_x, neighbor_y)].is_uncoverable
        ]

    # ========================================================================
    # State Accessors
    # ========================================================================

    def dims(self) -> Tuple[int, int]:
        """Board dimensions as (width, height)."""
        return self._grid.width, self._grid.height

    def tile(self, x: int, y: int) -> Tile:
        """Snapshot of the tile at (x, y)."""
        return replace(self._tiles[self._grid.index(x, y)])

    def is_victory(self) -> bool:
        """All non-mine tiles uncovered without uncovering a mine."""
        return self._covered == self.config.num_mines and not self._defeat

    def is_defeat(self) -> bool:
        """A mine has been uncovered."""
        return self._defeat

    @property
    def is_over(self) -> bool:
        """Check if the game has ended."""
        return self._defeat or self.is_victory()

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        if self._defeat:
            return GameState.LOST
        if self.is_victory():
            return GameState.WON
        if not self._placed:
            return GameState.UNPLACED
        return GameState.PLAYING

    @property
    def num_mines(self) -> int:
        return self.config.num_mines

    @property
    def covered_count(self) -> int:
        """Tiles still covered, never counted below the mine count."""
        return self._covered

    @property
    def flags_placed(self) -> int:
        return sum(1 for tile in self._tiles if tile.is_flagged)

    @property
    def mines_remaining(self) -> int:
        """Mines minus flags placed, floored at 0."""
        return max(0, self.config.num_mines - self.flags_placed)

    def get_valid_actions(self) -> List[Coord]:
        """
        Get list of tiles that can be uncovered.

        Returns:
            (x, y) positions that are covered and not flagged.
        """
        return [
            coord
            for coord, tile in zip(self._grid.all_coords(), self._tiles)
            if tile.is_uncoverable
        ]

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array indexed [y, x].

        Returns:
            2D int8 array of ``Tile.to_observation`` values.
        """
        obs = np.array(
            [tile.to_observation() for tile in self._tiles], dtype=np.int8
        )
        return obs.reshape(self._grid.height, self._grid.width)
