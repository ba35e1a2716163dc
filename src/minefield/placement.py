"""
Mine and hint placement.

Placement happens once per board, on the first uncover, so that the
clicked tile can be kept out of the mine pool.
"""
import logging
from typing import Iterable, List, Set

import numpy as np

from .grid import Grid
from .tile import MINE, Contents, Tile


logger = logging.getLogger(__name__)


def place_mines(
    tiles: List[Tile],
    grid: Grid,
    num_mines: int,
    skip: Set[int],
    rng: np.random.Generator,
) -> List[int]:
    """
    Scatter mines uniformly at random, never on a skipped index.

    Args:
        tiles: Flat row-major tile list, modified in place.
        grid: Dimensions of ``tiles``.
        num_mines: Number of mines to place.
        skip: Indices that must stay mine-free.
        rng: Random generator to draw positions from.

    Returns:
        Sorted indices that received a mine.

    Raises:
        ValueError: If fewer than ``num_mines`` indices are available.
    """
    candidates = [index for index in range(grid.size) if index not in skip]
    if num_mines > len(candidates):
        raise ValueError(
            f"Cannot place {num_mines} mines in {len(candidates)} free tiles"
        )

    chosen = rng.choice(len(candidates), size=num_mines, replace=False)
    mine_indices = sorted(candidates[int(i)] for i in chosen)
    for index in mine_indices:
        tiles[index].contents = MINE

    logger.debug("Placed %d mines avoiding %s", num_mines, sorted(skip))
    return mine_indices


def place_hints(tiles: List[Tile], grid: Grid) -> None:
    """Set hint or blank contents on every non-mine tile from its neighbours."""
    counts = [count_adjacent_mines(tiles, grid, x, y) for x, y in grid.all_coords()]
    for tile, count in zip(tiles, counts):
        if not tile.is_mine:
            tile.contents = Contents.for_count(count)


def count_adjacent_mines(tiles: List[Tile], grid: Grid, x: int, y: int) -> int:
    """Count mines adjacent to a specific tile."""
    count = 0
    for neighbor_x, neighbor_y in grid.neighbors(x, y):
        if tiles[grid.index(neighbor_x, neighbor_y)].is_mine:
            count += 1
    return count


def place_fixed_mines(tiles: List[Tile], grid: Grid, mines: Iterable[int]) -> None:
    """Put mines on exactly the given indices, then compute hints."""
    for index in mines:
        tiles[index].contents = MINE
    place_hints(tiles, grid)
