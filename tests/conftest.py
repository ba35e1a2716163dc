"""
Pytest configuration and shared fixtures.
"""
import numpy as np
import pytest

from minefield import Board, BoardConfig, Tile


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded generator for reproducible mine layouts."""
    return np.random.default_rng(1234)


@pytest.fixture
def beginner_board(rng: np.random.Generator) -> Board:
    """Create a seeded beginner board (8x8, 10 mines)."""
    return Board.beginner(rng)


@pytest.fixture
def corner_mine_board() -> Board:
    """3x3 board with its only mine at (2, 2)."""
    return Board.from_mines(BoardConfig(3, 3, 1), [(2, 2)])


@pytest.fixture
def wall_board() -> Board:
    """
    5x5 board with a full column of mines at x=3.

    Columns 0-1 are blank, column 2 and column 4 are hints.
    """
    return Board.from_mines(BoardConfig(5, 5, 5), [(3, y) for y in range(5)])


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for flood testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Tile Fixtures
# ============================================================================

@pytest.fixture
def covered_tile() -> Tile:
    """Create a covered blank tile."""
    return Tile()


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def small_config() -> BoardConfig:
    """3x3 configuration with one mine."""
    return BoardConfig(3, 3, 1)
