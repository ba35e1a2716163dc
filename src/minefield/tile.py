"""
Tile module for Minesweeper board.

Represents individual tiles on the board with their cover state
(covered with a mark, or uncovered) and contents (mine/hint/blank).
"""
from enum import Enum, auto
from dataclasses import dataclass, field
from typing import Optional


# ============================================================================
# Constants
# ============================================================================

class Mark(Enum):
    """Player annotation on a covered tile."""

    NONE = auto()
    FLAG = auto()
    UNSURE = auto()


_MARK_CYCLE = {
    Mark.NONE: Mark.FLAG,
    Mark.FLAG: Mark.UNSURE,
    Mark.UNSURE: Mark.NONE,
}


def next_mark(mark: Mark) -> Mark:
    """Return the mark that follows ``mark`` in the NONE -> FLAG -> UNSURE cycle."""
    return _MARK_CYCLE[mark]


class ContentKind(Enum):
    """What a tile conceals."""

    BLANK = auto()
    HINT = auto()
    MINE = auto()


# ============================================================================
# Value Types
# ============================================================================

@dataclass(frozen=True)
class Cover:
    """
    Cover state of a tile.

    A covered tile carries a Mark; an uncovered tile has ``mark`` None.

    Attributes:
        mark: Mark on the covered tile, or None once uncovered.
    """

    mark: Optional[Mark] = Mark.NONE

    @classmethod
    def up(cls, mark: Mark = Mark.NONE) -> "Cover":
        """Covered, annotated with ``mark``."""
        return cls(mark)

    @classmethod
    def down(cls) -> "Cover":
        """Uncovered."""
        return cls(None)

    @property
    def is_up(self) -> bool:
        return self.mark is not None

    @property
    def is_down(self) -> bool:
        return self.mark is None


@dataclass(frozen=True)
class Contents:
    """
    Contents of a tile.

    Attributes:
        kind: Mine, hint or blank.
        hint: Adjacent mine count (1-8) for hints, 0 otherwise.
    """

    kind: ContentKind = ContentKind.BLANK
    hint: int = 0

    def __post_init__(self) -> None:
        if self.kind is ContentKind.HINT and not 1 <= self.hint <= 8:
            raise ValueError(f"Hint value must be 1-8, got {self.hint}")
        if self.kind is not ContentKind.HINT and self.hint != 0:
            raise ValueError("Only hint contents carry a count")

    @classmethod
    def for_count(cls, count: int) -> "Contents":
        """Hint for a positive neighbour mine count, blank for zero."""
        if count == 0:
            return BLANK
        return cls(ContentKind.HINT, count)


MINE = Contents(ContentKind.MINE)
BLANK = Contents(ContentKind.BLANK)


# ============================================================================
# Tile Data Class
# ============================================================================

@dataclass
class Tile:
    """
    A single tile in the Minesweeper grid.

    Attributes:
        cover: Covered (with a mark) or uncovered.
        contents: Mine, hint or blank. Fixed once mines are placed.
    """

    cover: Cover = field(default_factory=Cover.up)
    contents: Contents = BLANK

    def uncover(self) -> None:
        """Uncover this tile. Uncovering twice has no further effect."""
        self.cover = Cover.down()

    def mark(self) -> bool:
        """
        Cycle the mark on this tile.

        Returns:
            True if the mark changed, False if the tile is uncovered.
        """
        if self.cover.is_down:
            return False
        self.cover = Cover.up(next_mark(self.cover.mark))
        return True

    @property
    def is_covered(self) -> bool:
        """Check if tile is still covered."""
        return self.cover.is_up

    @property
    def is_uncoverable(self) -> bool:
        """Covered and not flagged."""
        return self.cover.is_up and self.cover.mark is not Mark.FLAG

    @property
    def is_flagged(self) -> bool:
        """Check if tile carries a flag."""
        return self.cover.mark is Mark.FLAG

    @property
    def is_mine(self) -> bool:
        return self.contents.kind is ContentKind.MINE

    @property
    def is_hint(self) -> bool:
        return self.contents.kind is ContentKind.HINT

    @property
    def is_blank(self) -> bool:
        return self.contents.kind is ContentKind.BLANK

    def to_observation(self) -> int:
        """
        Convert tile to observation value.

        Returns:
            -1: Covered tile
            -2: Flagged tile
            -3: Tile marked unsure
            0-8: Uncovered tile with adjacent mine count
            9: Uncovered mine (game over state)
        """
        if self.cover.mark is Mark.NONE:
            return -1
        if self.cover.mark is Mark.FLAG:
            return -2
        if self.cover.mark is Mark.UNSURE:
            return -3
        if self.is_mine:
            return 9
        return self.contents.hint
