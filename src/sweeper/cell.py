"""
Cell module for Minesweeper game.

Represents individual cells on the game board with their state
(hidden/revealed/flagged), content (mine/number) and the end-of-game
highlight used when mines are shown.
"""
from enum import Enum, auto
from dataclasses import dataclass
from typing import Optional, Union


# ============================================================================
# Constants
# ============================================================================

MINE = "mine"


class CellState(Enum):
    """Possible visual states of a cell."""

    HIDDEN = auto()
    REVEALED = auto()
    FLAGGED = auto()


class Highlight(Enum):
    """End-of-game marker for mine cells."""

    NONE = auto()
    LOSS = auto()
    WIN = auto()


# ============================================================================
# Cell Data Class
# ============================================================================

@dataclass
class Cell:
    """
    Represents a single cell in the Minesweeper grid.

    A cell is either opened or flagged, never both: both live in a
    single ``state`` field, and a flagged cell must be unflagged before
    it can open.

    Attributes:
        is_mine: Whether this cell contains a mine.
        adjacent_mines: Count of mines in neighboring cells (0-8).
        state: Current visual state (hidden, revealed, or flagged).
        highlight: Marker applied to mines when the game ends.
        assigned: Whether content has been placed by the generator.
    """

    is_mine: bool = False
    adjacent_mines: int = 0
    state: CellState = CellState.HIDDEN
    highlight: Highlight = Highlight.NONE
    assigned: bool = True

    def reveal(self) -> bool:
        """
        Reveal this cell.

        Returns:
            True if cell was successfully revealed, False if already
            revealed or flagged.
        """
        if self.state != CellState.HIDDEN:
            return False
        self.state = CellState.REVEALED
        return True

    def toggle_flag(self) -> bool:
        """
        Toggle flag on this cell.

        Returns:
            True if flag was toggled, False if cell is revealed.
        """
        if self.state == CellState.REVEALED:
            return False
        if self.state == CellState.HIDDEN:
            self.state = CellState.FLAGGED
        else:
            self.state = CellState.HIDDEN
        return True

    def close(self) -> None:
        """Return the cell to its pristine hidden state, keeping content."""
        self.state = CellState.HIDDEN
        self.highlight = Highlight.NONE

    @property
    def content(self) -> Optional[Union[str, int]]:
        """``MINE``, the adjacent count, or None before placement."""
        if not self.assigned:
            return None
        if self.is_mine:
            return MINE
        return self.adjacent_mines

    @property
    def is_hidden(self) -> bool:
        """Check if cell is hidden."""
        return self.state == CellState.HIDDEN

    @property
    def is_revealed(self) -> bool:
        """Check if cell is revealed."""
        return self.state == CellState.REVEALED

    @property
    def is_flagged(self) -> bool:
        """Check if cell is flagged."""
        return self.state == CellState.FLAGGED

    def to_observation(self) -> int:
        """
        Convert cell to an integer code for renderers and agents.

        Returns:
            -1: Hidden cell
            -2: Flagged cell
            0-8: Revealed cell with adjacent mine count
            9: Revealed mine
        """
        if self.state == CellState.HIDDEN:
            return -1
        if self.state == CellState.FLAGGED:
            return -2
        if self.is_mine:
            return 9
        return self.adjacent_mines
