"""
Board module for Minesweeper game.

Holds the grid of cells, board configuration and the read-only views
handed to renderers. Mine placement lives in ``generator``, revealing
in ``reveal`` and the win check in ``rules``.
"""
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, List, Optional, Tuple, Union

import numpy as np

from .cell import Cell, Highlight


Position = Tuple[int, int]

NEIGHBOR_OFFSETS: Tuple[Position, ...] = tuple(
    (delta_row, delta_col)
    for delta_row in (-1, 0, 1)
    for delta_col in (-1, 0, 1)
    if (delta_row, delta_col) != (0, 0)
)


# ============================================================================
# Configuration
# ============================================================================

class InvalidConfiguration(ValueError):
    """Raised when board dimensions or mine count are out of bounds."""


@dataclass(frozen=True)
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        rows: Number of rows.
        cols: Number of columns.
        total_mines: Total mines to place.
    """

    rows: int = 9
    cols: int = 9
    total_mines: int = 10

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfiguration("Board dimensions must be positive")
        if self.total_mines < 1:
            raise InvalidConfiguration("Must have at least 1 mine")
        if self.total_mines >= self.total_cells:
            raise InvalidConfiguration(
                f"Too many mines (max {self.total_cells - 1})"
            )

    @property
    def total_cells(self) -> int:
        return self.rows * self.cols


# ============================================================================
# Render View
# ============================================================================

@dataclass(frozen=True)
class CellView:
    """
    Read-only view of a cell for renderers.

    ``content`` is None while the cell is concealed.
    """

    content: Optional[Union[str, int]]
    opened: bool
    flagged: bool
    highlight: Highlight


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Shape is fixed at creation; cell states mutate in place. ``version``
    is bumped by the session whenever it publishes a new board.
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    _grid: List[List[Cell]] = field(default_factory=list, repr=False)
    version: int = 0

    def __post_init__(self) -> None:
        """Initialize the grid after dataclass creation."""
        if not self._grid:
            self._init_grid()

    @classmethod
    def from_mines(
        cls, config: BoardConfig, mines: Iterable[Position]
    ) -> "Board":
        """
        Build a board with mines at the given positions.

        Args:
            config: Board configuration; ``total_mines`` must match.
            mines: (row, col) positions of the mines.

        Returns:
            Board with contents assigned and adjacency counts computed.
        """
        board = cls(config)
        board.place_mines(mines)
        return board

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create grid of closed cells with no content assigned."""
        self._grid = [
            [Cell(assigned=False) for _ in range(self.config.cols)]
            for _ in range(self.config.rows)
        ]

    def place_mines(self, mines: Iterable[Position]) -> None:
        """
        Assign content: mines at ``mines``, adjacency counts elsewhere.

        Raises:
            InvalidConfiguration: If the positions are not exactly
                ``total_mines`` distinct in-bounds cells.
        """
        positions = set(mines)
        if len(positions) != self.config.total_mines:
            raise InvalidConfiguration(
                f"Expected {self.config.total_mines} distinct mines, "
                f"got {len(positions)}"
            )
        for row, col in positions:
            if not self.is_valid_position(row, col):
                raise InvalidConfiguration(
                    f"Mine position ({row}, {col}) is off the board"
                )

        for row, col, cell in self.cells():
            cell.is_mine = (row, col) in positions
            cell.assigned = True
        self._calculate_adjacent_mines()

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for row, col, cell in self.cells():
            if cell.is_mine:
                cell.adjacent_mines = 0
            else:
                cell.adjacent_mines = self._count_adjacent_mines(row, col)

    def _count_adjacent_mines(self, row: int, col: int) -> int:
        """Count mines adjacent to a specific cell."""
        count = 0
        for neighbor_row, neighbor_col in self.neighbors(row, col):
            if self._grid[neighbor_row][neighbor_col].is_mine:
                count += 1
        return count

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def neighbors(self, row: int, col: int) -> List[Position]:
        """
        Get valid neighboring cell positions.

        Args:
            row: Row index of center cell.
            col: Column index of center cell.

        Returns:
            List of (row, col) tuples for in-bounds neighbors.
        """
        neighbors = []
        for delta_row, delta_col in NEIGHBOR_OFFSETS:
            new_row = row + delta_row
            new_col = col + delta_col
            if self.is_valid_position(new_row, new_col):
                neighbors.append((new_row, new_col))
        return neighbors

    def is_valid_position(self, row: int, col: int) -> bool:
        """Check if position is within board bounds."""
        return 0 <= row < self.config.rows and 0 <= col < self.config.cols

    # ========================================================================
    # Cell Access
    # ========================================================================

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def total_mines(self) -> int:
        return self.config.total_mines

    def cell_at(self, row: int, col: int) -> Cell:
        """Get cell at position, raising IndexError when out of bounds."""
        if not self.is_valid_position(row, col):
            raise IndexError(
                f"Cell ({row}, {col}) is outside a "
                f"{self.rows}x{self.cols} board"
            )
        return self._grid[row][col]

    def cells(self) -> Iterator[Tuple[int, int, Cell]]:
        """Iterate over (row, col, cell) in row-major order."""
        for row, cells in enumerate(self._grid):
            for col, cell in enumerate(cells):
                yield row, col, cell

    def mine_positions(self) -> List[Position]:
        return [(row, col) for row, col, cell in self.cells() if cell.is_mine]

    def count_unopened(self) -> int:
        return sum(1 for _, _, cell in self.cells() if not cell.is_revealed)

    def count_flagged_mines(self) -> int:
        return sum(
            1 for _, _, cell in self.cells() if cell.is_flagged and cell.is_mine
        )

    # ========================================================================
    # Copies and Resets
    # ========================================================================

    def copy(self) -> "Board":
        """Return a working copy with independent cells."""
        grid = [[replace(cell) for cell in cells] for cells in self._grid]
        return Board(self.config, grid, self.version)

    def close_all(self) -> None:
        """Close, unflag and unhighlight every cell, keeping the layout."""
        for _, _, cell in self.cells():
            cell.close()

    # ========================================================================
    # Views
    # ========================================================================

    def snapshot(self) -> Tuple[Tuple[CellView, ...], ...]:
        """
        Get a read-only view of the board for renderers.

        Content is only exposed for opened cells.
        """
        return tuple(
            tuple(
                CellView(
                    content=cell.content if cell.is_revealed else None,
                    opened=cell.is_revealed,
                    flagged=cell.is_flagged,
                    highlight=cell.highlight,
                )
                for cell in cells
            )
            for cells in self._grid
        )

    def get_observation(self) -> np.ndarray:
        """
        Get board state as numpy array.

        Returns:
            2D numpy array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.rows, self.config.cols), dtype=np.int8)
        for row, col, cell in self.cells():
            obs[row, col] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get list of cells a left click can open.

        Returns:
            List of (row, col) positions that are hidden and unflagged.
        """
        return [(row, col) for row, col, cell in self.cells() if cell.is_hidden]

    def render_ascii(self) -> str:
        """Render board as ASCII string."""
        lines = []
        for cells in self._grid:
            symbols = []
            for cell in cells:
                code = cell.to_observation()
                if code == -1:
                    symbols.append(".")
                elif code == -2:
                    symbols.append("F")
                elif code == 9:
                    symbols.append("X" if cell.highlight is Highlight.LOSS else "*")
                elif code == 0:
                    symbols.append(" ")
                else:
                    symbols.append(str(code))
            lines.append(" ".join(symbols))
        return "\n".join(lines)
