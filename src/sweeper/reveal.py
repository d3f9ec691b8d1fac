"""
Reveal engine: opening cells, flood fill and end-of-game mine display.
"""
from collections import deque
from enum import Enum, auto
from typing import Deque, Set

from .board import Board, Position
from .cell import Highlight


class RevealOutcome(Enum):
    """What the clicked cell turned out to be."""

    MINE = auto()
    EMPTY = auto()
    NUMBER = auto()


def reveal_from(board: Board, row: int, col: int) -> RevealOutcome:
    """
    Open the cell at (row, col), flood-filling from zero-count cells.

    The target must be hidden and unflagged. A mine is opened and marked
    with the loss highlight; showing the remaining mines is left to the
    caller via ``reveal_all_mines``.

    Args:
        board: Board to mutate in place.
        row: Row index to reveal.
        col: Column index to reveal.

    Returns:
        The kind of cell that was opened.

    Raises:
        ValueError: If the target is already opened or flagged.
    """
    cell = board.cell_at(row, col)
    if not cell.is_hidden:
        raise ValueError(f"Cell ({row}, {col}) is not hidden")

    if cell.is_mine:
        cell.reveal()
        cell.highlight = Highlight.LOSS
        return RevealOutcome.MINE

    if cell.adjacent_mines > 0:
        cell.reveal()
        return RevealOutcome.NUMBER

    _flood_fill(board, (row, col))
    return RevealOutcome.EMPTY


def _flood_fill(board: Board, start: Position) -> None:
    """Breadth-first open of the zero-count region around ``start``."""
    queue: Deque[Position] = deque([start])
    seen: Set[Position] = {start}

    while queue:
        row, col = queue.popleft()
        cell = board.cell_at(row, col)
        cell.reveal()
        if cell.adjacent_mines != 0:
            # Numbered rim cells stop propagation.
            continue

        for neighbor in board.neighbors(row, col):
            if neighbor in seen:
                continue
            neighbor_cell = board.cell_at(*neighbor)
            if neighbor_cell.is_hidden and not neighbor_cell.is_mine:
                seen.add(neighbor)
                queue.append(neighbor)


def reveal_all_mines(board: Board, highlight_win: bool = False) -> None:
    """
    Open every mine for end-of-game display.

    On a win all mines get the win highlight; on a loss the detonated
    mine keeps its loss highlight and the others stay plain. Flagged
    mines keep their flag so the flag count still matches the board.
    Non-mine cells are left untouched.
    """
    for _, _, cell in board.cells():
        if not cell.is_mine:
            continue
        cell.reveal()
        if highlight_win:
            cell.highlight = Highlight.WIN
