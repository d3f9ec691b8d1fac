"""
Win evaluation.
"""
from .board import Board


def is_win(board: Board, total_mines: int) -> bool:
    """
    Check whether the board is in a winning position.

    The game is won when every non-mine cell has been opened, or when
    every mine carries a flag, whatever else is open or closed.
    """
    if board.count_unopened() == total_mines:
        return True
    return board.count_flagged_mines() == total_mines
