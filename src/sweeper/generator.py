"""
Board generator.

Places mines uniformly at random, optionally keeping one cell safe, and
computes adjacency counts.
"""
from typing import List, Optional, Union

import numpy as np

from .board import Board, BoardConfig, InvalidConfiguration, Position


RandomSource = Union[None, int, np.random.Generator]


def make_rng(rng: RandomSource = None) -> np.random.Generator:
    """Coerce a seed, Generator or None into a numpy Generator."""
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def generate(
    rows: int,
    cols: int,
    total_mines: int,
    safe_cell: Optional[Position] = None,
    rng: RandomSource = None,
) -> Board:
    """Generate a board from raw dimensions; see ``generate_board``."""
    return generate_board(BoardConfig(rows, cols, total_mines), safe_cell, rng)


def generate_board(
    config: BoardConfig,
    safe_cell: Optional[Position] = None,
    rng: RandomSource = None,
) -> Board:
    """
    Generate a new board with randomly placed mines.

    Only the literal ``safe_cell`` is excluded from mine placement, not
    its neighbourhood.

    Args:
        config: Board dimensions and mine count.
        safe_cell: Optional (row, col) that must not hold a mine.
        rng: Seed or numpy Generator driving the shuffle.

    Returns:
        Board with all cells closed and contents assigned.

    Raises:
        InvalidConfiguration: If the configuration is out of bounds or
            ``safe_cell`` is not on the board.
    """
    board = Board(config)
    if safe_cell is not None and not board.is_valid_position(*safe_cell):
        raise InvalidConfiguration(f"Safe cell {safe_cell} is off the board")

    candidates = _get_valid_mine_positions(config, safe_cell)
    order = make_rng(rng).permutation(len(candidates))
    mines = [candidates[index] for index in order[: config.total_mines]]

    board.place_mines(mines)
    return board


def _get_valid_mine_positions(
    config: BoardConfig, exclude: Optional[Position]
) -> List[Position]:
    """Get all valid positions for mine placement."""
    positions = []
    for row in range(config.rows):
        for col in range(config.cols):
            if (row, col) != exclude:
                positions.append((row, col))
    return positions
