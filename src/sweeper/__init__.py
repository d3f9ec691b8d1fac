"""
Minesweeper core package.

Provides board generation, cell revealing, win evaluation and the game
session state machine, plus a Gymnasium adapter for automated play.
"""
from .cell import Cell, CellState, Highlight, MINE
from .board import Board, BoardConfig, CellView, InvalidConfiguration
from .generator import generate, generate_board
from .reveal import RevealOutcome, reveal_all_mines, reveal_from
from .rules import is_win
from .levels import (
    BEGINNER,
    INTERMEDIATE,
    EXPERT,
    LEVELS,
    DEFAULT_LEVEL,
    CUSTOM_LEVEL,
    MAX_CUSTOM_CELLS,
    difficulty_label,
    mine_density,
    validate_custom_settings,
)
from .timer import Stopwatch, format_elapsed
from .events import GameEvent
from .session import GameSession, GameStatus
from .environment import MinesweeperEnv

__all__ = [
    "Cell",
    "CellState",
    "Highlight",
    "MINE",
    "Board",
    "BoardConfig",
    "CellView",
    "InvalidConfiguration",
    "generate",
    "generate_board",
    "RevealOutcome",
    "reveal_all_mines",
    "reveal_from",
    "is_win",
    "BEGINNER",
    "INTERMEDIATE",
    "EXPERT",
    "LEVELS",
    "DEFAULT_LEVEL",
    "CUSTOM_LEVEL",
    "MAX_CUSTOM_CELLS",
    "difficulty_label",
    "mine_density",
    "validate_custom_settings",
    "Stopwatch",
    "format_elapsed",
    "GameEvent",
    "GameSession",
    "GameStatus",
    "MinesweeperEnv",
]
