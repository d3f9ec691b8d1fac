"""
Game session state machine.

Owns the current board, level, flag counter, stopwatch and result, and
turns left/right clicks into calls on the generator, the reveal engine
and the win check.
"""
import logging
import time
from enum import Enum, auto
from typing import Callable, List, Optional

from .board import Board, BoardConfig
from .events import EventListener, GameEvent
from .generator import RandomSource, generate_board, make_rng
from .levels import (
    CUSTOM_LEVEL,
    DEFAULT_CUSTOM_SETTINGS,
    DEFAULT_LEVEL,
    resolve_level,
    validate_custom_settings,
)
from .reveal import RevealOutcome, reveal_all_mines, reveal_from
from .rules import is_win
from .timer import Stopwatch


logger = logging.getLogger(__name__)


# ============================================================================
# Constants
# ============================================================================

class GameStatus(Enum):
    """Possible states of a game."""

    NOT_STARTED = auto()
    PLAYING = auto()
    WON = auto()
    LOST = auto()


TERMINAL_STATUSES = (GameStatus.WON, GameStatus.LOST)


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    A single player's Minesweeper session.

    Created once and reset for every new game. Each click is applied to
    a working copy of the board which replaces the visible board only
    once the click has been handled completely.
    """

    def __init__(
        self,
        level: str = DEFAULT_LEVEL,
        custom_settings: BoardConfig = DEFAULT_CUSTOM_SETTINGS,
        seed: RandomSource = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        """
        Initialize the session and deal the first board.

        Args:
            level: Predefined level name or ``"custom"``.
            custom_settings: Configuration used by the custom level.
            seed: Seed or numpy Generator for mine placement.
            clock: Time source for the stopwatch.
        """
        self._rng = make_rng(seed)
        self._custom_settings = custom_settings
        self._level = level
        self._config = self._config_for(level)
        self._listeners: List[EventListener] = []
        self._stopwatch = Stopwatch(clock)
        self._board: Optional[Board] = None
        self._status = GameStatus.NOT_STARTED
        self._flags_placed = 0
        self._start_new_game()

    # ========================================================================
    # Hooks
    # ========================================================================

    def subscribe(self, listener: EventListener) -> None:
        """Register a callable receiving ``(event, session)``."""
        self._listeners.append(listener)

    def unsubscribe(self, listener: EventListener) -> None:
        self._listeners.remove(listener)

    def _emit(self, event: GameEvent) -> None:
        for listener in list(self._listeners):
            listener(event, self)

    # ========================================================================
    # Level and Game Transitions
    # ========================================================================

    def _config_for(self, level: str) -> BoardConfig:
        if level == CUSTOM_LEVEL:
            return self._custom_settings
        return resolve_level(level)

    def change_level(self, level: str) -> None:
        """
        Switch to another level and start a new game on it.

        Raises:
            InvalidConfiguration: If the level is unknown.
        """
        config = self._config_for(level)
        self._level = level
        self._config = config
        self._start_new_game()

    def set_custom_settings(
        self, rows: int, cols: int, total_mines: int
    ) -> BoardConfig:
        """
        Validate custom settings, switch to the custom level and deal.

        Raises:
            InvalidConfiguration: If the settings are rejected; the
                session is left unchanged.
        """
        config = validate_custom_settings(rows, cols, total_mines)
        self.new_game(config)
        return config

    def new_game(self, config: Optional[BoardConfig] = None) -> None:
        """
        Start a new game with a fresh layout.

        Args:
            config: Optional custom configuration; when given it becomes
                the custom settings and the active level switches to
                ``"custom"``.
        """
        if config is not None:
            self._custom_settings = config
            self._level = CUSTOM_LEVEL
            self._config = config
        self._start_new_game()

    def restart(self) -> None:
        """Replay the current layout with every cell closed again."""
        working = self._board.copy()
        working.close_all()
        logger.debug("Restarting %s game on the same layout", self._level)
        self._reset(working)

    def _start_new_game(self) -> None:
        board = generate_board(self._config, rng=self._rng)
        logger.info(
            "New %s game: %dx%d with %d mines",
            self._level,
            self._config.rows,
            self._config.cols,
            self._config.total_mines,
        )
        self._reset(board)

    def _reset(self, board: Board) -> None:
        self._stopwatch.reset()
        self._flags_placed = 0
        self._status = GameStatus.NOT_STARTED
        self._publish(board)
        self._emit(GameEvent.NEW_GAME)

    def _publish(self, board: Board) -> None:
        """Swap in a fully updated board."""
        if self._board is not None:
            board.version = self._board.version + 1
        self._board = board

    def _begin_playing(self) -> None:
        if self._status is GameStatus.NOT_STARTED:
            self._status = GameStatus.PLAYING
            self._stopwatch.start()

    def _finish(self, status: GameStatus) -> None:
        self._status = status
        self._stopwatch.stop()
        logger.info(
            "Game %s after %s", status.name.lower(), self._stopwatch.formatted()
        )

    # ========================================================================
    # Click Handling
    # ========================================================================

    def left_click(self, row: int, col: int) -> bool:
        """
        Open the cell at (row, col).

        On the very first interaction of a game a mine under the cursor
        causes the whole layout to be dealt again with that cell kept
        safe, so every other number may change.

        Returns:
            True if the board changed, False for a no-op.

        Raises:
            IndexError: If the position is off the board.
        """
        cell = self._board.cell_at(row, col)
        if self.ended or not cell.is_hidden:
            return False

        if self._status is GameStatus.NOT_STARTED and cell.is_mine:
            logger.debug("First click at (%d, %d) hit a mine, redealing", row, col)
            working = generate_board(
                self._config, safe_cell=(row, col), rng=self._rng
            )
        else:
            working = self._board.copy()

        outcome = reveal_from(working, row, col)
        self._begin_playing()

        won = False
        if outcome is RevealOutcome.MINE:
            reveal_all_mines(working, highlight_win=False)
            self._finish(GameStatus.LOST)
        elif is_win(working, self._config.total_mines):
            reveal_all_mines(working, highlight_win=True)
            won = True
            self._finish(GameStatus.WON)

        self._publish(working)

        if outcome is RevealOutcome.MINE:
            self._emit(GameEvent.GAME_LOST)
            return True
        if outcome is RevealOutcome.EMPTY:
            self._emit(GameEvent.REVEAL_EMPTY)
        else:
            self._emit(GameEvent.REVEAL_NUMBER)
        if won:
            self._emit(GameEvent.GAME_WON)
        return True

    def right_click(self, row: int, col: int) -> bool:
        """
        Toggle the flag on the cell at (row, col).

        Flagging every mine wins the game.

        Returns:
            True if the flag was toggled, False for a no-op.

        Raises:
            IndexError: If the position is off the board.
        """
        cell = self._board.cell_at(row, col)
        if self.ended or cell.is_revealed:
            return False

        working = self._board.copy()
        target = working.cell_at(row, col)
        target.toggle_flag()
        placed = target.is_flagged
        flags_placed = self._flags_placed + (1 if placed else -1)
        self._begin_playing()

        won = is_win(working, self._config.total_mines)
        if won:
            reveal_all_mines(working, highlight_win=True)
            self._finish(GameStatus.WON)

        self._flags_placed = flags_placed
        self._publish(working)

        if placed:
            self._emit(GameEvent.FLAG_PLACED)
        else:
            self._emit(GameEvent.FLAG_REMOVED)
        if won:
            self._emit(GameEvent.GAME_WON)
        return True

    def tick(self) -> str:
        """Periodic refresh for the time display; never touches the board."""
        return self.elapsed

    # ========================================================================
    # State Accessors
    # ========================================================================

    @property
    def board(self) -> Board:
        return self._board

    @property
    def level(self) -> str:
        return self._level

    @property
    def config(self) -> BoardConfig:
        return self._config

    @property
    def custom_settings(self) -> BoardConfig:
        return self._custom_settings

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def flags_placed(self) -> int:
        return self._flags_placed

    @property
    def mines_left(self) -> int:
        """Mines minus flags; negative when over-flagged."""
        return self._config.total_mines - self._flags_placed

    @property
    def won(self) -> bool:
        return self._status is GameStatus.WON

    @property
    def lost(self) -> bool:
        return self._status is GameStatus.LOST

    @property
    def ended(self) -> bool:
        return self._status in TERMINAL_STATUSES

    @property
    def timer_running(self) -> bool:
        return self._stopwatch.is_running

    @property
    def elapsed_seconds(self) -> float:
        return self._stopwatch.elapsed_seconds

    @property
    def elapsed(self) -> str:
        """Elapsed time as MM:SS."""
        return self._stopwatch.formatted()
