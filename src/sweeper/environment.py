"""
Gymnasium adapter over a game session.

Each step is one left click on a ``GameSession`` playing a custom
board, so scripted players go through the same first-click safety,
flood fill and win check as a person at the terminal. Flags are not
part of the action space.
"""
from typing import Any, Dict, Optional, Tuple, SupportsFloat

import gymnasium as gym
import numpy as np
from gymnasium import spaces

from .board import BoardConfig, Position
from .levels import CUSTOM_LEVEL
from .session import GameSession, GameStatus


# Score for a click that changed the board, keyed by the status it left.
CLICK_SCORES: Dict[GameStatus, float] = {
    GameStatus.PLAYING: 1.0,
    GameStatus.WON: 10.0,
    GameStatus.LOST: -10.0,
}
# Clicks on opened or flagged cells leave the board as it was.
WASTED_CLICK_SCORE = -0.1


class MinesweeperEnv(gym.Env):
    """
    One custom-level game per episode, played by cell index.

    The observation is ``Board.get_observation()``: -1 closed, -2
    flagged, 0-8 an opened count and 9 a mine shown after the game
    ends. Action ``i`` clicks ``divmod(i, cols)``. Scores come from
    ``CLICK_SCORES`` and ``WASTED_CLICK_SCORE``; an episode terminates
    when the session is won or lost.
    """

    metadata = {"render_modes": ["human", "ansi"], "render_fps": 4}

    def __init__(
        self,
        config: Optional[BoardConfig] = None,
        render_mode: Optional[str] = None,
    ) -> None:
        super().__init__()

        self.config = config or BoardConfig()
        self.render_mode = render_mode
        self.session = self._open_session()

        self.observation_space = spaces.Box(
            low=-2,
            high=9,
            shape=(self.config.rows, self.config.cols),
            dtype=np.int8,
        )
        self.action_space = spaces.Discrete(self.config.total_cells)

        self._clicks = 0

    def _open_session(self, seed=None) -> GameSession:
        return GameSession(
            custom_settings=self.config, level=CUSTOM_LEVEL, seed=seed
        )

    def reset(
        self,
        *,
        seed: Optional[int] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Tuple[np.ndarray, Dict[str, Any]]:
        """
        Deal a fresh layout.

        A seed rebuilds the session around the environment's seeded
        generator so mine layouts repeat; without one the current
        session just starts another game.
        """
        super().reset(seed=seed)
        if seed is not None:
            self.session = self._open_session(seed=self.np_random)
        else:
            self.session.new_game()
        self._clicks = 0

        return self.session.board.get_observation(), self._get_info()

    def step(
        self, action: int
    ) -> Tuple[np.ndarray, SupportsFloat, bool, bool, Dict[str, Any]]:
        """Click the cell at ``action`` and score what happened."""
        row, col = self.position_of(action)
        self._clicks += 1

        if self.session.left_click(row, col):
            reward = CLICK_SCORES[self.session.status]
        else:
            reward = WASTED_CLICK_SCORE

        return (
            self.session.board.get_observation(),
            reward,
            self.session.ended,
            False,
            self._get_info(),
        )

    def position_of(self, action: int) -> Position:
        return divmod(int(action), self.config.cols)

    def _get_info(self) -> Dict[str, Any]:
        board = self.session.board
        return {
            "steps": self._clicks,
            "revealed": board.config.total_cells - board.count_unopened(),
            "total_safe": self.config.total_cells - self.config.total_mines,
            "game_state": self.session.status.name,
            "mines_left": self.session.mines_left,
            "valid_actions": len(board.get_valid_actions()),
        }

    def render(self) -> Optional[str]:
        text = self.session.board.render_ascii()
        if self.render_mode == "ansi":
            return text
        if self.render_mode == "human":
            print(text)
        return None

    def get_action_mask(self) -> np.ndarray:
        """Flat boolean mask of the cells a click would still open."""
        mask = np.zeros(self.action_space.n, dtype=bool)
        for row, col in self.session.board.get_valid_actions():
            mask[row * self.config.cols + col] = True
        return mask
