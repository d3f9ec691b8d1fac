"""
Hook points fired by the game session.

Front ends subscribe to these to drive sound effects and visual
effects; the core never plays anything itself.
"""
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from .session import GameSession


class GameEvent(Enum):
    """Notifications emitted on session state transitions."""

    NEW_GAME = auto()
    FLAG_PLACED = auto()
    FLAG_REMOVED = auto()
    REVEAL_EMPTY = auto()
    REVEAL_NUMBER = auto()
    GAME_WON = auto()
    GAME_LOST = auto()


EventListener = Callable[[GameEvent, "GameSession"], None]
