"""
Elapsed-time tracking for a game.
"""
import time
from typing import Callable, Optional


def format_elapsed(seconds: float) -> str:
    """Format seconds as MM:SS; minutes are not capped."""
    whole = int(seconds)
    minutes, secs = divmod(whole, 60)
    return f"{minutes:02d}:{secs:02d}"


class Stopwatch:
    """
    Start/stop timer with an injectable clock.

    Once stopped it keeps reporting the frozen duration until reset.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._started_at: Optional[float] = None
        self._stopped_at: Optional[float] = None

    @property
    def is_running(self) -> bool:
        return self._started_at is not None and self._stopped_at is None

    @property
    def has_started(self) -> bool:
        return self._started_at is not None

    def start(self) -> None:
        """Start the timer; no-op if it has already been started."""
        if self._started_at is None:
            self._started_at = self._clock()

    def stop(self) -> None:
        """Freeze the elapsed time; no-op unless running."""
        if self.is_running:
            self._stopped_at = self._clock()

    def reset(self) -> None:
        self._started_at = None
        self._stopped_at = None

    @property
    def elapsed_seconds(self) -> float:
        if self._started_at is None:
            return 0.0
        end = self._stopped_at if self._stopped_at is not None else self._clock()
        return max(0.0, end - self._started_at)

    def formatted(self) -> str:
        return format_elapsed(self.elapsed_seconds)
