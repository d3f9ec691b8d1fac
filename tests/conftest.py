"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from sweeper import Board, BoardConfig, Cell, CUSTOM_LEVEL, GameSession
import sweeper.session as session_module


# ============================================================================
# Helpers
# ============================================================================

class FakeClock:
    """Manually advanced time source for the stopwatch."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 9x9 board with no content assigned."""
    return Board()


@pytest.fixture
def center_mine_board() -> Board:
    """3x3 board with its single mine in the middle."""
    return Board.from_mines(BoardConfig(3, 3, 1), [(1, 1)])


@pytest.fixture
def corner_mine_board() -> Board:
    """5x5 board with one mine in the bottom-right corner."""
    return Board.from_mines(BoardConfig(5, 5, 1), [(4, 4)])


@pytest.fixture
def wall_board() -> Board:
    """5x5 board with a full column of mines down the middle."""
    return Board.from_mines(
        BoardConfig(5, 5, 5), [(row, 2) for row in range(5)]
    )


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


@pytest.fixture
def numbered_cell() -> Cell:
    """Create a revealed cell with adjacent mines."""
    cell = Cell(adjacent_mines=3)
    cell.reveal()
    return cell


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)


# ============================================================================
# Session Fixtures
# ============================================================================

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def make_session(monkeypatch, clock):
    """
    Build a session whose boards come from fixed mine layouts.

    Each layout is consumed by one board generation; once they run out
    the real generator takes over. Calls are recorded on
    ``session.generated`` as (config, safe_cell) tuples.
    """
    def factory(config: BoardConfig, *layouts) -> GameSession:
        queue = [list(layout) for layout in layouts]
        calls = []
        real_generate = session_module.generate_board

        def fake_generate(cfg, safe_cell=None, rng=None):
            calls.append((cfg, safe_cell))
            if queue:
                return Board.from_mines(cfg, queue.pop(0))
            return real_generate(cfg, safe_cell=safe_cell, rng=rng)

        monkeypatch.setattr(session_module, "generate_board", fake_generate)
        session = GameSession(
            level=CUSTOM_LEVEL, custom_settings=config, seed=7, clock=clock
        )
        session.generated = calls
        return session

    return factory
