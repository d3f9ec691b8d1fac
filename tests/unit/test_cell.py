"""
Unit tests for Cell class.

Tests cell state management, reveal/flag behavior, content and
observation conversion.
"""
import pytest
from sweeper import Cell, CellState, Highlight, MINE


# ============================================================================
# Cell Initialization Tests
# ============================================================================

class TestCellInitialization:
    """Test cell creation and default values."""

    def test_default_cell_is_not_mine(self) -> None:
        """New cell should not be a mine by default."""
        cell = Cell()
        assert cell.is_mine is False

    def test_default_cell_is_hidden(self) -> None:
        """New cell should be hidden by default."""
        cell = Cell()
        assert cell.state == CellState.HIDDEN
        assert cell.is_hidden is True

    def test_default_cell_has_no_highlight(self) -> None:
        """New cell should carry no end-of-game highlight."""
        assert Cell().highlight == Highlight.NONE

    def test_unassigned_cell_has_no_content(self) -> None:
        """Cells waiting for mine placement expose no content."""
        assert Cell(assigned=False).content is None

    def test_mine_content(self, mine_cell: Cell) -> None:
        """Mine cells report the mine marker as content."""
        assert mine_cell.content == MINE

    def test_number_content(self) -> None:
        """Non-mine cells report their adjacent count."""
        assert Cell(adjacent_mines=5).content == 5


# ============================================================================
# Cell Reveal Tests
# ============================================================================

class TestCellReveal:
    """Test cell reveal behavior."""

    def test_reveal_hidden_cell_returns_true(self, hidden_cell: Cell) -> None:
        """Revealing a hidden cell should succeed."""
        assert hidden_cell.reveal() is True

    def test_reveal_changes_state_to_revealed(self, hidden_cell: Cell) -> None:
        """Revealing a cell should change its state."""
        hidden_cell.reveal()
        assert hidden_cell.state == CellState.REVEALED
        assert hidden_cell.is_revealed is True

    def test_reveal_already_revealed_returns_false(
        self, numbered_cell: Cell
    ) -> None:
        """Revealing an already revealed cell should fail."""
        assert numbered_cell.reveal() is False

    def test_reveal_flagged_cell_returns_false(self, hidden_cell: Cell) -> None:
        """Cannot reveal a flagged cell."""
        hidden_cell.toggle_flag()
        assert hidden_cell.reveal() is False
        assert hidden_cell.is_flagged is True


# ============================================================================
# Cell Flag Tests
# ============================================================================

class TestCellFlag:
    """Test cell flagging behavior."""

    def test_flag_changes_state_to_flagged(self, hidden_cell: Cell) -> None:
        """Flagging a cell should change its state."""
        assert hidden_cell.toggle_flag() is True
        assert hidden_cell.state == CellState.FLAGGED

    def test_unflag_returns_to_hidden(self, hidden_cell: Cell) -> None:
        """Unflagging a cell should return it to hidden."""
        hidden_cell.toggle_flag()
        hidden_cell.toggle_flag()
        assert hidden_cell.is_hidden is True

    def test_flag_revealed_cell_returns_false(
        self, numbered_cell: Cell
    ) -> None:
        """Cannot flag a revealed cell."""
        assert numbered_cell.toggle_flag() is False
        assert numbered_cell.is_revealed is True


# ============================================================================
# Cell Close Tests
# ============================================================================

class TestCellClose:
    """Test returning a cell to its initial state."""

    def test_close_keeps_content(self, mine_cell: Cell) -> None:
        """Closing resets state and highlight but keeps the mine."""
        mine_cell.reveal()
        mine_cell.highlight = Highlight.LOSS
        mine_cell.close()
        assert mine_cell.is_hidden is True
        assert mine_cell.highlight == Highlight.NONE
        assert mine_cell.is_mine is True


# ============================================================================
# Cell Observation Tests
# ============================================================================

class TestCellObservation:
    """Test integer codes used by renderers and agents."""

    def test_hidden_cell_observation_is_negative_one(
        self, hidden_cell: Cell
    ) -> None:
        """Hidden cell should return -1."""
        assert hidden_cell.to_observation() == -1

    def test_flagged_cell_observation_is_negative_two(
        self, hidden_cell: Cell
    ) -> None:
        """Flagged cell should return -2."""
        hidden_cell.toggle_flag()
        assert hidden_cell.to_observation() == -2

    @pytest.mark.parametrize("count", range(0, 9))
    def test_revealed_cell_observation_matches_adjacent_count(
        self, count: int
    ) -> None:
        """Revealed cell returns its adjacent mine count."""
        cell = Cell(adjacent_mines=count)
        cell.reveal()
        assert cell.to_observation() == count

    def test_revealed_mine_observation_is_nine(self, mine_cell: Cell) -> None:
        """Revealed mine should return 9."""
        mine_cell.reveal()
        assert mine_cell.to_observation() == 9
