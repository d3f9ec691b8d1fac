"""
Difficulty levels and custom game settings.
"""
from typing import Dict

from .board import BoardConfig, InvalidConfiguration


# ============================================================================
# Preset Levels
# ============================================================================

BEGINNER = BoardConfig(9, 9, 10)
INTERMEDIATE = BoardConfig(16, 16, 40)
EXPERT = BoardConfig(16, 30, 99)

LEVELS: Dict[str, BoardConfig] = {
    "beginner": BEGINNER,
    "intermediate": INTERMEDIATE,
    "expert": EXPERT,
}

DEFAULT_LEVEL = "beginner"
CUSTOM_LEVEL = "custom"
DEFAULT_CUSTOM_SETTINGS = BoardConfig(10, 10, 15)

# Limit total cells to avoid performance issues
MAX_CUSTOM_CELLS = 480


# ============================================================================
# Custom Settings
# ============================================================================

def validate_custom_settings(
    rows: int, cols: int, total_mines: int
) -> BoardConfig:
    """
    Validate custom game settings.

    Args:
        rows: Requested number of rows.
        cols: Requested number of columns.
        total_mines: Requested mine count.

    Returns:
        The validated configuration.

    Raises:
        InvalidConfiguration: With a message suitable for the player.
    """
    if rows < 1 or cols < 1:
        raise InvalidConfiguration("Rows and columns must be at least 1.")
    total_cells = rows * cols
    if total_cells > MAX_CUSTOM_CELLS:
        raise InvalidConfiguration(
            f"Board size too large. Maximum cells allowed: {MAX_CUSTOM_CELLS}"
        )
    if total_mines >= total_cells:
        raise InvalidConfiguration(
            "Too many mines. Must be less than total cells."
        )
    if total_mines < 1:
        raise InvalidConfiguration("Must have at least 1 mine.")
    return BoardConfig(rows, cols, total_mines)


def resolve_level(level_id: str) -> BoardConfig:
    """Look up a predefined level by name."""
    try:
        return LEVELS[level_id]
    except KeyError:
        known = ", ".join(list(LEVELS) + [CUSTOM_LEVEL])
        raise InvalidConfiguration(
            f"Unknown level {level_id!r} (expected one of: {known})"
        ) from None


# ============================================================================
# Difficulty Rating
# ============================================================================

def mine_density(config: BoardConfig) -> float:
    """Percentage of cells holding a mine."""
    return config.total_mines / config.total_cells * 100


def difficulty_label(config: BoardConfig) -> str:
    """Rate a configuration by its mine density."""
    percentage = mine_density(config)
    if percentage < 10:
        return "Easy"
    if percentage < 20:
        return "Medium"
    if percentage < 30:
        return "Hard"
    return "Expert"
