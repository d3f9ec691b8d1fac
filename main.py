#!/usr/bin/env python3
"""
Minesweeper - Terminal front end.

Usage:
    python main.py play [--level NAME | --rows R --cols C --mines M] [--seed N]
    python main.py levels
"""
import argparse
import logging
from typing import List, Optional

from sweeper import (
    CUSTOM_LEVEL,
    DEFAULT_LEVEL,
    LEVELS,
    GameEvent,
    GameSession,
    InvalidConfiguration,
    difficulty_label,
    mine_density,
)


HELP_TEXT = """Commands:
  o ROW COL          open a cell
  f ROW COL          toggle a flag
  n                  new game
  r                  restart the same layout
  l NAME             change level ({levels})
  c ROWS COLS MINES  custom game
  q                  quit"""

EFFECTS = {
    GameEvent.FLAG_PLACED: "[flag placed]",
    GameEvent.FLAG_REMOVED: "[flag removed]",
    GameEvent.REVEAL_EMPTY: "[whoosh]",
    GameEvent.REVEAL_NUMBER: "[click]",
    GameEvent.GAME_WON: "*** WIN! ***",
    GameEvent.GAME_LOST: "*** BOOM - game over ***",
}


def print_effect(event: GameEvent, session: GameSession) -> None:
    """Stand-in for sound effects: print a short cue per event."""
    text = EFFECTS.get(event)
    if text:
        print(text)


def render(session: GameSession) -> str:
    """Render the header and board with row/column indices."""
    board = session.board
    width = len(str(board.cols - 1))
    header = " " * (width + 2) + " ".join(
        str(col % 10) for col in range(board.cols)
    )
    lines = [
        f"Level: {session.level}  Mines left: {session.mines_left}  "
        f"Time: {session.tick()}  Status: {session.status.name}",
        header,
    ]
    for row, line in enumerate(board.render_ascii().split("\n")):
        lines.append(f"{row:>{width}}  {line}")
    return "\n".join(lines)


def parse_position(args: List[str]) -> Optional[tuple]:
    if len(args) != 2:
        return None
    try:
        return int(args[0]), int(args[1])
    except ValueError:
        return None


def handle_command(session: GameSession, line: str) -> bool:
    """
    Apply one player command.

    Returns:
        False when the player asked to quit.
    """
    parts = line.split()
    if not parts:
        return True
    command, args = parts[0].lower(), parts[1:]

    if command in ("q", "quit"):
        return False
    if command in ("o", "open", "f", "flag"):
        position = parse_position(args)
        if position is None or not session.board.is_valid_position(*position):
            print("Expected a row and column on the board.")
            return True
        if command in ("o", "open"):
            session.left_click(*position)
        else:
            session.right_click(*position)
    elif command in ("n", "new"):
        session.new_game()
    elif command in ("r", "restart"):
        session.restart()
    elif command in ("l", "level") and len(args) == 1:
        try:
            session.change_level(args[0])
        except InvalidConfiguration as error:
            print(error)
    elif command in ("c", "custom") and len(args) == 3:
        try:
            rows, cols, mines = (int(value) for value in args)
            config = session.set_custom_settings(rows, cols, mines)
        except ValueError as error:
            print(f"Rejected: {error}")
        else:
            print(
                f"Custom game: {mine_density(config):.1f}% mines "
                f"({difficulty_label(config)})"
            )
    else:
        print(HELP_TEXT.format(levels=", ".join(list(LEVELS) + [CUSTOM_LEVEL])))
    return True


def play(args: argparse.Namespace) -> None:
    """Run an interactive game in the terminal."""
    session = GameSession(level=args.level, seed=args.seed)
    if args.rows or args.cols or args.mines:
        config = session.custom_settings
        session.set_custom_settings(
            args.rows or config.rows,
            args.cols or config.cols,
            args.mines or config.total_mines,
        )
    session.subscribe(print_effect)

    print(HELP_TEXT.format(levels=", ".join(list(LEVELS) + [CUSTOM_LEVEL])))
    while True:
        print()
        print(render(session))
        try:
            line = input("> ")
        except EOFError:
            break
        if not handle_command(session, line):
            break


def levels(args: argparse.Namespace) -> None:
    """List the predefined levels."""
    print(f"{'Level':<14} {'Rows':>5} {'Cols':>5} {'Mines':>6}  Difficulty")
    print("-" * 48)
    for name, config in LEVELS.items():
        marker = " (default)" if name == DEFAULT_LEVEL else ""
        print(
            f"{name:<14} {config.rows:>5} {config.cols:>5} "
            f"{config.total_mines:>6}  {difficulty_label(config)}{marker}"
        )


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(description="Minesweeper in the terminal")
    parser.add_argument(
        "--verbose", action="store_true", help="Log game transitions"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play a game")
    play_parser.add_argument(
        "--level",
        choices=list(LEVELS) + [CUSTOM_LEVEL],
        default=DEFAULT_LEVEL,
        help="Difficulty level",
    )
    play_parser.add_argument("--rows", type=int, help="Custom board rows")
    play_parser.add_argument("--cols", type=int, help="Custom board columns")
    play_parser.add_argument("--mines", type=int, help="Custom mine count")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine placement"
    )

    subparsers.add_parser("levels", help="List difficulty levels")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command == "play":
        try:
            play(args)
        except InvalidConfiguration as error:
            parser.error(str(error))
    elif args.command == "levels":
        levels(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
