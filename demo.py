#!/usr/bin/env python3
"""Replay games of a player that clicks closed cells at random."""
import argparse
import os
import time

import numpy as np

from sweeper import BoardConfig, MinesweeperEnv


def redraw(header: str, env: MinesweeperEnv) -> None:
    os.system('cls' if os.name == 'nt' else 'clear')
    print(header)
    print(env.render())


def play_one(env: MinesweeperEnv, rng: np.random.Generator, title: str,
             delay: float) -> bool:
    """Click random closed cells until the game ends; True on a win."""
    redraw(title, env)
    time.sleep(delay)

    clicks = 0
    while True:
        action = int(rng.choice(np.flatnonzero(env.get_action_mask())))
        _, _, terminated, _, info = env.step(action)
        clicks += 1
        row, col = env.position_of(action)
        redraw(f"{title} | click {clicks} at ({row}, {col}) "
               f"| mines left {info['mines_left']}", env)
        time.sleep(delay)
        if terminated:
            return info["game_state"] == "WON"


def demo(config: BoardConfig, games: int = 5, delay: float = 0.3,
         seed: int = None) -> int:
    """Play ``games`` random games on ``config`` and return the win count."""
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(seed)
    wins = 0

    for game in range(1, games + 1):
        env.reset(seed=None if seed is None else seed + game)
        if play_one(env, rng, f"Game {game}/{games} | wins {wins}", delay):
            wins += 1
            print("\nCleared the board.")
        else:
            print("\nClicked a mine.")
        time.sleep(1.0)

    print(f"\n{wins} of {games} games won")
    return wins


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--rows", type=int, default=9)
    parser.add_argument("--cols", type=int, default=9)
    parser.add_argument("--mines", type=int, default=10)
    parser.add_argument("--games", type=int, default=5)
    parser.add_argument("--delay", type=float, default=0.3,
                        help="Seconds between clicks")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seeds both the layouts and the clicks")
    args = parser.parse_args()

    config = BoardConfig(rows=args.rows, cols=args.cols,
                         total_mines=args.mines)
    demo(config, games=args.games, delay=args.delay, seed=args.seed)


if __name__ == "__main__":
    main()
