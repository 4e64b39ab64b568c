#!/usr/bin/env python3
"""
Minefield - Main entry point.

Requires the package to be installed first (pip install -e .), since
the engine is imported as minefield from src/.

Usage:
    python main.py [--verbose] play [--seed N]
    python main.py [--verbose] demo [--games N] [--max-steps N]
        [--delay S] [--seed N]
"""
import argparse
import logging
import sys
import time
from typing import Optional, TextIO

import numpy as np

from minefield import GameSession, MinesweeperEnv, MoveResult, RandomAgent
from minefield.board import REFERENCE
from minefield.render import render_ansi


HELP_TEXT = (
    "Commands: r COL ROW (reveal), f COL ROW (flag), "
    "n (new game), q (quit)"
)


def execute(session: GameSession, line: str) -> Optional[str]:
    """
    Run one command line against a session.

    Returns:
        A message for the player, or None to quit.
    """
    parts = line.split()
    if not parts:
        return ""
    command = parts[0].lower()

    if command == "q":
        return None
    if command == "n":
        session.new_game()
        return "New game"
    if command not in ("r", "f") or len(parts) != 3:
        return HELP_TEXT

    try:
        column, row = int(parts[1]), int(parts[2])
    except ValueError:
        return HELP_TEXT
    if not session.board.is_valid_position(column, row):
        return f"({column}, {row}) is off the board"

    if command == "f":
        session.on_toggle_flag(column, row)
        return ""

    result = session.on_reveal(column, row)
    if result == MoveResult.WON:
        return "*** WIN! ***"
    if result == MoveResult.LOST:
        return "*** LOST (hit mine) ***"
    return ""


def play(args: argparse.Namespace, stdin: Optional[TextIO] = None) -> None:
    """Play an interactive game in the terminal, reading stdin by default."""
    if stdin is None:
        stdin = sys.stdin
    session = GameSession(REFERENCE, np.random.default_rng(args.seed))
    print(HELP_TEXT)
    print(render_ansi(session.board))

    for line in stdin:
        message = execute(session, line)
        if message is None:
            break
        print(render_ansi(session.board))
        if message:
            print(message)


def demo(args: argparse.Namespace) -> None:
    """Watch the random agent play."""
    env = MinesweeperEnv(config=REFERENCE, render_mode="ansi")
    agent = RandomAgent(REFERENCE.width, REFERENCE.height, seed=args.seed)

    wins = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        obs, info = env.reset(seed=seed)
        print(f"=== Game {game + 1}/{args.games} | {info['mines']} mines ===")

        for _ in range(args.max_steps):
            action = agent.select_action(obs, env.get_action_mask())
            obs, reward, terminated, truncated, info = env.step(action)
            if terminated or truncated:
                break

        print(env.render())
        print(f"Result: {info['game_state']} after {info['steps']} steps\n")
        if info["game_state"] == "WON":
            wins += 1
        time.sleep(args.delay)

    print(f"=== Final: {wins}/{args.games} wins ===")


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="Minefield - terminal minesweeper"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play in the terminal")
    play_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for mine layouts"
    )

    demo_parser = subparsers.add_parser("demo", help="Watch the random agent")
    demo_parser.add_argument(
        "--games", type=int, default=5, help="Number of games"
    )
    demo_parser.add_argument(
        "--max-steps", type=int, default=500, help="Step limit per game"
    )
    demo_parser.add_argument(
        "--delay", type=float, default=0.0, help="Delay between games"
    )
    demo_parser.add_argument(
        "--seed", type=int, default=None, help="Seed for layouts and agent"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    if args.command == "play":
        play(args)
    elif args.command == "demo":
        demo(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
