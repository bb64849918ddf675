#!/usr/bin/env python3
"""
Play TicTacToe against the computer in the terminal.

Usage:
    python play.py
    python play.py --seed 7 --think-delay 0
"""

import sys
import time
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from tictactoe import InvalidMove, Session, SessionConfig, render_board


def print_scores(session: Session):
    s = session.scores
    print(f"Score  You: {s.human_wins}  Computer: {s.computer_wins}  Ties: {s.ties}")


def show(session: Session):
    print()
    print(render_board(session.state.board, highlight=session.winning_line or ()))
    print()
    print(session.status)


def computer_turn(session: Session):
    """Compute the move right away, then wait before showing it."""
    move = session.computer_move()
    if move is None:
        return
    time.sleep(session.config.think_delay)
    print(f"Computer plays: {move}")
    show(session)


def finish_game(session: Session):
    print_scores(session)
    print("Enter r to play again, z to reset scores, q to quit.")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Play TicTacToe against the computer")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the computer")
    parser.add_argument("--think-delay", type=float, default=0.5, help="Seconds before the computer's move is shown")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    session = Session(SessionConfig(seed=args.seed, think_delay=args.think_delay))

    print("=== TicTacToe ===")
    print("You are X. Enter a cell 0-8, r to restart, z to reset scores, q to quit.")
    show(session)

    while True:
        try:
            cmd = input("> ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            print("\nBye")
            return

        if cmd == "q":
            print_scores(session)
            return
        if cmd == "r":
            session.restart()
            show(session)
            continue
        if cmd == "z":
            session.reset_scores()
            print_scores(session)
            show(session)
            continue

        try:
            index = int(cmd)
        except ValueError:
            print("Please type a number 0-8, or r/z/q.")
            continue

        try:
            session.human_move(index)
        except InvalidMove as e:
            print(f"Invalid move: {e}")
            continue

        show(session)
        if session.state.active:
            computer_turn(session)
        if not session.state.active:
            finish_game(session)


if __name__ == "__main__":
    main()
