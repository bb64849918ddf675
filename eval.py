#!/usr/bin/env python3
"""
Measure the computer opponent against a random player and against itself.

Usage:
    python eval.py
    python eval.py --games 2000 --seed 1 --out runs/eval.json
"""

import sys
import json
import argparse
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from tictactoe import eval_vs_random, eval_self_play


def print_rates(title: str, results: dict, side: str):
    print(f"\n{title} ({results['games']} games, rates for {side})")
    print(f"  Wins:   {results['win']:.2%}")
    print(f"  Draws:  {results['draw']:.2%}")
    print(f"  Losses: {results['loss']:.2%}")
    print(f"  Length: {results['len_mean']:.2f} ± {results['len_std']:.2f} "
          f"(min {results['len_min']}, max {results['len_max']})")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Evaluate the TicTacToe computer opponent")
    parser.add_argument("--games", type=int, default=500, help="Number of eval games")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--out", type=str, default=None, help="Write results as JSON to this path")
    parser.add_argument("--no-progress", action="store_true", help="Hide progress bars")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    if args.games <= 0:
        print("--games must be positive")
        return 1

    print("=== Evaluation ===")
    vs_random = eval_vs_random(games=args.games, seed=args.seed, progress=not args.no_progress)
    print_rates("vs Random", vs_random, "heuristic")

    self_play = eval_self_play(games=args.games, seed=args.seed, progress=not args.no_progress)
    print_rates("Self-play", self_play, "X")

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w") as f:
            json.dump({
                "seed": args.seed,
                "games": args.games,
                "vs_random": vs_random,
                "self_play": self_play,
            }, f, indent=2)
        print(f"\n✓ Results saved to {out_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
