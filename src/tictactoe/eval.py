"""
Evaluation functions.

Plays the heuristic opponent against a random mover and against itself
to measure how often it wins, draws and loses.
"""

import random
from typing import Callable, Dict, List, Optional, Sequence, Tuple

import numpy as np
from tqdm.auto import trange

from .game import TIE, X, O, apply_move, legal_moves, new_game, opponent
from .heuristic import select_move

# (board, mark to play, rng) -> cell index
MoveFn = Callable[[Sequence[int], int, random.Random], int]


def heuristic_policy(board: Sequence[int], mark: int, rng: random.Random) -> int:
    return select_move(board, opponent(mark), mark, rng=rng)


def random_policy(board: Sequence[int], mark: int, rng: random.Random) -> int:
    return rng.choice(legal_moves(board))


def play_game(first: MoveFn, second: MoveFn, rng: random.Random) -> Tuple[int, int, List[int]]:
    """
    Play one game; `first` plays X.

    Returns:
        (winner, length, moves) where winner is +1/-1/TIE
    """
    state = new_game()
    policies = {X: first, O: second}
    moves = []

    while state.active:
        action = policies[state.player](state.board, state.player, rng)
        state = apply_move(state, action, state.player)
        moves.append(action)

    return state.winner, len(moves), moves


def _summarize(wins: int, draws: int, losses: int, lengths: List[int]) -> Dict[str, float]:
    total = wins + draws + losses
    arr = np.asarray(lengths, dtype=np.float64)
    return {
        "games": total,
        "win": wins / total,
        "draw": draws / total,
        "loss": losses / total,
        "len_mean": float(arr.mean()),
        "len_std": float(arr.std()),
        "len_min": int(arr.min()),
        "len_max": int(arr.max()),
    }


def eval_vs_random(games: int = 500, seed: Optional[int] = None, progress: bool = True) -> Dict[str, float]:
    """
    Heuristic vs uniform random mover, alternating who plays X.

    Returns:
        Dict with 'games', 'win', 'draw', 'loss' (heuristic's side) and length stats
    """
    if games <= 0:
        raise ValueError("games must be positive")
    rng = random.Random(seed)
    wins = draws = losses = 0
    lengths = []

    for g in trange(games, desc="vs random", disable=not progress):
        heuristic_side = X if g % 2 == 0 else O
        if heuristic_side == X:
            winner, length, _ = play_game(heuristic_policy, random_policy, rng)
        else:
            winner, length, _ = play_game(random_policy, heuristic_policy, rng)

        if winner == TIE:
            draws += 1
        elif winner == heuristic_side:
            wins += 1
        else:
            losses += 1
        lengths.append(length)

    return _summarize(wins, draws, losses, lengths)


def eval_self_play(games: int = 100, seed: Optional[int] = None, progress: bool = True) -> Dict[str, float]:
    """
    Heuristic vs heuristic. Rates are from X's side.
    """
    if games <= 0:
        raise ValueError("games must be positive")
    rng = random.Random(seed)
    wins = draws = losses = 0
    lengths = []

    for _ in trange(games, desc="self-play", disable=not progress):
        winner, length, _ = play_game(heuristic_policy, heuristic_policy, rng)
        if winner == TIE:
            draws += 1
        elif winner == X:
            wins += 1
        else:
            losses += 1
        lengths.append(length)

    return _summarize(wins, draws, losses, lengths)
