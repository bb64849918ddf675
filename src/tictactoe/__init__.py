"""
TicTacToe against a rule-based computer opponent.

A pure game engine (immutable states in, new states out), a fixed-priority
opponent heuristic, and a session layer that keeps score across games.
"""

from .game import (
    EMPTY,
    X,
    O,
    TIE,
    WIN_LINES,
    GameState,
    InvalidMove,
    new_game,
    apply_move,
    check_winner,
    winning_line,
    is_full,
    legal_moves,
    render_board,
)
from .heuristic import select_move, find_winning_move, find_center_move, find_random_move
from .score import Outcome, ScoreTally
from .config import SessionConfig
from .session import Session
from .eval import play_game, eval_vs_random, eval_self_play

__version__ = "0.1.0"
__all__ = [
    "EMPTY",
    "X",
    "O",
    "TIE",
    "WIN_LINES",
    "GameState",
    "InvalidMove",
    "new_game",
    "apply_move",
    "check_winner",
    "winning_line",
    "is_full",
    "legal_moves",
    "render_board",
    "select_move",
    "find_winning_move",
    "find_center_move",
    "find_random_move",
    "Outcome",
    "ScoreTally",
    "SessionConfig",
    "Session",
    "play_game",
    "eval_vs_random",
    "eval_self_play",
]
