"""
Rule-based computer opponent.

Priority chain: win now, block the opponent, take the center, random empty
cell. This does not search the game tree and can lose to forks.
"""

import random
from typing import Optional, Sequence

from .game import EMPTY, WIN_LINES, legal_moves

CENTER = 4


def find_winning_move(board: Sequence[int], mark: int) -> Optional[int]:
    """
    First empty cell completing a line for `mark`.

    Lines are scanned in WIN_LINES order, and cells within a line in their
    listed order. Used with the opponent's mark this finds the block.
    """
    for line in WIN_LINES:
        cells = [board[i] for i in line]
        if cells.count(mark) == 2:
            for i in line:
                if board[i] == EMPTY:
                    return i
    return None


def find_center_move(board: Sequence[int]) -> Optional[int]:
    return CENTER if board[CENTER] == EMPTY else None


def find_random_move(board: Sequence[int], rng=None) -> Optional[int]:
    moves = legal_moves(board)
    if not moves:
        return None
    return (rng or random).choice(moves)


def select_move(
    board: Sequence[int],
    opponent_mark: int,
    self_mark: int,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Pick the computer's next cell.

    Args:
        board: Current board
        opponent_mark: Mark of the player to block
        self_mark: Mark the computer plays
        rng: Source for the random fallback (module `random` if None)

    Raises:
        ValueError: the board has no empty cell
    """
    if EMPTY not in board:
        raise ValueError("select_move called on a full board")

    # Compare against None: cell 0 is a valid answer
    move = find_winning_move(board, self_mark)
    if move is None:
        move = find_winning_move(board, opponent_mark)
    if move is None:
        move = find_center_move(board)
    if move is None:
        move = find_random_move(board, rng)
    return move
