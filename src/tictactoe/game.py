"""
TicTacToe game rules and state management.

Board representation: tuple[int] of length 9
  - 0: empty
  - +1: X (human, moves first)
  - -1: O (computer)

GameState.winner: None while the game runs, +1/-1 for a win, 0 (TIE) for a tie.
"""

import operator
from dataclasses import dataclass, replace
from typing import Iterable, List, Optional, Sequence, Tuple

EMPTY = 0
X = +1
O = -1
TIE = 0

SYMBOLS = {EMPTY: " ", X: "X", O: "O"}

# Winning lines (rows, columns, diagonals); scan order matters for tie-breaks
WIN_LINES = (
    (0, 1, 2), (3, 4, 5), (6, 7, 8),  # rows
    (0, 3, 6), (1, 4, 7), (2, 5, 8),  # columns
    (0, 4, 8), (2, 4, 6),              # diagonals
)

Board = Tuple[int, ...]


class InvalidMove(ValueError):
    """A move request the rules reject. The state it was applied to is unchanged."""

    def __init__(self, index, reason: str, message: str):
        super().__init__(message)
        self.index = index
        self.reason = reason


@dataclass(frozen=True)
class GameState:
    """Immutable game state."""
    board: Board
    player: int  # Side to move: +1 or -1
    active: bool = True
    winner: Optional[int] = None  # +1, -1, TIE, or None while in progress

    @property
    def is_tie(self) -> bool:
        return not self.active and self.winner == TIE


def opponent(player: int) -> int:
    return -player


def new_game() -> GameState:
    """Fresh game: empty board, X to move."""
    return GameState(board=(EMPTY,) * 9, player=X)


def check_winner(board: Sequence[int]) -> Optional[int]:
    """Return the mark filling the first complete line, or None."""
    line = winning_line(board)
    if line is None:
        return None
    return board[line[0]]


def winning_line(board: Sequence[int]) -> Optional[Tuple[int, int, int]]:
    """
    Return the first fully occupied uniform line in WIN_LINES order.

    Boards with more than one such line cannot come out of alternating play,
    but are still answered with the first match.
    """
    for a, b, c in WIN_LINES:
        if board[a] != EMPTY and board[a] == board[b] == board[c]:
            return (a, b, c)
    return None


def is_full(board: Sequence[int]) -> bool:
    return all(v != EMPTY for v in board)


def legal_moves(board: Sequence[int]) -> List[int]:
    """Return list of legal move indices (empty squares)."""
    return [i for i, v in enumerate(board) if v == EMPTY]


def apply_move(state: GameState, index: int, player: int) -> GameState:
    """
    Place `player` on `index` and return the resulting state.

    Raises:
        InvalidMove: index out of range, cell occupied, game over, or
            `player` is not the side to move.
    """
    if isinstance(index, bool):
        raise InvalidMove(index, "out_of_range", f"Cell {index!r} is not in 0-8")
    try:
        index = operator.index(index)
    except TypeError:
        raise InvalidMove(index, "out_of_range", f"Cell {index!r} is not in 0-8") from None
    if not 0 <= index < 9:
        raise InvalidMove(index, "out_of_range", f"Cell {index} is not in 0-8")
    if not state.active:
        raise InvalidMove(index, "inactive", "Game is already over")
    if player != state.player:
        raise InvalidMove(
            index, "wrong_turn",
            f"It is {SYMBOLS[state.player]}'s turn, not {SYMBOLS.get(player, player)}'s",
        )
    if state.board[index] != EMPTY:
        raise InvalidMove(index, "occupied", f"Cell {index} is already taken")

    board = state.board[:index] + (player,) + state.board[index + 1:]

    # Win check first: a winning move on the last empty cell is a win
    if check_winner(board) is not None:
        return replace(state, board=board, active=False, winner=player)
    if is_full(board):
        return replace(state, board=board, active=False, winner=TIE)
    return replace(state, board=board, player=opponent(player))


def render_board(board: Sequence[int], highlight: Iterable[int] = ()) -> str:
    """Text grid; highlighted cells are shown in brackets, empty cells by index."""
    marked = set(highlight)
    cells = []
    for i, v in enumerate(board):
        sym = SYMBOLS[v] if v != EMPTY else str(i)
        cells.append(f"[{sym}]" if i in marked else f" {sym} ")
    rows = ["|".join(cells[r * 3:r * 3 + 3]) for r in range(3)]
    return "\n---+---+---\n".join(rows)
