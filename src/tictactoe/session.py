"""
Single-player session: one game at a time against the heuristic, plus a score tally.

The session is what a front-end talks to. It holds the current GameState and
swaps it for the state returned by the engine after each move.
"""

import random
from typing import Optional, Tuple

from .config import SessionConfig
from .game import GameState, apply_move, new_game, winning_line
from .heuristic import select_move
from .score import Outcome, ScoreTally


class Session:
    """
    Game + score for one player.

    Each instance owns its own state and random source; nothing is shared
    between sessions.
    """

    def __init__(self, config: Optional[SessionConfig] = None):
        self.config = config or SessionConfig()
        self.rng = random.Random(self.config.seed)
        self.scores = ScoreTally()
        self.state = new_game()

    @property
    def human_mark(self) -> int:
        return self.config.human_mark

    @property
    def computer_mark(self) -> int:
        return self.config.computer_mark

    @property
    def is_computer_turn(self) -> bool:
        return self.state.active and self.state.player == self.computer_mark

    @property
    def outcome(self) -> Optional[Outcome]:
        if self.state.active:
            return None
        return Outcome.from_state(self.state, self.human_mark)

    @property
    def winning_line(self) -> Optional[Tuple[int, int, int]]:
        """Cells to highlight once the game is won."""
        if self.state.active:
            return None
        return winning_line(self.state.board)

    @property
    def status(self) -> str:
        outcome = self.outcome
        if outcome is None:
            return "Your turn: pick a cell" if not self.is_computer_turn else "Computer is thinking..."
        if outcome is Outcome.HUMAN_WIN:
            return "You win!"
        if outcome is Outcome.COMPUTER_WIN:
            return "Computer wins! Try again"
        return "Tie! Try again"

    def _advance(self, state: GameState) -> GameState:
        self.state = state
        if not state.active:
            self.scores.record(Outcome.from_state(state, self.human_mark))
        return state

    def human_move(self, index: int) -> GameState:
        """
        Apply the human's move.

        Raises:
            InvalidMove: the move was rejected; the session state is unchanged
        """
        return self._advance(apply_move(self.state, index, self.human_mark))

    def computer_move(self) -> Optional[int]:
        """
        Compute and apply the computer's move.

        Returns the chosen cell, or None when it is not the computer's turn.
        """
        if not self.is_computer_turn:
            return None
        move = select_move(self.state.board, self.human_mark, self.computer_mark, rng=self.rng)
        self._advance(apply_move(self.state, move, self.computer_mark))
        return move

    def restart(self) -> GameState:
        """Start a new game. Scores are kept."""
        self.state = new_game()
        return self.state

    def reset_scores(self) -> GameState:
        """Zero the tally and start a new game."""
        self.scores.reset()
        return self.restart()
