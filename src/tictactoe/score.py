"""
Session score tally.
"""

from enum import Enum
from typing import Dict

from .game import GameState, TIE


class Outcome(Enum):
    """Result of a finished game from the human's side."""
    HUMAN_WIN = "human"
    COMPUTER_WIN = "computer"
    TIE = "tie"

    @classmethod
    def from_state(cls, state: GameState, human_mark: int) -> "Outcome":
        """Map a terminal state to its outcome."""
        if state.active:
            raise ValueError("Game is still in progress")
        if state.winner == TIE:
            return cls.TIE
        return cls.HUMAN_WIN if state.winner == human_mark else cls.COMPUTER_WIN


class ScoreTally:
    """
    Wins/losses/ties across games of one session.

    Counters only go up through record() and back to zero through reset().
    """

    def __init__(self):
        self._counts: Dict[Outcome, int] = {o: 0 for o in Outcome}

    @property
    def human_wins(self) -> int:
        return self._counts[Outcome.HUMAN_WIN]

    @property
    def computer_wins(self) -> int:
        return self._counts[Outcome.COMPUTER_WIN]

    @property
    def ties(self) -> int:
        return self._counts[Outcome.TIE]

    def record(self, outcome: Outcome):
        self._counts[Outcome(outcome)] += 1

    def reset(self):
        for o in self._counts:
            self._counts[o] = 0

    def as_dict(self) -> Dict[str, int]:
        return {o.value: n for o, n in self._counts.items()}

    def __repr__(self) -> str:
        return (f"ScoreTally(human_wins={self.human_wins}, "
                f"computer_wins={self.computer_wins}, ties={self.ties})")
