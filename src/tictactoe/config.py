"""
Session configuration.
"""

from dataclasses import dataclass
from typing import Optional

from .game import X, O


@dataclass
class SessionConfig:
    """Session configuration."""

    # Random seed for the opponent's fallback move (None: unseeded)
    seed: Optional[int] = None

    # Pause before the computer's move is shown, in seconds.
    # Only the front-end sleeps; the move itself is computed immediately.
    think_delay: float = 0.5

    # Marks
    human_mark: int = X
    computer_mark: int = O

    def __post_init__(self):
        if {self.human_mark, self.computer_mark} != {X, O}:
            raise ValueError("human_mark and computer_mark must be X and O")
        if self.think_delay < 0:
            raise ValueError("think_delay must be >= 0")
