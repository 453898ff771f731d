"""
Risky Dice - Game Engine Base Classes

This module defines the foundational constants, enums and data structures
used throughout the game engine. Scoring options are immutable (frozen
dataclasses); they are computed fresh on every query and never mutated.
"""

from dataclasses import dataclass
from enum import Enum, auto


# Fixed rules
NUM_DICE = 6
DIE_FACES = 6
TARGET_SCORE = 4000


class PatternKind(Enum):
    """Scoring pattern families, valued by their display label."""
    OF_A_KIND = "of a kind"
    ONES = "ones"
    FIVES = "fives"
    IN_A_ROW = "in a row"

    def __str__(self) -> str:
        return self.value


class TurnPhase(Enum):
    """Phases of a single player's turn."""
    THROWING = auto()            # Dice just thrown, options not yet queried
    AWAITING_SELECTION = auto()  # Options available, player must decide
    BUST = auto()                # Terminal: no options, turn points lost
    BANKED = auto()              # Terminal: turn points added to score
    WON = auto()                 # Terminal: target score reached

    @property
    def is_terminal(self) -> bool:
        return self in (TurnPhase.BUST, TurnPhase.BANKED, TurnPhase.WON)


@dataclass(frozen=True)
class ScoringOption:
    """
    A single legal selection from the current dice.

    Attributes:
        slots: Dice slot identifiers the selection consumes
        points: Points awarded when the selection is accepted
        kind: Pattern family the selection belongs to
    """
    slots: tuple[int, ...]
    points: int
    kind: PatternKind

    def __post_init__(self) -> None:
        """Validate the option is well formed."""
        if not self.slots:
            raise ValueError("A scoring option must use at least one die.")
        if len(set(self.slots)) != len(self.slots):
            raise ValueError(f"Duplicate slots in scoring option: {self.slots}.")
        if self.points <= 0:
            raise ValueError(f"Scoring option points must be positive, got {self.points}.")

    @property
    def dice_count(self) -> int:
        """Number of dice the option consumes."""
        return len(self.slots)

    def __str__(self) -> str:
        return f"{self.points}, [{self.dice_count} {self.kind}]"
