"""
Risky Dice Game Engine.

Pure Python game logic with zero UI/config dependencies.
Handles dice throwing, scoring options, bust detection and exhausted dice.
"""

from src.engine.base import (
    NUM_DICE,
    TARGET_SCORE,
    PatternKind,
    ScoringOption,
    TurnPhase,
)
from src.engine.dice import DiceSet, is_exhausted, new_throw, reroll
from src.engine.events import TurnEvent, TurnEventRecord, describe_event
from src.engine.scoring import ScoringEngine, is_bust, scoring_options
from src.engine.turn import TurnState, accept, bank, would_win

__all__ = [
    # Constants
    "NUM_DICE",
    "TARGET_SCORE",
    # Data Classes
    "DiceSet",
    "ScoringOption",
    "TurnEventRecord",
    # Enums
    "PatternKind",
    "TurnEvent",
    "TurnPhase",
    # Engines
    "ScoringEngine",
    "TurnState",
    # Operations
    "accept",
    "bank",
    "describe_event",
    "is_bust",
    "is_exhausted",
    "new_throw",
    "reroll",
    "scoring_options",
    "would_win",
]
