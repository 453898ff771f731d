"""
Risky Dice Session Layer.

Players, turn order and turn history for a single game.
"""

from src.session.game import GameSession
from src.session.models import Player, TurnOutcome, TurnRecord

__all__ = [
    "GameSession",
    "Player",
    "TurnOutcome",
    "TurnRecord",
]
