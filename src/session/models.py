"""
Risky Dice - Session Models

Pydantic models for the players and turn history of a game session.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Player(BaseModel):
    """A named player and their permanent score."""

    name: str = Field(min_length=1, max_length=30)
    score: int = Field(default=0, ge=0)

    model_config = {"validate_assignment": True}


class TurnOutcome(str, Enum):
    """How a turn ended."""

    BANKED = "banked"
    BUST = "bust"
    WON = "won"


class TurnRecord(BaseModel):
    """One finished turn, kept in the session history."""

    player_name: str
    round_number: int = Field(ge=1)
    outcome: TurnOutcome
    points: int = Field(default=0, ge=0)
    throws: int = Field(default=1, ge=1)
    score_after: int = Field(default=0, ge=0)

    model_config = {"frozen": True}
