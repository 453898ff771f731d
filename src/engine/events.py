"""
Risky Dice - Turn Event Definitions

Event types and payloads recorded as a turn moves through its phases.
Front-ends read them to announce busts, exhausted dice and wins.
"""

from dataclasses import dataclass, field
from enum import Enum, auto


class TurnEvent(Enum):
    """Events that can occur during a turn."""

    THROWN = auto()
    SELECTED = auto()
    REROLLED = auto()
    EXHAUSTED = auto()
    BUST = auto()
    BANKED = auto()
    WON = auto()


@dataclass(frozen=True)
class TurnEventRecord:
    """
    One entry of a turn's event log.

    Attributes:
        event: What happened
        points: Points involved (option value, banked or forfeited points)
        dice: Dice values in play after the event
    """

    event: TurnEvent
    points: int = 0
    dice: tuple[int, ...] = field(default_factory=tuple)


_EVENT_MESSAGES: dict[TurnEvent, str] = {
    TurnEvent.THROWN: "Threw {dice}",
    TurnEvent.SELECTED: "Took {points} points",
    TurnEvent.REROLLED: "Re-rolled: {dice}",
    TurnEvent.EXHAUSTED: "Exhausted dice, re-rolling! {dice}",
    TurnEvent.BUST: "Bust! {dice} turn points lost: {points}",
    TurnEvent.BANKED: "Banking {points}",
    TurnEvent.WON: "Reached the target with {points} turn points!",
}


def describe_event(record: TurnEventRecord) -> str:
    """Human-readable line for an event record."""
    template = _EVENT_MESSAGES[record.event]
    return template.format(points=record.points, dice=list(record.dice))
