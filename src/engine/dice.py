"""
Risky Dice - Dice Set

Six fixed dice slots. Each slot holds a face value or is empty once its die
has been consumed by an accepted scoring option. Slot identity never
changes, so slot references stay valid while other dice are removed.

Randomness is injected as a ``random.Random`` instance so tests can script
every throw.
"""

import random
from typing import Sequence

from src.engine.base import DIE_FACES, NUM_DICE
from src.engine.validators import validate_dice_values, validate_slots


class DiceSet:
    """The dice currently in play for one turn."""

    def __init__(self, slots: Sequence[int | None], rng: random.Random | None = None):
        if len(slots) != NUM_DICE:
            raise ValueError(f"A dice set has exactly {NUM_DICE} slots, got {len(slots)}.")
        validate_dice_values([v for v in slots if v is not None])
        self._slots: list[int | None] = list(slots)
        self._rng = rng if rng is not None else random.Random()

    @classmethod
    def fresh(cls, rng: random.Random | None = None) -> "DiceSet":
        """Throw all six dice."""
        rng = rng if rng is not None else random.Random()
        return cls([rng.randint(1, DIE_FACES) for _ in range(NUM_DICE)], rng=rng)

    @classmethod
    def from_values(
        cls,
        values: Sequence[int],
        rng: random.Random | None = None
    ) -> "DiceSet":
        """Build a forced throw; values fill slots from 0, the rest are empty."""
        values = validate_dice_values(values)
        return cls(list(values) + [None] * (NUM_DICE - len(values)), rng=rng)

    @property
    def rng(self) -> random.Random:
        return self._rng

    @property
    def slots(self) -> tuple[int | None, ...]:
        """Raw slot states, ``None`` for consumed dice."""
        return tuple(self._slots)

    def items(self) -> list[tuple[int, int]]:
        """(slot, value) pairs for occupied slots, in slot order."""
        return [(slot, value) for slot, value in enumerate(self._slots) if value is not None]

    def values(self) -> list[int]:
        """Occupied face values, in slot order."""
        return [value for value in self._slots if value is not None]

    def occupied_count(self) -> int:
        return sum(1 for value in self._slots if value is not None)

    def is_exhausted(self) -> bool:
        """True once every die has been consumed."""
        return self.occupied_count() == 0

    def consume(self, slots: Sequence[int]) -> None:
        """
        Empty the given slots.

        Raises:
            ValueError: If any slot is out of range, repeated or already empty.
                The set is left unchanged.
        """
        occupied = [slot for slot, _ in self.items()]
        for slot in validate_slots(slots, occupied):
            self._slots[slot] = None

    def reroll_occupied(self, rng: random.Random | None = None) -> None:
        """Throw every remaining die again; empty slots stay empty."""
        rng = rng if rng is not None else self._rng
        for slot, value in enumerate(self._slots):
            if value is not None:
                self._slots[slot] = rng.randint(1, DIE_FACES)

    def __len__(self) -> int:
        return self.occupied_count()

    def __repr__(self) -> str:
        return f"DiceSet({self._slots!r})"


def new_throw(rng: random.Random | None = None) -> DiceSet:
    """Throw six fresh dice."""
    return DiceSet.fresh(rng)


def reroll(dice: DiceSet) -> DiceSet:
    """Re-roll the remaining dice in place and return the same set."""
    dice.reroll_occupied()
    return dice


def is_exhausted(dice: DiceSet) -> bool:
    return dice.is_exhausted()
