"""
Risky Dice - Scoring Engine

This module enumerates every legal scoring option for the dice currently in
play. All methods are stateless class methods; nothing is mutated and no
randomness is consumed.

Scoring Rules:
    - Ones: the first n dice showing 1, 100 points each
    - Fives: the first n dice showing 5, 50 points each
    - Three 1s: 1,000 points
    - Three of X (2, 3, 4, 6): X x 100 points
    - Four+ of a kind: previous tier x 2
    - Fives never score as a kind, only through the fives rule
    - 1-2-3-4-5: 500 points
    - 2-3-4-5-6: 750 points
    - 1-2-3-4-5-6: 1,500 points

Options overlap on purpose: the player may take any one of them, including a
smaller part of a larger combination.
"""

from collections import Counter
from typing import Sequence

from src.engine.base import PatternKind, ScoringOption
from src.engine.dice import DiceSet
from src.engine.validators import validate_dice_values


class ScoringEngine:
    """
    Stateless scoring engine for the six-dice game.

    All methods are class methods operating on the dice passed in.
    """

    # Scoring values
    SINGLE_ONE_POINTS = 100
    SINGLE_FIVE_POINTS = 50
    THREE_ONES_POINTS = 1000
    LOW_STRAIGHT_POINTS = 500
    HIGH_STRAIGHT_POINTS = 750
    FULL_STRAIGHT_POINTS = 1500

    MIN_OF_A_KIND = 3
    STRAIGHT_HINGE = (2, 3, 4, 5)

    @classmethod
    def scoring_options(
        cls,
        dice: DiceSet | Sequence[int]
    ) -> list[ScoringOption]:
        """
        List every legal scoring option.

        Order is ones, fives, of a kind (faces in order of first appearance),
        then straights from lowest to highest value.

        Args:
            dice: A DiceSet, or plain values which take slots 0..n-1

        Returns:
            Scoring options; empty exactly when the throw is a bust
        """
        if isinstance(dice, DiceSet):
            items = dice.items()
        else:
            items = list(enumerate(validate_dice_values(dice)))

        options: list[ScoringOption] = []
        options.extend(cls._singles(items, 1, cls.SINGLE_ONE_POINTS, PatternKind.ONES))
        options.extend(cls._singles(items, 5, cls.SINGLE_FIVE_POINTS, PatternKind.FIVES))
        options.extend(cls._of_a_kind(items))
        options.extend(cls._straights(items))
        return options

    @classmethod
    def _singles(
        cls,
        items: list[tuple[int, int]],
        face: int,
        points: int,
        kind: PatternKind
    ) -> list[ScoringOption]:
        """One option per run length, always taking the lowest slots."""
        found = cls._slots_for_face(items, face)
        return [
            ScoringOption(slots=tuple(found[:n]), points=points * n, kind=kind)
            for n in range(1, len(found) + 1)
        ]

    @classmethod
    def _of_a_kind(cls, items: list[tuple[int, int]]) -> list[ScoringOption]:
        """
        Three or more dice of one face, any face except 5.

        Points double for each die beyond three.
        Special case: Three 1s = 1000 points.
        """
        options: list[ScoringOption] = []
        counts = Counter(value for _, value in items)

        # Counter keeps first-seen order, which follows slot order here
        for face, count in counts.items():
            if face == 5 or count < cls.MIN_OF_A_KIND:
                continue
            found = cls._slots_for_face(items, face)
            for n in range(cls.MIN_OF_A_KIND, count + 1):
                options.append(ScoringOption(
                    slots=tuple(found[:n]),
                    points=cls.of_a_kind_points(face, n),
                    kind=PatternKind.OF_A_KIND,
                ))

        return options

    @classmethod
    def of_a_kind_points(cls, face: int, count: int) -> int:
        """Points for ``count`` dice of ``face`` (count >= 3)."""
        if face == 1:
            base_points = cls.THREE_ONES_POINTS
        else:
            base_points = face * 100
        return base_points * 2 ** (count - cls.MIN_OF_A_KIND)

    @classmethod
    def _straights(cls, items: list[tuple[int, int]]) -> list[ScoringOption]:
        """
        Check for straight combinations.

        2-3-4-5 must all be present; 1 and 6 decide which straights apply.
        Duplicates do not block a straight.
        """
        first_slot: dict[int, int] = {}
        for slot, value in items:
            first_slot.setdefault(value, slot)

        if not all(v in first_slot for v in cls.STRAIGHT_HINGE):
            return []

        options: list[ScoringOption] = []
        candidates = (
            ((1,), cls.LOW_STRAIGHT_POINTS),
            ((6,), cls.HIGH_STRAIGHT_POINTS),
            ((1, 6), cls.FULL_STRAIGHT_POINTS),
        )
        for ends, points in candidates:
            if all(v in first_slot for v in ends):
                needed = sorted(cls.STRAIGHT_HINGE + ends)
                options.append(ScoringOption(
                    slots=tuple(first_slot[v] for v in needed),
                    points=points,
                    kind=PatternKind.IN_A_ROW,
                ))

        return options

    @classmethod
    def _slots_for_face(cls, items: list[tuple[int, int]], face: int) -> list[int]:
        return [slot for slot, value in items if value == face]

    @classmethod
    def is_bust(cls, options: Sequence[ScoringOption]) -> bool:
        """A throw is a bust when it offers no scoring option."""
        return len(options) == 0


def scoring_options(dice: DiceSet | Sequence[int]) -> list[ScoringOption]:
    return ScoringEngine.scoring_options(dice)


def is_bust(options: Sequence[ScoringOption]) -> bool:
    return ScoringEngine.is_bust(options)
