"""
Risky Dice - Dice Set Tests

Tests for throwing, consuming and re-rolling the six dice slots.
"""

import random

import pytest
from src.engine.dice import DiceSet, is_exhausted, new_throw, reroll


class TestFreshThrow:
    """Tests for DiceSet.fresh() / new_throw()."""

    def test_six_dice_occupied(self):
        dice = DiceSet.fresh()
        assert dice.occupied_count() == 6
        assert len(dice.values()) == 6

    def test_value_range(self):
        """Throw 200 times; every value should be 1-6."""
        rng = random.Random()
        for _ in range(200):
            assert all(1 <= v <= 6 for v in DiceSet.fresh(rng).values())

    def test_uses_injected_source(self, scripted_rng):
        dice = new_throw(scripted_rng(4, 2, 6, 1, 1, 3))
        assert dice.values() == [4, 2, 6, 1, 1, 3]

    def test_same_seed_same_throw(self):
        first = DiceSet.fresh(random.Random(42)).values()
        second = DiceSet.fresh(random.Random(42)).values()
        assert first == second


class TestForcedThrow:
    """Tests for DiceSet.from_values()."""

    def test_fills_from_slot_zero(self):
        dice = DiceSet.from_values([3, 5])
        assert dice.slots == (3, 5, None, None, None, None)
        assert dice.items() == [(0, 3), (1, 5)]

    def test_too_many_dice_raise(self):
        with pytest.raises(ValueError, match="At most 6 dice"):
            DiceSet.from_values([1] * 7)

    @pytest.mark.parametrize("value", [0, 7, -1])
    def test_invalid_face_raises(self, value: int):
        with pytest.raises(ValueError, match="must be between 1 and 6"):
            DiceSet.from_values([1, value])

    def test_wrong_slot_count_raises(self):
        with pytest.raises(ValueError, match="exactly 6 slots"):
            DiceSet([1, 2, 3])


class TestConsume:
    """Tests for DiceSet.consume()."""

    def test_consumed_slots_become_empty(self):
        dice = DiceSet.from_values([1, 1, 1, 5, 5, 2])
        dice.consume((0, 1, 2))
        assert dice.values() == [5, 5, 2]
        assert dice.items() == [(3, 5), (4, 5), (5, 2)]
        assert dice.occupied_count() == 3

    def test_slot_identity_survives_consumption(self):
        dice = DiceSet.from_values([2, 5, 2, 5, 2, 5])
        dice.consume((1,))
        dice.consume((5,))
        assert dice.items() == [(0, 2), (2, 2), (3, 5), (4, 2)]

    def test_consuming_empty_slot_raises(self):
        dice = DiceSet.from_values([1, 2, 3, 4, 5, 6])
        dice.consume((0,))
        with pytest.raises(ValueError, match="Slot 0 is empty"):
            dice.consume((0, 1))
        # Nothing changed on failure
        assert dice.values() == [2, 3, 4, 5, 6]

    def test_duplicate_slots_raise(self):
        dice = DiceSet.from_values([1, 2, 3, 4, 5, 6])
        with pytest.raises(ValueError, match="Duplicate slots"):
            dice.consume((2, 2))

    @pytest.mark.parametrize("slot", [-1, 6, 10])
    def test_out_of_range_slot_raises(self, slot: int):
        dice = DiceSet.from_values([1, 2, 3, 4, 5, 6])
        with pytest.raises(ValueError, match="out of range"):
            dice.consume((slot,))

    def test_exhausted_after_all_consumed(self):
        dice = DiceSet.from_values([1, 2, 3, 4, 5, 6])
        assert not is_exhausted(dice)
        dice.consume(range(6))
        assert dice.is_exhausted()
        assert dice.values() == []


class TestReroll:
    """Tests for DiceSet.reroll_occupied() / reroll()."""

    def test_rerolls_only_occupied_slots(self, scripted_rng):
        dice = DiceSet.from_values([1, 2, 3, 4, 5, 6], rng=scripted_rng(6, 6, 6))
        dice.consume((0, 2, 4))
        reroll(dice)
        assert dice.slots == (None, 6, None, 6, None, 6)

    def test_reroll_keeps_occupied_count(self):
        dice = DiceSet.fresh(random.Random(7))
        dice.consume((1, 3))
        dice.reroll_occupied()
        assert dice.occupied_count() == 4
        assert dice.slots[1] is None and dice.slots[3] is None

    def test_reroll_of_exhausted_set_draws_nothing(self, scripted_rng):
        dice = DiceSet.from_values([1], rng=scripted_rng())
        dice.consume((0,))
        dice.reroll_occupied()
        assert dice.is_exhausted()
