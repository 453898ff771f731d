"""
Risky Dice - Input Validation Utilities

Provides validation functions for game engine inputs. All validators
either return validated data or raise descriptive ValueError exceptions.
"""

from typing import Iterable, Sequence

from src.engine.base import DIE_FACES, NUM_DICE


def validate_dice_values(
    values: Sequence[int],
    min_count: int = 0,
    max_count: int = NUM_DICE
) -> tuple[int, ...]:
    """
    Validate and normalize dice values.

    Args:
        values: Sequence of dice values to validate
        min_count: Minimum number of dice required
        max_count: Maximum number of dice allowed

    Returns:
        Validated values as a tuple

    Raises:
        ValueError: If validation fails
    """
    values_tuple = tuple(values)
    count = len(values_tuple)

    if count < min_count:
        raise ValueError(f"At least {min_count} dice required, got {count}.")

    if count > max_count:
        raise ValueError(f"At most {max_count} dice allowed, got {count}.")

    for i, value in enumerate(values_tuple):
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError(f"Die value at index {i} must be an integer, got {type(value).__name__}.")
        if not (1 <= value <= DIE_FACES):
            raise ValueError(
                f"Die value at index {i} is {value}, must be between 1 and {DIE_FACES}."
            )

    return values_tuple


def validate_slots(
    slots: Iterable[int],
    occupied: Iterable[int]
) -> tuple[int, ...]:
    """
    Validate dice slots about to be consumed.

    Every slot must be currently occupied and listed only once.

    Args:
        slots: Slot identifiers to consume
        occupied: Slot identifiers currently holding a die

    Returns:
        Validated slots as a tuple

    Raises:
        ValueError: If a slot is out of range, duplicated or already empty
    """
    slots_tuple = tuple(slots)
    occupied_set = frozenset(occupied)

    if len(set(slots_tuple)) != len(slots_tuple):
        raise ValueError(f"Duplicate slots in {slots_tuple}.")

    for slot in slots_tuple:
        if not isinstance(slot, int) or not (0 <= slot < NUM_DICE):
            raise ValueError(
                f"Slot {slot!r} is out of range. Must be between 0 and {NUM_DICE - 1}."
            )
        if slot not in occupied_set:
            raise ValueError(f"Slot {slot} is empty and cannot be consumed.")

    return slots_tuple


def validate_score(score: int) -> int:
    """
    Validate a score value.

    Raises:
        ValueError: If score is not a non-negative integer
    """
    if not isinstance(score, int):
        raise ValueError(f"Score must be an integer, got {type(score).__name__}.")

    if score < 0:
        raise ValueError(f"Score cannot be negative, got {score}.")

    return score


def validate_player_names(names: Sequence[str], max_length: int = 30) -> tuple[str, ...]:
    """
    Validate and normalize player names.

    Args:
        names: Player display names, in turn order
        max_length: Longest allowed name

    Returns:
        Stripped names as a tuple

    Raises:
        ValueError: If no names are given or a name is blank or too long
    """
    cleaned = tuple(name.strip() for name in names)

    if not cleaned:
        raise ValueError("At least one player name is required.")

    for name in cleaned:
        if not name:
            raise ValueError("Player names cannot be blank.")
        if len(name) > max_length:
            raise ValueError(f"Player name {name!r} is longer than {max_length} characters.")

    return cleaned
