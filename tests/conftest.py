"""
Risky Dice - Test Configuration and Fixtures

Common fixtures and test data for all test modules.
"""

import random
from typing import Callable, Iterable

import pytest

from src.config.settings import get_settings
from src.engine.base import PatternKind, ScoringOption
from src.session.models import Player


class ScriptedRandom(random.Random):
    """Random source whose die throws follow a fixed script."""

    def __init__(self, values: Iterable[int]):
        super().__init__(0)
        self.script = list(values)

    def randint(self, a: int, b: int) -> int:
        if not self.script:
            raise AssertionError("Scripted dice ran out of values.")
        return self.script.pop(0)


@pytest.fixture
def scripted_rng() -> Callable[..., ScriptedRandom]:
    """Factory for random sources that throw the given values in order."""
    def _make(*values: int) -> ScriptedRandom:
        return ScriptedRandom(values)
    return _make


@pytest.fixture
def player() -> Player:
    return Player(name="Jim")


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def option_index() -> Callable[[Iterable[ScoringOption], int, PatternKind], int]:
    """Finds the index of the option with the given points and kind."""
    def _find(options: Iterable[ScoringOption], points: int, kind: PatternKind) -> int:
        options = list(options)
        for i, option in enumerate(options):
            if option.points == points and option.kind == kind:
                return i
        raise AssertionError(f"No {kind} option worth {points} in {options}.")
    return _find


# =============================================================================
# SCORING TEST DATA
# =============================================================================

@pytest.fixture
def bust_rolls() -> list[tuple[int, ...]]:
    """Rolls that offer no scoring option."""
    return [
        (2,),
        (3,),
        (4,),
        (6,),
        (2, 3),
        (3, 4),
        (4, 6),
        (2, 3, 4),
        (2, 3, 6),
        (2, 2, 3, 3, 4, 6),
        (2, 3, 4, 6, 6, 4),
    ]
