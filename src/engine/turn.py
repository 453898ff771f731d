"""
Risky Dice - Turn State Machine

Drives one player's turn: throws, scoring option selection, bust and
exhaustion checks, re-rolls and banking. Each transition has exactly one
entry point (``select``, ``reroll``, ``bank``) so the machine can be driven
by any front-end, or directly from tests.

Phases:
    THROWING -> AWAITING_SELECTION | BUST
    AWAITING_SELECTION --select--> AWAITING_SELECTION | BUST | WON
    AWAITING_SELECTION --reroll--> AWAITING_SELECTION | BUST
    AWAITING_SELECTION --bank--> BANKED | WON

A win is checked the moment an option is accepted, not only at bank time.
"""

import logging
import random
from typing import TYPE_CHECKING

from src.engine.base import TARGET_SCORE, ScoringOption, TurnPhase
from src.engine.dice import DiceSet
from src.engine.events import TurnEvent, TurnEventRecord
from src.engine.scoring import ScoringEngine
from src.engine.validators import validate_score

if TYPE_CHECKING:
    from src.session.models import Player

logger = logging.getLogger(__name__)


def accept(dice: DiceSet, option: ScoringOption) -> int:
    """Consume the option's dice and return the points it is worth."""
    dice.consume(option.slots)
    return option.points


def would_win(player: "Player", turn_points: int) -> bool:
    """True if banking ``turn_points`` now would reach the target score."""
    return player.score + turn_points >= TARGET_SCORE


def bank(player: "Player", turn_points: int) -> bool:
    """
    Add turn points to the player's permanent score.

    Returns:
        True if the player has reached the target score
    """
    player.score += validate_score(turn_points)
    return player.score >= TARGET_SCORE


class TurnState:
    """
    Mutable state of the turn in progress.

    Attributes:
        player: Player whose turn it is
        dice: Dice currently in play
        turn_points: Points accumulated this turn (not yet banked)
        can_reroll: Whether re-rolling the remaining dice is offered
        throw_count: Throws made this turn, including re-rolls and refreshes
        phase: Current phase of the turn
        events: Log of everything that happened this turn
    """

    def __init__(
        self,
        player: "Player",
        rng: random.Random | None = None,
        dice: DiceSet | None = None,
    ):
        if rng is None:
            rng = dice.rng if dice is not None else random.Random()
        self._rng = rng
        self.player = player
        self.dice = dice if dice is not None else DiceSet.fresh(rng)
        self.turn_points = 0
        self.can_reroll = False
        self.throw_count = 1
        self.phase = TurnPhase.THROWING
        self.events: list[TurnEventRecord] = []
        self._options: list[ScoringOption] = []

        logger.debug("Turn started for %s: %s", player.name, self.dice.values())
        self._record(TurnEvent.THROWN)
        self._evaluate()

    @property
    def options(self) -> tuple[ScoringOption, ...]:
        """Scoring options currently on offer."""
        return tuple(self._options)

    @property
    def is_over(self) -> bool:
        return self.phase.is_terminal

    @property
    def has_won(self) -> bool:
        return self.phase == TurnPhase.WON

    @property
    def is_bust(self) -> bool:
        return self.phase == TurnPhase.BUST

    def would_win(self) -> bool:
        return would_win(self.player, self.turn_points)

    def select(self, index: int) -> ScoringOption:
        """
        Accept the scoring option at ``index`` of the current offer.

        The option is removed from the offer, its dice are consumed and its
        points added to the turn. Reaching the target ends the game at once;
        otherwise exhausted dice are refreshed and the remaining dice are
        scored again.

        Raises:
            ValueError: If the turn is not awaiting a selection or the index
                is out of range
        """
        self._require_selection_phase("select a scoring option")
        if not (0 <= index < len(self._options)):
            raise ValueError(
                f"Option index {index} is out of range. "
                f"Must be between 0 and {len(self._options) - 1}."
            )

        option = self._options.pop(index)
        self.turn_points += accept(self.dice, option)
        self.can_reroll = True
        self._record(TurnEvent.SELECTED, option.points)
        logger.debug("%s took %s (turn points %d)", self.player.name, option, self.turn_points)

        if self.would_win():
            self._win()
            return option

        if self.dice.is_exhausted():
            self.dice = DiceSet.fresh(self._rng)
            self.can_reroll = False
            self.throw_count += 1
            self.phase = TurnPhase.THROWING
            self._record(TurnEvent.EXHAUSTED, self.turn_points)
            logger.info("%s exhausted the dice, re-throwing six", self.player.name)

        self._evaluate()
        return option

    def accept_option(self, option: ScoringOption) -> ScoringOption:
        """Accept an option by value instead of by index."""
        self._require_selection_phase("select a scoring option")
        try:
            index = self._options.index(option)
        except ValueError:
            raise ValueError(f"Option {option} is not on offer.") from None
        return self.select(index)

    def reroll(self) -> None:
        """
        Re-roll the remaining dice.

        Raises:
            ValueError: If no option has been accepted since the last throw
        """
        self._require_selection_phase("re-roll")
        if not self.can_reroll:
            raise ValueError("Re-roll is only offered right after taking a scoring option.")

        self.dice.reroll_occupied(self._rng)
        self.can_reroll = False
        self.throw_count += 1
        self.phase = TurnPhase.THROWING
        self._record(TurnEvent.REROLLED)
        logger.debug("%s re-rolled: %s", self.player.name, self.dice.values())
        self._evaluate()

    def bank(self) -> bool:
        """
        Bank the turn points and end the turn.

        Returns:
            True if the player has won
        """
        self._require_selection_phase("bank")
        won = bank(self.player, self.turn_points)
        self._options = []
        if won:
            self.phase = TurnPhase.WON
            self._record(TurnEvent.WON, self.turn_points)
        else:
            self.phase = TurnPhase.BANKED
            self._record(TurnEvent.BANKED, self.turn_points)
        logger.info(
            "%s banked %d, new score %d", self.player.name, self.turn_points, self.player.score
        )
        return won

    def _win(self) -> None:
        # Points are locked in as soon as the winning option is accepted
        bank(self.player, self.turn_points)
        self._options = []
        self.phase = TurnPhase.WON
        self._record(TurnEvent.WON, self.turn_points)
        logger.info("%s won with score %d", self.player.name, self.player.score)

    def _evaluate(self) -> None:
        """Score the dice just thrown, or refresh the offer after a selection."""
        self._options = ScoringEngine.scoring_options(self.dice)
        if ScoringEngine.is_bust(self._options):
            lost = self.turn_points
            self.turn_points = 0
            self.can_reroll = False
            self.phase = TurnPhase.BUST
            self._record(TurnEvent.BUST, lost)
            logger.info("%s went bust on %s, lost %d", self.player.name, self.dice.values(), lost)
        else:
            self.phase = TurnPhase.AWAITING_SELECTION

    def _require_selection_phase(self, action: str) -> None:
        if self.phase != TurnPhase.AWAITING_SELECTION:
            raise ValueError(f"Cannot {action} while the turn is {self.phase.name}.")

    def _record(self, event: TurnEvent, points: int = 0) -> None:
        self.events.append(TurnEventRecord(event=event, points=points, dice=tuple(self.dice.values())))
