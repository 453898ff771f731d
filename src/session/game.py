"""
Risky Dice - Game Session

Sequences turns over the players of one game. Players take turns in the
order given; a round ends once every player has had a turn. The game ends
the moment any player reaches the target score, and the winner is reported
with the number of rounds it took.
"""

import logging
import random
from typing import Sequence

from src.engine.base import TurnPhase
from src.engine.dice import DiceSet
from src.engine.turn import TurnState
from src.engine.validators import validate_player_names
from src.session.models import Player, TurnOutcome, TurnRecord

logger = logging.getLogger(__name__)

_OUTCOMES: dict[TurnPhase, TurnOutcome] = {
    TurnPhase.BANKED: TurnOutcome.BANKED,
    TurnPhase.BUST: TurnOutcome.BUST,
    TurnPhase.WON: TurnOutcome.WON,
}


class GameSession:
    """
    Players, scores and turn order for one game.

    Args:
        names: Player names in turn order
        seed: Seed for the dice; ``None`` seeds from the OS
        rng: Random source to use instead of a seeded one
    """

    def __init__(
        self,
        names: Sequence[str],
        seed: int | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.players = [Player(name=name) for name in validate_player_names(names)]
        self.rng = rng if rng is not None else random.Random(seed)
        self.round_number = 1
        self.current_index = 0
        self.current_turn: TurnState | None = None
        self.history: list[TurnRecord] = []
        self.winner: Player | None = None

    @property
    def current_player(self) -> Player:
        return self.players[self.current_index]

    @property
    def is_over(self) -> bool:
        return self.winner is not None

    def start_turn(self, dice: DiceSet | None = None) -> TurnState:
        """
        Begin the current player's turn with a fresh throw.

        Args:
            dice: Forced throw to start from (for tests and replays)

        Raises:
            ValueError: If the game is over or a turn is still in progress
        """
        if self.is_over:
            raise ValueError("The game is over; no more turns can be started.")
        if self.current_turn is not None and not self.current_turn.is_over:
            raise ValueError(f"{self.current_player.name}'s turn is still in progress.")

        self.current_turn = TurnState(self.current_player, rng=self.rng, dice=dice)
        logger.debug(
            "Round %d: %s's turn (score %d)",
            self.round_number, self.current_player.name, self.current_player.score,
        )
        return self.current_turn

    def end_turn(self) -> TurnRecord:
        """
        Record the finished turn and pass play to the next player.

        Raises:
            ValueError: If there is no finished turn to record
        """
        turn = self.current_turn
        if turn is None or not turn.is_over:
            raise ValueError("There is no finished turn to end.")

        points = 0 if turn.phase == TurnPhase.BUST else turn.turn_points
        record = TurnRecord(
            player_name=turn.player.name,
            round_number=self.round_number,
            outcome=_OUTCOMES[turn.phase],
            points=points,
            throws=turn.throw_count,
            score_after=turn.player.score,
        )
        self.history.append(record)
        self.current_turn = None

        if turn.has_won:
            self.winner = turn.player
            logger.info(
                "%s won in %d rounds with %d points",
                self.winner.name, self.round_number, self.winner.score,
            )
            return record

        self.current_index += 1
        if self.current_index == len(self.players):
            self.current_index = 0
            self.round_number += 1
        return record

    def leader(self) -> Player:
        """Highest scoring player; the earliest in turn order on ties."""
        return max(self.players, key=lambda p: p.score)

    def points_behind(self, player: Player) -> int:
        return self.leader().score - player.score

    def chase_message(self, player: Player | None = None) -> str:
        """``"Winning!"`` for a leader, otherwise who they chase and by how much."""
        player = player or self.current_player
        leader = self.leader()
        if leader.score == player.score:
            return "Winning!"
        return f"Chasing {leader.name}! {self.points_behind(player)} points behind."

    def standings(self) -> list[Player]:
        """Players sorted by score, highest first."""
        return sorted(self.players, key=lambda p: p.score, reverse=True)
