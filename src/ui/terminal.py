"""Terminal front-end — play Risky Dice at the console.

Usage::

    riskydice Jim James Joe

Each decision lists ``0| Bank``, the numbered scoring options and, right
after taking an option, a final ``N| re-roll`` entry.
"""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Sequence

from src.config.settings import configure_logging, get_settings
from src.engine.base import TARGET_SCORE
from src.engine.events import TurnEvent, describe_event
from src.engine.turn import TurnState
from src.session.game import GameSession

logger = logging.getLogger(__name__)

_RULE = "<>" * 23

InputFn = Callable[[str], str]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="riskydice",
        description=f"Dice: get to {TARGET_SCORE} in the least amount of turns.",
    )
    parser.add_argument("names", nargs="+", metavar="NAME", help="player names, in turn order")
    parser.add_argument("--seed", type=int, default=None, help="seed the dice for a repeatable game")
    return parser


def turn_banner(session: GameSession) -> str:
    """Whose turn it is, and how far they trail the leader."""
    name = session.current_player.name
    return f"\n{_RULE}\n{name}'s turn! {session.chase_message()}\n{_RULE}"


def format_menu(turn: TurnState, round_number: int) -> str:
    """The decision menu for the current throw."""
    lines = [
        f"Turn: {round_number} (score: {turn.player.score}, turn points: {turn.turn_points})",
        str(turn.dice.values()),
        "0| Bank",
    ]
    for n, option in enumerate(turn.options, 1):
        lines.append(f"{n}| {option}")
    if turn.can_reroll:
        lines.append(f"{max_selection(turn)}| re-roll")
    return "\n".join(lines)


def max_selection(turn: TurnState) -> int:
    return len(turn.options) + int(turn.can_reroll)


def read_selection(upper: int, input_fn: InputFn = input) -> int:
    """Prompt until the player enters a whole number between 0 and ``upper``."""
    while True:
        raw = input_fn(f"Select option: 0 to {upper}\n=> ")
        try:
            selection = int(raw.strip())
        except ValueError:
            selection = -1
        if 0 <= selection <= upper:
            return selection
        print(f"Invalid selection: Number between 0 and {upper}")


def apply_selection(turn: TurnState, selection: int) -> None:
    """Dispatch a menu number to bank, re-roll or a scoring option."""
    if selection == 0:
        turn.bank()
    elif turn.can_reroll and selection == max_selection(turn):
        turn.reroll()
    else:
        turn.select(selection - 1)


def play_turn(session: GameSession, input_fn: InputFn = input) -> TurnState:
    """Run the current player's turn until it banks, busts or wins."""
    print(turn_banner(session))
    turn = session.start_turn()
    seen = 0
    while True:
        for record in turn.events[seen:]:
            if record.event in (TurnEvent.EXHAUSTED, TurnEvent.BUST):
                print(describe_event(record))
        seen = len(turn.events)
        if turn.is_over:
            break
        print(format_menu(turn, session.round_number))
        apply_selection(turn, read_selection(max_selection(turn), input_fn))

    if not turn.is_bust:
        print(f"Banking {turn.turn_points}, new score: {turn.player.score}")
    return turn


def play_game(session: GameSession, input_fn: InputFn = input) -> GameSession:
    while not session.is_over:
        play_turn(session, input_fn)
        session.end_turn()
    print(f"Game completed in {session.round_number} turns!")
    return session


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings)

    seed = args.seed if args.seed is not None else settings.dice_seed
    try:
        session = GameSession(args.names, seed=seed)
    except ValueError as exc:
        build_parser().error(str(exc))

    print(f"\nWelcome to dice: get to {TARGET_SCORE} in the least amount of throws. "
          "Exit game with ctrl + c")
    try:
        play_game(session)
    except (KeyboardInterrupt, EOFError):
        logger.info("Game abandoned in round %d", session.round_number)
        print()
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
