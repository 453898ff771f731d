"""Tests for src/ui/terminal.py — console menus, input and the game loop."""

from unittest.mock import patch

import pytest

from src.engine.base import TurnPhase
from src.engine.dice import DiceSet
from src.engine.turn import TurnState
from src.session.game import GameSession
from src.ui.terminal import (
    apply_selection,
    build_parser,
    format_menu,
    main,
    max_selection,
    play_game,
    read_selection,
    turn_banner,
)


def _inputs(*answers: str):
    answers_iter = iter(answers)
    return lambda prompt: next(answers_iter)


class TestReadSelection:
    def test_reprompts_until_in_range(self, capsys):
        assert read_selection(3, _inputs("x", "9", " 2 ")) == 2
        out = capsys.readouterr().out
        assert out.count("Invalid selection: Number between 0 and 3") == 2

    def test_zero_is_bank(self):
        assert read_selection(1, _inputs("0")) == 0


class TestMenu:
    def test_first_menu_has_no_reroll(self, player):
        turn = TurnState(player, dice=DiceSet.from_values([1, 5, 2, 2, 3, 4]))
        menu = format_menu(turn, round_number=1).splitlines()
        assert menu == [
            "Turn: 1 (score: 0, turn points: 0)",
            "[1, 5, 2, 2, 3, 4]",
            "0| Bank",
            "1| 100, [1 ones]",
            "2| 50, [1 fives]",
            "3| 500, [5 in a row]",
        ]
        assert max_selection(turn) == 3

    def test_reroll_offered_after_selection(self, player):
        turn = TurnState(player, dice=DiceSet.from_values([1, 5, 2, 2, 3, 4]))
        turn.select(0)
        menu = format_menu(turn, round_number=2).splitlines()
        assert menu[-2:] == ["1| 50, [1 fives]", "2| re-roll"]
        assert max_selection(turn) == 2


class TestApplySelection:
    def test_zero_banks(self, player):
        turn = TurnState(player, dice=DiceSet.from_values([1, 5, 2, 2, 3, 4]))
        apply_selection(turn, 0)
        assert turn.phase == TurnPhase.BANKED

    def test_last_number_rerolls(self, player, scripted_rng):
        rng = scripted_rng(1, 1, 1, 2, 3)
        turn = TurnState(player, rng=rng, dice=DiceSet.from_values([1, 5, 2, 2, 3, 4]))
        apply_selection(turn, 1)
        apply_selection(turn, max_selection(turn))
        assert turn.throw_count == 2
        assert turn.dice.values() == [1, 1, 1, 2, 3]

    def test_other_numbers_select_options(self, player):
        turn = TurnState(player, dice=DiceSet.from_values([1, 5, 2, 2, 3, 4]))
        apply_selection(turn, 3)
        # The straight leaves a lone 2 behind, so the turn busts afterwards
        assert turn.events[1].points == 500
        assert turn.is_bust


class TestGameLoop:
    def test_banner_for_leader(self):
        session = GameSession(["Jim", "Joe"], seed=1)
        assert "Jim's turn! Winning!" in turn_banner(session)

    def test_single_throw_win(self, scripted_rng, capsys):
        session = GameSession(["Solo"], rng=scripted_rng(1, 1, 1, 1, 1, 2))
        # 1-5: ones, 6-8: three/four/five 1s
        play_game(session, _inputs("8"))

        assert session.winner.name == "Solo"
        assert session.winner.score == 4000
        out = capsys.readouterr().out
        assert "Banking 4000, new score: 4000" in out
        assert "Game completed in 1 turns!" in out

    def test_bust_is_announced(self, scripted_rng, capsys):
        rng = scripted_rng(2, 3, 4, 6, 6, 2, 1, 1, 1, 1, 1, 2)
        session = GameSession(["Solo"], rng=rng)
        play_game(session, _inputs("8"))

        out = capsys.readouterr().out
        assert "Bust! [2, 3, 4, 6, 6, 2]" in out
        assert "Game completed in 2 turns!" in out
        assert len(session.history) == 2


class TestMain:
    def test_names_required(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args([])

    @patch("src.ui.terminal.play_game")
    def test_main_starts_a_game(self, mock_play):
        assert main(["Jim", "Joe", "--seed", "3"]) == 0
        session = mock_play.call_args.args[0]
        assert [p.name for p in session.players] == ["Jim", "Joe"]

    @patch("src.ui.terminal.play_game", side_effect=KeyboardInterrupt)
    def test_interrupt_exits_cleanly(self, mock_play):
        assert main(["Jim"]) == 1
