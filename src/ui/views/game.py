"""Game page — the main play area with dice, controls, and scoreboard."""

from __future__ import annotations

import streamlit as st

from src.engine.base import TARGET_SCORE
from src.engine.events import TurnEvent
from src.engine.turn import TurnState
from src.session.game import GameSession
from src.ui.components.dice_tray import render_dice_tray
from src.ui.components.scoreboard import render_scoreboard
from src.ui.components.turn_controls import render_turn_controls
from src.ui.themes.animations import (
    render_bust_animation,
    render_exhausted_banner,
    render_score_popup,
)


def render_game_page() -> None:
    """Render the main game page."""
    ss = st.session_state
    session: GameSession | None = ss.get("game")

    if session is None:
        ss["page"] = "home"
        st.rerun()
        return

    if session.is_over:
        ss["page"] = "results"
        st.rerun()
        return

    turn = session.current_turn

    # --- Layout: game area (3) | scoreboard (1) ---
    game_col, score_col = st.columns([3, 1])

    with score_col:
        render_scoreboard(
            players=session.players,
            current_turn_index=session.current_index,
            turn_score=turn.turn_points if turn else 0,
            target_score=TARGET_SCORE,
            round_number=session.round_number,
        )

    with game_col:
        st.subheader(f"{session.current_player.name}'s turn! {session.chase_message()}")

        if turn is None:
            if st.button("Throw Dice", key="btn_throw", type="primary"):
                session.start_turn()
                st.rerun()
            return

        _render_latest_events(turn)
        render_dice_tray(turn.dice.slots)

        if turn.is_over:
            label = "See Results" if turn.has_won else "Next Player"
            if st.button(label, key="btn_end_turn", type="primary"):
                session.end_turn()
                st.rerun()
            return

        action = render_turn_controls(
            options=turn.options,
            turn_score=turn.turn_points,
            can_reroll=turn.can_reroll,
            decision=len(turn.events),
        )
        if action is not None:
            _handle_action(turn, action)
            st.rerun()


def _handle_action(turn: TurnState, action: tuple[str, int | None]) -> None:
    """Apply a turn-control action to the turn in progress."""
    kind, index = action
    if kind == "bank":
        turn.bank()
    elif kind == "reroll":
        turn.reroll()
    elif kind == "select" and index is not None:
        turn.select(index)
    else:
        raise ValueError(f"Unknown turn action {action!r}.")


def _render_latest_events(turn: TurnState) -> None:
    """Announce what the last decision led to."""
    if not turn.events:
        return
    last = turn.events[-1]
    if last.event == TurnEvent.BUST:
        render_bust_animation(last.points)
    elif last.event == TurnEvent.EXHAUSTED:
        render_exhausted_banner()
    elif last.event in (TurnEvent.SELECTED, TurnEvent.WON, TurnEvent.BANKED) and last.points:
        render_score_popup(last.points)
