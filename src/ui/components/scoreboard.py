"""Scoreboard component — player rankings and turn indicator."""

from __future__ import annotations

import streamlit as st

from src.session.models import Player


def render_scoreboard(
    players: list[Player],
    current_turn_index: int,
    turn_score: int,
    target_score: int,
    round_number: int,
) -> None:
    """Render the scoreboard panel.

    Args:
        players: All players, in turn order.
        current_turn_index: Index into the players list for whose turn it is.
        turn_score: Accumulated (unbanked) turn score for the active player.
        target_score: Score needed to win.
        round_number: Current round, starting at 1.
    """
    html = ['<div class="scoreboard">']
    html.append(
        f'<div class="scoreboard-title">Round {round_number} &mdash; {target_score} to Win</div>'
    )

    for idx, player in enumerate(players):
        is_active = idx == current_turn_index

        row_classes = ["player-row"]
        if is_active:
            row_classes.append("active")

        # Turn indicator
        indicator = "&#9856; " if is_active else ""

        # Score delta for active player
        delta_html = ""
        if is_active and turn_score > 0:
            delta_html = f'<span class="score-delta">+{turn_score}</span>'

        html.append(
            f'<div class="{" ".join(row_classes)}">'
            f'<span class="name">{indicator}{player.name}</span>'
            f'<span class="score">{player.score}{delta_html}</span>'
            f"</div>"
        )

    html.append("</div>")
    st.markdown("".join(html), unsafe_allow_html=True)
