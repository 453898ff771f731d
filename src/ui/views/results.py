"""Results page — victory screen, final standings and turn history."""

from __future__ import annotations

import streamlit as st

from src.config.settings import get_settings
from src.session.game import GameSession
from src.ui.themes.animations import render_victory_animation


def render_results_page() -> None:
    """Render the results / victory page."""
    ss = st.session_state
    session: GameSession | None = ss.get("game")

    if session is None or not session.is_over:
        ss["page"] = "home" if session is None else "game"
        st.rerun()
        return

    render_victory_animation(session.winner.name, session.round_number)

    # Final standings
    st.subheader("Final Standings")

    for rank, player in enumerate(session.standings(), 1):
        style = "font-weight:700;" if player is session.winner else ""
        st.markdown(
            f'<div class="player-row" style="{style}">'
            f'<span class="name">{rank}. {player.name}</span>'
            f'<span class="score">{player.score}</span>'
            f"</div>",
            unsafe_allow_html=True,
        )

    with st.expander("Turn history"):
        st.dataframe([record.model_dump(mode="json") for record in session.history])

    st.divider()

    col1, col2 = st.columns(2)

    with col1:
        if st.button("Play Again", type="primary"):
            names = [p.name for p in session.players]
            ss["game"] = GameSession(names, seed=get_settings().dice_seed)
            ss["page"] = "game"
            st.rerun()

    with col2:
        if st.button("Return Home"):
            ss.pop("game", None)
            ss["page"] = "home"
            st.rerun()
