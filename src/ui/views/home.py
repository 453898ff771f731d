"""Home page — title, rules and player entry."""

from __future__ import annotations

import streamlit as st

from src.config.settings import get_settings
from src.engine.base import TARGET_SCORE
from src.session.game import GameSession


def render_home_page() -> None:
    """Render the home / landing page."""
    st.title("Risky Dice")
    st.caption(f"Get to {TARGET_SCORE} in the fewest turns")

    names_text = st.text_area(
        "Players (one name per line, in turn order)",
        key="player_names",
        placeholder="Jim\nJames\nJoe",
    )

    if st.button("Start Game", type="primary"):
        names = [line for line in names_text.splitlines() if line.strip()]
        try:
            session = GameSession(names, seed=get_settings().dice_seed)
        except ValueError as exc:
            st.error(str(exc))
            return
        st.session_state["game"] = session
        st.session_state["page"] = "game"
        st.rerun()

    st.divider()

    with st.expander("Rules"):
        st.markdown(
            f"""
**Throw six dice and press your luck!**

- Take one scoring option at a time; its dice are set aside
- After taking an option you may **re-roll** the remaining dice
- **Bust** = no scoring option; lose your unbanked turn points
- **Exhausted** = all six dice set aside; throw six fresh dice
- Reach **{TARGET_SCORE}** (banked or not) to win at once
"""
        )
