"""Risky Dice — Streamlit Application Entrypoint."""

from __future__ import annotations

import streamlit as st

from src.config.settings import configure_logging


_RULES = """\
**Goal:** First to **4,000 points** wins, in the fewest turns!

**Throwing:**
- Throw 6 dice and take one scoring option at a time
- Right after taking an option you may re-roll the rest
- **Bust** = no scoring option — lose all unbanked points
- **Exhausted** = all 6 dice used — throw 6 fresh dice

**Scoring:**
| Combo | Points |
|---|---|
| Each 1 | 100 |
| Each 5 | 50 |
| Three 1s | 1,000 |
| Three 2s, 3s, 4s, 6s | Face x 100 |
| Four+ of a kind | Previous x 2 |
| 1-2-3-4-5 | 500 |
| 2-3-4-5-6 | 750 |
| 1-2-3-4-5-6 | 1,500 |

Fives never count as a kind: three 5s are worth 150.
"""


def main() -> None:
    """Application entrypoint. Must call ``st.set_page_config`` first."""
    st.set_page_config(
        page_title="Risky Dice",
        page_icon="🎲",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    configure_logging()

    from src.ui.themes import load_css
    load_css()

    # Session state defaults
    if "page" not in st.session_state:
        st.session_state["page"] = "home"

    # Page routing (lazy imports to avoid circular deps)
    page = st.session_state["page"]

    if page == "home":
        from src.ui.views.home import render_home_page
        render_home_page()
    elif page == "game":
        from src.ui.views.game import render_game_page
        render_game_page()
    elif page == "results":
        from src.ui.views.results import render_results_page
        render_results_page()
    else:
        st.session_state["page"] = "home"
        st.rerun()

    # In-game rules in sidebar
    if page == "game":
        with st.sidebar:
            st.markdown("### Rules")
            st.markdown(_RULES)


if __name__ == "__main__":
    main()
