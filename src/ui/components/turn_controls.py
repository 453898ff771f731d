"""Turn control buttons — Bank, scoring options, Re-roll."""

from __future__ import annotations

from typing import Sequence

import streamlit as st

from src.engine.base import ScoringOption


def render_turn_controls(
    options: Sequence[ScoringOption],
    turn_score: int,
    can_reroll: bool,
    decision: int,
) -> tuple[str, int | None] | None:
    """Render one button per legal decision.

    Args:
        options: Scoring options currently on offer.
        turn_score: Accumulated (unbanked) turn score.
        can_reroll: Whether the remaining dice may be re-rolled.
        decision: Decision counter, used to keep button keys unique.

    Returns:
        ``("bank", None)``, ``("select", index)``, ``("reroll", None)``,
        or ``None`` if no action taken.
    """
    cols = st.columns(2)

    with cols[0]:
        if st.button(
            f"Bank {turn_score} pts" if turn_score > 0 else "Bank",
            key=f"btn_bank_{decision}",
            type="primary",
        ):
            return ("bank", None)

    with cols[1]:
        if st.button(
            "Re-roll remaining dice",
            key=f"btn_reroll_{decision}",
            disabled=not can_reroll,
        ):
            return ("reroll", None)

    st.markdown("**Scoring options**")
    for i, option in enumerate(options):
        if st.button(
            f"{option.points} pts — {option.dice_count} {option.kind}",
            key=f"btn_option_{i}_{decision}",
        ):
            return ("select", i)

    return None
