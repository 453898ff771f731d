"""Dice tray component — renders the six dice slots."""

from __future__ import annotations

from typing import Sequence

import streamlit as st


def render_dice_tray(slots: Sequence[int | None], highlight: set[int] | None = None) -> None:
    """Render every dice slot, greying out consumed dice.

    Args:
        slots: Face value per slot, ``None`` for dice already set aside.
        highlight: Slots to mark as part of the hovered/last option.
    """
    highlight = highlight or set()

    html_parts = ['<div class="dice-tray">']
    for i, val in enumerate(slots):
        classes = ["die"]
        if val is None:
            classes.append("consumed")
        elif i in highlight:
            classes.append("scoring")
        face = "&middot;" if val is None else str(val)
        html_parts.append(f'<div class="{" ".join(classes)}">{face}</div>')
    html_parts.append("</div>")
    st.markdown("".join(html_parts), unsafe_allow_html=True)
