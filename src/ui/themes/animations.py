"""CSS injection and HTML banner helpers for the dice table theme."""

from pathlib import Path

import streamlit as st


def load_css() -> None:
    """Inject the table CSS theme into the Streamlit app."""
    css_path = Path(__file__).parent / "table.css"
    css_text = css_path.read_text(encoding="utf-8")
    st.markdown(f"<style>{css_text}</style>", unsafe_allow_html=True)


def render_bust_animation(lost: int) -> None:
    """Render the bust overlay with shake animation."""
    st.markdown(
        '<div class="bust-overlay">'
        "<h2>BUST!</h2>"
        f"<p>No scoring dice — {lost} turn points lost.</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_victory_animation(name: str, rounds: int) -> None:
    """Render the victory overlay with glow animation."""
    st.markdown(
        '<div class="victory-overlay">'
        '<span class="crown">&#9813;</span>'
        f"<h1>{name} Wins!</h1>"
        f"<p>Game completed in {rounds} turns.</p>"
        "</div>",
        unsafe_allow_html=True,
    )


def render_exhausted_banner() -> None:
    """Render the exhausted dice banner with pulse animation."""
    st.markdown(
        '<div class="hot-dice-banner">'
        "&#9856; Exhausted dice, re-rolling all six! &#9856;"
        "</div>",
        unsafe_allow_html=True,
    )


def render_score_popup(points: int) -> None:
    """Render an animated score popup."""
    st.markdown(
        f'<div class="score-popup">+{points}</div>',
        unsafe_allow_html=True,
    )
