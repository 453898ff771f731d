"""Dice table theme for Risky Dice."""

from src.ui.themes.animations import (
    load_css,
    render_bust_animation,
    render_exhausted_banner,
    render_score_popup,
    render_victory_animation,
)

__all__ = [
    "load_css",
    "render_bust_animation",
    "render_exhausted_banner",
    "render_score_popup",
    "render_victory_animation",
]
