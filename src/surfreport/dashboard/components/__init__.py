"""Dashboard UI components for surfreport.

This module provides reusable Streamlit components:

- Cards: build_day_cards, build_shore_card, day_labels, tides_to_dataframe
- Day Card: render_day_card, render_day_nav, render_condition_legend, inject_card_css
- Loading: with_loading, with_error_handling, render_card_skeleton, render_error_screen
"""

from surfreport.dashboard.components.cards import (
    DayCard,
    SecondaryRow,
    ShoreCard,
    build_day_cards,
    build_shore_card,
    day_labels,
    tides_to_dataframe,
)
from surfreport.dashboard.components.day_card import (
    day_card_html,
    inject_card_css,
    render_condition_legend,
    render_day_card,
    render_day_nav,
    shore_section_html,
)
from surfreport.dashboard.components.loading import (
    render_card_skeleton,
    render_empty_state,
    render_error_screen,
    render_retry_button,
    with_error_handling,
    with_loading,
)

__all__ = [
    # Cards
    "DayCard",
    "SecondaryRow",
    "ShoreCard",
    "build_day_cards",
    "build_shore_card",
    "day_labels",
    "tides_to_dataframe",
    # Day card
    "day_card_html",
    "inject_card_css",
    "render_condition_legend",
    "render_day_card",
    "render_day_nav",
    "shore_section_html",
    # Loading
    "render_card_skeleton",
    "render_empty_state",
    "render_error_screen",
    "render_retry_button",
    "with_error_handling",
    "with_loading",
]
