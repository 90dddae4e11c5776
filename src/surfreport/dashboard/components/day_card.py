"""Rendering for day cards.

The HTML for each card is built by plain functions so it can be checked
without a running Streamlit session; render_day_card only writes it out.
"""

from html import escape
from typing import Optional

import streamlit as st

from surfreport.dashboard.components.cards import DayCard, ShoreCard, tides_to_dataframe
from surfreport.visualization import CONDITION_SCALE

CARD_CSS = """
<style>
.day-card { border-radius: 12px; padding: 16px; margin-bottom: 12px; background: #f7fbff; }
.shore-section { border-left: 6px solid #3498DB; padding: 8px 12px; margin: 8px 0; border-radius: 6px; }
.shore-section.condition-flat { border-left-color: #2ECC71; background: #eefaf3; }
.shore-section.condition-fair { border-left-color: #F1C40F; background: #fdf9e7; }
.shore-section.condition-rough { border-left-color: #E74C3C; background: #fdeeee; }
.shore-name { font-weight: 600; font-size: 0.9rem; color: #555; }
.headline { font-size: 2rem; font-weight: 700; }
.headline-unit { font-size: 0.9rem; color: #666; margin-left: 4px; }
.swell-meta { font-size: 0.85rem; color: #444; }
.secondary-row { font-size: 0.8rem; color: #666; }
.conditions { font-size: 0.8rem; font-style: italic; color: #777; }
.wind-row { font-size: 0.9rem; margin-top: 8px; }
</style>
"""


def inject_card_css() -> None:
    """Inject the card stylesheet once per page run."""
    st.markdown(CARD_CSS, unsafe_allow_html=True)


def shore_section_html(shore: ShoreCard, show_name: bool = True) -> str:
    """HTML for one shore's section of a card."""
    parts = [f'<div class="shore-section {shore.condition}">']
    if show_name:
        parts.append(f'<div class="shore-name">{escape(shore.name)}</div>')

    unit = f'<span class="headline-unit">{escape(shore.headline_unit)}</span>' if shore.headline_unit else ""
    parts.append(f'<div class="headline">{escape(shore.headline)}{unit}</div>')

    meta = [m for m in (shore.swell, shore.trend, shore.haw_note) if m]
    if meta:
        parts.append(f'<div class="swell-meta">{escape(" · ".join(meta))}</div>')

    if shore.secondary is not None:
        parts.append(
            f'<div class="secondary-row">+ {escape(shore.secondary.face)} '
            f'{escape(shore.secondary.meta)}</div>'
        )
    if shore.conditions:
        parts.append(f'<div class="conditions">{escape(shore.conditions)}</div>')

    parts.append("</div>")
    return "".join(parts)


def day_card_html(card: DayCard, show_shore_names: bool = True) -> str:
    """HTML for the forecast part of a card (shores and wind)."""
    parts = ['<div class="day-card">', f"<h3>{escape(card.label)}</h3>"]
    for shore in card.shores:
        parts.append(shore_section_html(shore, show_name=show_shore_names))
    if card.wind is not None and card.wind.value:
        parts.append(f'<div class="wind-row">💨 {escape(card.wind.value)}</div>')
    parts.append("</div>")
    return "".join(parts)


def render_day_card(card: DayCard, show_shore_names: bool = True, container=None) -> None:
    """Render a card followed by its tide table."""
    target = container if container is not None else st
    target.markdown(day_card_html(card, show_shore_names), unsafe_allow_html=True)

    if card.tides:
        target.dataframe(
            tides_to_dataframe(card.tides),
            hide_index=True,
            use_container_width=True,
        )
    else:
        target.caption("No tide data for this day")


def render_condition_legend(container=None) -> None:
    """Render the color legend for the condition scale."""
    target = container if container is not None else st
    items = " ".join(
        f'<span style="color: {color};">●</span> {name}'
        for _, color, name in CONDITION_SCALE
    )
    target.markdown(f"<small>{items}</small>", unsafe_allow_html=True)


def render_day_nav(index: int, total: int, container=None) -> Optional[str]:
    """Render prev/next buttons around a day counter.

    Returns:
        "previous", "next" or None depending on which button was clicked
    """
    target = container if container is not None else st
    col_prev, col_label, col_next = target.columns([1, 2, 1])

    clicked = None
    with col_prev:
        if st.button("◀ Prev", key="day_prev", disabled=index <= 0):
            clicked = "previous"
    with col_label:
        st.markdown(
            f"<div style='text-align: center;'>Day {index + 1} of {total}</div>",
            unsafe_allow_html=True,
        )
    with col_next:
        if st.button("Next ▶", key="day_next", disabled=index >= total - 1):
            clicked = "next"
    return clicked
