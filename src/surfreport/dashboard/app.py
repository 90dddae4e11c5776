"""Streamlit dashboard for the Oahu surf report.

One card per forecast day, with an "All shores" tab combining every shore
and one tab per shore. Prev/next buttons move between days.
Run with: streamlit run src/surfreport/dashboard/app.py
"""

import sys
from pathlib import Path

# Add src directory to path for Streamlit Cloud compatibility
_app_file = Path(__file__).resolve()
_src_path = _app_file.parent.parent.parent
if str(_src_path) not in sys.path:
    sys.path.insert(0, str(_src_path))

import logging
from typing import Optional

import streamlit as st

from surfreport.cache.refresh import (
    ALL_SHORES_TAB,
    TABS,
    LoadCoordinator,
    LoadResult,
    LoadStatus,
)
from surfreport.dashboard.components import (
    build_day_cards,
    inject_card_css,
    render_card_skeleton,
    render_condition_legend,
    render_day_card,
    render_day_nav,
    render_empty_state,
    render_error_screen,
    with_error_handling,
    with_loading,
)
from surfreport.models import Shore

logger = logging.getLogger(__name__)

COORDINATOR_KEY = "surfreport_coordinator"


def tab_label(tab: str) -> str:
    """Display name for a tab value."""
    if tab == ALL_SHORES_TAB:
        return "All shores"
    return Shore(tab).display_name


def tab_shores(tab: str) -> list[Shore]:
    """Shores shown on a tab, in card order."""
    if tab == ALL_SHORES_TAB:
        return list(Shore)
    return [Shore(tab)]


def get_coordinator() -> LoadCoordinator:
    """Get the session's coordinator, creating it on first use."""
    if COORDINATOR_KEY not in st.session_state:
        st.session_state[COORDINATOR_KEY] = LoadCoordinator()
    return st.session_state[COORDINATOR_KEY]


@with_error_handling("Could not load surf data")
@with_loading("Loading surf report...")
def load_report(coordinator: LoadCoordinator) -> LoadResult:
    """Run a load cycle with a spinner."""
    return coordinator.refresh()


def render_sidebar(coordinator: LoadCoordinator) -> None:
    st.sidebar.header("Oahu Surf")
    st.sidebar.markdown("**Data Sources**")
    st.sidebar.markdown("- Surf News Network")
    st.sidebar.markdown("- NOAA Tides & Currents (Honolulu)")

    st.sidebar.markdown("---")
    render_condition_legend(container=st.sidebar)

    st.sidebar.markdown("---")
    if st.sidebar.button("🔄 Refresh"):
        load_report(coordinator)
        st.rerun()

    result = coordinator.result
    if result is not None:
        st.sidebar.caption(f"Last updated: {result.loaded_at:%Y-%m-%d %H:%M}")


def render_cards(coordinator: LoadCoordinator, result: LoadResult) -> None:
    """Render the tab selector, day navigation and the current card."""
    tab = st.radio(
        "Shore",
        TABS,
        index=TABS.index(coordinator.active_tab),
        format_func=tab_label,
        horizontal=True,
        label_visibility="collapsed",
    )
    coordinator.set_tab(tab)

    cards = build_day_cards(result.report, result.tides_by_day, tab_shores(tab))
    if not cards:
        render_empty_state(
            "No forecast data available",
            suggestion="The report page may have changed or this shore has no forecast.",
        )
        return

    # A single shore can have fewer days than the longest sequence
    index = min(coordinator.current_day, len(cards) - 1)
    clicked = render_day_nav(index, len(cards))
    if clicked == "next":
        coordinator.go_to_day(index + 1)
        st.rerun()
    elif clicked == "previous":
        coordinator.go_to_day(index - 1)
        st.rerun()

    render_day_card(cards[index], show_shore_names=tab == ALL_SHORES_TAB)


def main(coordinator: Optional[LoadCoordinator] = None):
    """Main dashboard function."""
    st.set_page_config(
        page_title="Oahu Surf Report",
        page_icon="🌊",
        layout="centered",
    )
    inject_card_css()

    coordinator = coordinator or get_coordinator()
    render_sidebar(coordinator)

    st.title("🌊 Oahu Surf Report")

    if coordinator.result is None:
        placeholder = st.empty()
        render_card_skeleton(container=placeholder)
        load_report(coordinator)
        placeholder.empty()

    result = coordinator.result
    if result is None or not result.usable:
        message = result.message if result is not None else None
        if render_error_screen(message, on_retry=lambda: load_report(coordinator)):
            st.rerun()
        return

    if result.status is LoadStatus.PARTIAL:
        st.warning("Tide data is unavailable right now.")

    render_cards(coordinator, result)


def run_dashboard():
    """Entry point for running dashboard."""
    main()


if __name__ == "__main__":
    try:
        main()
    except Exception as e:
        import traceback
        logger.error(f"Application error: {e}")
        st.error(f"Application Error: {e}")
        st.code(traceback.format_exc())
