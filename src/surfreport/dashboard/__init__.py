"""Streamlit dashboard for surfreport.

This module provides:

- run_dashboard: Render the card dashboard
- build_day_cards: Card view models for each forecast day
"""

from surfreport.dashboard.app import run_dashboard
from surfreport.dashboard.components import build_day_cards

__all__ = ["build_day_cards", "run_dashboard"]
