"""Tide predictions: records, payload parsing and per-day grouping."""

from surfreport.tides.grouping import group_tides_by_day, parse_predictions
from surfreport.tides.models import TideExtremum, TideKind

__all__ = [
    "TideExtremum",
    "TideKind",
    "group_tides_by_day",
    "parse_predictions",
]
