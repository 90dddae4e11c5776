"""Best-effort text extractors for surf report fragments."""

from surfreport.extraction.extractors import (
    extract_conditions_comment,
    extract_date,
    extract_labeled_number,
    extract_period_and_direction,
    extract_swell_reading,
    extract_trend,
    extract_wave_height_range,
    extract_wind_phrase,
)
from surfreport.extraction.rules import PatternRule, first_match, leftmost_match

__all__ = [
    "PatternRule",
    "extract_conditions_comment",
    "extract_date",
    "extract_labeled_number",
    "extract_period_and_direction",
    "extract_swell_reading",
    "extract_trend",
    "extract_wave_height_range",
    "extract_wind_phrase",
    "first_match",
    "leftmost_match",
]
