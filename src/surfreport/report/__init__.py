"""Surf report parsing: section lookup, day/shore parsing and data models."""

from surfreport.report.locator import (
    MAX_HOPS,
    has_class_marker,
    heading_equals,
    heading_starts_with,
    locate_section,
)
from surfreport.models import (
    DayForecast,
    Shore,
    ShoreForecastSet,
    SurfReport,
    SwellReading,
    Trend,
    WaveHeightRange,
    WindReading,
)
from surfreport.report.parser import (
    parse_forecast_day,
    parse_report,
    parse_shore_forecasts,
    parse_wind_forecast,
)

__all__ = [
    "DayForecast",
    "MAX_HOPS",
    "Shore",
    "ShoreForecastSet",
    "SurfReport",
    "SwellReading",
    "Trend",
    "WaveHeightRange",
    "WindReading",
    "has_class_marker",
    "heading_equals",
    "heading_starts_with",
    "locate_section",
    "parse_forecast_day",
    "parse_report",
    "parse_shore_forecasts",
    "parse_wind_forecast",
]
