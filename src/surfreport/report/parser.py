"""Day and shore parser for Surf News Network style report pages.

Page structure assumed (best-effort, not a schema):

    <h3>North</h3>
    <div class="mainbox">
      <div class="reportday">
        <div class="titleday">Monday</div>
        <div class="tidescontent">01/15 Primary Dropping 14s NNE Haw: 3-5
          Face: 5-9 Secondary ... Face: 1-2 Clean</div>
      </div>
      ...
    </div>
    <h3>Winds</h3>
    <div class="mainbox"> ... same day boxes ... </div>
"""

import logging
from typing import Optional

from bs4 import BeautifulSoup, Tag

from surfreport.extraction.extractors import (
    extract_conditions_comment,
    extract_date,
    extract_swell_reading,
    extract_wave_height_range,
    extract_wind_phrase,
)
from surfreport.report.locator import (
    MAIN_BOX_MARKER,
    any_heading,
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
    WindReading,
)

logger = logging.getLogger(__name__)

DAY_SELECTOR = ".reportday"
DAY_LABEL_SELECTOR = ".titleday"
DAY_CONTENT_SELECTOR = ".tidescontent"

PRIMARY_MARKER = "Primary"
SECONDARY_MARKER = "Secondary"

HTML_PARSER = "html.parser"


def _day_label(day: Tag) -> str:
    title = day.select_one(DAY_LABEL_SELECTOR)
    return title.get_text().strip() if title is not None else ""


def _day_text(day: Tag) -> str:
    """Text of the day's content block, or of the whole day box."""
    content = day.select_one(DAY_CONTENT_SELECTOR)
    return (content if content is not None else day).get_text()


def parse_forecast_day(day: Tag) -> Optional[DayForecast]:
    """Parse one day box into a DayForecast.

    Args:
        day: A ``.reportday`` element

    Returns:
        DayForecast, or None when the box has no day label (a day that
        cannot be labeled cannot be positioned in a sequence).
    """
    label = _day_label(day)
    if not label:
        return None

    text = _day_text(day)
    forecast = DayForecast(
        day_label=label,
        date=extract_date(text) or extract_date(label),
    )

    primary_at = text.find(PRIMARY_MARKER)
    secondary_at = text.find(SECONDARY_MARKER)

    if primary_at >= 0:
        end = secondary_at if secondary_at >= 0 else len(text)
        forecast.primary = extract_swell_reading(
            text[primary_at + len(PRIMARY_MARKER):end]
        )
    if secondary_at >= 0:
        forecast.secondary = extract_swell_reading(
            text[secondary_at + len(SECONDARY_MARKER):]
        )

    # Conditions follow the last face height of the whole day text
    forecast.conditions = extract_conditions_comment(text)
    forecast.wave_height = extract_wave_height_range(text)
    return forecast


def parse_shore_days(container: Tag) -> list[DayForecast]:
    """Parse every day box in a shore container, in document order."""
    days = []
    for day in container.select(DAY_SELECTOR):
        parsed = parse_forecast_day(day)
        if parsed is not None:
            days.append(parsed)
        else:
            logger.debug("Skipping day box without a label")
    return days


def parse_shore_forecasts(document: BeautifulSoup | Tag) -> ShoreForecastSet:
    """Parse the swell forecast of every shore.

    A shore whose section is missing gets an empty list; this is not an
    error.
    """
    forecasts = ShoreForecastSet()
    for shore in Shore:
        container = locate_section(
            document,
            heading_equals(shore.value),
            has_class_marker(MAIN_BOX_MARKER),
        )
        if container is None:
            logger.info(f"No {shore.value} shore section found")
            continue
        forecasts[shore] = parse_shore_days(container)
        logger.debug(f"Parsed {len(forecasts[shore])} days for {shore.value} shore")
    return forecasts


def parse_wind_forecast(document: BeautifulSoup | Tag) -> list[WindReading]:
    """Parse the per-day wind outlook.

    The section heading is "winds" or anything starting with "wind".
    """
    container = locate_section(
        document,
        any_heading(heading_equals("winds"), heading_starts_with("wind")),
        has_class_marker(MAIN_BOX_MARKER),
    )
    if container is None:
        logger.info("No wind section found")
        return []

    readings = []
    for day in container.select(DAY_SELECTOR):
        label = _day_label(day)
        readings.append(WindReading(
            day_label=label,
            value=extract_wind_phrase(_day_text(day), label),
        ))
    return readings


def parse_report(html: str) -> SurfReport:
    """Parse a report page into shore forecasts and wind readings."""
    document = BeautifulSoup(html or "", HTML_PARSER)
    report = SurfReport(
        forecasts=parse_shore_forecasts(document),
        wind=parse_wind_forecast(document),
    )
    logger.info(
        f"Parsed report: {report.forecasts.total_days} shore-days, "
        f"{len(report.wind)} wind days"
    )
    return report
