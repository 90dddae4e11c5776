"""Day card view models for the swipeable card UI.

Turns a LoadResult into one card per forecast day. Cards are aligned by
index across shores, wind and tide dates; the reference shore (first
shore with data) supplies the day labels.
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

import pandas as pd

from surfreport.models import DayForecast, Shore, SurfReport, Trend, WindReading
from surfreport.tides.models import TideExtremum
from surfreport.visualization.colors import CONDITION_FLAT, condition_class


@dataclass
class SecondaryRow:
    """Compact line for a secondary swell."""

    face: str
    meta: str


@dataclass
class ShoreCard:
    """Display fields for one shore on one day."""

    shore: Shore
    name: str
    condition: str
    headline: str
    headline_unit: str = ""
    trend: str = ""
    haw_note: Optional[str] = None
    swell: Optional[str] = None
    secondary: Optional[SecondaryRow] = None
    conditions: Optional[str] = None


@dataclass
class DayCard:
    """Everything shown on one day's card."""

    index: int
    label: str
    shores: list[ShoreCard] = field(default_factory=list)
    wind: Optional[WindReading] = None
    tides: list[TideExtremum] = field(default_factory=list)


def build_shore_card(shore: Shore, day: DayForecast) -> ShoreCard:
    """Build the shore section of a card.

    The headline is the primary face height, else the Hawaiian-scale
    height, else "Flat". A secondary swell is only shown when it has a face
    height and its trend is not "None".
    """
    primary = day.primary
    condition = condition_class(primary.face) if primary.has_data else CONDITION_FLAT

    if primary.face:
        headline, unit = primary.face, "ft face"
    elif primary.haw:
        headline, unit = primary.haw, "ft haw"
    else:
        headline, unit = "Flat", ""

    swell = None
    if primary.period:
        swell = f"{primary.period} {primary.direction}" if primary.direction else primary.period

    secondary = None
    sec = day.secondary
    if sec.face and sec.trend is not Trend.NONE:
        parts = []
        if sec.period:
            parts.append(f"{sec.period} {sec.direction}" if sec.direction else sec.period)
        meta = " ".join(parts)
        if sec.trend:
            meta = f"{meta} · {sec.trend.label}" if meta else sec.trend.label
        secondary = SecondaryRow(face=f"{sec.face} ft", meta=meta)

    return ShoreCard(
        shore=shore,
        name=shore.display_name,
        condition=condition,
        headline=headline,
        headline_unit=unit,
        trend=primary.trend.label if primary.trend else "",
        haw_note=f"Haw: {primary.haw} ft" if primary.haw and primary.face else None,
        swell=swell,
        secondary=secondary,
        conditions=day.conditions,
    )


def day_labels(report: SurfReport, shores: Optional[Iterable[Shore]] = None) -> list[str]:
    """Label per day index.

    With several shores the reference shore's labels are canonical; with a
    single shore its own labels are used.
    """
    shores = list(shores) if shores is not None else list(Shore)
    if len(shores) == 1:
        return [day.full_label for day in report.forecasts[shores[0]]]
    for shore in shores:
        days = report.forecasts[shore]
        if days:
            return [day.full_label for day in days]
    return []


def build_day_cards(
    report: SurfReport,
    tides_by_day: Optional[dict[str, list[TideExtremum]]] = None,
    shores: Optional[Iterable[Shore]] = None,
) -> list[DayCard]:
    """Build one card per day index.

    Args:
        report: Parsed report
        tides_by_day: Output of group_tides_by_day; the n-th date (in order)
            goes on the n-th card
        shores: Shores to include, in order (default: all, card order)

    Returns:
        Cards for day indexes 0..N-1 where N is the longest included shore
        sequence; empty if no included shore has data.
    """
    shores = list(shores) if shores is not None else list(Shore)
    tides_by_day = tides_by_day or {}
    tide_dates = sorted(tides_by_day)
    labels = day_labels(report, shores)
    num_days = max((len(report.forecasts[s]) for s in shores), default=0)

    cards = []
    for d in range(num_days):
        card = DayCard(
            index=d,
            label=labels[d] if d < len(labels) else f"Day {d + 1}",
        )
        for shore in shores:
            day = report.forecasts.day_at(shore, d)
            if day is not None:
                card.shores.append(build_shore_card(shore, day))
        if d < len(report.wind):
            card.wind = report.wind[d]
        if d < len(tide_dates):
            card.tides = tides_by_day[tide_dates[d]]
        cards.append(card)
    return cards


def tides_to_dataframe(tides: list[TideExtremum]) -> pd.DataFrame:
    """Tide rows for a card as a DataFrame (Tide, Time, Height)."""
    return pd.DataFrame(
        {
            "Tide": [("▲ " if t.is_high else "▼ ") + t.kind.label for t in tides],
            "Time": [t.time_label for t in tides],
            "Height": [t.height_label for t in tides],
        },
        columns=["Tide", "Time", "Height"],
    )
