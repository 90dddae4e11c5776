"""Tide prediction parsing and per-day grouping."""

import logging
import re
from typing import Any, Iterable

from surfreport.tides.models import TideExtremum, TideKind

logger = logging.getLogger(__name__)

TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$")


def parse_predictions(payload: dict[str, Any]) -> list[TideExtremum]:
    """Convert a NOAA CO-OPS ``predictions`` payload into TideExtremum records.

    Args:
        payload: Decoded JSON of the form
            ``{"predictions": [{"t": "2024-01-01 03:00", "v": "1.234", "type": "H"}]}``

    Returns:
        Extrema in payload order. A missing ``predictions`` key yields an
        empty list. Entries with a missing key, an unknown type, a timestamp
        not in "YYYY-MM-DD HH:MM" form or a non-numeric height are skipped.
    """
    extrema = []
    for i, entry in enumerate(payload.get("predictions") or []):
        try:
            timestamp, height = entry["t"], entry["v"]
            if not isinstance(timestamp, str) or not TIMESTAMP_RE.fullmatch(timestamp):
                raise ValueError(f"bad timestamp {timestamp!r}")
            float(height)
            extrema.append(TideExtremum(
                timestamp=timestamp,
                height_feet=height,
                kind=TideKind(entry["type"]),
            ))
        except (KeyError, TypeError, ValueError) as e:
            logger.warning(f"Skipping malformed tide prediction #{i}: {entry!r} ({e})")
    return extrema


def group_tides_by_day(extrema: Iterable[TideExtremum]) -> dict[str, list[TideExtremum]]:
    """Group chronological tide extrema into calendar-day buckets.

    Each bucket holds every extremum of its date plus one lookahead entry:
    the extremum immediately following the bucket's last member in the
    input, so the overnight transition tide can be shown. The lookahead is
    extra context only; it still appears as an own-day entry of the next
    date's bucket.

    Input must already be in chronological order; nothing is re-sorted.

    Args:
        extrema: Extrema sorted by timestamp

    Returns:
        Mapping of "YYYY-MM-DD" to extrema, with keys in ascending date order.
        Empty input gives an empty mapping.

    Example:
        >>> buckets = group_tides_by_day(extrema)
        >>> [t.timestamp for t in buckets["2024-01-01"]]
        ['2024-01-01 03:00', '2024-01-01 15:00', '2024-01-02 04:00']
    """
    extrema = list(extrema)
    if not extrema:
        return {}

    # date -> index of the date's last extremum in the input
    by_date: dict[str, list[TideExtremum]] = {}
    last_index: dict[str, int] = {}
    for i, extremum in enumerate(extrema):
        by_date.setdefault(extremum.date, []).append(extremum)
        last_index[extremum.date] = i

    buckets = {}
    for date in sorted(by_date):
        entries = list(by_date[date])
        next_index = last_index[date] + 1
        if next_index < len(extrema):
            entries.append(extrema[next_index])
        buckets[date] = entries
    return buckets
