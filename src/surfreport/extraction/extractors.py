"""Text pattern extractors for surf report fragments.

Each extractor pulls one semantic value (trend, period and direction, a
labeled height, a conditions comment, a wave-height range, a wind phrase)
out of a free-text fragment. Extractors are pure and total: any string,
including an empty one, yields either a value or None.

Where several phrasings express the same value the alternatives live in an
ordered rule table (see ``surfreport.extraction.rules``); the order of each
table is part of the contract and pinned by tests.
"""

import re
from typing import Optional

from surfreport.extraction.rules import (
    PatternRule,
    first_match,
    leftmost_match,
    ordered,
    rule,
)
from surfreport.models import SwellReading, Trend, WaveHeightRange

# Characters allowed in a height expression ("3-5+", "0-1.5", "2/3")
HEIGHT_EXPR = r"[\d\-+./]+"

# Longest conditions comment kept
CONDITIONS_MAX_CHARS = 60

# Length of the raw-text fallback for wind summaries
WIND_FALLBACK_CHARS = 80

COMPASS_LETTERS = frozenset("NSEW")

_NUM = r"\d+(?:\.\d+)?"
_RANGE = rf"{_NUM}\s*[-–]\s*{_NUM}\+?"
_FOOT = r"['’]"

_DATE_RE = re.compile(r"(\d{2}/\d{2})")
_PERIOD_DIR_RE = re.compile(r"(\d+)s\s*(?:&nbsp;)?\s*([NSEW]{1,3})", re.IGNORECASE)
_CONDITIONS_RE = re.compile(
    rf"Face:\s*{HEIGHT_EXPR}\s*([\w][\w\s,'-]*)", re.ASCII
)


def _constant(value):
    return lambda match: value


def _clean_range(text: str) -> str:
    """Normalize separators in a range ("3 – 5", "8 to 10") to "3-5"."""
    return re.sub(r"\s*(?:[-–]|\bto\b)\s*", "-", text.strip())


# Leftmost keyword wins; rank breaks ties at the same position.
TREND_RULES: list[PatternRule[Trend]] = ordered([
    rule("dropping", r"Dropping", 0, _constant(Trend.DROPPING), re.IGNORECASE),
    rule("holding", r"Holding", 1, _constant(Trend.HOLDING), re.IGNORECASE),
    rule("up_holding", r"Up\s*&?\s*holding", 2, _constant(Trend.HOLDING), re.IGNORECASE),
    rule("rising", r"Rising", 3, _constant(Trend.RISING_OR_BUILDING), re.IGNORECASE),
    rule("building", r"Building", 4, _constant(Trend.RISING_OR_BUILDING), re.IGNORECASE),
    rule("steady", r"Steady", 5, _constant(Trend.STEADY), re.IGNORECASE),
    rule("none", r"None", 6, _constant(Trend.NONE), re.IGNORECASE),
])

# Most specific phrasing first; looser fallbacks risk false positives.
WAVE_HEIGHT_RULES: list[PatternRule[WaveHeightRange]] = ordered([
    rule(
        "surfs",
        rf"surf['’]?s\s+({_NUM}(?:\s*[-–]\s*{_NUM})?\+?)\s*{_FOOT}",
        0,
        lambda m: WaveHeightRange(_clean_range(m.group(1)), rule="surfs"),
        re.IGNORECASE,
    ),
    rule(
        "maybe",
        rf"({_RANGE})\s*{_FOOT}?\s*,?\s*maybe\s+({_NUM})\s*{_FOOT}",
        1,
        lambda m: WaveHeightRange(
            _clean_range(m.group(1)), qualifier=f"maybe {m.group(2)}", rule="maybe"
        ),
        re.IGNORECASE,
    ),
    rule(
        "occasional",
        rf"({_RANGE})\s*{_FOOT}?\s*,?\s*(?:occ\.|occasional(?:ly)?)\s*({_NUM}(?:\s*[-–]\s*{_NUM})?\+?)",
        2,
        lambda m: WaveHeightRange(
            _clean_range(m.group(1)),
            qualifier=f"occ. {_clean_range(m.group(2))}",
            rule="occasional",
        ),
        re.IGNORECASE,
    ),
    rule(
        "bare",
        rf"({_RANGE})\s*{_FOOT}",
        3,
        lambda m: WaveHeightRange(_clean_range(m.group(1)), rule="bare"),
    ),
    rule(
        "location",
        rf"\b(?!(?i:haw|face|primary|secondary|up|dropping|holding|rising|building|steady|none)\b)"
        rf"([A-Z][a-z]+(?:\s+[A-Z][a-z]+)*)\s*:?\s+({_NUM}\s*(?:[-–]|to)\s*{_NUM}\+?)",
        4,
        lambda m: WaveHeightRange(
            _clean_range(m.group(2)), qualifier=m.group(1), rule="location"
        ),
    ),
])

WIND_RULES: list[PatternRule[str]] = ordered([
    rule(
        "mph_range",
        r"(\d+[-–]\d+\s*mph\s*[^.]{0,30})",
        0,
        lambda m: m.group(1).strip(),
        re.IGNORECASE,
    ),
    rule(
        "compass_trades",
        r"([NSEW]{1,3}\s+(?:trades?|winds?)\s+\d+[-–]\d+\s*mph[^.]{0,20})",
        1,
        lambda m: m.group(1).strip(),
        re.IGNORECASE,
    ),
])


def extract_trend(text: str) -> Optional[Trend]:
    """Extract the swell trend keyword.

    "Up & holding" normalizes to Holding; "Rising" and "Building" both map
    to RisingOrBuilding.

    Args:
        text: Swell block text (e.g. "Dropping 14s NNE Haw: 3-5")

    Returns:
        Trend of the first keyword in the text, or None.
    """
    return leftmost_match(TREND_RULES, text, re.IGNORECASE)


def extract_period_and_direction(text: str) -> Optional[tuple[str, str]]:
    """Extract swell period and compass direction.

    Matches "<int>s <compass>" where the compass is 1-3 of N/S/E/W. The
    direction is upper-cased and filtered to compass letters, dropping any
    stray characters picked up from adjacent markup.

    Returns:
        Tuple of (period like "14s", direction like "NNE"), or None.

    Example:
        >>> extract_period_and_direction("Dropping 14s NNE Haw: 3-5")
        ('14s', 'NNE')
    """
    if not text:
        return None
    match = _PERIOD_DIR_RE.search(text)
    if match is None:
        return None
    direction = "".join(c for c in match.group(2).upper() if c in COMPASS_LETTERS)
    if not direction:
        return None
    return f"{match.group(1)}s", direction


def extract_labeled_number(text: str, label: str) -> Optional[str]:
    """Extract the height expression following a label such as "Haw:".

    >>> extract_labeled_number("Haw: 3-5+ Face: 5-9", "Face:")
    '5-9'
    """
    if not text or not label:
        return None
    match = re.search(rf"{re.escape(label)}\s*({HEIGHT_EXPR})", text, re.IGNORECASE)
    if match is None:
        return None
    return match.group(1).strip() or None


def extract_conditions_comment(text: str) -> Optional[str]:
    """Extract the conditions comment after the last face height.

    The comment always follows the final "Face:" value, so the search starts
    at the last occurrence; an earlier "Face:" belongs to the primary block.

    Returns:
        The trimmed phrase (at most 60 chars) if longer than 2 chars, else None.
    """
    if not text:
        return None
    start = text.rfind("Face:")
    if start < 0:
        return None
    match = _CONDITIONS_RE.search(text, start)
    if match is None:
        return None
    phrase = match.group(1).strip()
    if len(phrase) <= 2:
        return None
    return phrase[:CONDITIONS_MAX_CHARS]


def extract_wave_height_range(text: str) -> Optional[WaveHeightRange]:
    """Extract a forecast wave-height range.

    Tries, in order: "Surf's 3-5'", "3-5' maybe 6'", "3-5' occ. 6'",
    a bare "3-5'", and a location name followed by a range
    ("Waimea 10-15"). The first rule that matches wins, regardless of where
    in the text the looser phrasings occur.
    """
    return first_match(WAVE_HEIGHT_RULES, text)


def extract_wind_phrase(text: str, day_label: str) -> str:
    """Summarize a day's wind forecast.

    The day label is removed first since headings are often repeated inside
    the content block. Falls back to the first 80 characters of what remains.
    """
    remaining = (text or "")
    if day_label:
        remaining = remaining.replace(day_label, "", 1)
    remaining = remaining.strip()
    phrase = first_match(WIND_RULES, remaining)
    if phrase is not None:
        return phrase
    return remaining[:WIND_FALLBACK_CHARS]


def extract_date(text: str) -> Optional[str]:
    """Extract the first "MM/DD" date."""
    if not text:
        return None
    match = _DATE_RE.search(text)
    return match.group(1) if match else None


def extract_swell_reading(text: str) -> SwellReading:
    """Build a SwellReading from one primary or secondary block."""
    reading = SwellReading(
        trend=extract_trend(text),
        haw=extract_labeled_number(text, "Haw:"),
        face=extract_labeled_number(text, "Face:"),
    )
    period_dir = extract_period_and_direction(text)
    if period_dir is not None:
        reading.period, reading.direction = period_dir
    return reading
