"""Data models for parsed surf reports."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional


class Trend(str, Enum):
    """Swell trend reported for a day-part."""

    DROPPING = "Dropping"
    HOLDING = "Holding"
    RISING_OR_BUILDING = "RisingOrBuilding"
    STEADY = "Steady"
    NONE = "None"
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value):
        return cls.UNKNOWN

    @property
    def label(self) -> str:
        """Human-readable label for display."""
        if self is Trend.RISING_OR_BUILDING:
            return "Rising"
        return self.value


class Shore(str, Enum):
    """Coastal regions with independent swell forecasts, in card order."""

    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    @property
    def display_name(self) -> str:
        return f"{self.value.capitalize()} Shore"


@dataclass
class SwellReading:
    """One direction's forecasted energy for one day-part.

    Heights are kept as display strings ("3-5+", "0-1.5") because the source
    mixes plain numbers, ranges and trailing modifiers.

    Attributes:
        trend: Trend keyword, or None if absent
        period: Swell period as "<seconds>s" (e.g. "14s")
        direction: Compass direction using only N/S/E/W (e.g. "NNE")
        haw: Hawaiian-scale height string
        face: Face height string
    """

    trend: Optional[Trend] = None
    period: Optional[str] = None
    direction: Optional[str] = None
    haw: Optional[str] = None
    face: Optional[str] = None

    @property
    def period_seconds(self) -> Optional[int]:
        """Swell period as an integer number of seconds."""
        if not self.period:
            return None
        return int(self.period.rstrip("s"))

    @property
    def has_data(self) -> bool:
        """Whether any trend, period or height was extracted."""
        return any(
            value is not None
            for value in (self.trend, self.period, self.haw, self.face)
        )


@dataclass
class WaveHeightRange:
    """Wave-height range found in free text.

    Attributes:
        range: Range expression as written (e.g. "3-5")
        qualifier: Extra context such as "maybe 6", "occ. 8" or a location name
        rule: Name of the pattern rule that matched
    """

    range: str
    qualifier: Optional[str] = None
    rule: str = ""

    def __str__(self) -> str:
        if self.qualifier:
            return f"{self.range} ({self.qualifier})"
        return self.range


@dataclass
class DayForecast:
    """Forecast for one calendar day on one shore.

    Days are identified by their position in the shore's sequence, not by
    date, since the date is frequently missing from the source.
    """

    day_label: str
    date: Optional[str] = None
    primary: SwellReading = field(default_factory=SwellReading)
    secondary: SwellReading = field(default_factory=SwellReading)
    conditions: Optional[str] = None
    wave_height: Optional[WaveHeightRange] = None

    @property
    def full_label(self) -> str:
        """Day label with the date appended when known (e.g. "Mon 01/15")."""
        if self.date:
            return f"{self.day_label} {self.date}"
        return self.day_label


@dataclass
class ShoreForecastSet:
    """Ordered day forecasts for every shore.

    All four shores are always present; a shore whose section is missing
    from the page has an empty list. Sequences may differ in length and are
    aligned by index only.
    """

    north: list[DayForecast] = field(default_factory=list)
    east: list[DayForecast] = field(default_factory=list)
    south: list[DayForecast] = field(default_factory=list)
    west: list[DayForecast] = field(default_factory=list)

    def __getitem__(self, shore: Shore | str) -> list[DayForecast]:
        return getattr(self, Shore(shore).value)

    def __setitem__(self, shore: Shore | str, days: list[DayForecast]) -> None:
        setattr(self, Shore(shore).value, days)

    def items(self) -> Iterator[tuple[Shore, list[DayForecast]]]:
        for shore in Shore:
            yield shore, self[shore]

    @property
    def num_days(self) -> int:
        """Length of the longest shore sequence."""
        return max((len(days) for _, days in self.items()), default=0)

    @property
    def total_days(self) -> int:
        return sum(len(days) for _, days in self.items())

    def reference_shore(self) -> Optional[Shore]:
        """First shore in card order that has any days.

        Its day labels are treated as canonical for each day index.
        """
        for shore, days in self.items():
            if days:
                return shore
        return None

    def day_at(self, shore: Shore | str, index: int) -> Optional[DayForecast]:
        days = self[shore]
        if 0 <= index < len(days):
            return days[index]
        return None


@dataclass
class WindReading:
    """Wind summary for one day.

    ``value`` is either a matched "<range> mph ..." phrase or a raw slice of
    the day's text.
    """

    day_label: str
    value: str


@dataclass
class SurfReport:
    """Everything parsed from one report page."""

    forecasts: ShoreForecastSet = field(default_factory=ShoreForecastSet)
    wind: list[WindReading] = field(default_factory=list)

    def day_labels(self) -> list[str]:
        """Canonical label for each day index, from the reference shore."""
        shore = self.forecasts.reference_shore()
        if shore is None:
            return []
        return [day.full_label for day in self.forecasts[shore]]
