"""Data models for tide predictions."""

from dataclasses import dataclass
from enum import Enum


class TideKind(str, Enum):
    """Type of tide extremum, using the API's one-letter codes."""

    HIGH = "H"
    LOW = "L"

    @property
    def label(self) -> str:
        return "High" if self is TideKind.HIGH else "Low"


@dataclass
class TideExtremum:
    """A predicted high or low tide.

    Attributes:
        timestamp: Local time as "YYYY-MM-DD HH:MM"
        height_feet: Height above datum as a decimal string (e.g. "1.234")
        kind: High or low
    """

    timestamp: str
    height_feet: str
    kind: TideKind

    @property
    def date(self) -> str:
        """Calendar date portion of the timestamp ("YYYY-MM-DD")."""
        return self.timestamp.split(" ")[0]

    @property
    def is_high(self) -> bool:
        return self.kind is TideKind.HIGH

    @property
    def time_label(self) -> str:
        """12-hour clock time (e.g. "3:04 PM")."""
        clock = self.timestamp.split(" ")[1]
        hour_str, minute_str = clock.split(":")[:2]
        hour = int(hour_str)
        suffix = "PM" if hour >= 12 else "AM"
        return f"{hour % 12 or 12}:{int(minute_str):02d} {suffix}"

    @property
    def height_label(self) -> str:
        """Height rounded to one decimal with unit (e.g. "1.2 ft")."""
        return f"{float(self.height_feet):.1f} ft"
