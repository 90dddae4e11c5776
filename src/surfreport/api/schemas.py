"""Pydantic schemas for API responses.

Mirror the dataclasses in surfreport.models and surfreport.tides.models.
Every schema reads attributes directly, so the parsed dataclasses can be
passed to ``model_validate``.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from surfreport.cache.refresh import LoadResult, LoadStatus
from surfreport.dashboard.components.cards import DayCard
from surfreport.models import Shore, Trend
from surfreport.tides.models import TideKind


class SwellReadingSchema(BaseModel):
    """One swell reading; absent fields are null."""

    model_config = ConfigDict(from_attributes=True)

    trend: Optional[Trend] = None
    period: Optional[str] = Field(default=None, description='Period, e.g. "14s"')
    direction: Optional[str] = Field(default=None, description='Compass direction, e.g. "NNE"')
    haw: Optional[str] = Field(default=None, description="Hawaiian-scale height")
    face: Optional[str] = Field(default=None, description="Face height")


class WaveHeightSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    range: str
    qualifier: Optional[str] = None
    rule: str = ""


class DayForecastSchema(BaseModel):
    """Forecast for one day on one shore."""

    model_config = ConfigDict(from_attributes=True)

    day_label: str
    date: Optional[str] = Field(default=None, description="MM/DD when known")
    primary: SwellReadingSchema
    secondary: SwellReadingSchema
    conditions: Optional[str] = None
    wave_height: Optional[WaveHeightSchema] = None


class WindSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day_label: str
    value: str


class TideSchema(BaseModel):
    """A predicted high or low tide.

    Attributes:
        timestamp: Local time "YYYY-MM-DD HH:MM"
        height_feet: Height above MLLW as a decimal string
        kind: "H" or "L"
    """

    model_config = ConfigDict(from_attributes=True)

    timestamp: str
    height_feet: str
    kind: TideKind


class SecondaryRowSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    face: str
    meta: str


class ShoreCardSchema(BaseModel):
    """Display fields for one shore on a card."""

    model_config = ConfigDict(from_attributes=True)

    shore: Shore
    name: str
    condition: str = Field(..., description="CSS condition class, empty for normal surf")
    headline: str
    headline_unit: str = ""
    trend: str = ""
    haw_note: Optional[str] = None
    swell: Optional[str] = None
    secondary: Optional[SecondaryRowSchema] = None
    conditions: Optional[str] = None


class DayCardSchema(BaseModel):
    """One day's card: every shore, wind and that day's tides."""

    model_config = ConfigDict(from_attributes=True)

    index: int
    label: str
    shores: list[ShoreCardSchema] = Field(default_factory=list)
    wind: Optional[WindSchema] = None
    tides: list[TideSchema] = Field(default_factory=list)

    @classmethod
    def from_card(cls, card: DayCard) -> "DayCardSchema":
        return cls.model_validate(card)


class ReportResponse(BaseModel):
    """Full result of the latest load cycle.

    Attributes:
        status: "content", "partial" or "error"
        message: Human-readable message when the report failed
        loaded_at: Time the load finished
        duration_ms: Wall time of the load
        forecasts: Day forecasts per shore ("north", "east", "south", "west")
        wind: Wind readings in day order
        tides_by_day: Tide extrema per date with one lookahead entry
        day_labels: Canonical label per day index
        errors: Failure message per source
    """

    status: LoadStatus
    message: Optional[str] = None
    loaded_at: datetime
    duration_ms: int = 0
    forecasts: dict[str, list[DayForecastSchema]] = Field(default_factory=dict)
    wind: list[WindSchema] = Field(default_factory=list)
    tides_by_day: dict[str, list[TideSchema]] = Field(default_factory=dict)
    day_labels: list[str] = Field(default_factory=list)
    errors: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_result(cls, result: LoadResult) -> "ReportResponse":
        """Build the response from a LoadResult."""
        forecasts = {shore.value: [] for shore in Shore}
        wind = []
        labels = []
        if result.report is not None:
            for shore, days in result.report.forecasts.items():
                forecasts[shore.value] = [DayForecastSchema.model_validate(d) for d in days]
            wind = [WindSchema.model_validate(w) for w in result.report.wind]
            labels = result.report.day_labels()

        return cls(
            status=result.status,
            message=result.message,
            loaded_at=result.loaded_at,
            duration_ms=result.duration_ms,
            forecasts=forecasts,
            wind=wind,
            tides_by_day={
                day: [TideSchema.model_validate(t) for t in extrema]
                for day, extrema in result.tides_by_day.items()
            },
            day_labels=labels,
            errors=dict(result.errors),
        )


class HealthResponse(BaseModel):
    """Health check response.

    Attributes:
        status: "healthy" if a usable report is loaded, else "degraded"
        report_loaded: Whether report data is available
        last_status: Status of the latest load, if any
        loaded_at: Time of the latest load, if any
        version: API version
    """

    status: str = Field(..., description="Service health status")
    report_loaded: bool = Field(..., description="Whether report data is available")
    last_status: Optional[LoadStatus] = None
    loaded_at: Optional[datetime] = None
    version: str = Field(..., description="API version")


class ErrorResponse(BaseModel):
    """Error response.

    Attributes:
        error: Error code
        message: Human-readable message
        detail: Optional extra information
    """

    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable error message")
    detail: Optional[str] = Field(default=None, description="Additional error details")
