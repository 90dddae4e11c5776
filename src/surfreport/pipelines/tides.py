"""NOAA CO-OPS tide prediction pipeline.

Fetches high/low tide predictions for a station over the coming week.

API reference: https://api.tidesandcurrents.noaa.gov/api/prod/
"""

import logging
from datetime import date, timedelta
from typing import Any, Optional

import requests

from surfreport.cache.responses import ResponseCache
from surfreport.tides.grouping import parse_predictions
from surfreport.tides.models import TideExtremum
from surfreport.utils import SourcePipeline, ValidationResult

logger = logging.getLogger(__name__)

NOAA_TIDE_URL = "https://api.tidesandcurrents.noaa.gov/api/prod/datagetter"

# Honolulu, Oahu
HONOLULU_STATION = "1612340"

APPLICATION_NAME = "OahuSurf"

# Days after today included in the request
FORECAST_DAYS = 6

REQUEST_TIMEOUT = 20


def format_date_param(day: date) -> str:
    """Format a date as the API's YYYYMMDD."""
    return day.strftime("%Y%m%d")


class TidePredictionPipeline(SourcePipeline[dict, list[TideExtremum]]):
    """Tide prediction download → parse → validate.

    Example:
        >>> pipeline = TidePredictionPipeline()
        >>> extrema, validation = pipeline.run()
        >>> extrema[0].kind
        <TideKind.HIGH: 'H'>
    """

    name = "tides"

    def __init__(
        self,
        station: str = HONOLULU_STATION,
        days: int = FORECAST_DAYS,
        url: str = NOAA_TIDE_URL,
        timeout: Optional[float] = REQUEST_TIMEOUT,
        cache: Optional[ResponseCache] = None,
    ):
        """Initialize the pipeline.

        Args:
            station: NOAA station identifier
            days: Number of days after today to request
            url: Data getter endpoint
            timeout: HTTP request timeout in seconds (None waits forever)
            cache: Optional response cache for offline fallback
        """
        self.station = station
        self.days = days
        self.url = url
        self.timeout = timeout
        self.cache = cache

    def build_params(self, today: Optional[date] = None) -> dict[str, str]:
        """Query parameters for today through today + ``days``."""
        today = today or date.today()
        return {
            "begin_date": format_date_param(today),
            "end_date": format_date_param(today + timedelta(days=self.days)),
            "station": self.station,
            "product": "predictions",
            "datum": "MLLW",
            "time_zone": "lst_ldt",
            "interval": "hilo",
            "units": "english",
            "application": APPLICATION_NAME,
            "format": "json",
        }

    def download(self, today: Optional[date] = None, **kwargs) -> dict[str, Any]:
        """Fetch the predictions JSON.

        Raises:
            requests.RequestException: On network failure
            requests.HTTPError: On a non-success status
            ValueError: If the body is not JSON
        """
        params = self.build_params(today)
        logger.info(
            f"Fetching tides for station {self.station} "
            f"({params['begin_date']}-{params['end_date']})"
        )
        if self.cache is not None:
            response = self.cache.get(self.url, params=params, timeout=self.timeout)
        else:
            response = requests.get(self.url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def process(self, raw: dict[str, Any]) -> list[TideExtremum]:
        if "error" in raw:
            message = raw["error"].get("message") if isinstance(raw["error"], dict) else raw["error"]
            logger.warning(f"Tide API returned an error: {message}")
        return parse_predictions(raw)

    def validate(self, data: list[TideExtremum]) -> ValidationResult:
        """Valid when there is at least one extremum in chronological order."""
        issues = []
        if not data:
            issues.append("No tide predictions returned")

        timestamps = [t.timestamp for t in data]
        out_of_order = sum(1 for a, b in zip(timestamps, timestamps[1:]) if b < a)
        if out_of_order:
            issues.append(f"{out_of_order} predictions out of chronological order")

        return ValidationResult(
            valid=bool(data) and out_of_order == 0,
            total_records=len(data),
            missing_pct=0.0 if data else 100.0,
            issues=issues,
            stats={
                "highs": sum(1 for t in data if t.is_high),
                "lows": sum(1 for t in data if not t.is_high),
                "days": len({t.date for t in data}),
            },
        )
