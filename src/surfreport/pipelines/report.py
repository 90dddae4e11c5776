"""Surf News Network report page pipeline.

Downloads the report page and parses shore swell forecasts and the wind
outlook from it. Page structure is not under our control, so parsing is
best-effort: missing sections produce empty results rather than errors,
and validation reports them as issues.
"""

import logging
from typing import Optional

import requests

from surfreport.cache.responses import ResponseCache
from surfreport.models import Shore, SurfReport
from surfreport.report.parser import parse_report
from surfreport.utils import SourcePipeline, ValidationResult

logger = logging.getLogger(__name__)

SNN_URL = "https://www.surfnewsnetwork.com/"

# Request timeout in seconds
REQUEST_TIMEOUT = 20

HEADERS = {
    "User-Agent": "surfreport/1.0",
    "X-Requested-With": "XMLHttpRequest",
}


class SurfReportPipeline(SourcePipeline[str, SurfReport]):
    """Report page download → parse → validate.

    Example:
        >>> pipeline = SurfReportPipeline()
        >>> report, validation = pipeline.run()
        >>> print(report.day_labels())
    """

    name = "report"

    def __init__(
        self,
        url: str = SNN_URL,
        timeout: Optional[float] = REQUEST_TIMEOUT,
        cache: Optional[ResponseCache] = None,
    ):
        """Initialize the pipeline.

        Args:
            url: Report page URL
            timeout: HTTP request timeout in seconds (None waits forever)
            cache: Optional response cache for offline fallback
        """
        self.url = url
        self.timeout = timeout
        self.cache = cache

    def download(self, **kwargs) -> str:
        """Fetch the report page HTML.

        Raises:
            requests.RequestException: On network failure
            requests.HTTPError: On a non-success status
        """
        logger.info(f"Fetching surf report from {self.url}")
        if self.cache is not None:
            response = self.cache.get(self.url, headers=HEADERS, timeout=self.timeout)
        else:
            response = requests.get(self.url, headers=HEADERS, timeout=self.timeout)
        response.raise_for_status()
        return response.text

    def process(self, raw: str) -> SurfReport:
        return parse_report(raw)

    def validate(self, data: SurfReport) -> ValidationResult:
        """Valid when at least one shore has a forecast day."""
        issues = []
        missing = [shore.value for shore, days in data.forecasts.items() if not days]
        if missing:
            issues.append(f"No forecast days for: {', '.join(missing)}")
        if not data.wind:
            issues.append("No wind forecast found")

        lengths = {shore.value: len(days) for shore, days in data.forecasts.items()}
        if len(set(n for n in lengths.values() if n)) > 1:
            issues.append(f"Shores have different day counts: {lengths}")

        return ValidationResult(
            valid=data.forecasts.total_days > 0,
            total_records=data.forecasts.total_days,
            missing_pct=100.0 * len(missing) / len(Shore),
            issues=issues,
            stats={"days_per_shore": lengths, "wind_days": len(data.wind)},
        )
