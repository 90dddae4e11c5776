"""Data source pipelines for surfreport.

Each pipeline is responsible for:
1. Downloading the raw payload from its source
2. Processing it into typed records
3. Validating completeness

Pipelines:
- report: Surf News Network report page (shore swell forecasts, wind)
- tides: NOAA CO-OPS high/low tide predictions
"""

from .report import SNN_URL, SurfReportPipeline
from .tides import HONOLULU_STATION, NOAA_TIDE_URL, TidePredictionPipeline

__all__ = [
    "HONOLULU_STATION",
    "NOAA_TIDE_URL",
    "SNN_URL",
    "SurfReportPipeline",
    "TidePredictionPipeline",
]
