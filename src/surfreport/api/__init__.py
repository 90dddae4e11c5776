"""JSON API for surfreport.

This module provides:

- create_app: Factory function to create FastAPI application
- ReportResponse: Full report response schema
- DayCardSchema: Single day card schema

Note: FastAPI-dependent exports (create_app) are lazy-loaded to allow
importing schemas without FastAPI installed.
"""

# Schemas can be imported directly (only depend on pydantic)
from surfreport.api.schemas import (
    DayCardSchema,
    DayForecastSchema,
    ErrorResponse,
    HealthResponse,
    ReportResponse,
    SwellReadingSchema,
    TideSchema,
    WindSchema,
)


def __getattr__(name):
    """Lazy load FastAPI-dependent components."""
    if name == "create_app":
        from surfreport.api.app import create_app
        return create_app
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "create_app",
    "DayCardSchema",
    "DayForecastSchema",
    "ErrorResponse",
    "HealthResponse",
    "ReportResponse",
    "SwellReadingSchema",
    "TideSchema",
    "WindSchema",
]
