"""FastAPI application serving the parsed surf report.

Provides REST API endpoints for:
- The full report (forecasts per shore, wind, tides by day)
- Single day cards
- Health checks

Example:
    >>> from surfreport.api import create_app
    >>> app = create_app()
    >>> # Run with: surfreport-api, or uvicorn surfreport.api.app:app --reload
"""

import logging
from typing import Optional

import uvicorn
from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from surfreport.api.schemas import (
    DayCardSchema,
    ErrorResponse,
    HealthResponse,
    ReportResponse,
)
from surfreport.cache.refresh import LoadCoordinator, LoadResult
from surfreport.dashboard.components.cards import build_day_cards

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


def _require_report(coordinator: LoadCoordinator, refresh: bool = False) -> LoadResult:
    """Latest usable result, loading first if needed.

    Raises:
        HTTPException: 503 when the report could not be loaded
    """
    if refresh or coordinator.result is None:
        coordinator.refresh()

    result = coordinator.result
    if result is None or not result.usable:
        message = result.message if result is not None else "Report not loaded"
        raise HTTPException(status_code=503, detail=message)
    return result


def create_app(
    coordinator: Optional[LoadCoordinator] = None,
    load_on_startup: bool = True,
) -> FastAPI:
    """Create FastAPI application.

    Args:
        coordinator: Session state to serve (default: a new LoadCoordinator)
        load_on_startup: Whether to run a load cycle on startup

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Surf Report API",
        description="Parsed Oahu surf forecasts and tide predictions",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    coordinator = coordinator or LoadCoordinator()
    app.state.coordinator = coordinator

    @app.on_event("startup")
    async def startup_event():
        """Load the report on startup."""
        if load_on_startup:
            try:
                result = coordinator.refresh()
                logger.info(f"Initial load: {result}")
            except Exception as e:
                logger.error(f"Failed to load report on startup: {e}")

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        """Handle HTTP exceptions with custom response."""
        return JSONResponse(
            status_code=exc.status_code,
            content=ErrorResponse(
                error=f"HTTP_{exc.status_code}",
                message=str(exc.detail),
            ).model_dump(),
        )

    @app.get("/", tags=["info"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": "Surf Report API",
            "version": API_VERSION,
            "docs": "/docs",
        }

    @app.get("/health", response_model=HealthResponse, tags=["info"])
    async def health_check():
        """Health check endpoint."""
        result = coordinator.result
        loaded = result is not None and result.usable
        return HealthResponse(
            status="healthy" if loaded else "degraded",
            report_loaded=loaded,
            last_status=result.status if result is not None else None,
            loaded_at=result.loaded_at if result is not None else None,
            version=API_VERSION,
        )

    @app.get(
        "/report",
        response_model=ReportResponse,
        responses={503: {"model": ErrorResponse, "description": "Report could not be loaded"}},
        tags=["report"],
    )
    def get_report(refresh: bool = Query(False, description="Run a new load cycle first")):
        """Get the latest parsed report.

        Tides may be empty (status "partial") when only the tide source failed.
        """
        result = _require_report(coordinator, refresh=refresh)
        return ReportResponse.from_result(result)

    @app.get(
        "/days/{index}",
        response_model=DayCardSchema,
        responses={
            404: {"model": ErrorResponse, "description": "No such day"},
            503: {"model": ErrorResponse, "description": "Report could not be loaded"},
        },
        tags=["report"],
    )
    def get_day(index: int):
        """Get the card for one day index (all shores, wind and tides)."""
        result = _require_report(coordinator)
        cards = build_day_cards(result.report, result.tides_by_day)
        if not 0 <= index < len(cards):
            raise HTTPException(
                status_code=404,
                detail=f"Day {index} out of range (0-{len(cards) - 1})" if cards else "No forecast days",
            )
        return DayCardSchema.from_card(cards[index])

    return app


# Default app instance for uvicorn
app = create_app()


def run_server(host: str = "127.0.0.1", port: int = 8000) -> None:
    """Serve the default app with uvicorn."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    uvicorn.run(app, host=host, port=port)
