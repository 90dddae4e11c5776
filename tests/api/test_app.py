"""Tests for the surf report API.

Tests use FastAPI TestClient with a coordinator whose loader returns
prepared results, so no network is touched.
"""

from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

import surfreport.api.app as app_module
from surfreport.api import DayCardSchema, ReportResponse, create_app
from surfreport.cache.refresh import (
    REPORT_FAILED_MESSAGE,
    LoadCoordinator,
    LoadResult,
    LoadStatus,
)
from surfreport.report.parser import parse_report
from surfreport.tides.grouping import group_tides_by_day


@pytest.fixture
def content_result(sample_report_html, sample_tides):
    """Successful load result."""
    return LoadResult(
        status=LoadStatus.CONTENT,
        report=parse_report(sample_report_html),
        tides=sample_tides,
        tides_by_day=group_tides_by_day(sample_tides),
    )


@pytest.fixture
def coordinator(content_result):
    """Coordinator that always loads the sample result."""
    return LoadCoordinator(loader=lambda: content_result)


@pytest.fixture
def client(coordinator):
    """Test client with the report already loaded."""
    coordinator.refresh()
    app = create_app(coordinator=coordinator, load_on_startup=False)
    return TestClient(app)


@pytest.fixture
def failing_client():
    """Test client whose loads always fail."""
    coordinator = LoadCoordinator(
        loader=lambda: LoadResult(
            status=LoadStatus.ERROR,
            message=REPORT_FAILED_MESSAGE,
            errors={"report": "offline"},
        )
    )
    app = create_app(coordinator=coordinator, load_on_startup=False)
    return TestClient(app)


class TestSchemas:
    """Tests for Pydantic schemas."""

    def test_report_response_from_result(self, content_result):
        """Response mirrors the load result."""
        response = ReportResponse.from_result(content_result)

        assert response.status is LoadStatus.CONTENT
        assert set(response.forecasts) == {"north", "east", "south", "west"}
        assert response.forecasts["west"] == []
        north = response.forecasts["north"][0]
        assert north.primary.trend.value == "Dropping"
        assert north.primary.face == "5-9"
        assert north.conditions == "Clean"
        assert response.day_labels == ["Mon 01/15", "Tue 01/16"]
        assert response.tides_by_day["2024-01-01"][2].timestamp == "2024-01-02 04:00"

    def test_report_response_error(self):
        """An error result has empty forecasts."""
        response = ReportResponse.from_result(
            LoadResult(status=LoadStatus.ERROR, message=REPORT_FAILED_MESSAGE)
        )
        assert response.message == REPORT_FAILED_MESSAGE
        assert all(days == [] for days in response.forecasts.values())
        assert response.wind == []

    def test_json_values(self, content_result):
        """Enums serialize as their values."""
        data = ReportResponse.from_result(content_result).model_dump(mode="json")
        assert data["status"] == "content"
        assert data["forecasts"]["north"][1]["primary"]["trend"] == "RisingOrBuilding"
        assert data["tides_by_day"]["2024-01-01"][0]["kind"] == "H"


class TestInfoEndpoints:
    """Tests for / and /health."""

    def test_root(self, client):
        """Root returns API info."""
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["name"] == "Surf Report API"

    def test_health_loaded(self, client):
        """Health reports a loaded report."""
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert data["report_loaded"] is True
        assert data["last_status"] == "content"

    def test_health_not_loaded(self, failing_client):
        """Health is degraded before a successful load."""
        data = failing_client.get("/health").json()
        assert data["status"] == "degraded"
        assert data["report_loaded"] is False
        assert data["last_status"] is None


class TestReportEndpoint:
    """Tests for /report."""

    def test_report(self, client):
        """Full report is returned."""
        response = client.get("/report")
        assert response.status_code == 200

        data = response.json()
        assert data["status"] == "content"
        assert len(data["forecasts"]["north"]) == 2
        assert data["wind"][0]["value"] == "10-20 mph"
        assert data["errors"] == {}

    def test_refresh(self, client, coordinator):
        """refresh=true runs a new load cycle."""
        before = coordinator.result.sequence
        client.get("/report", params={"refresh": True})
        assert coordinator.result.sequence == before + 1

    def test_loads_on_demand(self, coordinator):
        """A coordinator without a result loads on first request."""
        client = TestClient(create_app(coordinator=coordinator, load_on_startup=False))
        assert client.get("/report").status_code == 200
        assert coordinator.result is not None

    def test_total_failure(self, failing_client):
        """A failed load returns 503 with the error message."""
        response = failing_client.get("/report")
        assert response.status_code == 503

        data = response.json()
        assert data["error"] == "HTTP_503"
        assert data["message"] == REPORT_FAILED_MESSAGE


class TestDaysEndpoint:
    """Tests for /days/{index}."""

    def test_day_card(self, client):
        """A day card combines shores, wind and tides."""
        response = client.get("/days/0")
        assert response.status_code == 200

        card = DayCardSchema.model_validate(response.json())
        assert card.label == "Mon 01/15"
        assert [s.shore.value for s in card.shores] == ["north", "east", "south"]
        assert card.shores[0].headline == "5-9"
        assert card.wind.value == "10-20 mph"
        assert len(card.tides) == 3

    def test_second_day(self, client):
        """Shores without a second day are left out."""
        card = client.get("/days/1").json()
        assert [s["shore"] for s in card["shores"]] == ["north", "east"]
        assert card["shores"][0]["secondary"]["face"] == "2-3 ft"

    def test_out_of_range(self, client):
        """Unknown day index returns 404."""
        response = client.get("/days/7")
        assert response.status_code == 404
        assert response.json()["error"] == "HTTP_404"

    def test_negative_index(self, client):
        """Negative index returns 404."""
        assert client.get("/days/-1").status_code == 404

    def test_failure(self, failing_client):
        """Days are unavailable when the report failed."""
        assert failing_client.get("/days/0").status_code == 503


class TestRunServer:
    """Tests for the uvicorn entry point."""

    @patch("surfreport.api.app.uvicorn.run")
    def test_serves_default_app(self, mock_run):
        """run_server hands the module app to uvicorn."""
        app_module.run_server(port=9000)

        mock_run.assert_called_once_with(app_module.app, host="127.0.0.1", port=9000)
