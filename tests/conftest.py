"""Shared pytest fixtures for surfreport tests.

Test Tiers:
- unit: Fast tests with fixtures, no network (default)
- integration: Tests wiring several components together with mocked HTTP
- live: Real HTTP tests against the report site and NOAA, slow, requires network

Run live tests with: pytest -m live --run-live
"""

from pathlib import Path

import pytest

from surfreport.tides.models import TideExtremum, TideKind


def pytest_addoption(parser):
    """Add command line options for test configuration."""
    parser.addoption(
        "--run-live",
        action="store_true",
        default=False,
        help="Run live HTTP tests (slow, requires network)",
    )


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: fast unit tests using fixtures")
    config.addinivalue_line("markers", "integration: tests combining components with mocked HTTP")
    config.addinivalue_line("markers", "live: real HTTP tests (slow, requires network)")


def pytest_collection_modifyitems(config, items):
    """Skip live tests unless --run-live is specified."""
    if config.getoption("--run-live"):
        # --run-live given: don't skip live tests
        return

    skip_live = pytest.mark.skip(reason="need --run-live option to run")
    for item in items:
        if "live" in item.keywords:
            item.add_marker(skip_live)


@pytest.fixture
def project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


SAMPLE_REPORT_HTML = """
<html>
<body>
<h3>North</h3>
<p>Updated daily at 6am</p>
<div class="mainbox">
  <div class="reportday">
    <div class="titleday">Mon</div>
    <div class="tidescontent">01/15 Primary Dropping 14s NNE Haw: 3-5 Face: 5-9 Clean</div>
  </div>
  <div class="reportday">
    <div class="titleday">Tue</div>
    <div class="tidescontent">01/16 Primary Rising 16s NW Haw: 6-8 Face: 10-14
      Secondary Holding 8s E Haw: 1-2 Face: 2-3 Choppy</div>
  </div>
</div>
<h3>East</h3>
<div class="mainbox">
  <div class="reportday">
    <div class="titleday">Mon</div>
    <div class="tidescontent">01/15 Primary Steady 8s ENE Haw: 1-2 Face: 2-3 Bumpy</div>
  </div>
  <div class="reportday">
    <div class="titleday">Tue</div>
    <div class="tidescontent">01/16 Primary Steady 8s ENE Haw: 1-2 Face: 2-3 Bumpy</div>
  </div>
</div>
<h3>South</h3>
<div class="mainbox">
  <div class="reportday">
    <div class="titleday">Mon</div>
    <div class="tidescontent">01/15 Primary Holding 12s SSW Haw: 1-2 Face: 2-3 Clean</div>
  </div>
</div>
<h3>Winds</h3>
<div class="mainbox">
  <div class="reportday">
    <div class="titleday">Mon</div>
    <div class="tidescontent">Mon NE trades 10-20 mph. Lighter in the afternoon.</div>
  </div>
  <div class="reportday">
    <div class="titleday">Tue</div>
    <div class="tidescontent">Light and variable</div>
  </div>
</div>
</body>
</html>
"""


@pytest.fixture
def sample_report_html() -> str:
    """Report page with North (2 days), East (2), South (1), wind and no West."""
    return SAMPLE_REPORT_HTML


@pytest.fixture
def sample_tide_payload() -> dict:
    """NOAA predictions payload spanning two days."""
    return {
        "predictions": [
            {"t": "2024-01-01 03:00", "v": "1.812", "type": "H"},
            {"t": "2024-01-01 15:00", "v": "-0.105", "type": "L"},
            {"t": "2024-01-02 04:00", "v": "1.934", "type": "H"},
        ]
    }


@pytest.fixture
def sample_tides() -> list[TideExtremum]:
    """Chronological extrema matching sample_tide_payload."""
    return [
        TideExtremum("2024-01-01 03:00", "1.812", TideKind.HIGH),
        TideExtremum("2024-01-01 15:00", "-0.105", TideKind.LOW),
        TideExtremum("2024-01-02 04:00", "1.934", TideKind.HIGH),
    ]
