"""Load cycle: fetch the report page and tides together.

Both sources are fetched concurrently and joined with a collect-all
policy: one failing never cancels the other. The report page is required
(the cards are organized around it); tides are optional.

Usage:
    python -m surfreport.cache.refresh            # Load once, print summary
    python -m surfreport.cache.refresh --json     # Print the full report as JSON
    python -m surfreport.cache.refresh --timeout 30
"""

import argparse
import logging
import sys
import threading
import time
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from surfreport.models import Shore, SurfReport
from surfreport.pipelines.report import SurfReportPipeline
from surfreport.pipelines.tides import TidePredictionPipeline
from surfreport.tides.grouping import group_tides_by_day
from surfreport.tides.models import TideExtremum
from surfreport.utils import SourcePipeline, ValidationResult

logger = logging.getLogger(__name__)

REPORT_FAILED_MESSAGE = "Could not load surf data."

# Tab showing every shore on one card per day
ALL_SHORES_TAB = "all"
TABS = (ALL_SHORES_TAB,) + tuple(shore.value for shore in Shore)


class LoadStatus(str, Enum):
    """Outcome of a load cycle."""

    CONTENT = "content"  # report and tides
    PARTIAL = "partial"  # report only
    ERROR = "error"  # no report


@dataclass
class LoadResult:
    """Everything produced by one load cycle.

    Attributes:
        status: Overall outcome
        report: Parsed report page, None when it could not be loaded
        tides: Tide extrema in chronological order
        tides_by_day: Extrema grouped per date with one lookahead entry
        errors: Failure message per source name ("report", "tides")
        validations: Validation result per source that loaded
        message: Human-readable message for the error screen
        loaded_at: Time the cycle finished
        duration_ms: Wall time of the cycle
        sequence: Refresh sequence number assigned by LoadCoordinator
    """

    status: LoadStatus
    report: Optional[SurfReport] = None
    tides: list[TideExtremum] = field(default_factory=list)
    tides_by_day: dict[str, list[TideExtremum]] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    validations: dict[str, ValidationResult] = field(default_factory=dict)
    message: Optional[str] = None
    loaded_at: datetime = field(default_factory=datetime.now)
    duration_ms: int = 0
    sequence: int = 0

    @property
    def usable(self) -> bool:
        """Whether there is report data to render."""
        return self.status is not LoadStatus.ERROR and self.report is not None

    def __str__(self) -> str:
        days = self.report.forecasts.num_days if self.report else 0
        return (
            f"Load {self.status.value}: {days} days, "
            f"{len(self.tides)} tides, {len(self.errors)} errors "
            f"({self.duration_ms}ms)"
        )


def _run(pipeline: SourcePipeline):
    return pipeline.run(raise_on_invalid=False)


def load_all(
    report_pipeline: Optional[SurfReportPipeline] = None,
    tide_pipeline: Optional[TidePredictionPipeline] = None,
    timeout: Optional[float] = None,
) -> LoadResult:
    """Run one load cycle.

    Args:
        report_pipeline: Report source (default SurfReportPipeline())
        tide_pipeline: Tide source (default TidePredictionPipeline())
        timeout: Optional overall wait in seconds; a source still running
            afterwards counts as failed. Each request also carries its
            pipeline's own HTTP timeout.

    Returns:
        LoadResult. ERROR when the report failed (whatever the tides did),
        PARTIAL when only the tides failed, CONTENT otherwise.
    """
    report_pipeline = report_pipeline or SurfReportPipeline()
    tide_pipeline = tide_pipeline or TidePredictionPipeline()
    start_time = time.time()

    executor = ThreadPoolExecutor(max_workers=2, thread_name_prefix="surfreport-load")
    futures = {
        executor.submit(_run, pipeline): pipeline.name
        for pipeline in (report_pipeline, tide_pipeline)
    }
    _, not_done = wait(futures, timeout=timeout)
    # A hung branch must not block the join
    executor.shutdown(wait=False, cancel_futures=True)

    outcomes = {}
    errors = {}
    for future, name in futures.items():
        if future in not_done:
            errors[name] = f"Timed out after {timeout}s"
            logger.error(f"{name}: timed out after {timeout}s")
            continue
        try:
            outcomes[name] = future.result()
        except Exception as e:
            errors[name] = str(e) or type(e).__name__
            logger.error(f"{name}: failed - {e}")

    validations = {}
    for name, (_, validation) in outcomes.items():
        validations[name] = validation
        if not validation.valid:
            logger.warning(f"{name}: {validation} {validation.issues}")

    result = LoadResult(status=LoadStatus.ERROR, errors=errors, validations=validations)

    if report_pipeline.name in outcomes:
        result.report = outcomes[report_pipeline.name][0]
        result.status = LoadStatus.CONTENT
    else:
        result.message = REPORT_FAILED_MESSAGE

    tides_loaded = tide_pipeline.name in outcomes
    if tides_loaded:
        tides = outcomes[tide_pipeline.name][0]
        try:
            result.tides_by_day = group_tides_by_day(tides)
            result.tides = tides
        except Exception as e:
            tides_loaded = False
            errors[tide_pipeline.name] = str(e) or type(e).__name__
            logger.error(f"{tide_pipeline.name}: grouping failed - {e}")

    if not tides_loaded and result.status is LoadStatus.CONTENT:
        result.status = LoadStatus.PARTIAL

    result.duration_ms = int((time.time() - start_time) * 1000)
    result.loaded_at = datetime.now()
    logger.info(str(result))
    return result


class LoadCoordinator:
    """Session state for the card UI.

    Holds the latest load result plus the transient UI state (displayed day
    index, active tab). Every refresh takes a sequence number first and only
    commits its result if no newer refresh has started meanwhile, so an
    overlapping slow refresh cannot overwrite newer data.

    Example:
        >>> coordinator = LoadCoordinator()
        >>> result = coordinator.refresh()
        >>> coordinator.next_day()
        1
    """

    def __init__(self, loader: Optional[Callable[[], LoadResult]] = None):
        """Initialize the coordinator.

        Args:
            loader: Callable running one load cycle (default: load_all)
        """
        self._loader = loader or load_all
        self._lock = threading.Lock()
        self._sequence = 0
        self.result: Optional[LoadResult] = None
        self.current_day = 0
        self.active_tab = ALL_SHORES_TAB

    def begin(self) -> int:
        """Reserve the next refresh sequence number."""
        with self._lock:
            self._sequence += 1
            return self._sequence

    def commit(self, sequence: int, result: LoadResult) -> bool:
        """Store a result unless a newer refresh has started.

        Returns:
            True if the result was stored.
        """
        with self._lock:
            if sequence != self._sequence:
                logger.info(f"Discarding load #{sequence}; #{self._sequence} is newer")
                return False
            result.sequence = sequence
            self.result = result
            self.current_day = 0
            return True

    def refresh(self) -> LoadResult:
        """Run a load cycle and commit its result."""
        sequence = self.begin()
        result = self._loader()
        self.commit(sequence, result)
        return result

    @property
    def num_days(self) -> int:
        if self.result is None or not self.result.usable:
            return 0
        return self.result.report.forecasts.num_days

    def go_to_day(self, index: int) -> int:
        """Show day ``index``, clamped to the available days."""
        last = max(self.num_days - 1, 0)
        self.current_day = min(max(index, 0), last)
        return self.current_day

    def next_day(self) -> int:
        return self.go_to_day(self.current_day + 1)

    def previous_day(self) -> int:
        return self.go_to_day(self.current_day - 1)

    def set_tab(self, tab: str) -> str:
        if tab not in TABS:
            raise ValueError(f"Invalid tab: {tab}. Must be one of {TABS}")
        self.active_tab = tab
        return tab


def print_summary(result: LoadResult) -> None:
    """Print a load result in human-readable format."""
    print()
    print("=" * 60)
    print("Surf Report")
    print("=" * 60)
    print(f"Status: {result.status.value} (loaded {result.loaded_at:%Y-%m-%d %H:%M})")
    for name, error in result.errors.items():
        print(f"  {name} failed: {error}")
    if result.message:
        print(result.message)

    if result.report is not None:
        labels = result.report.day_labels()
        for shore, days in result.report.forecasts.items():
            print()
            print(f"{shore.display_name} ({len(days)} days)")
            print("-" * 60)
            for day in days:
                p = day.primary
                height = p.face or p.haw or "Flat"
                trend = p.trend.label if p.trend else ""
                swell = f"{p.period or ''} {p.direction or ''}".strip()
                print(f"  {day.full_label:<18} {height:<8} {swell:<10} {trend:<10} {day.conditions or ''}")

        if result.report.wind:
            print()
            print("Wind")
            print("-" * 60)
            for i, wind in enumerate(result.report.wind):
                label = wind.day_label or (labels[i] if i < len(labels) else f"Day {i + 1}")
                print(f"  {label:<18} {wind.value}")

    if result.tides_by_day:
        print()
        print("Tides")
        print("-" * 60)
        for day, extrema in result.tides_by_day.items():
            row = ", ".join(f"{t.kind.label} {t.time_label} {t.height_label}" for t in extrema)
            print(f"  {day}: {row}")

    print("=" * 60)


def main():
    """CLI entry point for a single load cycle."""
    parser = argparse.ArgumentParser(
        description="Fetch and parse the surf report and tide predictions",
        epilog="""
Examples:
  python -m surfreport.cache.refresh            # Summary
  python -m surfreport.cache.refresh --json     # Full JSON
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full result as JSON",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=None,
        help="Overall timeout in seconds for the load cycle",
    )
    parser.add_argument(
        "--station",
        default=None,
        help="NOAA tide station ID (default: Honolulu)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Suppress output except errors",
    )

    args = parser.parse_args()

    # Configure logging
    if args.quiet:
        level = logging.ERROR
    elif args.verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    tide_pipeline = TidePredictionPipeline(station=args.station) if args.station else None
    result = load_all(tide_pipeline=tide_pipeline, timeout=args.timeout)

    if args.json:
        from surfreport.api.schemas import ReportResponse
        print(ReportResponse.from_result(result).model_dump_json(indent=2))
    else:
        print_summary(result)

    return 1 if result.status is LoadStatus.ERROR else 0


if __name__ == "__main__":
    sys.exit(main())
