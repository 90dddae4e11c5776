"""Base classes for source pipelines."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

# Raw payload (HTML text, decoded JSON) and processed result types
RawT = TypeVar("RawT")
DataT = TypeVar("DataT")


@dataclass
class ValidationResult:
    """Result of validating one source's processed data.

    Attributes:
        valid: Whether the data is usable for rendering
        total_records: Number of records (forecast days, tide extrema) found
        missing_pct: Percentage of expected sections that were absent (0-100)
        issues: List of validation issues found
        stats: Dictionary of summary statistics
    """

    valid: bool
    total_records: int
    missing_pct: float = 0.0
    issues: list[str] = field(default_factory=list)
    stats: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        status = "VALID" if self.valid else "INVALID"
        return (
            f"ValidationResult({status}, "
            f"records={self.total_records}, "
            f"missing={self.missing_pct:.1f}%, "
            f"issues={len(self.issues)})"
        )

    @classmethod
    def from_dict(cls, d: dict) -> "ValidationResult":
        """Create ValidationResult from a dictionary."""
        return cls(
            valid=d.get("valid", True),
            total_records=d.get("total_records", 0),
            missing_pct=d.get("missing_pct", 0.0),
            issues=d.get("issues", []),
            stats=d.get("stats", {}),
        )


class SourcePipeline(ABC, Generic[RawT, DataT]):
    """Abstract base class for the report and tide sources.

    A pipeline downloads one raw payload, processes it into typed records and
    validates the result. Parsing never raises for missing content; only the
    download step raises (network errors, non-success status codes).
    """

    #: Short name used in logs and in LoadResult.errors
    name: str = "source"

    @abstractmethod
    def download(self, **kwargs) -> RawT:
        """Fetch the raw payload from the source.

        Raises:
            requests.RequestException: On network failure or non-success status
        """

    @abstractmethod
    def process(self, raw: RawT) -> DataT:
        """Turn the raw payload into typed records."""

    @abstractmethod
    def validate(self, data: DataT) -> ValidationResult:
        """Check processed data for completeness."""

    def run(
        self,
        raise_on_invalid: bool = False,
        **kwargs
    ) -> tuple[DataT, ValidationResult]:
        """Run the full pipeline: download → process → validate.

        Args:
            raise_on_invalid: If True, raise ValueError when validation fails
            **kwargs: Additional parameters passed to download()

        Returns:
            Tuple of (processed data, validation result)

        Raises:
            ValueError: If raise_on_invalid=True and validation fails
        """
        raw = self.download(**kwargs)
        data = self.process(raw)
        validation = self.validate(data)

        if raise_on_invalid and not validation.valid:
            raise ValueError(
                f"{self.name} validation failed: {validation.issues}. "
                f"Missing: {validation.missing_pct:.1f}%"
            )

        return data, validation
