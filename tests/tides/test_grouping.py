"""Tests for tide payload parsing and per-day grouping."""

import pytest

from surfreport.tides.grouping import group_tides_by_day, parse_predictions
from surfreport.tides.models import TideExtremum, TideKind


def _tide(timestamp: str, kind: str = "H") -> TideExtremum:
    return TideExtremum(timestamp, "1.0", TideKind(kind))


class TestParsePredictions:
    """Tests for parse_predictions."""

    def test_parses_entries(self, sample_tide_payload):
        """Entries become TideExtremum records in payload order."""
        extrema = parse_predictions(sample_tide_payload)
        assert [t.timestamp for t in extrema] == [
            "2024-01-01 03:00", "2024-01-01 15:00", "2024-01-02 04:00",
        ]
        assert extrema[0].kind is TideKind.HIGH
        assert extrema[1].kind is TideKind.LOW
        assert extrema[1].height_feet == "-0.105"

    def test_missing_predictions_key(self):
        """A payload without predictions gives an empty list."""
        assert parse_predictions({"error": {"message": "No data"}}) == []

    def test_malformed_entries_skipped(self, caplog):
        """Entries with missing keys or unknown types are skipped with a warning."""
        payload = {"predictions": [
            {"t": "2024-01-01 03:00", "v": "1.0", "type": "H"},
            {"t": "2024-01-01 09:00", "v": "0.1"},
            {"t": "2024-01-01 15:00", "v": "0.2", "type": "X"},
            "garbage",
        ]}
        with caplog.at_level("WARNING"):
            extrema = parse_predictions(payload)
        assert len(extrema) == 1
        assert "Skipping malformed tide prediction" in caplog.text

    @pytest.mark.parametrize("entry", [
        {"t": None, "v": "0.2", "type": "L"},
        {"t": "2024-01-01", "v": "0.2", "type": "L"},
        {"t": "2024-01-01 9:00", "v": "0.2", "type": "L"},
        {"t": "2024-01-01 09:00", "v": "", "type": "L"},
        {"t": "2024-01-01 09:00", "v": None, "type": "L"},
        {"t": "2024-01-01 09:00", "v": "n/a", "type": "L"},
    ])
    def test_bad_timestamp_or_height_skipped(self, entry, caplog):
        """Unusable timestamps and heights are skipped instead of kept."""
        payload = {"predictions": [{"t": "2024-01-01 03:00", "v": "1.0", "type": "H"}, entry]}
        with caplog.at_level("WARNING"):
            extrema = parse_predictions(payload)

        assert [t.timestamp for t in extrema] == ["2024-01-01 03:00"]
        assert "Skipping malformed tide prediction #1" in caplog.text

    def test_kept_entries_render(self):
        """Every kept entry can be grouped and labeled."""
        payload = {"predictions": [
            {"t": "2024-01-01", "v": "", "type": "H"},
            {"t": "2024-01-01 15:04", "v": "-0.12", "type": "L"},
        ]}
        buckets = group_tides_by_day(parse_predictions(payload))

        [tide] = buckets["2024-01-01"]
        assert tide.time_label == "3:04 PM"
        assert tide.height_label == "-0.1 ft"


class TestGroupTidesByDay:
    """Tests for group_tides_by_day."""

    def test_two_day_scenario(self, sample_tides):
        """First day gets the next day's first tide as lookahead."""
        buckets = group_tides_by_day(sample_tides)

        assert list(buckets) == ["2024-01-01", "2024-01-02"]
        assert [t.timestamp for t in buckets["2024-01-01"]] == [
            "2024-01-01 03:00", "2024-01-01 15:00", "2024-01-02 04:00",
        ]
        assert [t.timestamp for t in buckets["2024-01-02"]] == ["2024-01-02 04:00"]

    def test_empty(self):
        """Empty input gives an empty mapping."""
        assert group_tides_by_day([]) == {}

    def test_single_day(self):
        """A single day has no lookahead."""
        tides = [_tide("2024-03-01 02:00"), _tide("2024-03-01 08:30", "L")]
        assert group_tides_by_day(tides) == {"2024-03-01": tides}

    def test_accepts_iterator(self, sample_tides):
        """Any iterable is accepted."""
        assert list(group_tides_by_day(iter(sample_tides))) == ["2024-01-01", "2024-01-02"]

    def test_day_without_tides_skipped(self):
        """Dates with no extrema have no bucket; lookahead is the next entry."""
        tides = [_tide("2024-01-01 20:00"), _tide("2024-01-03 01:00", "L")]
        buckets = group_tides_by_day(tides)
        assert list(buckets) == ["2024-01-01", "2024-01-03"]
        assert buckets["2024-01-01"][-1].timestamp == "2024-01-03 01:00"

    @pytest.mark.parametrize("count", [1, 4, 9, 17])
    def test_grouping_properties(self, count):
        """Buckets recover the input; each lookahead is later than its day."""
        tides = [
            _tide(f"2024-02-{1 + i // 4:02d} {(i % 4) * 6:02d}:15", "H" if i % 2 == 0 else "L")
            for i in range(count)
        ]
        buckets = group_tides_by_day(tides)

        own = [t for date, entries in buckets.items() for t in entries if t.date == date]
        assert own == tides

        for date, entries in buckets.items():
            own_entries = [t for t in entries if t.date == date]
            extra = [t for t in entries if t.date != date]
            assert len(extra) <= 1
            for lookahead in extra:
                assert all(lookahead.timestamp > t.timestamp for t in own_entries)


class TestTideExtremum:
    """Tests for TideExtremum display helpers."""

    def test_labels(self):
        """Time and height are formatted for display."""
        tide = TideExtremum("2024-01-01 15:04", "1.234", TideKind.HIGH)
        assert tide.date == "2024-01-01"
        assert tide.time_label == "3:04 PM"
        assert tide.height_label == "1.2 ft"
        assert tide.is_high

    def test_midnight_and_noon(self):
        """12-hour clock edges."""
        assert TideExtremum("2024-01-01 00:05", "0", TideKind.LOW).time_label == "12:05 AM"
        assert TideExtremum("2024-01-01 12:00", "0", TideKind.LOW).time_label == "12:00 PM"

    def test_kind_label(self):
        """Kinds have display labels."""
        assert TideKind.HIGH.label == "High"
        assert TideKind("L").label == "Low"
