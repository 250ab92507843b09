"""Tests for the DataStore module."""

from __future__ import annotations

import json
from datetime import UTC, datetime, timedelta
from pathlib import Path

import pytest

from ocean_sense.store import DataStore


class TestDataStoreInit:
    """Test DataStore initialization."""

    def test_creates_tier_paths(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.base == tmp_path
        assert store.reference == tmp_path / "reference"
        assert store.historical == tmp_path / "historical"
        assert store.live == tmp_path / "live"
        assert store.derived == tmp_path / "derived"


class TestDataStoreWrite:
    """Test writing data with metadata envelopes."""

    def test_write_envelope_format(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        valid = datetime(2026, 3, 1, tzinfo=UTC)
        rows = [{"name": "Mocha", "lat": 15.2, "lon": 88.1}]
        path = store.write(
            Path("live/cyclone_tracks.json"), rows, source="tracks-api", valid_until=valid
        )

        data = json.loads(path.read_text())
        assert data["meta"]["source"] == "tracks-api"
        assert "fetched_at" in data["meta"]
        assert data["meta"]["valid_until"] == valid.isoformat()
        assert data["data"] == rows

    def test_write_extra_params(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("historical/fisheries/occurrences.json"), [], source="obis", rows=0)
        meta = store.meta(Path("historical/fisheries/occurrences.json"))
        assert meta["rows"] == 0

    def test_write_creates_parent_dirs(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("reference/cyclones/deep/nested.json"), {}, source="test")
        assert (tmp_path / "reference" / "cyclones" / "deep" / "nested.json").exists()

    def test_write_no_valid_until(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("derived/output.json"), {}, source="test")
        assert "valid_until" not in store.meta(Path("derived/output.json"))

    def test_rejects_path_outside_base(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path / "data")
        with pytest.raises(ValueError, match="escapes"):
            store.write(Path("../outside.json"), {}, source="test")


class TestDataStoreRead:
    """Test reading data from the store."""

    def test_read_returns_data_payload(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("live/test.json"), {"key": "value"}, source="test")
        assert store.read(Path("live/test.json")) == {"key": "value"}

    def test_read_missing_file(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        assert store.read(Path("nonexistent.json")) is None
        assert store.read_raw(Path("nonexistent.json")) is None
        assert store.meta(Path("nonexistent.json")) == {}

    def test_read_raw_returns_full_envelope(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("live/test.json"), [1, 2], source="test")
        result = store.read_raw(Path("live/test.json"))
        assert result is not None
        assert result["data"] == [1, 2]
        assert result["meta"]["source"] == "test"


class TestDataStoreIsFresh:
    """Test freshness checking."""

    def test_missing_file_not_fresh(self, tmp_path: Path) -> None:
        assert DataStore(tmp_path).is_fresh(Path("nonexistent.json")) is False

    def test_expired_file_not_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        past = datetime.now(UTC) - timedelta(hours=1)
        store.write(Path("live/test.json"), {}, source="test", valid_until=past)
        assert store.is_fresh(Path("live/test.json")) is False

    def test_future_valid_until_is_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        future = datetime.now(UTC) + timedelta(minutes=30)
        store.write(Path("live/test.json"), {}, source="test", valid_until=future)
        assert store.is_fresh(Path("live/test.json")) is True

    def test_naive_valid_until_treated_as_utc(self, tmp_path: Path) -> None:
        path = tmp_path / "live" / "test.json"
        path.parent.mkdir(parents=True)
        future = (datetime.now(UTC) + timedelta(hours=2)).replace(tzinfo=None)
        path.write_text(json.dumps({"meta": {"valid_until": future.isoformat()}, "data": []}))
        assert DataStore(tmp_path).is_fresh(Path("live/test.json")) is True

    def test_no_valid_until_not_fresh(self, tmp_path: Path) -> None:
        store = DataStore(tmp_path)
        store.write(Path("derived/test.json"), {}, source="test")
        assert store.is_fresh(Path("derived/test.json")) is False
