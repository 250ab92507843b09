"""Tests for raw row normalization."""

from __future__ import annotations

from typing import Any

import pytest

from ocean_sense.analysis.normalizer import (
    normalize_row,
    normalize_rows,
    resolve_coordinates,
    resolve_field,
    resolve_number,
    resolve_year,
    to_number,
    year_from_date,
)
from ocean_sense.schemas import SourceKind

FISHERIES_ROWS = [
    {
        "scientificName": "Rastrelliger kanagurta",
        "decimalLatitude": "9.9",
        "decimalLongitude": "76.3",
        "eventDate": "2005-06-01",
    },
    {
        "scientificName": "Thunnus albacares",
        "decimalLatitude": "bad",
        "decimalLongitude": "76.3",
        "year": "2005",
    },
]


class TestToNumber:
    """Numeric coercion treats anything unparsable as absent."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [("9.9", 9.9), (" 76.3 ", 76.3), (12, 12.0), (0, 0.0), ("-0.5", -0.5)],
    )
    def test_parses_finite_numbers(self, raw: object, expected: float) -> None:
        assert to_number(raw) == expected

    @pytest.mark.parametrize("raw", ["bad", "", None, "nan", "inf", True, [1], {"a": 1}])
    def test_unparsable_is_none(self, raw: object) -> None:
        assert to_number(raw) is None


class TestYearFromDate:
    """Calendar year extraction from date strings."""

    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("2005-06-01", 2005),
            ("2019-11-08T06:00:00Z", 2019),
            ("2021-05-24 12:00", 2021),
            ("1998-07", 1998),
            ("2005-06-01/2005-06-03", 2005),
            ("1891", 1891),
            ("06/01/2005", 2005),
            ("June 2005", 2005),
            ("1 Jun. 2005", 2005),
        ],
    )
    def test_extracts_year(self, raw: str, expected: int) -> None:
        assert year_from_date(raw) == expected

    @pytest.mark.parametrize("raw", ["", "   ", "June", "n/a", "12/05", None, 2005])
    def test_unusable_dates(self, raw: object) -> None:
        assert year_from_date(raw) is None


class TestResolveField:
    """Ordered, case-tolerant candidate lookup."""

    def test_exact_match_wins_over_case_folded(self) -> None:
        row = {"LAT": "1.0", "lat": "2.0"}
        assert resolve_field(row, ("lat",)) == "2.0"

    def test_case_folded_fallback(self) -> None:
        assert resolve_field({"DecimalLatitude": "3.5"}, ("decimalLatitude",)) == "3.5"

    def test_priority_order(self) -> None:
        row = {"lat": "1.0", "decimalLatitude": "2.0"}
        assert resolve_field(row, ("decimalLatitude", "lat")) == "2.0"

    def test_blank_values_are_skipped(self) -> None:
        row = {"decimalLatitude": " ", "lat": "4.0"}
        assert resolve_field(row, ("decimalLatitude", "lat")) == "4.0"

    def test_dotted_path(self) -> None:
        row = {"location": {"lat": 12.5}}
        assert resolve_field(row, ("location.lat",)) == 12.5

    def test_missing(self) -> None:
        assert resolve_field({"other": 1}, ("lat", "location.lat")) is None


class TestResolveYear:
    """Explicit year, then aliases, then dates."""

    def test_explicit_year_beats_date(self) -> None:
        assert resolve_year({"year": "2001", "eventDate": "2005-01-01"}) == 2001

    def test_aliased_year(self) -> None:
        assert resolve_year({"date_year": 1999}) == 1999

    def test_unparsable_year_falls_back_to_date(self) -> None:
        assert resolve_year({"year": "n/a", "datetime": "2010-03-04T00:00:00"}) == 2010

    def test_fractional_year_is_rejected(self) -> None:
        assert resolve_year({"year": "2001.5"}) is None

    def test_absent(self) -> None:
        assert resolve_year({"scientificName": "Sardinella longiceps"}) is None


class TestResolveCoordinates:
    """Coordinates resolve as a pair or not at all."""

    def test_both_present(self) -> None:
        assert resolve_coordinates({"decLat": "10.5", "decLong": "80.2"}) == (10.5, 80.2)

    def test_only_one_means_neither(self) -> None:
        assert resolve_coordinates({"latitude": "10.5"}) == (None, None)

    def test_out_of_range_means_neither(self) -> None:
        assert resolve_coordinates({"lat": "95", "lon": "80"}) == (None, None)

    def test_nested_lat_lon(self) -> None:
        row = {"location": {"lat": "-3.2", "lng": "55.1"}}
        assert resolve_coordinates(row) == (-3.2, 55.1)

    def test_unparsable_alias_falls_through(self) -> None:
        row = {"latitude": "bad", "decimalLatitude": "9.9", "decimalLongitude": "76.3"}
        assert resolve_coordinates(row) == (9.9, 76.3)


class TestResolveNumber:
    """First candidate that parses as a number wins."""

    def test_skips_unparsable_candidates(self) -> None:
        assert resolve_number({"value": "n/a", "sst": "29.1"}, ("value", "sst")) == 29.1

    def test_priority_order(self) -> None:
        assert resolve_number({"value": "1", "sst": "2"}, ("value", "sst")) == 1.0

    def test_none_parse(self) -> None:
        assert resolve_number({"value": "", "sst": "bad"}, ("value", "sst")) is None


class TestNormalizeRow:
    """Single row -> CanonicalRecord."""

    def test_end_to_end_fisheries_example(self) -> None:
        first, second = (normalize_row(r, SourceKind.FISHERIES) for r in FISHERIES_ROWS)
        assert first is not None
        assert second is not None
        assert first.year == 2005
        assert second.year == 2005
        assert (first.latitude, first.longitude) == (9.9, 76.3)
        assert first.label == "Rastrelliger kanagurta"
        assert second.latitude is None
        assert second.longitude is None
        assert not second.has_coordinates

    def test_occurrences_carry_no_value(self) -> None:
        record = normalize_row(FISHERIES_ROWS[0], SourceKind.FISHERIES)
        assert record is not None
        assert record.value is None

    def test_alias_tolerance(self) -> None:
        upper = {"decimalLatitude": "9.9", "decimalLongitude": "76.3", "year": "2005"}
        lower = {"decimallatitude": "9.9", "decimallongitude": "76.3", "year": "2005"}
        assert normalize_row(upper, SourceKind.FISHERIES) == normalize_row(
            lower, SourceKind.FISHERIES
        )

    def test_missing_label_defaults_to_unknown(self) -> None:
        record = normalize_row({"year": 2001}, SourceKind.FISHERIES)
        assert record is not None
        assert record.label == "Unknown"

    def test_unparsable_first_alias_keeps_coordinates(self) -> None:
        row = {
            "latitude": "bad",
            "decimalLatitude": "9.9",
            "decimalLongitude": "76.3",
            "year": "2005",
        }
        record = normalize_row(row, SourceKind.FISHERIES)
        assert record is not None
        assert (record.latitude, record.longitude) == (9.9, 76.3)

    def test_no_year_is_dropped(self) -> None:
        assert normalize_row({"scientificName": "Thunnus albacares"}, SourceKind.FISHERIES) is None

    def test_cyclone_track_point(self) -> None:
        row = {
            "name": "Mocha",
            "season": "Post Monsoon",
            "lat": 15.2,
            "lon": 88.1,
            "datetime": "2023-05-12T00:00:00Z",
            "wind_speed": 110,
            "pressure": 970,
        }
        record = normalize_row(row, SourceKind.CYCLONE_TRACK_POINT)
        assert record is not None
        assert record.year == 2023
        assert record.label == "Mocha"
        assert record.value == 110.0
        assert record.attributes["pressure"] == 970.0
        assert record.season == "Post Monsoon"

    def test_ocean_parameter(self) -> None:
        row = {"parameter": "sst", "value": "29.4", "unit": "degC", "datetime": "2024-04-01"}
        record = normalize_row(row, SourceKind.OCEAN_PARAMETER)
        assert record is not None
        assert record.label == "sst"
        assert record.value == 29.4
        assert record.attributes == {"datetime": "2024-04-01", "unit": "degC"}

    def test_nested_attributes_are_merged(self) -> None:
        row = {"Year": "1999", "name": "Monsoon", "attributes": {"D": "2", "CS": "", "SCS": 1}}
        record = normalize_row(row, SourceKind.CYCLONE_TRACK_POINT)
        assert record is not None
        assert record.attributes == {"D": "2", "SCS": 1.0}


class TestNormalizeRows:
    """Batch normalization with drop counts."""

    def test_drop_count(self) -> None:
        rows = [*FISHERIES_ROWS, {"scientificName": "no year"}, {"eventDate": "unknown"}]
        result = normalize_rows(rows, SourceKind.FISHERIES)
        assert len(result.records) == 2
        assert result.dropped == 2
        assert result.total == 4

    def test_every_record_has_a_year(self) -> None:
        rows = [*FISHERIES_ROWS, {"year": ""}, {"year": "abc"}]
        result = normalize_rows(rows, SourceKind.FISHERIES)
        assert len(result.records) <= len(rows)
        assert all(isinstance(r.year, int) for r in result.records)

    def test_non_mapping_rows_are_dropped(self) -> None:
        rows: list[Any] = [FISHERIES_ROWS[0], "stray", 42]
        result = normalize_rows(rows, SourceKind.FISHERIES)
        assert len(result.records) == 1
        assert result.dropped == 2

    def test_deterministic(self) -> None:
        first = normalize_rows(FISHERIES_ROWS, SourceKind.FISHERIES)
        second = normalize_rows(FISHERIES_ROWS, SourceKind.FISHERIES)
        assert first.records == second.records

    def test_preserves_input_order(self) -> None:
        result = normalize_rows(FISHERIES_ROWS, SourceKind.FISHERIES)
        assert [r.label for r in result.records] == ["Rastrelliger kanagurta", "Thunnus albacares"]

    def test_empty_input(self) -> None:
        result = normalize_rows([], SourceKind.OCEAN_PARAMETER)
        assert result.records == []
        assert result.dropped == 0
