"""Tests for CSV and JSON row extraction."""

from __future__ import annotations

from ocean_sense.services.tabular import parse_csv_text, unwrap_records


class TestParseCsvText:
    """Header-keyed row dicts."""

    def test_basic(self) -> None:
        rows = parse_csv_text("scientificName,year\nThunnus albacares,2005\n")
        assert rows == [{"scientificName": "Thunnus albacares", "year": "2005"}]

    def test_strips_and_skips_blank_lines(self) -> None:
        rows = parse_csv_text("\n Year , TOTAL \n\n 2001 , 3 \n,\n")
        assert rows == [{"Year": "2001", "TOTAL": "3"}]

    def test_short_rows_are_padded(self) -> None:
        rows = parse_csv_text("a,b,c\n1\n")
        assert rows == [{"a": "1", "b": "", "c": ""}]

    def test_quoted_commas(self) -> None:
        rows = parse_csv_text('label,dataset\nX,"Survey, 2005"\n')
        assert rows[0]["dataset"] == "Survey, 2005"

    def test_empty_text(self) -> None:
        assert parse_csv_text("") == []


class TestUnwrapRecords:
    """JSON payload shapes."""

    def test_bare_list(self) -> None:
        assert unwrap_records([{"a": 1}]) == [{"a": 1}]

    def test_envelope(self) -> None:
        assert unwrap_records({"total": 1, "results": [{"a": 1}]}) == [{"a": 1}]

    def test_custom_keys(self) -> None:
        assert unwrap_records({"storms": [1, 2]}, keys=("storms",)) == [1, 2]

    def test_single_object(self) -> None:
        assert unwrap_records({"sst": 29.1}) == [{"sst": 29.1}]

    def test_scalar(self) -> None:
        assert unwrap_records("oops") == []
        assert unwrap_records(None) == []
