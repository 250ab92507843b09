"""Flat CSV export of filtered canonical records.

Layout (downstream consumers depend on this exact order)::

    label,latitude,longitude,year,sourceKind
    <one row per filtered record, input order>
    <empty row>
    filter,value
    species,<species>
    category,<category>
    season,<season>
    yearMin,<resolved min year>
    yearMax,<resolved max year>
    records,<number of exported rows>

Absent coordinates are written as empty cells. When the filter has no year
range, the resolved bounds are the exported records' year extent (empty if
nothing was exported).
"""

from __future__ import annotations

import csv
import io
from typing import TYPE_CHECKING

from ocean_sense.analysis.aggregator import year_extent
from ocean_sense.analysis.filters import apply_filter
from ocean_sense.schemas import FilterState

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ocean_sense.schemas import CanonicalRecord

EXPORT_COLUMNS = ("label", "latitude", "longitude", "year", "sourceKind")
SUMMARY_HEADER = ("filter", "value")


def _coordinate(value: float | None) -> str:
    return "" if value is None else repr(value)


def build_export_csv(
    records: Iterable[CanonicalRecord],
    state: FilterState | None = None,
    registry: Mapping[str, str] | None = None,
) -> str:
    """Render filtered records plus the filter summary block as CSV text."""
    state = state or FilterState()
    exported = apply_filter(records, state, registry)

    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator="\n")
    writer.writerow(EXPORT_COLUMNS)
    for record in exported:
        writer.writerow(
            [
                record.label,
                _coordinate(record.latitude),
                _coordinate(record.longitude),
                record.year,
                record.source_kind.value,
            ]
        )

    year_bounds = state.year_range or year_extent(exported)
    year_min, year_max = year_bounds if year_bounds else ("", "")

    writer.writerow([])
    writer.writerow(SUMMARY_HEADER)
    writer.writerow(["species", state.species])
    writer.writerow(["category", state.category])
    writer.writerow(["season", state.season])
    writer.writerow(["yearMin", year_min])
    writer.writerow(["yearMax", year_max])
    writer.writerow(["records", len(exported)])
    return buf.getvalue()
