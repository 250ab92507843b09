"""Map IMD seasonal cyclone-frequency tables onto cyclone raw rows.

Each table has a ``Year`` column, one column per storm category, and a
total column whose header matches ``/TOTAL/i``. Every table row becomes one
raw row that the normalizer turns into a ``cyclone-track-point`` record
with ``value`` = the season's total and a ``season`` attribute. Summing
records across seasons per year then gives the "all seasons" series.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Any

from ocean_sense.analysis.normalizer import to_number
from ocean_sense.reference.seasons import canonical_season

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping, Sequence

_TOTAL = re.compile(r"total", re.IGNORECASE)
_YEAR_HEADERS = {"year"}


def find_total_column(headers: Sequence[str]) -> str | None:
    """Return the first header matching /TOTAL/i, or None."""
    for header in headers:
        if _TOTAL.search(header):
            return header
    return None


def category_columns(headers: Sequence[str]) -> list[str]:
    """Storm-category columns: everything except the year and total columns."""
    total = find_total_column(headers)
    return [h for h in headers if h != total and h.strip().lower() not in _YEAR_HEADERS]


def seasonal_rows(rows: Iterable[Mapping[str, Any]], season: str) -> list[dict[str, Any]]:
    """Reshape one season's table rows into cyclone raw rows.

    A blank or unparsable total (or a table without a total column) counts
    as zero storms; year parsing is left to the normalizer.
    """
    season = canonical_season(season)
    materialized = list(rows)
    if not materialized:
        return []

    headers = list(materialized[0].keys())
    year_col = next((h for h in headers if h.strip().lower() in _YEAR_HEADERS), None)
    total_col = find_total_column(headers)
    categories = category_columns(headers)

    shaped: list[dict[str, Any]] = []
    for row in materialized:
        shaped.append(
            {
                "Year": row.get(year_col) if year_col else None,
                "name": season,
                "season": season,
                "value": (to_number(row.get(total_col)) if total_col else None) or 0.0,
                "attributes": {col: row.get(col) for col in categories},
            }
        )
    return shaped
