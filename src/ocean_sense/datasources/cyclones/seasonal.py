"""IMD seasonal cyclone-frequency tables."""

from __future__ import annotations

from ocean_sense.reference.seasons import canonical_season
from ocean_sense.services.http import SourceUnavailableError, fetch_text
from ocean_sense.services.tabular import parse_csv_text


def fetch_seasonal_table(location: str) -> list[dict[str, str]]:
    """Read one season's table (path or URL) into row dicts."""
    return parse_csv_text(fetch_text(location))


def fetch_seasonal_tables(sources: dict[str, str]) -> dict[str, list[dict[str, str]]]:
    """
    Read every configured season's table.

    A season whose table cannot be read is skipped with a message; the feed
    as a whole is only unavailable when no season could be read.

    Args:
        sources: Season name -> CSV path or URL.

    Returns:
        Canonical season name -> table rows.
    """
    tables: dict[str, list[dict[str, str]]] = {}
    errors: list[str] = []
    for season, location in sources.items():
        try:
            tables[canonical_season(season)] = fetch_seasonal_table(location)
        except SourceUnavailableError as exc:
            print(f"Skipping {season} table: {exc}")
            errors.append(str(exc))

    if sources and not tables:
        raise SourceUnavailableError("seasonal tables", "; ".join(errors))
    return tables
