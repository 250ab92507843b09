"""Fisheries occurrence rows from OBIS or a CSV export."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ocean_sense.datasources.fisheries import client
from ocean_sense.reference.geography import NORTH_INDIAN_OCEAN
from ocean_sense.services.http import fetch_text, is_url
from ocean_sense.services.tabular import parse_csv_text

if TYPE_CHECKING:
    from ocean_sense.reference.geography import BoundingBox


def fetch_occurrences(
    bbox: BoundingBox | None = None,
    *,
    url: str = client.OBIS_OCCURRENCE_API,
    taxon: str | None = None,
    start_year: int | None = None,
    max_pages: int = 5,
) -> list[dict[str, Any]]:
    """
    Fetch raw occurrence rows from the OBIS API.

    Args:
        bbox: Region to query. Defaults to the North Indian Ocean.
        url: Occurrence endpoint.
        taxon: Optional scientific name to restrict the query.
        start_year: Optional earliest event year.
        max_pages: Maximum API pages to fetch.

    Returns:
        Occurrence dicts as returned by the API.
    """
    bbox = bbox or NORTH_INDIAN_OCEAN
    params: dict[str, Any] = {
        "geometry": bbox.as_wkt(),
        "fields": ",".join(client.OCCURRENCE_FIELDS),
    }
    if taxon:
        params["scientificname"] = taxon
    if start_year:
        params["startdate"] = f"{start_year}-01-01"
    return client.get_occurrences_paginated(params, url=url, max_pages=max_pages)


def load_occurrence_csv(location: str) -> list[dict[str, str]]:
    """Read a fisheries CSV export (e.g. ``OBIS_Fisheries_Merged.csv``)."""
    return parse_csv_text(fetch_text(location))


def fetch_fisheries_rows(
    source: str,
    bbox: BoundingBox | None = None,
    *,
    max_pages: int = 5,
) -> list[dict[str, Any]]:
    """Rows from whichever kind of source is configured.

    A ``.csv`` path or URL is read as an export; any other URL is treated as
    an OBIS-compatible occurrence endpoint.
    """
    if source.lower().endswith(".csv") or not is_url(source):
        return list(load_occurrence_csv(source))
    return fetch_occurrences(bbox, url=source, max_pages=max_pages)
