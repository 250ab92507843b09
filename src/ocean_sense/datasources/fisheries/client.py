"""OBIS occurrence API client (paginated).

API docs: https://api.obis.org/

Pages are walked with the ``after`` cursor (id of the last record of the
previous page) rather than offsets, which OBIS caps.
"""

from __future__ import annotations

from typing import Any

from ocean_sense.services.http import get_json

OBIS_OCCURRENCE_API = "https://api.obis.org/v3/occurrence"
PAGE_SIZE = 1000

# Only the columns the normalizer and export need
OCCURRENCE_FIELDS = (
    "id",
    "scientificName",
    "decimalLatitude",
    "decimalLongitude",
    "eventDate",
    "date_year",
    "datasetName",
    "basisOfRecord",
    "depth",
    "family",
    "individualCount",
)


def get_occurrences_paginated(
    params: dict[str, Any],
    *,
    url: str = OBIS_OCCURRENCE_API,
    max_pages: int = 5,
) -> list[dict[str, Any]]:
    """Fetch up to ``max_pages`` pages of occurrence results."""
    results: list[dict[str, Any]] = []
    after: str | None = None
    for _page in range(max_pages):
        page_params = {**params, "size": PAGE_SIZE}
        if after is not None:
            page_params["after"] = after
        data = get_json(url, params=page_params)
        page: list[dict[str, Any]] = data.get("results", []) if isinstance(data, dict) else []
        results.extend(page)
        if len(page) < PAGE_SIZE or "id" not in page[-1]:
            break
        after = str(page[-1]["id"])
    return results
