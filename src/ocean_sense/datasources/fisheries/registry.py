"""Species registry: ``[{scientificName, category}, ...]``.

Only used to build the category filter; the core never transforms it beyond
a name -> category lookup.
"""

from __future__ import annotations

from typing import Any

from ocean_sense.services.http import fetch_json
from ocean_sense.services.tabular import unwrap_records


def fetch_registry(location: str) -> list[dict[str, Any]]:
    """Load registry entries from a JSON path or URL."""
    entries = unwrap_records(fetch_json(location), keys=("species", "results", "data"))
    return [e for e in entries if isinstance(e, dict) and e.get("scientificName")]


def registry_lookup(entries: list[dict[str, Any]]) -> dict[str, str]:
    """Map scientificName -> category. Entries without a category are skipped."""
    lookup: dict[str, str] = {}
    for entry in entries:
        name = str(entry.get("scientificName", "")).strip()
        category = entry.get("category")
        if name and category:
            lookup[name] = str(category).strip()
    return lookup


def registry_categories(entries: list[dict[str, Any]]) -> list[str]:
    """Distinct categories in first-seen order (for the category selector)."""
    return list(dict.fromkeys(registry_lookup(entries).values()))
