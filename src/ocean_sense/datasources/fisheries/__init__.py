"""Fisheries occurrence data source.

Occurrence records (OBIS API or a merged CSV export) plus the species
registry used for category filtering. Rows are returned raw; see
``analysis.normalizer`` for the canonical form.

Public API:
  - client: OBIS URL, paginated occurrence fetch
  - occurrences: fetch_occurrences, load_occurrence_csv, fetch_fisheries_rows
  - registry: fetch_registry, registry_lookup, registry_categories
"""

from ocean_sense.datasources.fisheries.client import OBIS_OCCURRENCE_API
from ocean_sense.datasources.fisheries.occurrences import (
    fetch_fisheries_rows,
    fetch_occurrences,
    load_occurrence_csv,
)
from ocean_sense.datasources.fisheries.registry import (
    fetch_registry,
    registry_categories,
    registry_lookup,
)

__all__ = [
    "OBIS_OCCURRENCE_API",
    "fetch_fisheries_rows",
    "fetch_occurrences",
    "fetch_registry",
    "load_occurrence_csv",
    "registry_categories",
    "registry_lookup",
]
