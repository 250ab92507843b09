"""FilterState as a pure predicate over canonical records.

Which constraint applies to which records:
  - year range: every record
  - species, category: fisheries records only (category via the species
    registry; a species missing from the registry never matches a category)
  - season: cyclone records that carry a ``season`` attribute; everything
    else passes. Season is never inferred from a record's date.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from ocean_sense.reference.seasons import canonical_season
from ocean_sense.schemas import ALL, CanonicalRecord, FilterState, SourceKind


def matches_filter(
    record: CanonicalRecord,
    state: FilterState | None = None,
    registry: Mapping[str, str] | None = None,
) -> bool:
    """Return True if ``record`` satisfies every applicable constraint."""
    if state is None:
        return True

    if state.year_range is not None:
        low, high = state.year_range
        if not low <= record.year <= high:
            return False

    if record.source_kind is SourceKind.FISHERIES:
        if state.species != ALL and record.label != state.species:
            return False
        if state.category != ALL and (registry or {}).get(record.label) != state.category:
            return False

    if state.season != ALL and record.source_kind is SourceKind.CYCLONE_TRACK_POINT:
        season = record.season
        if season is not None and canonical_season(season) != state.season:
            return False

    return True


def apply_filter(
    records: Iterable[CanonicalRecord],
    state: FilterState | None = None,
    registry: Mapping[str, str] | None = None,
) -> list[CanonicalRecord]:
    """Return the records matching ``state``, preserving order."""
    return [r for r in records if matches_filter(r, state, registry)]
