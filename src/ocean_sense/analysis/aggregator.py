"""Reduce canonical records to per-year series and map clusters.

Totals are plain sums. There is no smoothing or gap filling: a year with no
qualifying records is absent from the series, so consumers must not assume
contiguous years.
"""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING

from ocean_sense.analysis.filters import apply_filter
from ocean_sense.schemas import SeriesPoint, SpatialCluster

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from ocean_sense.schemas import CanonicalRecord, FilterState

DEFAULT_PRECISION = 4
DEFAULT_MAX_CLUSTERS = 2000


def aggregate_by_year(
    records: Iterable[CanonicalRecord],
    state: FilterState | None = None,
    registry: Mapping[str, str] | None = None,
    *,
    use_values: bool = True,
) -> list[SeriesPoint]:
    """Group filtered records by year into an ascending series.

    Each record contributes its ``value`` when present, otherwise 1.

    Args:
        records: Canonical records (any mix of source kinds).
        state: Active filter; None keeps everything.
        registry: scientificName -> category, for the category filter.
        use_values: If False, count records even when they carry values.

    Returns:
        One SeriesPoint per distinct year, sorted by year.
    """
    totals: dict[int, float] = {}
    for record in apply_filter(records, state, registry):
        amount = record.value if use_values and record.value is not None else 1.0
        totals[record.year] = totals.get(record.year, 0.0) + amount
    return [SeriesPoint(year=year, total=totals[year]) for year in sorted(totals)]


def aggregate_by_space(
    records: Iterable[CanonicalRecord],
    state: FilterState | None = None,
    registry: Mapping[str, str] | None = None,
    *,
    precision: int = DEFAULT_PRECISION,
    max_clusters: int = DEFAULT_MAX_CLUSTERS,
) -> list[SpatialCluster]:
    """Cluster filtered records on coordinates rounded to ``precision`` digits.

    Records without coordinates are skipped. Only the first ``max_clusters``
    cells (in first-seen order) are returned; the rest are deliberately
    dropped to bound map rendering cost.
    """
    counts: dict[tuple[float, float], int] = {}
    labels: dict[tuple[float, float], set[str]] = {}
    for record in apply_filter(records, state, registry):
        if record.latitude is None or record.longitude is None:
            continue
        key = (round(record.latitude, precision), round(record.longitude, precision))
        counts[key] = counts.get(key, 0) + 1
        labels.setdefault(key, set()).add(record.label)

    clusters: list[SpatialCluster] = []
    for key, count in counts.items():
        if len(clusters) >= max_clusters:
            break
        lat, lon = key
        clusters.append(
            SpatialCluster(lat=lat, lon=lon, count=count, labels=frozenset(labels[key]))
        )
    return clusters


def top_labels(
    records: Iterable[CanonicalRecord],
    state: FilterState | None = None,
    registry: Mapping[str, str] | None = None,
    *,
    limit: int = 10,
) -> list[tuple[str, int]]:
    """Most frequently recorded labels (e.g. top species), most common first."""
    counter = Counter(r.label for r in apply_filter(records, state, registry))
    return counter.most_common(limit)


def year_extent(records: Iterable[CanonicalRecord]) -> tuple[int, int] | None:
    """Return (min_year, max_year) across records, or None if there are none."""
    years = [r.year for r in records]
    if not years:
        return None
    return min(years), max(years)
