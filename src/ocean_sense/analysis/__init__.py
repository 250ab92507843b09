"""Normalization, aggregation and cross-series correlation.

This is the domain logic layer. Every module is a pure function of its
inputs: no I/O, no HTTP, no Prefect decorators.

Dependency rule: analysis/ imports from schemas and reference/ only.
It never fetches data or produces HTML.

Modules:
  - normalizer: raw feed rows -> CanonicalRecord (+ drop count)
  - seasonal: IMD seasonal frequency tables -> cyclone raw rows
  - filters: FilterState -> record predicate
  - aggregator: records -> per-year SeriesPoints, SpatialClusters, top labels
  - correlator: two series -> aligned samples, Pearson r

Adding an analysis module
-------------------------
1. Create ``analysis/{name}.py`` with a pure function over
   ``CanonicalRecord``/``SeriesPoint`` sequences.
2. Call it from ``flows/build.py`` after records are loaded into the
   snapshot board, and pass the result to a renderer.
3. Re-export below and add tests in ``tests/test_{name}.py``.
"""

from ocean_sense.analysis.aggregator import (
    aggregate_by_space,
    aggregate_by_year,
    top_labels,
    year_extent,
)
from ocean_sense.analysis.correlator import correlate, pearson_r
from ocean_sense.analysis.filters import apply_filter, matches_filter
from ocean_sense.analysis.normalizer import NormalizationResult, normalize_row, normalize_rows
from ocean_sense.analysis.seasonal import seasonal_rows

__all__ = [
    "NormalizationResult",
    "aggregate_by_space",
    "aggregate_by_year",
    "apply_filter",
    "correlate",
    "matches_filter",
    "normalize_row",
    "normalize_rows",
    "pearson_r",
    "seasonal_rows",
    "top_labels",
    "year_extent",
]
