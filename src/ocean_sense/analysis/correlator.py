"""Align two year-keyed series for scatter and correlation analysis.

The join is asymmetric: series A (the driver, e.g. cyclone counts) defines
the sampling years, and series B (the response, e.g. fisheries records) is
looked up per year with 0 for missing years.
"""

from __future__ import annotations

import math
import statistics
from typing import TYPE_CHECKING

from ocean_sense.schemas import CorrelationSample

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ocean_sense.schemas import SeriesPoint


def correlate(
    series_a: Sequence[SeriesPoint],
    series_b: Sequence[SeriesPoint],
    year_range: tuple[int, int] | None = None,
) -> list[CorrelationSample]:
    """Pair A's totals with B's totals by year.

    Args:
        series_a: Driver series; its years inside ``year_range`` are kept.
        series_b: Response series; a year absent here contributes y=0.
        year_range: Inclusive (min, max); None keeps all of A's years.
            An inverted range is swapped.

    Returns:
        Samples sorted by year, at most one per A year in range.
    """
    if year_range is not None:
        low, high = sorted(year_range)
    b_by_year = {point.year: point.total for point in series_b}

    samples: dict[int, CorrelationSample] = {}
    for point in series_a:
        if year_range is not None and not low <= point.year <= high:
            continue
        samples[point.year] = CorrelationSample(
            year=point.year,
            x=point.total,
            y=b_by_year.get(point.year, 0.0),
        )
    return [samples[year] for year in sorted(samples)]


def pearson_r(samples: Sequence[CorrelationSample]) -> float:
    """Pearson correlation of the aligned samples.

    Returns NaN with fewer than two samples or when either axis is constant.
    """
    if len(samples) < 2:
        return math.nan
    xs = [s.x for s in samples]
    ys = [s.y for s in samples]
    try:
        return statistics.correlation(xs, ys)
    except statistics.StatisticsError:
        return math.nan
