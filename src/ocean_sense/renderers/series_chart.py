"""Plotly time-series and scatter charts.

Charts are emitted as a ``<div>`` plus the trace JSON; the page loads
Plotly from its CDN once (see ``base.html.j2``).
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ocean_sense.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ocean_sense.schemas import CorrelationSample, SeriesPoint

# Trace colours, cycled in order
PALETTE = ("#38bdf8", "#fbbf24", "#67e8f9", "#ef9a9a", "#a78bfa", "#34d399")


def _slug(title: str) -> str:
    return "".join(ch if ch.isalnum() else "-" for ch in title.lower()).strip("-")


def build_series_chart_html(
    title: str,
    series: dict[str, Sequence[SeriesPoint]],
    *,
    y_title: str = "Count",
    secondary: Sequence[str] = (),
) -> str:
    """Line chart with one trace per named series.

    Series named in ``secondary`` are drawn against a right-hand axis (used
    for fisheries records next to cyclone counts). Empty series are skipped;
    if nothing remains a "no data" fragment is returned.
    """
    traces = []
    for i, (name, points) in enumerate(series.items()):
        if not points:
            continue
        traces.append(
            {
                "x": [p.year for p in points],
                "y": [p.total for p in points],
                "name": name,
                "type": "scatter",
                "mode": "lines+markers" if name in secondary else "lines",
                "yaxis": "y2" if name in secondary else "y",
                "line": {"color": PALETTE[i % len(PALETTE)]},
            }
        )

    return render_template(
        "series_chart.html.j2",
        chart_id=f"chart-{_slug(title)}",
        title=title,
        traces=traces,
        y_title=y_title,
        y2_title=", ".join(secondary),
        has_secondary=any(t["yaxis"] == "y2" for t in traces),
    )


def build_scatter_html(
    title: str,
    samples: Sequence[CorrelationSample],
    r: float,
    *,
    x_title: str,
    y_title: str,
) -> str:
    """Scatter of aligned samples with the Pearson r in the heading."""
    trace = {
        "x": [s.x for s in samples],
        "y": [s.y for s in samples],
        "text": [str(s.year) for s in samples],
        "mode": "markers",
        "type": "scatter",
        "marker": {"size": 8, "color": "#f97316", "opacity": 0.8},
    }
    return render_template(
        "scatter_chart.html.j2",
        chart_id=f"scatter-{_slug(title)}",
        title=title,
        trace=trace,
        sample_count=len(samples),
        r_label="n/a" if math.isnan(r) else f"{r:+.2f}",
        x_title=x_title,
        y_title=y_title,
    )
