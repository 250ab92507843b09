"""Small tabular panels: top labels and feed availability."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ocean_sense.renderers import render_template
from ocean_sense.schemas import SourceStatus

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from ocean_sense.snapshot import FeedSnapshot


def build_top_labels_html(
    top: Sequence[tuple[str, int]],
    *,
    title: str = "Top 10 Recorded Species",
) -> str:
    """Ranked label table with bars scaled to the most frequent label."""
    peak = top[0][1] if top else 0
    rows = [
        {"label": label, "count": count, "pct": round(100 * count / peak) if peak else 0}
        for label, count in top
    ]
    return render_template("top_labels.html.j2", title=title, rows=rows)


def build_feed_status_html(snapshots: Mapping[str, FeedSnapshot | None]) -> str:
    """One row per feed: status, record count, dropped rows, error."""
    rows = []
    for feed, snap in snapshots.items():
        if snap is None:
            rows.append({"feed": feed, "status": SourceStatus.PENDING.value, "records": 0})
            continue
        rows.append(
            {
                "feed": feed,
                "status": snap.status.value,
                "records": len(snap.records),
                "dropped": snap.dropped,
                "error": snap.error,
            }
        )
    return render_template("feed_status.html.j2", rows=rows)
