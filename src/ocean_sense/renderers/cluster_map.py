"""Leaflet map of spatial clusters.

Each cluster becomes one circle marker sized by record count, with a popup
listing up to three labels.
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING, Any

from ocean_sense.renderers import render_template

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ocean_sense.schemas import SpatialCluster

POPUP_LABELS = 3


def marker_radius(count: int) -> float:
    """Log-scaled marker radius, capped so dense cells stay readable."""
    return round(min(4 + math.log(count + 1) * 3, 18), 2)


def _marker(cluster: SpatialCluster) -> dict[str, Any]:
    labels = sorted(cluster.labels)
    shown = labels[:POPUP_LABELS]
    more = len(labels) - len(shown)
    return {
        "lat": cluster.lat,
        "lon": cluster.lon,
        "count": cluster.count,
        "radius": marker_radius(cluster.count),
        "labels": ", ".join(shown) + (f" +{more} more" if more > 0 else ""),
    }


def build_cluster_map_html(
    clusters: Sequence[SpatialCluster],
    *,
    title: str = "Fisheries Observation Points",
    max_clusters: int | None = None,
) -> tuple[str, str]:
    """Build an interactive map of clustered observation points.

    Returns a (map_div_html, map_script_js) tuple; the script is empty when
    there is nothing to plot.
    """
    if not clusters:
        return (
            f"<h2>{title}</h2><p>No observation points with coordinates for this filter.</p>",
            "",
        )

    map_div = render_template(
        "cluster_map.html.j2",
        title=title,
        cluster_count=len(clusters),
        record_count=sum(c.count for c in clusters),
        capped=max_clusters is not None and len(clusters) >= max_clusters,
    )
    map_script = render_template(
        "cluster_map_script.html.j2",
        markers=[_marker(c) for c in clusters],
    )
    return (map_div, map_script)
