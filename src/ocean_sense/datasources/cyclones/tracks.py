"""Cyclone track API: storms with per-point track lists."""

from __future__ import annotations

from typing import Any

from ocean_sense.datasources.cyclones.client import POINT_FIELDS, STORM_FIELDS, STORM_LIST_KEYS
from ocean_sense.services.http import get_json
from ocean_sense.services.tabular import unwrap_records


def fetch_tracks(url: str, params: dict[str, Any] | None = None) -> Any:
    """Fetch the raw track payload."""
    return get_json(url, params=params)


def flatten_tracks(payload: Any) -> list[dict[str, Any]]:
    """
    Flatten storms into one raw row per track point.

    Each row carries the storm's identity fields (``name``, ``season``,
    ``year``...) next to the point's ``lat``/``lon``/``datetime``/
    ``wind_speed``/``pressure``. Storms without a track list yield nothing.

    Returns:
        Raw rows ready for ``normalize_rows(..., SourceKind.CYCLONE_TRACK_POINT)``.
    """
    rows: list[dict[str, Any]] = []
    for storm in unwrap_records(payload, keys=STORM_LIST_KEYS):
        if not isinstance(storm, dict):
            continue
        track = storm.get("track")
        if not isinstance(track, list):
            continue

        identity = {k: storm[k] for k in STORM_FIELDS if storm.get(k) is not None}
        if "storm_id" not in identity and "id" in identity:
            identity["storm_id"] = identity.pop("id")

        for point in track:
            if not isinstance(point, dict):
                continue
            row = dict(identity)
            row.update({k: point[k] for k in POINT_FIELDS if point.get(k) is not None})
            rows.append(row)
    return rows
