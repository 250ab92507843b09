"""Ocean parameters (SST, chlorophyll-a, salinity) per grid point."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from ocean_sense.datasources.ocean.client import PARAMETERS, POINT_LIST_KEYS, TIME_FIELDS
from ocean_sense.services.http import get_json
from ocean_sense.services.tabular import unwrap_records

if TYPE_CHECKING:
    from ocean_sense.reference.geography import BoundingBox


def fetch_parameters(url: str, bbox: BoundingBox | None = None) -> Any:
    """Fetch the raw ocean-parameter payload, optionally bounded."""
    params: dict[str, Any] | None = None
    if bbox is not None:
        params = {"south": bbox.south, "west": bbox.west, "north": bbox.north, "east": bbox.east}
    return get_json(url, params=params)


def flatten_parameters(payload: Any, default_datetime: str | None = None) -> list[dict[str, Any]]:
    """
    Split each grid point into one raw row per parameter reading.

    Args:
        payload: List of points, an envelope of them, or a single reading.
        default_datetime: Timestamp for readings that carry none (a live
            "current conditions" reading is stamped with the fetch time).

    Returns:
        Rows with ``parameter``, ``value``, ``unit``, ``datetime`` and the
        point's ``lat``/``lon`` when present. Missing parameters are skipped.
    """
    envelope_time = None
    if isinstance(payload, dict):
        envelope_time = next((payload[k] for k in TIME_FIELDS if payload.get(k)), None)

    rows: list[dict[str, Any]] = []
    for point in unwrap_records(payload, keys=POINT_LIST_KEYS):
        if not isinstance(point, dict):
            continue
        stamp = next((point[k] for k in TIME_FIELDS if point.get(k)), None)
        stamp = stamp or envelope_time or default_datetime
        for name, unit in PARAMETERS.items():
            if point.get(name) is None:
                continue
            row: dict[str, Any] = {"parameter": name, "value": point[name], "unit": unit}
            if stamp:
                row["datetime"] = stamp
            for coord in ("lat", "lon"):
                if point.get(coord) is not None:
                    row[coord] = point[coord]
            rows.append(row)
    return rows
