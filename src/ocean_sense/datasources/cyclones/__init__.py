"""Tropical cyclone data source.

Public API:
  - seasonal: fetch_seasonal_table, fetch_seasonal_tables (IMD CSVs)
  - tracks: fetch_tracks, flatten_tracks (track API -> one row per point)
"""

from ocean_sense.datasources.cyclones.seasonal import fetch_seasonal_table, fetch_seasonal_tables
from ocean_sense.datasources.cyclones.tracks import fetch_tracks, flatten_tracks

__all__ = [
    "fetch_seasonal_table",
    "fetch_seasonal_tables",
    "fetch_tracks",
    "flatten_tracks",
]
