"""Cyclone feed constants.

Two inputs feed cyclone records:
  - IMD seasonal frequency tables (one CSV per season, 1891 onwards)
  - a cyclone-track API returning storms with ``track`` point lists
"""

# Keys under which track APIs wrap their storm list
STORM_LIST_KEYS = ("storms", "cyclones", "results", "data")

# Storm-level fields copied onto every flattened track point
STORM_FIELDS = ("name", "season", "year", "basin", "storm_id", "id")

# Point-level fields kept from each track entry
POINT_FIELDS = ("lat", "lon", "datetime", "wind_speed", "pressure", "grade")
