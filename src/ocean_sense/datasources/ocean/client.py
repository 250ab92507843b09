"""Gridded ocean-parameter feed constants."""

# Parameter key -> unit, in the order readings are flattened
PARAMETERS: dict[str, str] = {
    "sst": "degC",
    "chl": "mg/m3",
    "salinity": "PSU",
}

# Keys under which the API wraps its grid-point list
POINT_LIST_KEYS = ("data", "results", "points", "grid")

# Timestamp fields, in priority order
TIME_FIELDS = ("datetime", "time", "date")
