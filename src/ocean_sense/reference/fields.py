"""Candidate field names per logical field, in priority order.

The normalizer tries each name exactly, in order, then the same names
case-insensitively. Dotted names address nested JSON objects
(``location.lat`` → ``row["location"]["lat"]``).
"""

from __future__ import annotations

from ocean_sense.schemas import SourceKind

# Explicit numeric year, then aliased numeric year
YEAR_FIELDS: tuple[str, ...] = ("year", "Year", "YEAR", "date_year")

# Date strings a calendar year can be extracted from
DATE_FIELDS: tuple[str, ...] = (
    "eventDate",
    "eventdate",
    "datetime",
    "date",
    "time",
    "observed_on",
)

LATITUDE_FIELDS: tuple[str, ...] = (
    "latitude",
    "decimalLatitude",
    "decimallatitude",
    "decLat",
    "lat",
    "location.lat",
    "position.lat",
)

LONGITUDE_FIELDS: tuple[str, ...] = (
    "longitude",
    "decimalLongitude",
    "decimallongitude",
    "decLong",
    "decLon",
    "lon",
    "lng",
    "location.lon",
    "location.lng",
    "position.lon",
)

LABEL_FIELDS: dict[SourceKind, tuple[str, ...]] = {
    SourceKind.FISHERIES: ("scientificName", "scientificname", "sciname", "species", "label"),
    SourceKind.CYCLONE_TRACK_POINT: ("name", "storm_name", "stormName", "label", "season"),
    SourceKind.OCEAN_PARAMETER: ("parameter", "name", "label"),
}

VALUE_FIELDS: dict[SourceKind, tuple[str, ...]] = {
    # Occurrences count as one each; only explicit counts are carried
    SourceKind.FISHERIES: ("value",),
    SourceKind.CYCLONE_TRACK_POINT: ("value", "wind_speed", "windSpeed", "wind"),
    SourceKind.OCEAN_PARAMETER: ("value", "reading"),
}

ATTRIBUTE_FIELDS: dict[SourceKind, tuple[str, ...]] = {
    SourceKind.FISHERIES: (
        "eventDate",
        "datasetName",
        "dataset_id",
        "basisOfRecord",
        "depth",
        "family",
        "individualCount",
    ),
    SourceKind.CYCLONE_TRACK_POINT: (
        "season",
        "datetime",
        "pressure",
        "wind_speed",
        "storm_id",
        "basin",
        "grade",
    ),
    SourceKind.OCEAN_PARAMETER: ("datetime", "unit", "depth", "dataset"),
}
