"""Store paths shared by the fetch and build flows."""

from pathlib import Path

from ocean_sense.schemas import Feed

FISHERIES_PATH = Path("historical/fisheries/occurrences.json")
REGISTRY_PATH = Path("reference/species_registry.json")
SEASONAL_PATH = Path("reference/cyclones/seasonal_tables.json")
TRACKS_PATH = Path("live/cyclone_tracks.json")
OCEAN_PATH = Path("live/ocean_parameters.json")

FEED_PATHS: dict[Feed, Path] = {
    Feed.FISHERIES: FISHERIES_PATH,
    Feed.CYCLONE_SEASONS: SEASONAL_PATH,
    Feed.CYCLONE_TRACKS: TRACKS_PATH,
    Feed.OCEAN_PARAMETERS: OCEAN_PATH,
}

EXPORT_NAME = "ocean_sense_export.csv"
