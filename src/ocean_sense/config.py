"""
Application settings.

Values come from environment variables prefixed ``OCEAN_SENSE_`` (or a local
``.env`` file), e.g.::

    OCEAN_SENSE_DEBUG=true
    OCEAN_SENSE_FISHERIES_SOURCE=data/reference/OBIS_Fisheries_Merged.csv
    OCEAN_SENSE_CYCLONE_TRACKS_URL=https://example.org/api/cyclones

Feed locations accept either a local path or an ``http(s)`` URL.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ocean_sense.datasources.fisheries.client import OBIS_OCCURRENCE_API
from ocean_sense.reference.geography import BoundingBox

OPENAI_CHAT_COMPLETIONS = "https://api.openai.com/v1/chat/completions"


def _default_seasonal_sources() -> dict[str, str]:
    return {
        "Monsoon": "data/reference/seasonalFrequency_sc_Monsoon1891-2021.csv",
        "Post-Monsoon": "data/reference/seasonalFrequency_cd_Post-Monsoon1891-2021.csv",
        "Winter": "data/reference/seasonalFrequency_cd_Winter-1891-2021.csv",
    }


class Settings(BaseSettings):
    """Runtime configuration for fetch/build flows and the CLI."""

    model_config = SettingsConfigDict(
        env_prefix="OCEAN_SENSE_",
        env_file=".env",
        extra="ignore",
    )

    app_name: str = "ocean-sense"
    app_env: str = "development"
    debug: bool = False
    api_port: int = 8000

    # Feed locations
    fisheries_source: str = OBIS_OCCURRENCE_API
    fisheries_max_pages: int = 5
    registry_source: str = "data/reference/species_registry_top50.json"
    seasonal_sources: dict[str, str] = Field(default_factory=_default_seasonal_sources)
    cyclone_tracks_url: str | None = None
    ocean_parameters_url: str | None = None

    # North Indian Ocean
    region_south: float = -10.0
    region_west: float = 40.0
    region_north: float = 30.0
    region_east: float = 100.0

    # Refresh intervals
    cyclone_refresh_minutes: int = 60
    ocean_refresh_minutes: int = 30
    fisheries_refresh_hours: int = 24
    reference_refresh_days: int = 90

    # Map clustering
    cluster_precision: int = 4
    max_clusters: int = 2000

    # Default filter for the built site and CLI export
    default_species: str = "All"
    default_category: str = "All"
    default_season: str = "All"

    # Assistant passthrough
    assistant_url: str = OPENAI_CHAT_COMPLETIONS
    assistant_model: str = "gpt-4o-mini"
    assistant_api_key: str | None = None

    @property
    def region(self) -> BoundingBox:
        """Bounding box for occurrence and ocean-parameter queries."""
        return BoundingBox(
            south=self.region_south,
            west=self.region_west,
            north=self.region_north,
            east=self.region_east,
        )


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
