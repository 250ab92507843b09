"""Tests for application settings."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ocean_sense.config import Settings, get_settings
from ocean_sense.datasources.fisheries.client import OBIS_OCCURRENCE_API
from ocean_sense.reference.geography import NORTH_INDIAN_OCEAN

if TYPE_CHECKING:
    import pytest


class TestSettings:
    """Defaults and environment overrides."""

    def test_defaults(self) -> None:
        settings = Settings(_env_file=None)
        assert settings.app_name == "ocean-sense"
        assert settings.fisheries_source == OBIS_OCCURRENCE_API
        assert settings.cluster_precision == 4
        assert settings.max_clusters == 2000
        assert settings.cyclone_tracks_url is None
        assert list(settings.seasonal_sources) == ["Monsoon", "Post-Monsoon", "Winter"]

    def test_region_defaults_to_north_indian_ocean(self) -> None:
        assert Settings(_env_file=None).region == NORTH_INDIAN_OCEAN

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCEAN_SENSE_MAX_CLUSTERS", "50")
        monkeypatch.setenv("OCEAN_SENSE_CYCLONE_TRACKS_URL", "https://example.org/cyclones")
        monkeypatch.setenv("OCEAN_SENSE_REGION_NORTH", "25")
        settings = Settings(_env_file=None)
        assert settings.max_clusters == 50
        assert settings.cyclone_tracks_url == "https://example.org/cyclones"
        assert settings.region.north == 25.0

    def test_seasonal_sources_from_json_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OCEAN_SENSE_SEASONAL_SOURCES", '{"Winter": "winter.csv"}')
        assert Settings(_env_file=None).seasonal_sources == {"Winter": "winter.csv"}

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()
