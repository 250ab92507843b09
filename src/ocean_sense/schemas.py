"""
Domain models for Ocean Sense.

Pydantic models for normalized records and the aggregates derived from them.
These define the canonical schema - the normalizer maps every raw feed row
onto ``CanonicalRecord`` and the analysis layer only ever sees these.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from ocean_sense.reference.seasons import canonical_season

ALL = "All"

# Spellings the original selectors used for "no constraint"
_ALL_SPELLINGS = {"", "all", "all species", "all categories", "all seasons"}


# =============================================================================
# Sources
# =============================================================================


class SourceKind(StrEnum):
    """Which raw feed family a record originated from."""

    FISHERIES = "fisheries"
    CYCLONE_TRACK_POINT = "cyclone-track-point"
    OCEAN_PARAMETER = "ocean-parameter"


class Feed(StrEnum):
    """A fetchable source; the unit of refresh and availability."""

    FISHERIES = "fisheries"
    CYCLONE_SEASONS = "cyclone-seasons"
    CYCLONE_TRACKS = "cyclone-tracks"
    OCEAN_PARAMETERS = "ocean-parameters"

    @property
    def source_kind(self) -> SourceKind:
        if self is Feed.FISHERIES:
            return SourceKind.FISHERIES
        if self is Feed.OCEAN_PARAMETERS:
            return SourceKind.OCEAN_PARAMETER
        return SourceKind.CYCLONE_TRACK_POINT


class SourceStatus(StrEnum):
    """Availability of a feed's latest snapshot."""

    PENDING = "pending"
    AVAILABLE = "available"
    EMPTY = "empty"
    UNAVAILABLE = "unavailable"


# =============================================================================
# Records
# =============================================================================


class CanonicalRecord(BaseModel):
    """One observation of any kind, uniform regardless of source."""

    model_config = {"frozen": True}

    source_kind: SourceKind
    year: int
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    label: str = "Unknown"
    value: float | None = None
    attributes: dict[str, str | float] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _coordinates_paired(self) -> CanonicalRecord:
        if (self.latitude is None) != (self.longitude is None):
            msg = "latitude and longitude must be both present or both absent"
            raise ValueError(msg)
        return self

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @property
    def season(self) -> str | None:
        """Season attribute (cyclone records from seasonal tables), if any."""
        season = self.attributes.get("season")
        return str(season) if season is not None else None


# =============================================================================
# Aggregates
# =============================================================================


class SeriesPoint(BaseModel):
    """One (year, total) sample of a temporal aggregate."""

    model_config = {"frozen": True}

    year: int
    total: float


class SpatialCluster(BaseModel):
    """Records sharing a rounded (lat, lon) cell."""

    model_config = {"frozen": True}

    lat: float
    lon: float
    count: int = Field(..., ge=1)
    labels: frozenset[str] = Field(default_factory=frozenset)


class CorrelationSample(BaseModel):
    """One year of two aligned series, for scatter/correlation analysis."""

    model_config = {"frozen": True}

    year: int
    x: float
    y: float


# =============================================================================
# Filtering
# =============================================================================


class FilterState(BaseModel):
    """Immutable snapshot of the user-selected constraints.

    ``year_range`` of None means unbounded. An inverted range is swapped
    rather than rejected, since it is reachable through plain UI input.
    """

    model_config = {"frozen": True, "str_strip_whitespace": True}

    species: str = ALL
    category: str = ALL
    season: str = ALL
    year_range: tuple[int, int] | None = None

    @field_validator("species", "category", "season", mode="before")
    @classmethod
    def _resolve_all(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and value.strip().lower() in _ALL_SPELLINGS):
            return ALL
        return value

    @field_validator("season")
    @classmethod
    def _canonical_season(cls, value: str) -> str:
        return value if value == ALL else canonical_season(value)

    @field_validator("year_range")
    @classmethod
    def _ordered_range(cls, value: tuple[int, int] | None) -> tuple[int, int] | None:
        if value is None:
            return None
        low, high = value
        return (low, high) if low <= high else (high, low)

    @property
    def is_unconstrained(self) -> bool:
        return (
            self.species == ALL
            and self.category == ALL
            and self.season == ALL
            and self.year_range is None
        )
