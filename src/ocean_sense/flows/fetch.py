"""
Prefect flow for fetching raw rows from every feed.

Each feed is an independent task submitted concurrently; a feed that fails
(after its retries) is reported as unavailable and does not stop the others.
Feeds whose cached copy is still fresh are skipped.

Run locally:
    python -m ocean_sense.flows.fetch

Run with Prefect dashboard:
    prefect server start &
    python -m ocean_sense.flows.fetch
"""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from pathlib import Path
from typing import TYPE_CHECKING, Any

from prefect import flow, task

from ocean_sense.config import get_settings
from ocean_sense.datasources import cyclones, fisheries, ocean
from ocean_sense.flows.paths import (
    FISHERIES_PATH,
    OCEAN_PATH,
    REGISTRY_PATH,
    SEASONAL_PATH,
    TRACKS_PATH,
)
from ocean_sense.services.http import SourceUnavailableError
from ocean_sense.store import DataStore

if TYPE_CHECKING:
    from prefect.futures import PrefectFuture

    from ocean_sense.config import Settings
    from ocean_sense.reference.geography import BoundingBox

# Data store with tiered directories
store = DataStore(Path("data"))


@task(name="fetch-fisheries", retries=2, retry_delay_seconds=5)
def fetch_fisheries(source: str, bbox: BoundingBox, max_pages: int = 5) -> list[dict[str, Any]]:
    """Fetch fisheries occurrence rows (OBIS API or CSV export)."""
    return fisheries.fetch_fisheries_rows(source, bbox, max_pages=max_pages)


@task(name="fetch-species-registry", retries=2, retry_delay_seconds=5)
def fetch_species_registry(location: str) -> list[dict[str, Any]]:
    """Fetch the species registry used for category filtering."""
    return fisheries.fetch_registry(location)


@task(name="fetch-cyclone-seasons", retries=2, retry_delay_seconds=5)
def fetch_cyclone_seasons(sources: dict[str, str]) -> dict[str, Any]:
    """Fetch the IMD seasonal frequency tables, keyed by season."""
    return {"tables": cyclones.fetch_seasonal_tables(sources)}


@task(name="fetch-cyclone-tracks", retries=2, retry_delay_seconds=5)
def fetch_cyclone_tracks(url: str) -> list[dict[str, Any]]:
    """Fetch cyclone tracks, flattened to one row per track point."""
    return cyclones.flatten_tracks(cyclones.fetch_tracks(url))


@task(name="fetch-ocean-parameters", retries=2, retry_delay_seconds=5)
def fetch_ocean_parameters(url: str, bbox: BoundingBox) -> list[dict[str, Any]]:
    """Fetch ocean parameters, flattened to one row per parameter reading.

    Readings without their own timestamp are stamped with the fetch time.
    """
    fetched_at = datetime.now(UTC).isoformat()
    return ocean.flatten_parameters(ocean.fetch_parameters(url, bbox), default_datetime=fetched_at)


@task(name="save-feed")
def save_feed(path: Path, data: Any, source: str, ttl: timedelta) -> Path:
    """Save a feed payload via store with its freshness window."""
    rows = data.get("tables", data) if isinstance(data, dict) else data
    return store.write(
        path,
        data,
        source=source,
        valid_until=datetime.now(UTC) + ttl,
        rows=sum(len(v) for v in rows.values()) if isinstance(rows, dict) else len(rows),
    )


def _feed_jobs(settings: Settings) -> list[tuple[str, Path, str | None, timedelta]]:
    """(name, store path, source location, ttl) for every feed."""
    return [
        (
            "fisheries",
            FISHERIES_PATH,
            settings.fisheries_source,
            timedelta(hours=settings.fisheries_refresh_hours),
        ),
        (
            "species-registry",
            REGISTRY_PATH,
            settings.registry_source,
            timedelta(days=settings.reference_refresh_days),
        ),
        (
            "cyclone-seasons",
            SEASONAL_PATH,
            ", ".join(settings.seasonal_sources.values()) or None,
            timedelta(days=settings.reference_refresh_days),
        ),
        (
            "cyclone-tracks",
            TRACKS_PATH,
            settings.cyclone_tracks_url,
            timedelta(minutes=settings.cyclone_refresh_minutes),
        ),
        (
            "ocean-parameters",
            OCEAN_PATH,
            settings.ocean_parameters_url,
            timedelta(minutes=settings.ocean_refresh_minutes),
        ),
    ]


def _submit(name: str, settings: Settings) -> PrefectFuture[Any]:
    if name == "fisheries":
        return fetch_fisheries.submit(
            settings.fisheries_source, settings.region, settings.fisheries_max_pages
        )
    if name == "species-registry":
        return fetch_species_registry.submit(settings.registry_source)
    if name == "cyclone-seasons":
        return fetch_cyclone_seasons.submit(settings.seasonal_sources)
    if name == "cyclone-tracks":
        return fetch_cyclone_tracks.submit(settings.cyclone_tracks_url)
    return fetch_ocean_parameters.submit(settings.ocean_parameters_url, settings.region)


@flow(name="fetch-data", log_prints=True)
def fetch_all() -> dict[str, Any]:
    """
    Fetch all feeds.

    This is the main Prefect flow that orchestrates data fetching.
    Checks freshness before fetching and submits the stale feeds
    concurrently. Returns a per-feed summary: row count, ``"fresh"``,
    ``"not configured"`` or ``"unavailable"``.
    """
    settings = get_settings()
    results: dict[str, Any] = {}
    pending: list[tuple[str, Path, str, timedelta, PrefectFuture[Any]]] = []

    for name, path, location, ttl in _feed_jobs(settings):
        if not location:
            print(f"{name}: no source configured, skipping.")
            results[name] = "not configured"
            continue
        if store.is_fresh(path):
            print(f"{name}: cached data is fresh, skipping fetch.")
            results[name] = "fresh"
            continue
        print(f"Fetching {name} from {location}...")
        pending.append((name, path, location, ttl, _submit(name, settings)))

    for name, path, location, ttl, future in pending:
        try:
            data = future.result()
        except SourceUnavailableError as exc:
            print(f"{name}: source unavailable ({exc}); keeping previous cache.")
            results[name] = "unavailable"
            continue
        output_path = save_feed(path, data, location, ttl)
        rows = store.meta(path).get("rows", 0)
        print(f"Saved {rows} {name} rows to {output_path}")
        results[name] = rows

    return results


if __name__ == "__main__":
    result = fetch_all()
    print(f"Flow complete: {result}")
