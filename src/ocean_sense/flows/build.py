"""
Prefect flow for building the static site and CSV export from cached feeds.

Every build is one refresh cycle: each feed's cached rows are normalized into
a fresh snapshot on a ``SnapshotBoard``; feeds with no cached data are marked
unavailable and the page is rendered from whatever is left.

Run locally:
    python -m ocean_sense.flows.build
"""

from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path
from typing import TYPE_CHECKING, Any

from prefect import flow, task
from prefect.cache_policies import NONE

from ocean_sense.analysis import (
    aggregate_by_space,
    aggregate_by_year,
    correlate,
    normalize_rows,
    pearson_r,
    seasonal_rows,
    top_labels,
)
from ocean_sense.analysis.normalizer import NormalizationResult
from ocean_sense.config import get_settings
from ocean_sense.datasources.fisheries import registry_lookup
from ocean_sense.datasources.ocean import PARAMETERS
from ocean_sense.flows.paths import EXPORT_NAME, FEED_PATHS, REGISTRY_PATH
from ocean_sense.reference.seasons import SEASONS
from ocean_sense.renderers import render_template
from ocean_sense.renderers.cluster_map import build_cluster_map_html
from ocean_sense.renderers.export_csv import build_export_csv
from ocean_sense.renderers.panels import build_feed_status_html, build_top_labels_html
from ocean_sense.renderers.series_chart import build_scatter_html, build_series_chart_html
from ocean_sense.schemas import ALL, Feed, FilterState, SourceStatus
from ocean_sense.snapshot import SnapshotBoard
from ocean_sense.store import DataStore

if TYPE_CHECKING:
    from ocean_sense.schemas import SeriesPoint

# Store and output paths
store = DataStore(Path("data"))
SITE_DIR = store.derived / "site"

FISHERIES_SERIES = "Fisheries records"


# =============================================================================
# Loading (plain functions; also used by the CLI)
# =============================================================================


def normalize_feed(feed: Feed, payload: Any) -> NormalizationResult:
    """Normalize one feed's cached payload into canonical records."""
    if feed is Feed.CYCLONE_SEASONS:
        tables: dict[str, list[dict[str, Any]]] = (payload or {}).get("tables", {})
        rows = [row for season, table in tables.items() for row in seasonal_rows(table, season)]
    else:
        rows = payload or []
    return normalize_rows(rows, feed.source_kind)


def load_board(data_store: DataStore | None = None) -> SnapshotBoard:
    """Run one refresh cycle over the cached feeds."""
    data_store = data_store or store
    board = SnapshotBoard()
    for feed, path in FEED_PATHS.items():
        sequence = board.begin(feed)
        payload = data_store.read(path)
        if payload is None:
            board.fail(feed, sequence, "no cached data")
            continue
        result = normalize_feed(feed, payload)
        if result.dropped:
            print(f"{feed}: dropped {result.dropped} of {result.total} rows without a usable year")
        board.complete(feed, sequence, result)
    return board


def load_registry(data_store: DataStore | None = None) -> dict[str, str]:
    """scientificName -> category from the cached species registry."""
    entries = (data_store or store).read(REGISTRY_PATH)
    return registry_lookup(entries) if isinstance(entries, list) else {}


def default_filter() -> FilterState:
    settings = get_settings()
    return FilterState(
        species=settings.default_species,
        category=settings.default_category,
        season=settings.default_season,
    )


# =============================================================================
# Views
# =============================================================================


def cyclone_series(board: SnapshotBoard, state: FilterState) -> dict[str, list[SeriesPoint]]:
    """Seasonal cyclone totals per year: one series per season plus their sum."""
    records = board.records(Feed.CYCLONE_SEASONS)
    seasons = SEASONS if state.season == ALL else (state.season,)
    series = {
        f"{season} (cyclones)": aggregate_by_year(
            records, state.model_copy(update={"season": season})
        )
        for season in seasons
    }
    if state.season == ALL:
        series["All seasons (cyclones)"] = aggregate_by_year(records, state)
    return series


@task(name="load-snapshots", cache_policy=NONE)
def load_snapshots() -> SnapshotBoard:
    """Normalize every cached feed into a fresh snapshot board."""
    return load_board()


@task(name="build-html", cache_policy=NONE)
def build_html(
    board: SnapshotBoard,
    registry: dict[str, str],
    state: FilterState,
    export_name: str | None = EXPORT_NAME,
) -> str:
    """Build the HTML page for one filter state."""
    settings = get_settings()
    fish = board.records(Feed.FISHERIES)

    fish_series = aggregate_by_year(fish, state, registry)
    cyclones = cyclone_series(board, state)
    track_points = aggregate_by_year(
        board.records(Feed.CYCLONE_TRACKS), state, registry, use_values=False
    )
    timeseries_html = build_series_chart_html(
        "Time-series: Cyclones vs Fisheries Records",
        {**cyclones, "Cyclone track points": track_points, FISHERIES_SERIES: fish_series},
        y_title="Cyclone count",
        secondary=(FISHERIES_SERIES,),
    )

    # Driver: cyclone totals for the selected season (sum across seasons for "All")
    driver = aggregate_by_year(board.records(Feed.CYCLONE_SEASONS), state)
    samples = correlate(driver, fish_series, state.year_range)
    scatter_html = build_scatter_html(
        "Scatter: Cyclone count vs Fisheries records (per year)",
        samples,
        pearson_r(samples),
        x_title=f"Cyclone count ({state.season if state.season != ALL else 'all seasons'})",
        y_title="Fisheries records (count)",
    )

    clusters = aggregate_by_space(
        fish,
        state,
        registry,
        precision=settings.cluster_precision,
        max_clusters=settings.max_clusters,
    )
    map_html, map_script = build_cluster_map_html(clusters, max_clusters=settings.max_clusters)

    top_html = build_top_labels_html(top_labels(fish, state, registry))

    ocean_records = board.records(Feed.OCEAN_PARAMETERS)
    ocean_html = ""
    if ocean_records:
        ocean_html = build_series_chart_html(
            "Ocean parameter readings per year",
            {
                name: aggregate_by_year(
                    [r for r in ocean_records if r.label == name], state, use_values=False
                )
                for name in PARAMETERS
            },
            y_title="Readings",
        )

    status_html = build_feed_status_html({feed.value: board.snapshot(feed) for feed in Feed})

    return render_template(
        "base.html.j2",
        updated=datetime.now(UTC).strftime("%Y-%m-%d %H:%M UTC"),
        filter=state,
        export_name=export_name,
        feed_status=status_html,
        timeseries=timeseries_html,
        scatter=scatter_html,
        cluster_map=map_html,
        map_script=map_script,
        top_species=top_html,
        ocean_series=ocean_html,
    )


@task(name="write-export", cache_policy=NONE)
def write_export(board: SnapshotBoard, registry: dict[str, str], state: FilterState) -> Path:
    """Write the filtered CSV export next to the page."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / EXPORT_NAME
    output_path.write_text(build_export_csv(board.records(), state, registry), encoding="utf-8")
    return output_path


@task(name="write-site")
def write_site(html: str) -> Path:
    """Write HTML to site directory."""
    SITE_DIR.mkdir(parents=True, exist_ok=True)
    output_path = SITE_DIR / "index.html"
    with output_path.open("w") as f:
        f.write(html)
    return output_path


@flow(name="build-site", log_prints=True)
def build_all(state: FilterState | None = None) -> dict[str, Any]:
    """
    Build the static site and CSV export from cached feeds.

    This is the main Prefect flow that generates the static site.
    Returns ``{"error": "no data"}`` when no feed has any cached records.
    """
    state = state or default_filter()

    print("Normalizing cached feeds...")
    board = load_snapshots()
    statuses = board.statuses()
    for feed, status in statuses.items():
        print(f"  {feed}: {status}")

    if not any(s is SourceStatus.AVAILABLE for s in statuses.values()):
        print("No feed data found. Run fetch flow first.")
        return {"error": "no data"}

    registry = load_registry()
    if not registry and state.category != ALL:
        print("Warning: No species registry cached; category filter will match nothing.")

    print("Writing CSV export...")
    export_path = write_export(board, registry, state)

    print("Building HTML...")
    html = build_html(board, registry, state)

    print("Writing site...")
    output_path = write_site(html)

    print(f"Site built: {output_path}")
    return {"pages": 1, "output": str(output_path), "export": str(export_path)}


if __name__ == "__main__":
    result = build_all()
    print(f"Flow complete: {result}")
