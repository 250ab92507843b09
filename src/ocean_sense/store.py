"""Tiered data store with freshness-aware caching.

Manages read/write of JSON data files organized into tiers by update frequency:
  - reference/: Static data, 90-day TTL (species registry, IMD seasonal tables)
  - historical/: Slow-changing, 24h TTL (fisheries occurrence records)
  - live/: Ephemeral, 30-60 min TTL (cyclone tracks, ocean parameters)
  - derived/: Computed outputs, always recomputed (HTML site, CSV export)

Every JSON file is wrapped in a metadata envelope with ``valid_until`` so the
fetch flow can skip feeds that are still fresh. Payloads are the raw rows a
datasource returned; normalization happens at build time, so a change to the
field rules never requires a refetch.
"""

from __future__ import annotations

import json
from datetime import UTC, datetime
from pathlib import Path  # noqa: TC003 — used at runtime, not just annotations
from typing import Any


class DataStore:
    """Manages read/write of cached data files with TTL."""

    def __init__(self, base_dir: Path) -> None:
        self.base = base_dir
        self.reference = base_dir / "reference"
        self.historical = base_dir / "historical"
        self.live = base_dir / "live"
        self.derived = base_dir / "derived"

    def read(self, path: Path) -> Any:
        """Read data payload from a metadata-enveloped JSON file.

        Returns the ``data`` field, or None if the file doesn't exist.
        """
        envelope = self.read_raw(path)
        if envelope is None:
            return None
        return envelope.get("data", envelope)

    def read_raw(self, path: Path) -> dict[str, Any] | None:
        """Read the full envelope (meta + data) from a JSON file."""
        full = self._resolve(path)
        if not full.exists():
            return None
        with full.open() as f:
            result: dict[str, Any] = json.load(f)
        return result

    def write(
        self,
        path: Path,
        data: Any,
        source: str,
        valid_until: datetime | None = None,
        **params: Any,
    ) -> Path:
        """Write data wrapped in a metadata envelope.

        Args:
            path: Relative path under base_dir (e.g. ``live/cyclone_tracks.json``).
            data: Payload to store under the ``data`` key.
            source: Data source identifier (e.g. ``"api.obis.org"``).
            valid_until: Expiry timestamp. None means derived/no-cache.
            **params: Extra metadata fields (row counts, query params, etc.).

        Returns:
            Absolute path of the written file.
        """
        full = self._resolve(path)
        full.parent.mkdir(parents=True, exist_ok=True)

        meta: dict[str, Any] = {
            "source": source,
            "fetched_at": datetime.now(UTC).isoformat(),
        }
        if valid_until is not None:
            meta["valid_until"] = valid_until.isoformat()
        if params:
            meta.update(params)

        envelope = {"meta": meta, "data": data}
        with full.open("w") as f:
            json.dump(envelope, f, indent=2)

        return full

    def meta(self, path: Path) -> dict[str, Any]:
        """Envelope metadata, or an empty dict if the file is missing."""
        envelope = self.read_raw(path)
        if envelope is None:
            return {}
        meta: dict[str, Any] = envelope.get("meta", {})
        return meta

    def _resolve(self, path: Path) -> Path:
        full = self.base / path if not path.is_absolute() else path
        try:
            full.resolve().relative_to(self.base.resolve())
        except ValueError:
            msg = f"Path escapes store base directory: {path}"
            raise ValueError(msg) from None
        return full

    def is_fresh(self, path: Path) -> bool:
        """Check if a file exists and hasn't expired.

        Returns False if the file is missing, has no ``valid_until``, or
        the expiry time has passed.
        """
        full = self._resolve(path)
        if not full.exists():
            return False

        valid_until = self.meta(path).get("valid_until")
        if valid_until is None:
            return False

        expiry = datetime.fromisoformat(valid_until)
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=UTC)
        return datetime.now(UTC) < expiry
