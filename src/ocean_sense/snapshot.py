"""Versioned per-feed snapshots of canonical records.

Each refresh cycle of a feed is tagged with a sequence number from
``SnapshotBoard.begin``. When the fetch resolves, ``complete`` (or ``fail``)
installs the new snapshot only if its sequence is newer than the one already
installed for that feed, so a slow, superseded fetch can never overwrite
fresher data. A new snapshot replaces the previous one wholesale; old and new
records are never merged.

Usage::

    board = SnapshotBoard()
    seq = board.begin(Feed.FISHERIES)
    board.complete(Feed.FISHERIES, seq, normalize_rows(rows, SourceKind.FISHERIES))
    records = board.records()  # only feeds that are currently available
"""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from ocean_sense.schemas import Feed, SourceStatus

if TYPE_CHECKING:
    from ocean_sense.analysis.normalizer import NormalizationResult
    from ocean_sense.schemas import CanonicalRecord


@dataclass(frozen=True)
class FeedSnapshot:
    """The records of one feed from one refresh cycle."""

    feed: Feed
    sequence: int
    status: SourceStatus
    records: tuple[CanonicalRecord, ...] = ()
    dropped: int = 0
    error: str | None = None
    completed_at: datetime = field(default_factory=lambda: datetime.now(UTC))


class SnapshotBoard:
    """Latest accepted snapshot per feed, guarded against stale completions."""

    def __init__(self) -> None:
        self._sequence = itertools.count(1)
        self._lock = threading.Lock()
        self._snapshots: dict[Feed, FeedSnapshot] = {}

    def begin(self, feed: Feed) -> int:
        """Start a refresh cycle for ``feed`` and return its sequence number."""
        with self._lock:
            return next(self._sequence)

    def complete(self, feed: Feed, sequence: int, result: NormalizationResult) -> bool:
        """Install a successful cycle's records. Returns False if stale."""
        status = SourceStatus.AVAILABLE if result.records else SourceStatus.EMPTY
        return self._install(
            FeedSnapshot(
                feed=feed,
                sequence=sequence,
                status=status,
                records=tuple(result.records),
                dropped=result.dropped,
            )
        )

    def fail(self, feed: Feed, sequence: int, error: str) -> bool:
        """Mark ``feed`` unavailable for this cycle. Returns False if stale."""
        return self._install(
            FeedSnapshot(feed=feed, sequence=sequence, status=SourceStatus.UNAVAILABLE, error=error)
        )

    def _install(self, snapshot: FeedSnapshot) -> bool:
        with self._lock:
            current = self._snapshots.get(snapshot.feed)
            if current is not None and current.sequence >= snapshot.sequence:
                return False
            self._snapshots[snapshot.feed] = snapshot
            return True

    def snapshot(self, feed: Feed) -> FeedSnapshot | None:
        with self._lock:
            return self._snapshots.get(feed)

    def records(self, *feeds: Feed) -> list[CanonicalRecord]:
        """Records from the given feeds (default: all), skipping unavailable ones."""
        wanted = feeds or tuple(Feed)
        with self._lock:
            snapshots = [self._snapshots.get(f) for f in wanted]
        records: list[CanonicalRecord] = []
        for snap in snapshots:
            if snap is not None and snap.status is SourceStatus.AVAILABLE:
                records.extend(snap.records)
        return records

    def statuses(self) -> dict[Feed, SourceStatus]:
        """Status of every known feed; feeds never started are ``pending``."""
        with self._lock:
            return {
                feed: snap.status if (snap := self._snapshots.get(feed)) else SourceStatus.PENDING
                for feed in Feed
            }
