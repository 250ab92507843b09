"""Tests for sequence-tagged feed snapshots."""

from __future__ import annotations

from ocean_sense.analysis.normalizer import NormalizationResult
from ocean_sense.schemas import CanonicalRecord, Feed, SourceKind, SourceStatus
from ocean_sense.snapshot import SnapshotBoard


def result(*years: int, dropped: int = 0) -> NormalizationResult:
    records = [CanonicalRecord(source_kind=SourceKind.FISHERIES, year=y) for y in years]
    return NormalizationResult(records=records, dropped=dropped)


class TestSnapshotBoard:
    """Newest cycle wins regardless of completion order."""

    def test_sequences_increase(self) -> None:
        board = SnapshotBoard()
        first = board.begin(Feed.FISHERIES)
        second = board.begin(Feed.CYCLONE_TRACKS)
        assert second > first

    def test_complete_installs_records(self) -> None:
        board = SnapshotBoard()
        seq = board.begin(Feed.FISHERIES)
        assert board.complete(Feed.FISHERIES, seq, result(2001, 2002, dropped=3))
        snap = board.snapshot(Feed.FISHERIES)
        assert snap is not None
        assert snap.status is SourceStatus.AVAILABLE
        assert snap.dropped == 3
        assert [r.year for r in board.records(Feed.FISHERIES)] == [2001, 2002]

    def test_stale_completion_is_discarded(self) -> None:
        board = SnapshotBoard()
        old = board.begin(Feed.FISHERIES)
        new = board.begin(Feed.FISHERIES)
        assert board.complete(Feed.FISHERIES, new, result(2020))
        assert not board.complete(Feed.FISHERIES, old, result(1990))
        assert [r.year for r in board.records(Feed.FISHERIES)] == [2020]

    def test_stale_failure_does_not_hide_newer_data(self) -> None:
        board = SnapshotBoard()
        old = board.begin(Feed.FISHERIES)
        new = board.begin(Feed.FISHERIES)
        board.complete(Feed.FISHERIES, new, result(2020))
        assert not board.fail(Feed.FISHERIES, old, "timeout")
        assert board.statuses()[Feed.FISHERIES] is SourceStatus.AVAILABLE

    def test_new_cycle_replaces_wholesale(self) -> None:
        board = SnapshotBoard()
        board.complete(Feed.FISHERIES, board.begin(Feed.FISHERIES), result(2001, 2002))
        board.complete(Feed.FISHERIES, board.begin(Feed.FISHERIES), result(2003))
        assert [r.year for r in board.records()] == [2003]

    def test_failure_marks_unavailable_and_drops_records(self) -> None:
        board = SnapshotBoard()
        board.complete(Feed.FISHERIES, board.begin(Feed.FISHERIES), result(2001))
        board.fail(Feed.FISHERIES, board.begin(Feed.FISHERIES), "connection refused")
        snap = board.snapshot(Feed.FISHERIES)
        assert snap is not None
        assert snap.status is SourceStatus.UNAVAILABLE
        assert snap.error == "connection refused"
        assert board.records() == []

    def test_empty_result_is_not_an_error(self) -> None:
        board = SnapshotBoard()
        board.complete(Feed.OCEAN_PARAMETERS, board.begin(Feed.OCEAN_PARAMETERS), result())
        assert board.statuses()[Feed.OCEAN_PARAMETERS] is SourceStatus.EMPTY

    def test_partial_availability(self) -> None:
        board = SnapshotBoard()
        board.complete(Feed.FISHERIES, board.begin(Feed.FISHERIES), result(2001))
        board.fail(Feed.CYCLONE_TRACKS, board.begin(Feed.CYCLONE_TRACKS), "down")
        statuses = board.statuses()
        assert statuses[Feed.FISHERIES] is SourceStatus.AVAILABLE
        assert statuses[Feed.CYCLONE_TRACKS] is SourceStatus.UNAVAILABLE
        assert statuses[Feed.CYCLONE_SEASONS] is SourceStatus.PENDING
        assert len(board.records()) == 1

    def test_records_for_selected_feeds(self) -> None:
        board = SnapshotBoard()
        board.complete(Feed.FISHERIES, board.begin(Feed.FISHERIES), result(2001))
        board.complete(Feed.CYCLONE_SEASONS, board.begin(Feed.CYCLONE_SEASONS), result(2002))
        assert [r.year for r in board.records(Feed.CYCLONE_SEASONS)] == [2002]
        assert len(board.records()) == 2
