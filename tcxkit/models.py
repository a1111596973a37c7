"""Immutable records produced by the TCX decoder."""

from __future__ import annotations

from datetime import datetime
from typing import NamedTuple

from tcxkit.errors import ErrorKind, Status, TcxError


class TrackPoint(NamedTuple):
    """One GPS/sensor sample. Numeric fields use 0 when the source omits them."""

    time: datetime
    latitude: float = 0.0
    longitude: float = 0.0
    heart_rate_bpm: int = 0
    altitude_meters: float = 0.0
    distance_meters: float = 0.0


class ActivityRecord(NamedTuple):
    """
    One decoded activity.

    ``activity_id`` is the Activity/Id timestamp and acts as the natural key.
    ``distance_static`` (meters) and ``duration_static`` (seconds) are the
    lap totals as written in the file, never recomputed from samples.
    """

    activity_id: datetime
    name: str
    activity_type: str
    distance_static: float
    duration_static: float
    heart_rate: int
    track_points: tuple[TrackPoint, ...] = ()

    def summary(self) -> str:
        return (
            f"{self.activity_type} {self.distance_static / 1000} km at "
            f"{self.activity_id.isoformat()} for {self.duration_static} seconds."
        )

    def __str__(self) -> str:
        return self.summary()


class ParseResult(NamedTuple):
    """Outcome of decoding one document: a record on success, an error otherwise."""

    status: Status
    record: ActivityRecord | None = None
    error: TcxError | None = None

    @classmethod
    def success(cls, record: ActivityRecord) -> ParseResult:
        return cls(Status.OK, record, None)

    @classmethod
    def failure(cls, error: TcxError) -> ParseResult:
        return cls(error.status, None, error)

    @property
    def ok(self) -> bool:
        return self.status == Status.OK

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None


class DirectoryResult(NamedTuple):
    """Outcome of a directory scan.

    ``records`` follows directory listing order. ``failures`` lists
    ``(file_path, error)`` for every file that was skipped.
    """

    status: Status
    records: tuple[ActivityRecord, ...] = ()
    failures: tuple[tuple[str, TcxError], ...] = ()
    error: TcxError | None = None

    @property
    def ok(self) -> bool:
        return self.status == Status.OK

    @property
    def kind(self) -> ErrorKind | None:
        return self.error.kind if self.error is not None else None
