"""Flatten track points into a pandas DataFrame."""

from __future__ import annotations

from collections.abc import Iterable

import pandas as pd

from tcxkit.models import ActivityRecord

COLUMNS = ["Time", "Latitude", "Longitude", "HeartRateBpm", "AltitudeMeter", "DistanceMeter"]


def to_dataframe(records: ActivityRecord | Iterable[ActivityRecord]) -> pd.DataFrame:
    """Return one row per track point.

    Accepts a single record or an iterable of records; rows keep record
    order, then document order within each record.
    """
    if isinstance(records, ActivityRecord):
        records = [records]
    rows = [tuple(point) for record in records for point in record.track_points]
    return pd.DataFrame.from_records(rows, columns=COLUMNS)
