"""Summary figures derived from a decoded activity.

Speed and pace come from the lap totals stored in the file. The
recomputed distance walks the track points instead, and is only as good
as the positions the device recorded.
"""

from __future__ import annotations

import math

from geopy.distance import geodesic

from tcxkit.models import ActivityRecord, TrackPoint


def activity_type(record: ActivityRecord) -> str:
    return record.activity_type


def distance_static(record: ActivityRecord) -> float:
    """Lap distance in meters, as written in the file."""
    return record.distance_static


def duration_static(record: ActivityRecord) -> float:
    """Lap duration in seconds, as written in the file."""
    return record.duration_static


def _ratio(numerator: float, denominator: float) -> float:
    """Float division that yields inf, or nan for 0/0, instead of raising."""
    if denominator == 0:
        return math.nan if numerator == 0 else math.copysign(math.inf, numerator)
    return numerator / denominator


def average_speed(record: ActivityRecord) -> float:
    """Average speed in km/h."""
    return _ratio(record.distance_static / 1000, record.duration_static / 3600)


def average_pace(record: ActivityRecord) -> float:
    """Average pace in min/km."""
    return _ratio(record.duration_static / 60, record.distance_static / 1000)


def point_distance(a: TrackPoint, b: TrackPoint) -> float:
    """Distance in meters between two samples on the WGS-84 ellipsoid, including climb."""
    surface = geodesic((a.latitude, a.longitude), (b.latitude, b.longitude)).meters
    return math.hypot(surface, b.altitude_meters - a.altitude_meters)


def distance_recomputed(record: ActivityRecord) -> float:
    """Sum of consecutive point-to-point distances over the track, in meters."""
    points = record.track_points
    return sum(point_distance(a, b) for a, b in zip(points, points[1:]))
