"""CLI command: show — decode one activity file and print its metrics."""

import math

from tabulate import tabulate

from tcxkit import metrics
from tcxkit.file_provider import FileProvider
from tcxkit.models import ActivityRecord


def format_rate(func, record: ActivityRecord) -> str:
    value = func(record)
    return f"{value:.2f}" if math.isfinite(value) else "—"


def format_track_distance(record: ActivityRecord) -> str:
    try:
        return f"{metrics.distance_recomputed(record):.1f}"
    except ValueError:
        # Coordinates outside the valid latitude range
        return "—"


def metric_rows(record: ActivityRecord) -> list[list[str]]:
    return [
        ["Activity", metrics.activity_type(record)],
        ["Id", record.activity_id.isoformat()],
        ["Name", record.name or "—"],
        ["Distance (m)", f"{metrics.distance_static(record):.1f}"],
        ["Duration (s)", f"{metrics.duration_static(record):.1f}"],
        ["Average speed (km/h)", format_rate(metrics.average_speed, record)],
        ["Average pace (min/km)", format_rate(metrics.average_pace, record)],
        ["Average heart rate (bpm)", str(record.heart_rate) if record.heart_rate else "—"],
        ["Track points", str(len(record.track_points))],
        ["Distance from track (m)", format_track_distance(record)],
    ]


def run(path: str, table_format: str = "simple") -> int:
    """Print the summary line and a metrics table for ``path``."""
    result = FileProvider.parse_file(path)
    if not result.ok:
        print(f"Could not read {path}: {result.error} ({result.status.value} {result.status.name})")
        return 1

    print(result.record.summary())
    print()
    print(tabulate(metric_rows(result.record), headers=["Metric", "Value"], tablefmt=table_format))
    return 0
