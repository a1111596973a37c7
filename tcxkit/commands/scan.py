"""CLI command: scan — decode every TCX file in a folder."""

from tabulate import tabulate

from tcxkit import metrics
from tcxkit.file_provider import FileProvider
from tcxkit.models import ActivityRecord

from .show import format_rate


def record_row(record: ActivityRecord) -> list:
    return [
        record.activity_id.isoformat(),
        record.activity_type,
        f"{record.distance_static / 1000:.2f}",
        f"{record.duration_static:.0f}",
        format_rate(metrics.average_speed, record),
        format_rate(metrics.average_pace, record),
        len(record.track_points),
    ]


def run(data_folder: str, table_format: str = "simple") -> int:
    """Print one row per decoded activity and a count of skipped files."""
    result = FileProvider(data_folder).scan()

    if result.records:
        print(
            tabulate(
                [record_row(r) for r in result.records],
                headers=["Id", "Activity", "km", "Seconds", "km/h", "min/km", "Points"],
                tablefmt=table_format,
            )
        )
    for file_path, error in result.failures:
        print(f"Skipped {file_path}: {error.kind.value} ({error.status.value})")

    if not result.ok:
        print(f"{result.error} ({result.status.value} {result.status.name})")
        return 1
    return 0
