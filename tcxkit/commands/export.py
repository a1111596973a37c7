"""CLI command: export — write track points of one file or a folder as CSV."""

import os

from tcxkit.file_provider import FileProvider
from tcxkit.tabular import to_dataframe


def run(path: str, output: str) -> int:
    if os.path.isdir(path):
        result = FileProvider(path).scan()
        records = result.records
    else:
        result = FileProvider.parse_file(path)
        records = [result.record] if result.ok else []

    if not result.ok:
        print(f"Could not read {path}: {result.error} ({result.status.value} {result.status.name})")
        return 1

    df = to_dataframe(records)
    df.to_csv(output, index=False)
    print(f"Wrote {len(df)} track points to {output}")
    return 0
