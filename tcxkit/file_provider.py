"""Directory scanning for tcxkit.

This module defines the FileProvider class, which decodes every TCX file
in a folder. Any file whose name contains ``.tcx`` is a candidate, which
includes gzip-compressed ``.tcx.gz`` files; those are decompressed in
memory before decoding.

A file that fails to decode is logged and skipped. Only an empty overall
result is reported as a failure.
"""

import gzip
import logging
import os

from tcxkit.errors import InvalidDirectoryError, MalformedXmlError, NoActivitiesFoundError, PathError, Status
from tcxkit.formats import parse_tcx_file, parse_tcx_string
from tcxkit.models import DirectoryResult, ParseResult

logger = logging.getLogger(__name__)


class FileProvider:
    """Decode the TCX files found in one folder."""

    FILE_MARKER = ".tcx"

    def __init__(self, data_folder: str):
        self.data_folder = data_folder

    @staticmethod
    def _is_gzipped(file_path: str) -> bool:
        return os.fspath(file_path).lower().endswith(".gz")

    @staticmethod
    def parse_file(file_path: str) -> ParseResult:
        """Decode one file. Compressed files are read fully before parsing."""
        if not FileProvider._is_gzipped(file_path):
            return parse_tcx_file(file_path)
        if not os.path.isfile(file_path):
            return ParseResult.failure(PathError(f"No such file: {file_path}"))

        try:
            with gzip.open(file_path, "rb") as f:
                data = f.read().lstrip()
        except (OSError, EOFError) as e:
            logger.warning("Could not decompress %s: %s", file_path, e)
            return ParseResult.failure(MalformedXmlError(f"{file_path}: {e}"))
        return parse_tcx_string(data, source=file_path)

    def list_files(self) -> list[str]:
        """Return candidate files in directory listing order."""
        return [
            os.path.join(self.data_folder, name)
            for name in os.listdir(self.data_folder)
            if self.FILE_MARKER in name and os.path.isfile(os.path.join(self.data_folder, name))
        ]

    def scan(self) -> DirectoryResult:
        """Decode every candidate file and collect the successes."""
        if not os.path.isdir(self.data_folder):
            logger.warning("Invalid path: %s", self.data_folder)
            return DirectoryResult(
                Status.SERVER_ERROR,
                error=InvalidDirectoryError(f"Not a directory: {self.data_folder}"),
            )

        records = []
        failures = []
        for file_path in self.list_files():
            result = self.parse_file(file_path)
            if result.ok:
                records.append(result.record)
            else:
                logger.info("Skipping %s: %s", file_path, result.error)
                failures.append((file_path, result.error))

        logger.debug("Decoded %d of %d files in %s", len(records), len(records) + len(failures), self.data_folder)

        if not records:
            return DirectoryResult(
                Status.NOT_FOUND,
                failures=tuple(failures),
                error=NoActivitiesFoundError(f"No TCX activities found in {self.data_folder}"),
            )
        return DirectoryResult(Status.OK, tuple(records), tuple(failures))


def parse_tcx_dir(path: str) -> DirectoryResult:
    """Scan ``path`` for TCX files and decode them."""
    return FileProvider(path).scan()
