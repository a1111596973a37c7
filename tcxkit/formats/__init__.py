"""File format handlers for TCX activity data."""

from .tcx import decode, parse_tcx_file, parse_tcx_string
from .timestamps import normalize_timestamp

__all__ = ["decode", "normalize_timestamp", "parse_tcx_file", "parse_tcx_string"]
