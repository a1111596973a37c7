"""tcxkit: decode TCX activity files and summarize them."""

from .errors import ErrorKind, Status, TcxError
from .file_provider import FileProvider, parse_tcx_dir
from .formats import decode, normalize_timestamp, parse_tcx_file, parse_tcx_string
from .models import ActivityRecord, DirectoryResult, ParseResult, TrackPoint

__version__ = "0.1.0"
__all__ = [
    "ActivityRecord",
    "DirectoryResult",
    "ErrorKind",
    "FileProvider",
    "ParseResult",
    "Status",
    "TcxError",
    "TrackPoint",
    "decode",
    "normalize_timestamp",
    "parse_tcx_dir",
    "parse_tcx_file",
    "parse_tcx_string",
]
