"""Status codes and the exception hierarchy used across tcxkit.

Decoding functions raise one of the ``TcxError`` subclasses below. The
boundary functions (``parse_tcx_string``, ``parse_tcx_file`` and the
directory scan) catch them and hand back a tagged result instead, so a
caller only ever sees an exception when it calls ``decode`` directly.
"""

from enum import Enum, IntEnum


class Status(IntEnum):
    """Numeric result codes kept stable for external consumers."""

    OK = 200
    CLIENT_ERROR = 400
    TCX_SCHEMA_ERROR = 401
    NOT_FOUND = 404
    SERVER_ERROR = 500


class ErrorKind(Enum):
    NOT_TCX = "not_tcx"
    MALFORMED_XML = "malformed_xml"
    STRUCTURAL = "structural"
    FORMAT = "format"
    VALUE = "value"
    PATH = "path"
    INVALID_DIRECTORY = "invalid_directory"
    NOT_FOUND = "not_found"


class TcxError(Exception):
    """Base class for every failure tcxkit reports."""

    kind = ErrorKind.STRUCTURAL
    status = Status.CLIENT_ERROR


class NotTcxError(TcxError):
    """Well-formed XML whose root element is not TrainingCenterDatabase."""

    kind = ErrorKind.NOT_TCX
    status = Status.TCX_SCHEMA_ERROR


class MalformedXmlError(TcxError):
    kind = ErrorKind.MALFORMED_XML
    status = Status.CLIENT_ERROR


class StructuralError(TcxError):
    """A required element or attribute is missing."""

    kind = ErrorKind.STRUCTURAL
    status = Status.CLIENT_ERROR


class TimestampFormatError(TcxError, ValueError):
    kind = ErrorKind.FORMAT
    status = Status.CLIENT_ERROR


class ValueParseError(TcxError, ValueError):
    """Text of a present node could not be converted to the requested type."""

    kind = ErrorKind.VALUE
    status = Status.CLIENT_ERROR


class PathError(TcxError):
    kind = ErrorKind.PATH
    status = Status.NOT_FOUND


class InvalidDirectoryError(TcxError):
    kind = ErrorKind.INVALID_DIRECTORY
    status = Status.SERVER_ERROR


class NoActivitiesFoundError(TcxError):
    kind = ErrorKind.NOT_FOUND
    status = Status.NOT_FOUND
