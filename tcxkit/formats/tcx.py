"""TCX file format parser for tcxkit.

This module decodes TCX (Training Center XML) documents into an
``ActivityRecord``: the activity type and id, the totals of the first lap,
and every sample of that lap's track.

Only the first Activity and the first Lap are read. Multi-lap files are
truncated to their first lap.
"""

import logging
import os
import xml.etree.ElementTree as ET
from typing import Optional, Union

from tcxkit.errors import MalformedXmlError, NotTcxError, PathError, StructuralError, TcxError
from tcxkit.models import ActivityRecord, ParseResult, TrackPoint

from .timestamps import normalize_timestamp
from .xmlnode import child_elements, coerce_or_default, find_child, first_element, local_name

logger = logging.getLogger(__name__)

TCX_ROOT = "TrainingCenterDatabase"


def _require(node: ET.Element, name: str) -> ET.Element:
    child = find_child(node, name)
    if child is None:
        raise StructuralError(f"Missing required element {name} in {local_name(node.tag)}")
    return child


def _wrapped_int(node: ET.Element, name: str) -> int:
    """Read an integer held one level down, e.g. ``<HeartRateBpm><Value>140</Value></HeartRateBpm>``."""
    wrapper = find_child(node, name, False)
    if wrapper is None:
        return 0
    value = first_element(wrapper)
    if value is None:
        raise StructuralError(f"{name} has no value element")
    return coerce_or_default(int, value)


def _decode_trackpoint(trackpoint: ET.Element) -> TrackPoint:
    time = normalize_timestamp(_require(trackpoint, "Time").text or "")

    position = find_child(trackpoint, "Position", False)
    if position is None:
        latitude = longitude = 0.0
    else:
        latitude = coerce_or_default(float, find_child(position, "LatitudeDegrees"))
        longitude = coerce_or_default(float, find_child(position, "LongitudeDegrees"))

    return TrackPoint(
        time=time,
        latitude=latitude,
        longitude=longitude,
        heart_rate_bpm=_wrapped_int(trackpoint, "HeartRateBpm"),
        altitude_meters=coerce_or_default(float, find_child(trackpoint, "AltitudeMeters", False)),
        distance_meters=coerce_or_default(float, find_child(trackpoint, "DistanceMeters", False)),
    )


def decode(document: Union[ET.ElementTree, ET.Element]) -> ActivityRecord:
    """Decode a parsed TCX document.

    Raises ``NotTcxError`` if the root element is not TrainingCenterDatabase,
    ``StructuralError`` if a required element is missing, and
    ``ValueParseError`` / ``TimestampFormatError`` for malformed values.
    """
    root = document.getroot() if isinstance(document, ET.ElementTree) else document
    if local_name(root.tag) != TCX_ROOT:
        raise NotTcxError(f"Root element is {local_name(root.tag)!r}, expected {TCX_ROOT!r}")

    activity = _require(_require(root, "Activities"), "Activity")
    activity_type = activity.get("Sport")
    if activity_type is None:
        raise StructuralError("Activity has no Sport attribute")
    activity_id = normalize_timestamp(_require(activity, "Id").text or "")

    lap = _require(activity, "Lap")
    name = (lap.text or "").strip()
    duration = coerce_or_default(float, _require(lap, "TotalTimeSeconds"))
    distance = coerce_or_default(float, find_child(lap, "DistanceMeters"))
    heart_rate = _wrapped_int(lap, "AverageHeartRateBpm")

    track = _require(lap, "Track")
    track_points = tuple(_decode_trackpoint(tp) for tp in child_elements(track))

    return ActivityRecord(
        activity_id=activity_id,
        name=name,
        activity_type=activity_type,
        distance_static=distance,
        duration_static=duration,
        heart_rate=heart_rate,
        track_points=track_points,
    )


def _shorten(text: Union[str, bytes], limit: int = 80) -> str:
    if isinstance(text, bytes):
        text = text.decode("utf-8", errors="replace")
    text = " ".join(text.split())
    return text if len(text) <= limit else text[: limit - 3] + "..."


def parse_tcx_string(text: Union[str, bytes], source: Optional[str] = None) -> ParseResult:
    """Decode a TCX document held in memory.

    ``source`` names the document in log messages (a file path when the
    bytes came from disk); the text itself is used otherwise.
    """
    label = source or _shorten(text)
    try:
        root = ET.fromstring(text)
    except ET.ParseError as e:
        if source:
            logger.warning("Invalid XML document: %s", label)
        else:
            logger.error("Invalid XML string: %s", label)
        return ParseResult.failure(MalformedXmlError(f"{label}: {e}"))
    return _decode_result(root, label, source is not None)


def parse_tcx_file(file_path: Union[str, os.PathLike]) -> ParseResult:
    """Read and decode a TCX file from disk."""
    file_path = os.path.abspath(file_path)
    if not os.path.isfile(file_path):
        return ParseResult.failure(PathError(f"No such file: {file_path}"))

    try:
        tree = ET.parse(file_path)
    except ET.ParseError as e:
        logger.warning("Invalid XML document: %s", file_path)
        return ParseResult.failure(MalformedXmlError(f"{file_path}: {e}"))
    except OSError as e:
        logger.warning("Could not read %s: %s", file_path, e)
        return ParseResult.failure(PathError(f"{file_path}: {e}"))
    return _decode_result(tree.getroot(), file_path, True)


def _decode_result(root: ET.Element, label: str, is_file: bool) -> ParseResult:
    try:
        return ParseResult.success(decode(root))
    except NotTcxError as e:
        logger.warning("Invalid TCX %s: %s", "document" if is_file else "string", label)
        return ParseResult.failure(e)
    except TcxError as e:
        logger.warning("Could not decode %s: %s", label, e)
        return ParseResult.failure(e)
