"""Timestamp normalization for TCX Id and Time elements.

Device firmware writes ISO-8601 timestamps in a handful of shapes::

    2023-05-01T10:00:00
    2023-05-01T10:00:00Z
    2023-05-01T10:00:00.5Z
    2023-05-01T10:00:00.123

All of them normalize to a naive ``datetime`` at whole-second precision.
The trailing ``Z`` marks UTC; the result is left naive so that stamps with
and without a designator compare equal.
"""

import re
from datetime import datetime
from typing import Optional

from tcxkit.errors import TimestampFormatError

BASE_FORMAT = "%Y-%m-%dT%H:%M:%S"

TIMESTAMP_RE = re.compile(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?P<fraction>\.\d{1,3})?(?P<zone>Z)?")


def _suffix_format(fraction: Optional[str], zone: Optional[str]) -> str:
    suffix = ""
    if fraction:
        suffix += ".%f"
    if zone:
        suffix += "Z"
    return suffix


def _try_parse(text: str, fmt: str) -> Optional[datetime]:
    try:
        return datetime.strptime(text, fmt)
    except ValueError:
        return None


def normalize_timestamp(text: str) -> datetime:
    """Parse the first ISO-like timestamp found in ``text``.

    Raises ``TimestampFormatError`` when ``text`` holds nothing of the
    shape ``YYYY-MM-DDTHH:MM:SS[.s{1,3}][Z]`` or when the matched fields
    are out of range.
    """
    match = TIMESTAMP_RE.search(text or "")
    if match is None:
        raise TimestampFormatError(
            f"{text!r} is improperly formatted. Must be in the form "
            f"'yyyy-mm-ddTHH:MM:SSZ' or 'yyyy-mm-ddTHH:MM:SS.sssZ'"
        )

    matched = match.group(0)
    suffix = _suffix_format(match.group("fraction"), match.group("zone"))

    parsed = _try_parse(matched, BASE_FORMAT + suffix)
    if parsed is None and match.group("zone"):
        # Second attempt without the zone designator.
        parsed = _try_parse(matched[:-1], BASE_FORMAT + suffix[:-1])
    if parsed is None:
        raise TimestampFormatError(f"{matched!r} is not a valid date and time")

    return parsed.replace(microsecond=0)
