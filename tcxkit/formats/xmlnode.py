"""Small helpers for walking an ElementTree document.

TCX files normally carry the Garmin default namespace, so element tags
arrive as ``{http://...}Name``. Lookups here compare local names only,
which lets the same code read namespaced and bare documents.
"""

import logging
import xml.etree.ElementTree as ET
from typing import Optional

from tcxkit.errors import ValueParseError

logger = logging.getLogger(__name__)


def local_name(tag) -> str:
    """Return ``tag`` without its ``{namespace}`` prefix."""
    if not isinstance(tag, str):
        # Comments and processing instructions use callables as tags.
        return ""
    return tag.rsplit("}", 1)[-1]


def child_elements(node: ET.Element) -> list[ET.Element]:
    return [child for child in node if isinstance(child.tag, str)]


def first_element(node: ET.Element) -> Optional[ET.Element]:
    children = child_elements(node)
    return children[0] if children else None


def find_child(node: ET.Element, name: str, warn_if_missing: bool = True) -> Optional[ET.Element]:
    """Return the first immediate child of ``node`` named ``name``.

    Returns ``None`` when there is no such child. A warning is logged in
    that case unless ``warn_if_missing`` is false; absence is never raised.
    """
    for child in child_elements(node):
        if local_name(child.tag) == name:
            return child
    if warn_if_missing:
        logger.warning("Can't find %s in %s", name, local_name(node.tag))
    return None


def coerce_or_default(value_type, node: Optional[ET.Element]):
    """Convert the text of ``node`` to ``value_type``, or its zero if ``node`` is None.

    Only absence is defaulted. Text that is present but does not parse
    raises ``ValueParseError``.
    """
    if node is None:
        return value_type(0)
    text = (node.text or "").strip()
    try:
        return value_type(text)
    except ValueError as e:
        raise ValueParseError(
            f"Invalid {value_type.__name__} value {text!r} in {local_name(node.tag)}"
        ) from e
