"""Category and status marker tables.

Each table maps the literal substring searched for in a line to a stable
category key. Tables are plain dicts so configuration can replace them
wholesale (see :func:`issueparser.config.load_config`).
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from types import MappingProxyType

TYPE_MARKERS: Mapping[str, str] = MappingProxyType(
    {
        "🔴 Epic": "epic",
        "🔵 User Story": "user_story",
        "⚫️ Change": "change",
        "🚧 Risk": "risk",
        "🐞 Bug": "bug",
    }
)

STATUS_MARKERS: Mapping[str, str] = MappingProxyType(
    {
        "In Testing": "in_testing",
        "Done": "done",
        "Accepted for development": "accepted_for_development",
        "More Information Required": "more_information_required",
        "Resolved": "resolved",
        "Escalated": "escalated",
        "Canceled": "canceled",
    }
)

_KEY_STRIP_RE = re.compile(r"[^a-z0-9]+")


def marker_key(marker: str) -> str:
    """Derive a lower_snake key from a marker label (emoji are dropped)."""
    return _KEY_STRIP_RE.sub("_", marker.lower()).strip("_")


def match_marker(line: str, table: Mapping[str, str]) -> str | None:
    """Return the category key of the first marker contained in ``line``."""
    if not line:
        return None
    for marker, key in table.items():
        if marker in line:
            return key
    return None


def build_marker_table(raw: Mapping[str, str] | Iterable[str]) -> dict[str, str]:
    if isinstance(raw, Mapping):
        return {str(marker): str(key) for marker, key in raw.items() if str(marker)}
    return {str(marker): marker_key(str(marker)) for marker in raw if str(marker)}


__all__ = [
    "TYPE_MARKERS",
    "STATUS_MARKERS",
    "build_marker_table",
    "marker_key",
    "match_marker",
]
