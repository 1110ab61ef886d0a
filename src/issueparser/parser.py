from __future__ import annotations

import re
from collections.abc import Mapping

from .markers import STATUS_MARKERS, TYPE_MARKERS
from .models import Issue

_id_re = re.compile(r"#([0-9]+)")
_created_re = re.compile(r"created (.*?) by (.*?)(?:\s|$)")
_updated_re = re.compile(r"updated (.*?)(?:\s|$)")
# whitespace plus the byte order mark, which str.strip keeps
_trim_re = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")

ASSIGNED_PREFIX = "Assigned to"


def _trim(text: str) -> str:
    return _trim_re.sub("", text)


def _contains_any(line: str, markers: Mapping[str, str]) -> bool:
    return any(marker in line for marker in markers)


def _apply_fields(
    issue: Issue,
    line: str,
    type_markers: Mapping[str, str],
    status_markers: Mapping[str, str],
) -> None:
    # checks are independent; one line may set several fields
    if "created" in line and "by" in line:
        m = _created_re.search(line)
        if m:
            issue.created_at = m.group(1)
            issue.created_by = m.group(2)
    if "updated" in line:
        m = _updated_re.search(line)
        if m:
            issue.updated_at = m.group(1)
    if ASSIGNED_PREFIX in line:
        issue.assigned_to = _trim(line.replace(ASSIGNED_PREFIX, "", 1))
    if _contains_any(line, type_markers):
        issue.type = line
    if _contains_any(line, status_markers):
        issue.status = line


def extract_issues(
    text: str,
    *,
    type_markers: Mapping[str, str] = TYPE_MARKERS,
    status_markers: Mapping[str, str] = STATUS_MARKERS,
) -> list[Issue]:
    """Extract issue records from free-form pasted text.

    A line starting with ``#`` that contains ``#<digits>`` opens a new block;
    the line before it is the title. Field lines inside a block fill in the
    open record, which is emitted when the next block opens or input ends.
    Unrecognized lines are ignored, so this never raises for ``str`` input.
    """
    lines = text.split("\n")
    issues: list[Issue] = []
    current: Issue | None = None
    for i, raw in enumerate(lines):
        line = _trim(raw)
        if line.startswith("#"):
            m = _id_re.search(line)
            if m:
                if current is not None:
                    issues.append(current)
                current = Issue(
                    id=int(m.group(1)),
                    title=_trim(lines[i - 1]) if i > 0 else "",
                )
        if current is not None:
            _apply_fields(current, line, type_markers, status_markers)
    if current is not None:
        issues.append(current)
    return issues


__all__ = ["extract_issues", "ASSIGNED_PREFIX"]
