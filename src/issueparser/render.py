"""Table rendering for extracted issues (terminal text and standalone HTML)."""

from __future__ import annotations

import unicodedata
from collections.abc import Sequence

from jinja2 import Environment

from .models import Issue

COLUMNS: tuple[str, ...] = (
    "#",
    "Title",
    "Type",
    "Status",
    "Assigned To",
    "Created By",
    "Updated",
)

PLACEHOLDER = "-"


def issue_row(issue: Issue, placeholder: str = PLACEHOLDER) -> tuple[str, ...]:
    return (
        str(issue.id),
        issue.title,
        issue.type,
        issue.status,
        issue.assigned_to or placeholder,
        issue.created_by,
        issue.updated_at,
    )


def display_width(text: str) -> int:
    """Terminal columns taken by ``text``: wide and emoji glyphs count 2, marks 0."""
    width = 0
    last = 0
    for ch in text:
        if ch == "\ufe0f":
            # emoji presentation widens a narrow base such as U+26A0
            width += 1 if last == 1 else 0
            last = 2 if last else 0
            continue
        if unicodedata.combining(ch) or "\ufe00" <= ch <= "\ufe0e" or ch == "\u200d":
            continue
        last = 2 if unicodedata.east_asian_width(ch) in ("W", "F") else 1
        width += last
    return width


def _pad(cell: str, width: int) -> str:
    return cell + " " * (width - display_width(cell))


def render_table(issues: Sequence[Issue], placeholder: str = PLACEHOLDER) -> str:
    rows = [issue_row(issue, placeholder) for issue in issues]
    widths = [display_width(col) for col in COLUMNS]
    for row in rows:
        widths = [max(w, display_width(cell)) for w, cell in zip(widths, row)]

    def _fmt(cells: Sequence[str]) -> str:
        return "  ".join(_pad(cell, w) for cell, w in zip(cells, widths)).rstrip()

    lines = [_fmt(COLUMNS), "  ".join("─" * w for w in widths)]
    lines.extend(_fmt(row) for row in rows)
    return "\n".join(lines) + "\n"


_env = Environment(autoescape=True, keep_trailing_newline=True)

_HTML_TEMPLATE = _env.from_string(
    """\
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<title>{{ title }}</title>
<style>
body { font-family: system-ui, sans-serif; background: #f9fafb; color: #111827; margin: 2rem; }
table { border-collapse: collapse; width: 100%; }
th { text-align: left; font-size: 0.75rem; text-transform: uppercase; color: #6b7280; padding: 0.75rem 1.5rem; background: #f9fafb; }
td { padding: 1rem 1.5rem; font-size: 0.875rem; color: #6b7280; border-top: 1px solid #e5e7eb; }
td.id { color: #111827; font-weight: 500; }
tr.even { background: #ffffff; }
tr.odd { background: #f9fafb; }
</style>
</head>
<body>
<h3>{{ title }}</h3>
<table>
<thead><tr>{% for col in columns %}<th scope="col">{{ col }}</th>{% endfor %}</tr></thead>
<tbody>
{% for row in rows %}<tr class="{{ loop.cycle('even', 'odd') }}"><td class="id">{{ row[0] }}</td>
{%- for cell in row[1:] %}<td>{{ cell }}</td>{% endfor %}</tr>
{% endfor %}</tbody>
</table>
</body>
</html>
"""
)


def render_html(
    issues: Sequence[Issue],
    title: str = "Processed Issues",
    placeholder: str = PLACEHOLDER,
) -> str:
    """Render a standalone HTML document with one table row per issue.

    Every cell goes through Jinja2 autoescaping, so pasted markup in titles or
    assignees shows up as text.
    """
    return _HTML_TEMPLATE.render(
        title=title,
        columns=COLUMNS,
        rows=[issue_row(issue, placeholder) for issue in issues],
    )


__all__ = ["COLUMNS", "PLACEHOLDER", "display_width", "issue_row", "render_html", "render_table"]
