# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""HTML report output.

render_html() produces one self-contained page (inline CSS, no scripts):
a summary line followed by a table with one row per package. Every value is
HTML-escaped; URLs become links. Rows for failed queries carry the "error"
class so they stand out.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime
from html import escape
from pathlib import Path

from wingetaudit.io.files import atomic_write_text
from wingetaudit.records import PackageRecord

from .rows import column_titles, record_to_row

_LINK_COLUMNS = frozenset({"Download URL", "Release Notes", "Homepage"})

_STYLE = """
body { font-family: "Segoe UI", Arial, sans-serif; margin: 1.5em; color: #222; }
h1 { font-size: 1.4em; }
p.summary { color: #555; }
table { border-collapse: collapse; width: 100%; font-size: 0.85em; }
th, td { border: 1px solid #ccc; padding: 4px 6px; text-align: left; vertical-align: top; }
th { background: #2b579a; color: #fff; position: sticky; top: 0; }
tr:nth-child(even) td { background: #f4f6fa; }
tr.error td { background: #fde2e1; }
td.hash { font-family: Consolas, monospace; word-break: break-all; }
""".strip()


def _cell(title: str, value: str) -> str:
    if not value:
        return "<td></td>"
    if title in _LINK_COLUMNS:
        return f'<td><a href="{escape(value, quote=True)}">{escape(value)}</a></td>'
    if title == "SHA256":
        return f'<td class="hash">{escape(value)}</td>'
    return f"<td>{escape(value)}</td>"


def render_html(
    records: Sequence[PackageRecord],
    *,
    title: str = "winget package report",
    generated_at: datetime | None = None,
) -> str:
    """Render records as a complete HTML document.

    Args:
        records: Checked records, in report order.
        title: Page title and heading.
        generated_at: Timestamp shown in the summary (defaults to now).

    Returns:
        The HTML document as a string.
    """
    generated_at = generated_at or datetime.now()
    failed = sum(1 for record in records if record.failed)
    titles = column_titles()

    parts = [
        "<!DOCTYPE html>",
        '<html lang="en">',
        "<head>",
        '<meta charset="utf-8">',
        f"<title>{escape(title)}</title>",
        f"<style>\n{_STYLE}\n</style>",
        "</head>",
        "<body>",
        f"<h1>{escape(title)}</h1>",
        (
            f'<p class="summary">Generated {generated_at:%Y-%m-%d %H:%M} - '
            f"{len(records)} package(s), {len(records) - failed} succeeded, "
            f"{failed} failed</p>"
        ),
        "<table>",
        "<thead><tr>"
        + "".join(f"<th>{escape(t)}</th>" for t in titles)
        + "</tr></thead>",
        "<tbody>",
    ]
    for record in records:
        row = record_to_row(record)
        css = ' class="error"' if record.failed else ""
        cells = "".join(_cell(t, row[t]) for t in titles)
        parts.append(f"<tr{css}>{cells}</tr>")
    parts += ["</tbody>", "</table>", "</body>", "</html>", ""]
    return "\n".join(parts)


def write_html(records: Iterable[PackageRecord], path: Path, **kwargs) -> Path:
    """Render records to an HTML file.

    Raises:
        ReportError: If the file cannot be written.
    """
    return atomic_write_text(Path(path), render_html(list(records), **kwargs))
