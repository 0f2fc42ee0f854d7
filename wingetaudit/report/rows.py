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

"""Flat row shape shared by every report format."""

from __future__ import annotations

from wingetaudit.records import PackageRecord

# (column title, record attribute)
REPORT_COLUMNS: tuple[tuple[str, str], ...] = (
    ("Identifier", "identifier"),
    ("Name", "display_name"),
    ("Version", "version"),
    ("Previous Version", "previous_version"),
    ("Publisher", "publisher"),
    ("Release Date", "release_date"),
    ("Installer Type", "installer_kind"),
    ("Architecture", "architecture"),
    ("Download URL", "download_url"),
    ("SHA256", "sha256"),
    ("Release Notes", "release_notes_url"),
    ("Homepage", "homepage"),
    ("Description", "description"),
    ("Error", "error"),
)


def column_titles() -> list[str]:
    return [title for title, _ in REPORT_COLUMNS]


def record_to_row(record: PackageRecord) -> dict[str, str]:
    """Flatten a record into column title -> display text (None becomes "")."""
    row: dict[str, str] = {}
    for title, attribute in REPORT_COLUMNS:
        value = getattr(record, attribute)
        row[title] = "" if value is None else str(value)
    return row
