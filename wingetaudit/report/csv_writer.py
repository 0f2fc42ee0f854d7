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

"""CSV report output."""

from __future__ import annotations

from collections.abc import Iterable
import csv
import io
from pathlib import Path

from wingetaudit.io.files import atomic_write_text
from wingetaudit.records import PackageRecord

from .rows import column_titles, record_to_row


def render_csv(records: Iterable[PackageRecord]) -> str:
    """Render records as CSV text with a header row."""
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=column_titles())
    writer.writeheader()
    for record in records:
        writer.writerow(record_to_row(record))
    return buffer.getvalue()


def write_csv(records: Iterable[PackageRecord], path: Path) -> Path:
    """Write records to a UTF-8 CSV file.

    Args:
        records: Checked records, in report order.
        path: Destination file (parent directories are created).

    Returns:
        The destination path.

    Raises:
        ReportError: If the file cannot be written.
    """
    return atomic_write_text(Path(path), render_csv(records), newline="")
