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

"""Report renderers for checked package records.

All renderers consume the same flat row shape from record_to_row(), so the
CSV, HTML, and console outputs always agree on column names and values.

Modules:

rows : module
    REPORT_COLUMNS and record_to_row().
csv_writer : module
    write_csv() - one row per package, header row first.
html_writer : module
    render_html() / write_html() - a self-contained HTML table.
console : module
    print_summary() / print_record() - CLI output blocks.
"""

from .console import print_record, print_summary
from .csv_writer import write_csv
from .html_writer import render_html, write_html
from .rows import REPORT_COLUMNS, column_titles, record_to_row

__all__ = [
    "REPORT_COLUMNS",
    "column_titles",
    "print_record",
    "print_summary",
    "record_to_row",
    "render_html",
    "write_csv",
    "write_html",
]
