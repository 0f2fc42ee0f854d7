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

"""Parsers for winget text output.

Modules:

lines : module
    Classify a single "Key: value" line of `winget show`.
show : module
    Fold `winget show` output into a PackageRecord, including installer
    selection.
versions : module
    Parse the version table of `winget show --versions`.

These parsers never touch the network or spawn processes; they operate on
lines already captured by a query client.
"""

from .lines import ClassifiedLine, LineField, classify_line
from .show import UrlRank, classify_installer_url, parse_show_output
from .versions import parse_version_history, previous_version

__all__ = [
    "ClassifiedLine",
    "LineField",
    "UrlRank",
    "classify_line",
    "classify_installer_url",
    "parse_show_output",
    "parse_version_history",
    "previous_version",
]
