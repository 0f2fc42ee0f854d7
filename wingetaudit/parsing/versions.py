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

"""Parse the version table printed by `winget show --versions`.

winget prints a banner, a "Version" column header, a dashed separator, then
one version per line, most recent first:

    Found Google Chrome [Google.Chrome]
    Version
    -------------
    131.0.6778.86
    131.0.6778.70
    130.0.6723.117

The versions are returned in the order winget printed them. They are not
re-sorted; winget's own ordering is trusted.
"""

from __future__ import annotations

from collections.abc import Iterable

from wingetaudit.records import UNKNOWN

_NOISE_PREFIXES = ("Found", "Name", "Available")


def _is_separator(text: str) -> bool:
    return text.startswith("-") and not text.strip("-")


def parse_version_history(lines: Iterable[str]) -> tuple[str, ...]:
    """Collect the version strings listed after the table separator.

    Args:
        lines: Output lines of `winget show --versions`.

    Returns:
        Versions in the order printed (latest first). Empty if no separator
        line was found.
    """
    versions: list[str] = []
    header_found = False
    for line in lines:
        text = line.strip()
        if not text:
            continue
        if _is_separator(text):
            header_found = True
            continue
        if text == "Version" or text.startswith(_NOISE_PREFIXES):
            continue
        if header_found:
            versions.append(text)
    return tuple(versions)


def previous_version(lines: Iterable[str]) -> str:
    """Return the version released before the latest one.

    The first entry of the table is the latest version, which the show query
    already reports, so the second entry is the one of interest.

    Returns:
        The second listed version, or UNKNOWN if fewer than two are listed.
    """
    versions = parse_version_history(lines)
    if len(versions) < 2:
        return UNKNOWN
    return versions[1]
