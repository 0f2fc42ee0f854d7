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

"""Line classification for `winget show` output.

Each line of `winget show` is either a "Key: value" pair, the
"Found <name> [<id>]" banner, or noise (spinner characters, agreements text,
section headers such as "Installer:"). classify_line() maps a single line to
a (field, value) pair or None.

Matching rules:

- Leading and trailing whitespace is trimmed first; winget indents the
  Installer section by two spaces.
- Key prefixes are matched case-sensitively with str.startswith().
- The banner is the only anchored regex.

Example:
    >>> classify_line("  Installer Url: https://example.com/app.msi")
    ClassifiedLine(field=<LineField.INSTALLER_URL: 'Installer Url'>, value='https://example.com/app.msi')
    >>> classify_line("Found Google Chrome [Google.Chrome]").value
    'Google Chrome'
    >>> classify_line("License: MIT") is None
    True
"""

from __future__ import annotations

from enum import Enum
import re
from typing import NamedTuple


class LineField(str, Enum):
    """Fields recognized in `winget show` output."""

    DISPLAY_NAME = "Display Name"
    VERSION = "Version"
    PUBLISHER = "Publisher"
    RELEASE_DATE = "Release Date"
    RELEASE_NOTES_URL = "Release Notes Url"
    DESCRIPTION = "Description"
    HOMEPAGE = "Homepage"
    INSTALLER_URL = "Installer Url"
    INSTALLER_TYPE = "Installer Type"
    SHA256 = "SHA256"
    ARCHITECTURE = "Architecture"


class ClassifiedLine(NamedTuple):
    field: LineField
    value: str


# Checked in order; more specific prefixes first where they could overlap.
_PREFIXES: tuple[tuple[str, LineField], ...] = (
    ("Version:", LineField.VERSION),
    ("Publisher:", LineField.PUBLISHER),
    ("Release Date:", LineField.RELEASE_DATE),
    ("Release Notes Url:", LineField.RELEASE_NOTES_URL),
    ("Description:", LineField.DESCRIPTION),
    ("Homepage:", LineField.HOMEPAGE),
    ("Installer Url:", LineField.INSTALLER_URL),
    ("Installer Type:", LineField.INSTALLER_TYPE),
    ("Installer SHA256:", LineField.SHA256),
    ("SHA256:", LineField.SHA256),
    ("Installer Architecture:", LineField.ARCHITECTURE),
    ("Architecture:", LineField.ARCHITECTURE),
)

_FOUND_RE = re.compile(r"^Found (?P<name>.+?) \[")


def classify_line(line: str) -> ClassifiedLine | None:
    """Classify one line of `winget show` output.

    Args:
        line: Raw output line (may be blank or indented).

    Returns:
        The recognized field and its trimmed value, or None when the line is
        blank or not part of the recognized vocabulary.
    """
    text = line.strip()
    if not text:
        return None

    match = _FOUND_RE.match(text)
    if match:
        return ClassifiedLine(LineField.DISPLAY_NAME, match.group("name").strip())

    for prefix, field in _PREFIXES:
        if text.startswith(prefix):
            return ClassifiedLine(field, text[len(prefix) :].strip())

    return None
