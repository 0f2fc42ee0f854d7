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

"""Infer a missing architecture from the installer URL."""

from __future__ import annotations

from dataclasses import replace
import re

from wingetaudit.logging import get_global_logger
from wingetaudit.records import PackageRecord

# Priority order matters: a URL mentioning both x64 and arm64 is x64.
_URL_ARCH_PATTERNS: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"x64|amd64|win64", re.IGNORECASE), "x64"),
    (re.compile(r"x86|win32|i386", re.IGNORECASE), "x86"),
    (re.compile(r"arm64|aarch64", re.IGNORECASE), "arm64"),
)


def infer_architecture(url: str) -> str | None:
    """Return the first architecture whose pattern appears in url, or None."""
    for pattern, arch in _URL_ARCH_PATTERNS:
        if pattern.search(url):
            return arch
    return None


def apply_architecture(record: PackageRecord) -> PackageRecord:
    """Fill in architecture from the download URL when winget reported none.

    Records that already list an architecture, or have no download URL, are
    returned unchanged.
    """
    if record.architectures or not record.download_url:
        return record

    arch = infer_architecture(record.download_url)
    if arch is None:
        return record

    get_global_logger().debug(
        "ARCH", f"{record.identifier}: inferred {arch} from {record.download_url}"
    )
    return replace(record, architectures=(arch,))
