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

"""Package record types shared by the parsers, enrichers, and renderers.

A PackageRecord is created once per requested identifier and is never
mutated: each pipeline stage returns a new record via dataclasses.replace().

Sentinels:

- UNKNOWN ("unknown"): a single field winget did not report.
- ERROR ("ERROR"): the package query failed entirely. Only the
  version-bearing fields (version, previous_version) carry it, and the
  record is flagged with failed=True.

The two sentinels are deliberately different strings so that a missing
field and a failed query can never be confused in a report.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

UNKNOWN = "unknown"
ERROR = "ERROR"


class InstallerKind(str, Enum):
    """Classified packaging format of a package's installer."""

    MSI = "MSI"
    MSP = "MSP"
    EXE = "EXE"
    ZIP = "ZIP"
    MSIX = "MSIX"
    OTHER = "OTHER"
    EMPTY = ""

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PackageRecord:
    """Metadata collected for one package identifier.

    Attributes:
        identifier: The winget package identifier that was requested.
        display_name: Name from the "Found <name> [<id>]" banner.
        version: Latest version, UNKNOWN, or ERROR.
        previous_version: Second entry of the version history, UNKNOWN, or ERROR.
        publisher: Publisher text or UNKNOWN.
        release_date: Release date text (not parsed) or UNKNOWN.
        release_notes_url: Release notes URL, if reported.
        description: First line of the package description, if reported.
        homepage: Package homepage, if reported.
        download_url: The single authoritative installer URL.
        installer_kind: Installer format chosen for download_url.
        sha256: Installer SHA-256 (first one reported).
        architectures: Distinct architecture tokens in first-seen order.
        failed: True when the package query itself failed.
        error: Failure description when failed is True.
    """

    identifier: str
    display_name: str
    version: str = UNKNOWN
    previous_version: str = UNKNOWN
    publisher: str = UNKNOWN
    release_date: str = UNKNOWN
    release_notes_url: str | None = None
    description: str | None = None
    homepage: str | None = None
    download_url: str | None = None
    installer_kind: InstallerKind = InstallerKind.EMPTY
    sha256: str | None = None
    architectures: tuple[str, ...] = ()
    failed: bool = False
    error: str | None = None

    @property
    def architecture(self) -> str:
        """Architectures joined with commas ("" when none are known)."""
        return ",".join(self.architectures)

    @property
    def has_known_version(self) -> bool:
        return self.version not in (UNKNOWN, ERROR)


def error_record(identifier: str, error: str) -> PackageRecord:
    """Build the single row reported for a package whose query failed.

    Args:
        identifier: The package identifier that could not be resolved.
        error: Human-readable reason, shown in reports.

    Returns:
        A failed PackageRecord with ERROR in its version-bearing fields.
    """
    return PackageRecord(
        identifier=identifier,
        display_name=identifier,
        version=ERROR,
        previous_version=ERROR,
        failed=True,
        error=error,
    )
