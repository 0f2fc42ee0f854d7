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

"""Resolve Adobe Acrobat Reader installers from Adobe's download host.

The winget manifest for Acrobat Reader points at a full installer, while
enterprise deployments usually want the cumulative MSP patch for the same
release. Adobe publishes both under a path built from the version with its
dots removed:

    25.001.20997 -> 2500120997
    .../AcrobatDC/2500120997/AcroRdrDCUpd2500120997_MUI.msp
    .../AcrobatDC/2500120997/AcroRdrDC2500120997_MUI.exe

Candidates are probed in that order with a HEAD request. The first one that
exists replaces the record's download URL and installer kind. When neither
exists the winget-derived values are kept; this resolver only replaces,
never removes.

Example:
    >>> flatten_version("25.001.20997")
    '2500120997'
    >>> [kind for _, kind in candidate_installers("25.001.20997")]
    [<InstallerKind.MSP: 'MSP'>, <InstallerKind.EXE: 'EXE'>]
"""

from __future__ import annotations

from dataclasses import replace
import re

from wingetaudit.io.probe import DEFAULT_PROBE_TIMEOUT, Probe, head_request
from wingetaudit.logging import get_global_logger
from wingetaudit.records import InstallerKind, PackageRecord

ADOBE_READER_ID_RE = re.compile(r"^Adobe\.Acrobat\.Reader", re.IGNORECASE)

ADOBE_DOWNLOAD_BASE = "https://ardownload2.adobe.com/pub/adobe/reader/win/AcrobatDC"
MSP_URL_TEMPLATE = ADOBE_DOWNLOAD_BASE + "/{token}/AcroRdrDCUpd{token}_MUI.msp"
EXE_URL_TEMPLATE = ADOBE_DOWNLOAD_BASE + "/{token}/AcroRdrDC{token}_MUI.exe"


def is_adobe_reader(identifier: str) -> bool:
    return bool(ADOBE_READER_ID_RE.match(identifier))


def flatten_version(version: str) -> str:
    """Remove every "." from version ("25.001.20997" -> "2500120997")."""
    return version.replace(".", "")


def candidate_installers(version: str) -> tuple[tuple[str, InstallerKind], ...]:
    """Build the candidate (url, kind) pairs for version, in probe order."""
    token = flatten_version(version)
    return (
        (MSP_URL_TEMPLATE.format(token=token), InstallerKind.MSP),
        (EXE_URL_TEMPLATE.format(token=token), InstallerKind.EXE),
    )


def resolve_adobe_installer(
    record: PackageRecord,
    probe: Probe = head_request,
    timeout: float = DEFAULT_PROBE_TIMEOUT,
) -> PackageRecord:
    """Replace an Acrobat Reader record's installer with a verified Adobe URL.

    Args:
        record: Parsed record. Records that are not Acrobat Reader, or whose
            version is unknown or failed, are returned unchanged.
        probe: Existence check, called as probe(url, timeout). Any exception
            it raises counts as "not found".
        timeout: Seconds allowed per probe.

    Returns:
        A record pointing at the first candidate that exists, or the input
        record if none do.
    """
    logger = get_global_logger()

    if not is_adobe_reader(record.identifier) or not record.has_known_version:
        return record

    for url, kind in candidate_installers(record.version):
        try:
            found = probe(url, timeout)
        except Exception as err:
            logger.debug("ADOBE", f"Probe raised for {url}: {err}")
            found = False

        if found:
            logger.verbose("ADOBE", f"{record.identifier}: using {kind.value} {url}")
            return replace(record, download_url=url, installer_kind=kind)
        logger.debug("ADOBE", f"Not found: {url}")

    logger.verbose(
        "ADOBE",
        f"{record.identifier}: no Adobe installer found for {record.version}, "
        "keeping winget installer",
    )
    return record
