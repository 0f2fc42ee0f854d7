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

"""Fold `winget show` output into a PackageRecord.

parse_show_output() is a pure reduction: every classified line is applied to
an immutable fold state by a per-field handler, and the final state becomes
the PackageRecord. Fields do not share one merge rule:

- Version, Publisher, Release Date, Release Notes Url, Description,
  Homepage: last seen wins.
- Display name ("Found <name> ["): last seen wins, defaults to identifier.
- SHA256: first seen wins.
- Architecture: distinct tokens accumulate in first-seen order.
- Installer Url / Installer Type: installer selection (below).

Installer Selection:

A manifest may list several installers, and the declared Installer Type may
disagree with the URL extension. URLs are ranked by extension:

    NONE < OTHER (.exe, .zip, anything else) < MSI (.msi) < MSIX (.msix,
    .msixbundle, .appx, .appxbundle)

A URL is adopted when its rank reaches the state's replacement floor:

- no URL chosen yet: OTHER, so the first URL of any kind is adopted
- installer kind already MSIX: MSIX
- otherwise: max(current rank, MSI), so a later MSI or MSIX replaces an
  earlier pick but a later "other" URL never does

An Installer Type of msix/appx forces the kind to MSIX unconditionally, since
some MSIX packages are published with a .msi URL. Any other declared type
only fills in a kind that is still empty or OTHER. Once the kind is MSIX,
nothing downgrades it.

Example:
    >>> record = parse_show_output("Vendor.App", [
    ...     "Found Vendor App [Vendor.App]",
    ...     "Version: 1.2.3",
    ...     "  Installer Url: https://example.com/app.exe",
    ...     "  Installer Url: https://example.com/app.msix",
    ... ])
    >>> record.installer_kind, record.download_url
    (<InstallerKind.MSIX: 'MSIX'>, 'https://example.com/app.msix')
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, replace
from enum import IntEnum
from functools import reduce
from pathlib import PurePosixPath
import re
from urllib.parse import urlparse

from wingetaudit.logging import get_global_logger
from wingetaudit.parsing.lines import ClassifiedLine, LineField, classify_line
from wingetaudit.records import (
    UNKNOWN,
    InstallerKind,
    PackageRecord,
    error_record,
)


class UrlRank(IntEnum):
    """Precedence of an installer URL, derived from its extension."""

    NONE = 0
    OTHER = 1
    MSI = 2
    MSIX = 3


_MSIX_EXTENSIONS = frozenset({".msix", ".msixbundle", ".appx", ".appxbundle"})
_OTHER_KINDS = {".exe": InstallerKind.EXE, ".zip": InstallerKind.ZIP}

_DECLARED_MSIX = frozenset({"msix", "appx", "msixbundle", "appxbundle"})
_DECLARED_KINDS = {
    "msi": InstallerKind.MSI,
    "wix": InstallerKind.MSI,
    "exe": InstallerKind.EXE,
    "inno": InstallerKind.EXE,
    "nullsoft": InstallerKind.EXE,
    "burn": InstallerKind.EXE,
    "portable": InstallerKind.EXE,
    "zip": InstallerKind.ZIP,
}

_ARCH_SPLIT = re.compile(r"[,\s]+")


def classify_installer_url(url: str) -> tuple[UrlRank, InstallerKind]:
    """Rank an installer URL and derive its kind from the file extension.

    The query string is ignored, so "setup.msi?dl=1" still ranks as MSI.
    """
    suffix = PurePosixPath(urlparse(url).path).suffix.lower()
    if suffix in _MSIX_EXTENSIONS:
        return UrlRank.MSIX, InstallerKind.MSIX
    if suffix == ".msi":
        return UrlRank.MSI, InstallerKind.MSI
    return UrlRank.OTHER, _OTHER_KINDS.get(suffix, InstallerKind.OTHER)


@dataclass(frozen=True)
class _ShowState:
    display_name: str | None = None
    version: str | None = None
    publisher: str | None = None
    release_date: str | None = None
    release_notes_url: str | None = None
    description: str | None = None
    homepage: str | None = None
    download_url: str | None = None
    url_rank: UrlRank = UrlRank.NONE
    installer_kind: InstallerKind = InstallerKind.EMPTY
    sha256: str | None = None
    architectures: tuple[str, ...] = ()

    def replacement_floor(self) -> UrlRank:
        """Lowest URL rank that may replace the current download URL."""
        if self.download_url is None:
            return UrlRank.OTHER
        if self.installer_kind is InstallerKind.MSIX:
            return UrlRank.MSIX
        return max(self.url_rank, UrlRank.MSI)


def _last_wins(attribute: str) -> Callable[[_ShowState, str], _ShowState]:
    def apply(state: _ShowState, value: str) -> _ShowState:
        return replace(state, **{attribute: value})

    return apply


def _apply_installer_url(state: _ShowState, url: str) -> _ShowState:
    if not url:
        return state
    rank, kind = classify_installer_url(url)
    if rank < state.replacement_floor():
        return state
    if state.installer_kind is InstallerKind.MSIX:
        kind = InstallerKind.MSIX
    return replace(state, download_url=url, url_rank=rank, installer_kind=kind)


def _apply_installer_type(state: _ShowState, declared: str) -> _ShowState:
    token = declared.strip().lower()
    if token in _DECLARED_MSIX:
        return replace(state, installer_kind=InstallerKind.MSIX)
    if state.installer_kind in (InstallerKind.EMPTY, InstallerKind.OTHER):
        kind = _DECLARED_KINDS.get(token, InstallerKind.OTHER)
        return replace(state, installer_kind=kind)
    return state


def _apply_sha256(state: _ShowState, value: str) -> _ShowState:
    if state.sha256 or not value:
        return state
    return replace(state, sha256=value)


def _apply_architecture(state: _ShowState, value: str) -> _ShowState:
    tokens = list(state.architectures)
    for token in _ARCH_SPLIT.split(value.lower()):
        if token and token not in tokens:
            tokens.append(token)
    return replace(state, architectures=tuple(tokens))


_HANDLERS: dict[LineField, Callable[[_ShowState, str], _ShowState]] = {
    LineField.DISPLAY_NAME: _last_wins("display_name"),
    LineField.VERSION: _last_wins("version"),
    LineField.PUBLISHER: _last_wins("publisher"),
    LineField.RELEASE_DATE: _last_wins("release_date"),
    LineField.RELEASE_NOTES_URL: _last_wins("release_notes_url"),
    LineField.DESCRIPTION: _last_wins("description"),
    LineField.HOMEPAGE: _last_wins("homepage"),
    LineField.INSTALLER_URL: _apply_installer_url,
    LineField.INSTALLER_TYPE: _apply_installer_type,
    LineField.SHA256: _apply_sha256,
    LineField.ARCHITECTURE: _apply_architecture,
}


def _fold(state: _ShowState, line: ClassifiedLine) -> _ShowState:
    return _HANDLERS[line.field](state, line.value)


def parse_show_output(identifier: str, lines: Iterable[str]) -> PackageRecord:
    """Parse the output of `winget show` for one package.

    Args:
        identifier: The package identifier the query was issued for.
        lines: Output lines, in the order winget printed them.

    Returns:
        The populated PackageRecord. Fields never reported stay at UNKNOWN
        (or None for optional fields). If no line is recognized at all, the
        query is considered failed and an ERROR record is returned.
    """
    logger = get_global_logger()

    classified = [c for c in (classify_line(line) for line in lines) if c]
    if not classified:
        logger.debug("PARSE", f"{identifier}: no recognizable lines in show output")
        return error_record(identifier, "winget show returned no package details")

    state = reduce(_fold, classified, _ShowState())
    logger.debug(
        "PARSE",
        f"{identifier}: {len(classified)} field(s), installer "
        f"{state.installer_kind.value or '(none)'} ({state.url_rank.name})",
    )

    return PackageRecord(
        identifier=identifier,
        display_name=state.display_name or identifier,
        version=state.version or UNKNOWN,
        publisher=state.publisher or UNKNOWN,
        release_date=state.release_date or UNKNOWN,
        release_notes_url=state.release_notes_url or None,
        description=state.description or None,
        homepage=state.homepage or None,
        download_url=state.download_url or None,
        installer_kind=state.installer_kind,
        sha256=state.sha256,
        architectures=state.architectures,
    )
