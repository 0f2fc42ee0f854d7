"""
Pytest configuration and shared fixtures for wingetaudit tests.

This module provides reusable fixtures and test utilities used across
the test suite: canned winget output and a fake query client.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import pytest
import yaml

from wingetaudit.exceptions import QueryError


class FakeQuery:
    """PackageQuery double serving canned output per identifier.

    An identifier missing from `show` raises QueryError, the same way
    WingetClient reports "No package found". A value that is an exception
    instance is raised instead of returned.
    """

    def __init__(
        self,
        show: dict[str, Any] | None = None,
        versions: dict[str, Any] | None = None,
    ) -> None:
        self._show = show or {}
        self._versions = versions or {}
        self.calls: list[tuple[str, str]] = []

    def _answer(self, table: dict[str, Any], identifier: str) -> list[str]:
        if identifier not in table:
            raise QueryError(f"No package found: {identifier}", identifier)
        value = table[identifier]
        if isinstance(value, Exception):
            raise value
        return list(value)

    def show(self, identifier: str) -> list[str]:
        self.calls.append(("show", identifier))
        return self._answer(self._show, identifier)

    def show_versions(self, identifier: str) -> list[str]:
        self.calls.append(("versions", identifier))
        return self._answer(self._versions, identifier)


@pytest.fixture
def chrome_show_lines() -> list[str]:
    """`winget show --id Google.Chrome` output."""
    return [
        "Found Google Chrome [Google.Chrome]",
        "Version: 131.0.6778.86",
        "Publisher: Google LLC",
        "Publisher Url: https://www.google.com/",
        "Author: Google LLC",
        "Moniker: chrome",
        "Description: A more simple, secure, and faster web browser than ever.",
        "Homepage: https://www.google.com/chrome",
        "License: Freeware",
        "Release Notes Url: https://chromereleases.googleblog.com/",
        "Tags:",
        "  browser",
        "  chromium",
        "Installer:",
        "  Installer Type: wix",
        "  Installer Url: https://dl.google.com/dl/chrome/install/googlechromestandaloneenterprise64.msi",
        "  Installer SHA256: 5c3e0f1c1e1e8e6bb2a7d7fc0b5b5f2d0a4b1c3d2e9f8a7b6c5d4e3f2a1b0c9d",
        "  Release Date: 2024-11-19",
        "  Offline Distribution Supported: true",
    ]


@pytest.fixture
def chrome_versions_lines() -> list[str]:
    """`winget show --id Google.Chrome --versions` output."""
    return [
        "Found Google Chrome [Google.Chrome]",
        "Version",
        "-------------",
        "131.0.6778.86",
        "131.0.6778.70",
        "130.0.6723.117",
    ]


@pytest.fixture
def adobe_show_lines() -> list[str]:
    """`winget show --id Adobe.Acrobat.Reader.64-bit` output."""
    return [
        "Found Adobe Acrobat Reader DC (64-bit) [Adobe.Acrobat.Reader.64-bit]",
        "Version: 25.001.20997",
        "Publisher: Adobe",
        "Installer:",
        "  Installer Type: exe",
        "  Architecture: x64",
        "  Installer Url: https://ardownload2.adobe.com/pub/adobe/acrobat/win/AcrobatDC/2500120997/AcroRdrDCx642500120997_MUI.exe",
        "  Installer SHA256: 0f1e2d3c4b5a69788796a5b4c3d2e1f00f1e2d3c4b5a69788796a5b4c3d2e1f0",
    ]


@pytest.fixture
def fake_query():
    """Factory for FakeQuery instances."""
    return FakeQuery


@pytest.fixture
def create_yaml_file(tmp_path: Path):
    """
    Factory fixture for creating temporary YAML files.

    Usage:
        yaml_path = create_yaml_file("packages.yaml", {"packages": [...]})
    """

    def _create(filename: str, data: Any) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path

    return _create
