"""
Tests for wingetaudit.parsing module.

Tests the winget text parsers including:
- Line classification
- Field merge rules (last wins, first wins, accumulate)
- Installer URL/type precedence
- Version history parsing
"""

from __future__ import annotations

import pytest

from wingetaudit.parsing.lines import LineField, classify_line
from wingetaudit.parsing.show import UrlRank, classify_installer_url, parse_show_output
from wingetaudit.parsing.versions import parse_version_history, previous_version
from wingetaudit.records import ERROR, UNKNOWN, InstallerKind

pytestmark = pytest.mark.unit


class TestClassifyLine:
    """Tests for single-line classification."""

    @pytest.mark.parametrize(
        "line, field, value",
        [
            ("Version: 1.2.3", LineField.VERSION, "1.2.3"),
            ("Publisher: Google LLC", LineField.PUBLISHER, "Google LLC"),
            ("Release Date: 2024-11-19", LineField.RELEASE_DATE, "2024-11-19"),
            (
                "Release Notes Url: https://example.com/notes",
                LineField.RELEASE_NOTES_URL,
                "https://example.com/notes",
            ),
            ("Description: A browser", LineField.DESCRIPTION, "A browser"),
            ("Homepage: https://example.com", LineField.HOMEPAGE, "https://example.com"),
            (
                "  Installer Url: https://example.com/a.msi",
                LineField.INSTALLER_URL,
                "https://example.com/a.msi",
            ),
            ("  Installer Type: msi", LineField.INSTALLER_TYPE, "msi"),
            ("  Installer SHA256: ABCDEF", LineField.SHA256, "ABCDEF"),
            ("SHA256: abcdef", LineField.SHA256, "abcdef"),
            ("  Architecture: x64", LineField.ARCHITECTURE, "x64"),
            ("Installer Architecture: arm64", LineField.ARCHITECTURE, "arm64"),
        ],
    )
    def test_recognized_prefixes(self, line, field, value):
        """Test that every field prefix is recognized and trimmed."""
        classified = classify_line(line)
        assert classified is not None
        assert classified.field is field
        assert classified.value == value

    def test_found_banner_gives_display_name(self):
        """Test that the Found banner yields the display name."""
        classified = classify_line("Found Google Chrome [Google.Chrome]")
        assert classified.field is LineField.DISPLAY_NAME
        assert classified.value == "Google Chrome"

    def test_found_banner_must_start_line(self):
        """Test that the banner pattern is anchored."""
        assert classify_line("Not Found Something [X]") is None

    @pytest.mark.parametrize(
        "line",
        [
            "",
            "   ",
            "License: MIT",
            "Publisher Url: https://example.com",
            "Minimum OS Version: 10.0.0.0",
            "Installer:",
            "version: 1.0",
        ],
    )
    def test_unrecognized_lines(self, line):
        """Test that blank, unknown, and wrong-case lines are ignored."""
        assert classify_line(line) is None


class TestClassifyInstallerUrl:
    """Tests for URL ranking by extension."""

    @pytest.mark.parametrize(
        "url, rank, kind",
        [
            ("https://x/app.msix", UrlRank.MSIX, InstallerKind.MSIX),
            ("https://x/app.MsixBundle", UrlRank.MSIX, InstallerKind.MSIX),
            ("https://x/app.appx", UrlRank.MSIX, InstallerKind.MSIX),
            ("https://x/app.appxbundle", UrlRank.MSIX, InstallerKind.MSIX),
            ("https://x/app.msi?download=1", UrlRank.MSI, InstallerKind.MSI),
            ("https://x/setup.exe", UrlRank.OTHER, InstallerKind.EXE),
            ("https://x/portable.zip", UrlRank.OTHER, InstallerKind.ZIP),
            ("https://x/download?id=5", UrlRank.OTHER, InstallerKind.OTHER),
        ],
    )
    def test_rank_and_kind(self, url, rank, kind):
        assert classify_installer_url(url) == (rank, kind)


class TestParseShowOutput:
    """Tests for folding show output into a record."""

    def test_full_record(self, chrome_show_lines):
        """Test a realistic winget show output."""
        record = parse_show_output("Google.Chrome", chrome_show_lines)

        assert record.identifier == "Google.Chrome"
        assert record.display_name == "Google Chrome"
        assert record.version == "131.0.6778.86"
        assert record.publisher == "Google LLC"
        assert record.release_date == "2024-11-19"
        assert record.release_notes_url == "https://chromereleases.googleblog.com/"
        assert record.homepage == "https://www.google.com/chrome"
        assert record.description.startswith("A more simple")
        assert record.download_url.endswith("googlechromestandaloneenterprise64.msi")
        assert record.installer_kind is InstallerKind.MSI
        assert record.sha256.startswith("5c3e0f1c")
        assert record.previous_version == UNKNOWN
        assert not record.failed

    def test_missing_fields_use_sentinels(self):
        """Test that fields never reported stay at their defaults."""
        record = parse_show_output("Vendor.App", ["Version: 2.0"])

        assert record.display_name == "Vendor.App"
        assert record.publisher == UNKNOWN
        assert record.release_date == UNKNOWN
        assert record.homepage is None
        assert record.download_url is None
        assert record.installer_kind is InstallerKind.EMPTY
        assert record.architecture == ""

    def test_last_seen_wins_for_simple_fields(self):
        """Test last-seen-wins for version, publisher and display name."""
        record = parse_show_output(
            "Vendor.App",
            [
                "Found First Name [Vendor.App]",
                "Version: 1.0",
                "Publisher: Old",
                "Found Second Name [Vendor.App]",
                "Version: 2.0",
                "Publisher: New",
            ],
        )
        assert record.display_name == "Second Name"
        assert record.version == "2.0"
        assert record.publisher == "New"

    def test_sha256_first_seen_wins(self):
        """Test that the first SHA256 is kept."""
        record = parse_show_output(
            "Vendor.App",
            ["Installer SHA256: aaaa", "SHA256: bbbb", "Installer SHA256: cccc"],
        )
        assert record.sha256 == "aaaa"

    def test_architecture_accumulates_distinct_tokens(self):
        """Test that architectures are de-duplicated in first-seen order."""
        record = parse_show_output(
            "Vendor.App",
            [
                "Architecture: x64",
                "Installer Architecture: arm64",
                "Architecture: x64",
                "Architecture: x86",
            ],
        )
        assert record.architectures == ("x64", "arm64", "x86")
        assert record.architecture == "x64,arm64,x86"

    def test_exe_then_msix_prefers_msix(self):
        """Test that an MSIX URL beats an earlier EXE URL."""
        record = parse_show_output(
            "Vendor.App",
            ["Installer Url: https://x/setup.exe", "Installer Url: https://x/app.msix"],
        )
        assert record.installer_kind is InstallerKind.MSIX
        assert record.download_url == "https://x/app.msix"

    def test_msix_then_exe_keeps_msix(self):
        """Test that precedence, not recency, decides."""
        record = parse_show_output(
            "Vendor.App",
            ["Installer Url: https://x/app.msix", "Installer Url: https://x/setup.exe"],
        )
        assert record.installer_kind is InstallerKind.MSIX
        assert record.download_url == "https://x/app.msix"

    def test_msi_after_msix_is_ignored(self):
        """Test that an MSI URL never downgrades a chosen MSIX URL."""
        record = parse_show_output(
            "Vendor.App",
            [
                "Installer Url: https://x/app.msixbundle",
                "Installer Type: msi",
                "Installer Url: https://x/app.msi",
            ],
        )
        assert record.installer_kind is InstallerKind.MSIX
        assert record.download_url == "https://x/app.msixbundle"

    def test_msi_replaces_earlier_exe(self):
        """Test that an MSI URL beats an earlier EXE URL."""
        record = parse_show_output(
            "Vendor.App",
            ["Installer Url: https://x/setup.exe", "Installer Url: https://x/app.msi"],
        )
        assert record.installer_kind is InstallerKind.MSI
        assert record.download_url == "https://x/app.msi"

    def test_first_other_url_wins(self):
        """Test that a later 'other' URL does not replace the first."""
        record = parse_show_output(
            "Vendor.App",
            ["Installer Url: https://x/setup.exe", "Installer Url: https://x/app.zip"],
        )
        assert record.installer_kind is InstallerKind.EXE
        assert record.download_url == "https://x/setup.exe"

    def test_declared_msi_then_msix_url_gives_msix(self):
        """Test that URL precedence decides when only MSI is declared."""
        record = parse_show_output(
            "Vendor.App",
            ["Installer Type: msi", "Installer Url: https://x/app.msix"],
        )
        assert record.installer_kind is InstallerKind.MSIX
        assert record.download_url == "https://x/app.msix"

    def test_declared_msix_overrides_msi_url(self):
        """Test that an explicit MSIX declaration beats a .msi URL."""
        record = parse_show_output(
            "Vendor.App",
            ["Installer Url: https://x/app.msi", "Installer Type: msix"],
        )
        assert record.installer_kind is InstallerKind.MSIX
        assert record.download_url == "https://x/app.msi"

    def test_declared_appx_forces_msix(self):
        record = parse_show_output(
            "Vendor.App",
            ["Installer Url: https://x/setup.exe", "Installer Type: appx"],
        )
        assert record.installer_kind is InstallerKind.MSIX

    def test_declared_msix_not_downgraded_by_later_urls(self):
        """Test that the MSIX kind survives later MSI and EXE URLs."""
        record = parse_show_output(
            "Vendor.App",
            [
                "Installer Type: msix",
                "Installer Url: https://x/setup.exe",
                "Installer Url: https://x/app.msi",
            ],
        )
        assert record.installer_kind is InstallerKind.MSIX
        assert record.download_url == "https://x/setup.exe"

    def test_declared_type_fills_empty_kind(self):
        """Test that a declared type sets the kind when nothing else did."""
        record = parse_show_output("Vendor.App", ["Installer Type: inno"])
        assert record.installer_kind is InstallerKind.EXE

    def test_declared_type_does_not_override_url_kind(self):
        """Test that a non-MSIX declaration leaves a URL-derived kind alone."""
        record = parse_show_output(
            "Vendor.App",
            ["Installer Url: https://x/app.msi", "Installer Type: exe"],
        )
        assert record.installer_kind is InstallerKind.MSI

    def test_declared_type_replaces_other_kind(self):
        """Test that a declaration refines an OTHER kind."""
        record = parse_show_output(
            "Vendor.App",
            ["Installer Url: https://x/download?id=1", "Installer Type: nullsoft"],
        )
        assert record.installer_kind is InstallerKind.EXE

    def test_empty_output_is_error_record(self):
        """Test that no output at all yields a failed ERROR record."""
        record = parse_show_output("Missing.App", [])

        assert record.failed
        assert record.version == ERROR
        assert record.previous_version == ERROR
        assert record.version != UNKNOWN
        assert record.display_name == "Missing.App"

    def test_unrecognized_output_is_error_record(self):
        """Test that output with no recognized field is a failure."""
        record = parse_show_output(
            "Missing.App", ["No package found matching input criteria."]
        )
        assert record.failed
        assert record.version == ERROR


class TestVersionHistory:
    """Tests for `winget show --versions` parsing."""

    def test_previous_version_is_second_entry(self):
        lines = ["Version", "---", "1.2.3", "1.2.2", "1.2.1"]
        assert parse_version_history(lines) == ("1.2.3", "1.2.2", "1.2.1")
        assert previous_version(lines) == "1.2.2"

    def test_banner_and_noise_are_skipped(self, chrome_versions_lines):
        lines = ["", "Name  Id", "Available upgrades"] + chrome_versions_lines
        assert previous_version(lines) == "131.0.6778.70"

    def test_lines_before_separator_are_not_collected(self):
        lines = ["1.0.0", "Version", "-----", "2.0.0", "  1.9.0  "]
        assert parse_version_history(lines) == ("2.0.0", "1.9.0")

    def test_order_is_not_resorted(self):
        lines = ["Version", "---", "1.0", "3.0", "2.0"]
        assert previous_version(lines) == "3.0"

    @pytest.mark.parametrize(
        "lines",
        [
            [],
            ["Version", "---"],
            ["Version", "---", "1.2.3"],
            ["1.2.3", "1.2.2"],
        ],
    )
    def test_fewer_than_two_versions_is_unknown(self, lines):
        """Test that short tables give UNKNOWN without raising."""
        assert previous_version(lines) == UNKNOWN
