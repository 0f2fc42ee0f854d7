"""
Tests for wingetaudit.query module.

Tests the winget subprocess client including:
- Command construction
- Output splitting
- Error mapping to QueryError
"""

from __future__ import annotations

import subprocess
from unittest.mock import patch

import pytest

from wingetaudit.exceptions import QueryError
from wingetaudit.query.winget import WingetClient

pytestmark = pytest.mark.unit

WINGET_PATH = r"C:\Users\me\AppData\Local\Microsoft\WindowsApps\winget.exe"


def _completed(stdout: str) -> subprocess.CompletedProcess:
    return subprocess.CompletedProcess(args=[], returncode=0, stdout=stdout, stderr="")


class TestWingetClient:
    """Tests for WingetClient."""

    def test_show_runs_exact_query(self):
        client = WingetClient(timeout=30)
        with (
            patch("wingetaudit.query.winget.shutil.which", return_value=WINGET_PATH),
            patch("wingetaudit.query.winget.subprocess.run") as mock_run,
        ):
            mock_run.return_value = _completed("Found App [Vendor.App]\nVersion: 1.0\n")
            lines = client.show("Vendor.App")

        assert lines == ["Found App [Vendor.App]", "Version: 1.0"]
        cmd = mock_run.call_args.args[0]
        assert cmd[0] == WINGET_PATH
        assert cmd[1:4] == ["show", "--id", "Vendor.App"]
        assert "--exact" in cmd
        assert "--accept-source-agreements" in cmd
        assert "--versions" not in cmd
        assert mock_run.call_args.kwargs["timeout"] == 30
        assert mock_run.call_args.kwargs["check"] is True

    def test_show_versions_adds_versions_flag(self):
        client = WingetClient()
        with (
            patch("wingetaudit.query.winget.shutil.which", return_value=WINGET_PATH),
            patch("wingetaudit.query.winget.subprocess.run") as mock_run,
        ):
            mock_run.return_value = _completed("Version\n---\n2.0\n1.0\n")
            lines = client.show_versions("Vendor.App")

        assert lines == ["Version", "---", "2.0", "1.0"]
        assert "--versions" in mock_run.call_args.args[0]

    def test_spinner_carriage_returns_become_lines(self):
        client = WingetClient()
        with (
            patch("wingetaudit.query.winget.shutil.which", return_value=WINGET_PATH),
            patch("wingetaudit.query.winget.subprocess.run") as mock_run,
        ):
            mock_run.return_value = _completed("\r-\r\\\rFound App [Vendor.App]\n")
            lines = client.show("Vendor.App")

        assert lines[-1] == "Found App [Vendor.App]"

    def test_missing_executable_raises(self):
        client = WingetClient(executable="winget-missing")
        with patch("wingetaudit.query.winget.shutil.which", return_value=None):
            with pytest.raises(QueryError, match="not found") as excinfo:
                client.show("Vendor.App")
        assert excinfo.value.identifier == "Vendor.App"

    def test_nonzero_exit_raises_with_detail(self):
        client = WingetClient()
        err = subprocess.CalledProcessError(
            returncode=2316632084,
            cmd=["winget"],
            output="\r-\r\\\rNo package found matching input criteria.\n",
            stderr="",
        )
        with (
            patch("wingetaudit.query.winget.shutil.which", return_value=WINGET_PATH),
            patch("wingetaudit.query.winget.subprocess.run", side_effect=err),
        ):
            with pytest.raises(QueryError, match="No package found"):
                client.show("Missing.App")

    def test_timeout_raises(self):
        client = WingetClient(timeout=1)
        with (
            patch("wingetaudit.query.winget.shutil.which", return_value=WINGET_PATH),
            patch(
                "wingetaudit.query.winget.subprocess.run",
                side_effect=subprocess.TimeoutExpired(cmd=["winget"], timeout=1),
            ),
        ):
            with pytest.raises(QueryError, match="timed out"):
                client.show("Slow.App")

    def test_os_error_raises(self):
        client = WingetClient()
        with (
            patch("wingetaudit.query.winget.shutil.which", return_value=WINGET_PATH),
            patch(
                "wingetaudit.query.winget.subprocess.run",
                side_effect=PermissionError("access denied"),
            ),
        ):
            with pytest.raises(QueryError, match="failed to run winget"):
                client.show("Vendor.App")
