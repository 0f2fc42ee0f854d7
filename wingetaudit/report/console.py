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

"""Console output blocks for the CLI."""

from __future__ import annotations

from wingetaudit.records import PackageRecord
from wingetaudit.results import CheckResult

_RULE = "=" * 70


def _shorten(text: str, width: int) -> str:
    return text if len(text) <= width else text[: width - 3] + "..."


def print_summary(result: CheckResult) -> None:
    """Print a fixed-width table of all records followed by totals."""
    print(_RULE)
    print("PACKAGE RESULTS")
    print(_RULE)
    print(f"{'Identifier':<34} {'Version':<16} {'Previous':<16} {'Type':<5} Arch")
    print("-" * 70)
    for record in result.records:
        print(
            f"{_shorten(record.identifier, 34):<34} "
            f"{_shorten(record.version, 16):<16} "
            f"{_shorten(record.previous_version, 16):<16} "
            f"{record.installer_kind.value:<5} "
            f"{record.architecture}"
        )
    print(_RULE)
    print(
        f"Total: {result.total}   Succeeded: {result.succeeded}   "
        f"Failed: {result.failed}"
    )

    failures = [record for record in result.records if record.failed]
    if failures:
        print()
        print(f"Errors ({len(failures)}):")
        for record in failures:
            print(f"  [X] {record.identifier}: {record.error}")


def print_record(record: PackageRecord) -> None:
    """Print every field of a single record."""
    print(_RULE)
    print("PACKAGE DETAILS")
    print(_RULE)
    print(f"Identifier:       {record.identifier}")
    print(f"Name:             {record.display_name}")
    print(f"Version:          {record.version}")
    print(f"Previous Version: {record.previous_version}")
    print(f"Publisher:        {record.publisher}")
    print(f"Release Date:     {record.release_date}")
    print(f"Installer Type:   {record.installer_kind.value or '(none)'}")
    print(f"Architecture:     {record.architecture or '(unknown)'}")
    print(f"Download URL:     {record.download_url or '(none)'}")
    print(f"SHA-256:          {record.sha256 or '(none)'}")
    print(f"Release Notes:    {record.release_notes_url or '(none)'}")
    print(f"Homepage:         {record.homepage or '(none)'}")
    if record.failed:
        print(f"Error:            {record.error}")
    print(_RULE)
