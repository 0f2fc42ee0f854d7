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

"""Public API return types for wingetaudit.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Note:
    Only public API return types belong in this module. PackageRecord lives
    in records.py next to its sentinels.
"""

from __future__ import annotations

from dataclasses import dataclass

from wingetaudit.records import PackageRecord


@dataclass(frozen=True)
class CheckResult:
    """Result from checking a list of packages.

    Attributes:
        records: One record per requested identifier, in input order.
    """

    records: tuple[PackageRecord, ...]

    @property
    def total(self) -> int:
        return len(self.records)

    @property
    def failed(self) -> int:
        return sum(1 for record in self.records if record.failed)

    @property
    def succeeded(self) -> int:
        return self.total - self.failed


@dataclass(frozen=True)
class ValidationResult:
    """Result from validating a package list file.

    Attributes:
        status: Validation status ("valid" or "invalid").
        errors: List of error messages (empty if valid).
        warnings: List of warning messages.
        package_count: Number of package identifiers found.
        config_path: String path to the validated file.
    """

    status: str
    errors: list[str]
    warnings: list[str]
    package_count: int
    config_path: str
