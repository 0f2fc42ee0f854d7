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

"""Exception hierarchy for wingetaudit.

This module defines the errors library users can catch to tell apart the
different ways a package audit can go wrong:

- ConfigError: Package list problems (missing file, YAML parse, bad fields)
- QueryError: The package-query tool (winget) failed or produced nothing
- ReportError: A report could not be written

All exceptions inherit from WingetAuditError, so a single except clause
catches everything raised by the library.

Note:
    A QueryError for one package never escapes check_packages(); the
    pipeline turns it into an ERROR row and moves on to the next package.
    It is only raised to callers that use the query clients directly.

Example:
    Catching specific error types:
        ```python
        from wingetaudit.core import check_config
        from wingetaudit.exceptions import ConfigError, ReportError

        try:
            result = check_config(Path("packages.yaml"))
        except ConfigError as e:
            print(f"Configuration error: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "WingetAuditError",
    "ConfigError",
    "QueryError",
    "ReportError",
]


class WingetAuditError(Exception):
    """Base exception for all wingetaudit errors."""

    pass


class ConfigError(WingetAuditError):
    """Raised for configuration-related errors.

    This exception is raised when there are problems with:

    - A missing package list file
    - YAML parsing (syntax errors, empty files)
    - Missing, blank, or duplicate package identifiers
    - Settings of the wrong type or out of range
    """

    pass


class QueryError(WingetAuditError):
    """Raised when a package query cannot produce usable output.

    Covers a missing winget executable, a non-zero exit status (for example
    "No package found matching input criteria"), and query timeouts.

    Attributes:
        identifier: Package identifier the query was issued for.
    """

    def __init__(self, message: str, identifier: str | None = None) -> None:
        super().__init__(message)
        self.identifier = identifier


class ReportError(WingetAuditError):
    """Raised when a CSV or HTML report cannot be written."""

    pass
