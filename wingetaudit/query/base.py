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

"""Package query protocol.

The pipeline never spawns winget itself; it talks to an object implementing
PackageQuery. WingetClient is the production implementation. Tests and
offline tooling can pass anything with the same two methods.

Protocol Benefits:

Using typing.Protocol instead of ABC allows:

- Duck typing: fakes don't need explicit inheritance
- Type checkers still verify interface compliance

Example:
    A canned-output query for offline use:
        ```python
        class CannedQuery:
            def __init__(self, outputs):
                self.outputs = outputs

            def show(self, identifier):
                return self.outputs[identifier]

            def show_versions(self, identifier):
                return []

        records = check_packages(["Vendor.App"], query=CannedQuery(...))
        ```
"""

from __future__ import annotations

from typing import Protocol


class PackageQuery(Protocol):
    """Protocol for package-manager query clients."""

    def show(self, identifier: str) -> list[str]:
        """Return the lines of the package details query.

        Args:
            identifier: Exact package identifier (e.g., "Google.Chrome").

        Returns:
            Output lines in the order printed. May be empty.

        Raises:
            QueryError: If the query fails (package not found, tool missing,
                timeout).
        """
        ...

    def show_versions(self, identifier: str) -> list[str]:
        """Return the lines of the version history query.

        Raises:
            QueryError: If the query fails.
        """
        ...
