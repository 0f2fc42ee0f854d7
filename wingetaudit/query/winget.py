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

"""winget command-line client.

Runs the two queries the pipeline needs:

    winget show --id <id> --exact --accept-source-agreements --disable-interactivity
    winget show --id <id> --exact --versions --accept-source-agreements --disable-interactivity

Output is decoded as UTF-8 with replacement characters, so a stray byte in
a manifest description cannot break parsing. winget's progress spinner is
written with carriage returns; splitlines() turns it into short noise lines
that the parsers skip.

Error Handling:

- Missing executable -> QueryError
- Non-zero exit status (package not found, source errors) -> QueryError
- Timeout -> QueryError
"""

from __future__ import annotations

import shutil
import subprocess

from wingetaudit.exceptions import QueryError
from wingetaudit.logging import get_global_logger

DEFAULT_QUERY_TIMEOUT = 120.0

_COMMON_ARGS = ("--exact", "--accept-source-agreements", "--disable-interactivity")


class WingetClient:
    """PackageQuery implementation backed by the winget executable.

    Attributes:
        executable: Name or path of winget.
        timeout: Seconds allowed per winget invocation.
    """

    def __init__(
        self, executable: str = "winget", timeout: float = DEFAULT_QUERY_TIMEOUT
    ) -> None:
        self.executable = executable
        self.timeout = timeout

    def show(self, identifier: str) -> list[str]:
        return self._run(["show", "--id", identifier, *_COMMON_ARGS], identifier)

    def show_versions(self, identifier: str) -> list[str]:
        return self._run(
            ["show", "--id", identifier, "--versions", *_COMMON_ARGS], identifier
        )

    def _run(self, args: list[str], identifier: str) -> list[str]:
        logger = get_global_logger()

        exe = shutil.which(self.executable)
        if exe is None:
            raise QueryError(
                f"winget executable not found: {self.executable!r}", identifier
            )

        cmd = [exe, *args]
        logger.verbose("QUERY", " ".join([self.executable, *args]))

        try:
            result = subprocess.run(
                cmd,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                check=True,
                timeout=self.timeout,
            )
        except subprocess.CalledProcessError as err:
            detail = _last_meaningful_line(err.stdout) or _last_meaningful_line(
                err.stderr
            )
            message = f"winget exited with code {err.returncode} for {identifier}"
            if detail:
                message += f": {detail}"
            raise QueryError(message, identifier) from err
        except subprocess.TimeoutExpired as err:
            raise QueryError(
                f"winget timed out after {err.timeout}s for {identifier}", identifier
            ) from err
        except OSError as err:
            raise QueryError(f"failed to run winget: {err}", identifier) from err

        lines = result.stdout.splitlines()
        logger.debug("QUERY", f"{identifier}: {len(lines)} line(s) of output")
        return lines


def _last_meaningful_line(text: str | None) -> str | None:
    """Return the last line with more than spinner characters in it."""
    if not text:
        return None
    for line in reversed(text.splitlines()):
        stripped = line.strip()
        if len(stripped) > 1:
            return stripped
    return None
