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

"""Atomic report writes."""

from __future__ import annotations

from pathlib import Path

from wingetaudit.exceptions import ReportError
from wingetaudit.logging import get_global_logger


def atomic_write_text(path: Path, text: str, *, newline: str | None = None) -> Path:
    """Write text to path via <name>.part and an atomic rename.

    Parent directories are created as needed. A report that fails halfway
    never replaces the previous one.

    Args:
        path: Destination file.
        text: File contents.
        newline: Passed to open(); use "" for csv module output.

    Returns:
        The destination path.

    Raises:
        ReportError: If the file cannot be written.
    """
    path = Path(path)
    tmp = path.with_suffix(path.suffix + ".part")
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with tmp.open("w", encoding="utf-8", newline=newline) as f:
            f.write(text)
        tmp.replace(path)
    except OSError as err:
        try:
            tmp.unlink()
        except OSError:
            pass
        raise ReportError(f"failed to write {path}: {err}") from err

    get_global_logger().verbose("REPORT", f"Wrote {path}")
    return path
