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

"""Core orchestration for wingetaudit.

This module runs the per-package pipeline and applies it to a whole list.

Per-package pipeline (resolve_package):

1. Query package details (`winget show`) and parse them into a record.
   If the query fails, the package becomes a single ERROR row and the
   remaining steps are skipped.
2. Query the version history (`winget show --versions`) and take the
   previous version. A failure here only leaves previous_version "unknown".
3. For Adobe Acrobat Reader with a known version, probe Adobe's download
   host for the MSP patch, then the full EXE installer.
4. Infer the architecture from the download URL if winget reported none.

Error Isolation:

Failures are contained per package. check_packages() always returns exactly
one record per identifier, in input order, whatever happens to any single
package: query errors become ERROR rows, history and probe errors degrade to
sentinels, and anything unexpected is logged and turned into an ERROR row.

Design Principles:

- Each package is resolved by a pure function of its identifier and the
  injected collaborators (query client, probe); there is no shared state
- Records are immutable; every step returns a new record
- Parallel resolution is optional and never changes the output order

Example:
    Programmatic usage:
        ```python
        from wingetaudit.core import check_packages

        result = check_packages(["Google.Chrome", "Adobe.Acrobat.Reader.64-bit"])
        for record in result.records:
            print(record.identifier, record.version, record.installer_kind)
        ```
"""

from __future__ import annotations

from collections.abc import Iterable
from concurrent.futures import ThreadPoolExecutor
from dataclasses import replace
from pathlib import Path

from wingetaudit.config.loader import load_config
from wingetaudit.enrichment.adobe import is_adobe_reader, resolve_adobe_installer
from wingetaudit.enrichment.architecture import apply_architecture
from wingetaudit.exceptions import QueryError
from wingetaudit.io.probe import DEFAULT_PROBE_TIMEOUT, Probe, head_request
from wingetaudit.logging import get_global_logger
from wingetaudit.parsing.show import parse_show_output
from wingetaudit.parsing.versions import previous_version
from wingetaudit.query.base import PackageQuery
from wingetaudit.query.winget import WingetClient
from wingetaudit.records import PackageRecord, error_record
from wingetaudit.results import CheckResult


def resolve_package(
    identifier: str,
    query: PackageQuery,
    *,
    probe: Probe = head_request,
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT,
) -> PackageRecord:
    """Resolve one package identifier into a finished PackageRecord.

    Args:
        identifier: Exact winget package identifier.
        query: Client used for the details and version history queries.
        probe: URL existence check used by the Adobe resolver.
        probe_timeout: Seconds allowed per probe.

    Returns:
        The enriched record, or an ERROR record if the details query failed.
    """
    logger = get_global_logger()

    try:
        lines = query.show(identifier)
    except QueryError as err:
        logger.warning("QUERY", f"{identifier}: {err}")
        return error_record(identifier, str(err))

    record = parse_show_output(identifier, lines)
    if record.failed:
        logger.warning("QUERY", f"{identifier}: {record.error}")
        return record

    try:
        history = query.show_versions(identifier)
    except Exception as err:
        logger.verbose("VERSIONS", f"{identifier}: version history unavailable: {err}")
    else:
        record = replace(record, previous_version=previous_version(history))
        logger.debug("VERSIONS", f"{identifier}: previous {record.previous_version}")

    if is_adobe_reader(identifier) and record.has_known_version:
        record = resolve_adobe_installer(record, probe=probe, timeout=probe_timeout)

    return apply_architecture(record)


def check_packages(
    identifiers: Iterable[str],
    query: PackageQuery | None = None,
    *,
    probe: Probe = head_request,
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT,
    workers: int = 1,
) -> CheckResult:
    """Resolve every identifier and collect one record each, in input order.

    Args:
        identifiers: Package identifiers, in report order.
        query: Query client. Defaults to a WingetClient with default settings.
        probe: URL existence check used by the Adobe resolver.
        probe_timeout: Seconds allowed per probe.
        workers: Packages resolved concurrently. 1 (the default) resolves
            them sequentially.

    Returns:
        CheckResult whose records match identifiers one-to-one.
    """
    logger = get_global_logger()
    identifiers = list(identifiers)
    total = len(identifiers)
    if query is None:
        query = WingetClient()

    def _resolve(item: tuple[int, str]) -> PackageRecord:
        index, identifier = item
        logger.step(index, total, identifier)
        try:
            return resolve_package(
                identifier, query, probe=probe, probe_timeout=probe_timeout
            )
        except Exception as err:
            logger.warning("PIPELINE", f"{identifier}: unexpected error: {err}")
            return error_record(identifier, f"unexpected error: {err}")

    items = list(enumerate(identifiers, start=1))
    if workers > 1 and total > 1:
        logger.verbose("PIPELINE", f"Resolving {total} package(s) with {workers} workers")
        with ThreadPoolExecutor(max_workers=workers) as pool:
            records = list(pool.map(_resolve, items))
    else:
        records = [_resolve(item) for item in items]

    result = CheckResult(records=tuple(records))
    logger.verbose(
        "PIPELINE", f"Done: {result.succeeded} succeeded, {result.failed} failed"
    )
    return result


def check_config(
    config_path: Path,
    query: PackageQuery | None = None,
    *,
    probe: Probe = head_request,
    workers: int | None = None,
    probe_timeout: float | None = None,
) -> CheckResult:
    """Load a package list and check every package in it.

    Settings from the file apply unless overridden by the keyword arguments.

    Raises:
        ConfigError: If the package list is missing or invalid.
    """
    config = load_config(config_path)
    if query is None:
        query = WingetClient(config.winget, timeout=config.winget_timeout)

    return check_packages(
        config.packages,
        query,
        probe=probe,
        probe_timeout=probe_timeout if probe_timeout is not None else config.probe_timeout,
        workers=workers if workers is not None else config.workers,
    )
