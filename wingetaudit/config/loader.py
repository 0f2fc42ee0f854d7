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

"""Package list loading and validation for wingetaudit.

The package list is a YAML file naming the winget identifiers to check, in
the order they should appear in the report, plus optional settings:

    apiVersion: wingetaudit/v1
    packages:
      - Google.Chrome
      - Mozilla.Firefox
      - Adobe.Acrobat.Reader.64-bit
    settings:
      probe_timeout: 5        # seconds per Adobe installer probe
      workers: 1              # packages resolved in parallel
      winget_timeout: 120     # seconds per winget invocation
      winget: winget          # executable name or path
    report:
      csv: reports/packages.csv
      html: reports/packages.html

Only `packages` is required. Identifier order is preserved exactly and
identifiers must be unique.

Path Resolution
---------------
Relative report paths are resolved against the CONFIG FILE location, so a
package list can be run from any working directory.

Functions
---------
load_config : function
    Load a package list into an AuditConfig (raises ConfigError).
validate_config : function
    Check a package list and return every problem found (never raises).

Private Helpers
---------------
_load_yaml_file : Load YAML with error handling
_check_config_data : Collect errors and warnings for parsed data
_resolve_report_path : Resolve a report path relative to the config file
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from wingetaudit.exceptions import ConfigError
from wingetaudit.io.probe import DEFAULT_PROBE_TIMEOUT
from wingetaudit.logging import get_global_logger
from wingetaudit.query.winget import DEFAULT_QUERY_TIMEOUT
from wingetaudit.results import ValidationResult

SUPPORTED_API_VERSIONS = ("wingetaudit/v1",)

# -------------------------------
# Data types
# -------------------------------


@dataclass(frozen=True)
class AuditConfig:
    """Effective configuration for one audit run.

    Attributes:
        packages: Package identifiers, in report order.
        probe_timeout: Seconds per installer probe.
        workers: Number of packages resolved concurrently (1 = sequential).
        winget_timeout: Seconds per winget invocation.
        winget: winget executable name or path.
        csv_path: CSV report destination, if configured.
        html_path: HTML report destination, if configured.
        config_path: The file this configuration was loaded from.
    """

    packages: tuple[str, ...]
    probe_timeout: float = DEFAULT_PROBE_TIMEOUT
    workers: int = 1
    winget_timeout: float = DEFAULT_QUERY_TIMEOUT
    winget: str = "winget"
    csv_path: Path | None = None
    html_path: Path | None = None
    config_path: Path | None = None


# -------------------------------
# YAML helpers
# -------------------------------


def _load_yaml_file(p: Path) -> Any:
    """
    Load a YAML file and return the parsed Python object.

    Raises:
      ConfigError - when the file does not exist, cannot be parsed, or is empty
    """
    if not p.exists():
        raise ConfigError(f"file not found: {p}")
    try:
        with p.open("r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as err:
        raise ConfigError(f"Error parsing YAML: {p}: {err}") from err
    if data is None:
        raise ConfigError(f"YAML file is empty: {p}")
    return data


# -------------------------------
# Validation
# -------------------------------


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_config_data(data: Any) -> tuple[list[str], list[str]]:
    """Collect (errors, warnings) for a parsed package list."""
    errors: list[str] = []
    warnings: list[str] = []

    if not isinstance(data, dict):
        return ["top-level YAML must be a mapping (dict)"], warnings

    api_version = data.get("apiVersion")
    if api_version is None:
        warnings.append("Missing apiVersion (assuming wingetaudit/v1)")
    elif api_version not in SUPPORTED_API_VERSIONS:
        errors.append(
            f"Unsupported apiVersion: {api_version!r}. "
            f"Supported: {', '.join(SUPPORTED_API_VERSIONS)}"
        )

    packages = data.get("packages")
    if packages is None:
        errors.append("Missing required field: packages")
    elif not isinstance(packages, list):
        errors.append("packages must be a list of package identifiers")
    elif not packages:
        errors.append("packages cannot be empty")
    else:
        seen: set[str] = set()
        for i, identifier in enumerate(packages):
            if not isinstance(identifier, str):
                errors.append(f"packages[{i}] must be a string")
            elif not identifier.strip():
                errors.append(f"packages[{i}] cannot be empty")
            elif identifier.strip() in seen:
                errors.append(f"Duplicate package identifier: {identifier.strip()}")
            else:
                seen.add(identifier.strip())

    settings = data.get("settings", {})
    if not isinstance(settings, dict):
        errors.append("settings must be a dictionary")
    else:
        for key in ("probe_timeout", "winget_timeout"):
            if key in settings:
                value = settings[key]
                if not _is_number(value) or value <= 0:
                    errors.append(f"settings.{key} must be a positive number")
        if "workers" in settings:
            workers = settings["workers"]
            if not isinstance(workers, int) or isinstance(workers, bool) or workers < 1:
                errors.append("settings.workers must be an integer >= 1")
        if "winget" in settings:
            winget = settings["winget"]
            if not isinstance(winget, str) or not winget.strip():
                errors.append("settings.winget must be a non-empty string")
        unknown = sorted(
            set(settings) - {"probe_timeout", "winget_timeout", "workers", "winget"}
        )
        for key in unknown:
            warnings.append(f"Unknown setting ignored: settings.{key}")

    report = data.get("report", {})
    if not isinstance(report, dict):
        errors.append("report must be a dictionary")
    else:
        for key in ("csv", "html"):
            if key in report and not isinstance(report[key], str):
                errors.append(f"report.{key} must be a path string")

    return errors, warnings


def _resolve_report_path(raw: str | None, config_dir: Path) -> Path | None:
    if not raw:
        return None
    p = Path(raw)
    if not p.is_absolute():
        p = (config_dir / p).resolve()
    return p


# -------------------------------
# Public API
# -------------------------------


def validate_config(config_path: Path) -> ValidationResult:
    """Validate a package list file without running any queries.

    Args:
        config_path: Path to the YAML package list.

    Returns:
        ValidationResult with status "valid" or "invalid", every error and
        warning found, and the number of identifiers listed.
    """
    logger = get_global_logger()
    config_path = Path(config_path)
    logger.verbose("CONFIG", f"Validating: {config_path}")

    try:
        data = _load_yaml_file(config_path)
    except ConfigError as err:
        return ValidationResult(
            status="invalid",
            errors=[str(err)],
            warnings=[],
            package_count=0,
            config_path=str(config_path),
        )

    errors, warnings = _check_config_data(data)
    packages = data.get("packages") if isinstance(data, dict) else None
    count = len(packages) if isinstance(packages, list) else 0

    return ValidationResult(
        status="valid" if not errors else "invalid",
        errors=errors,
        warnings=warnings,
        package_count=count,
        config_path=str(config_path),
    )


def load_config(config_path: Path) -> AuditConfig:
    """Load and validate a package list.

    Args:
        config_path: Path to the YAML package list.

    Returns:
        The effective AuditConfig, with report paths made absolute.

    Raises:
        ConfigError: If the file is missing, unparsable, or invalid. The
            message carries the first error; use validate_config() to see
            all of them.
    """
    logger = get_global_logger()
    config_path = Path(config_path).resolve()
    logger.verbose("CONFIG", f"Loading package list: {config_path}")

    data = _load_yaml_file(config_path)
    errors, warnings = _check_config_data(data)
    for warning in warnings:
        logger.verbose("CONFIG", f"Warning: {warning}")
    if errors:
        more = f" (and {len(errors) - 1} more)" if len(errors) > 1 else ""
        raise ConfigError(f"{config_path}: {errors[0]}{more}")

    settings = data.get("settings", {})
    report = data.get("report", {})
    config_dir = config_path.parent

    config = AuditConfig(
        packages=tuple(identifier.strip() for identifier in data["packages"]),
        probe_timeout=float(settings.get("probe_timeout", DEFAULT_PROBE_TIMEOUT)),
        workers=settings.get("workers", 1),
        winget_timeout=float(settings.get("winget_timeout", DEFAULT_QUERY_TIMEOUT)),
        winget=settings.get("winget", "winget"),
        csv_path=_resolve_report_path(report.get("csv"), config_dir),
        html_path=_resolve_report_path(report.get("html"), config_dir),
        config_path=config_path,
    )
    logger.verbose("CONFIG", f"{len(config.packages)} package(s) configured")
    return config
