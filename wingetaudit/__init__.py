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

"""wingetaudit - winget package version and installer audit

A Python CLI and library that checks a curated list of Windows Package
Manager (winget) identifiers and reports, for each package:

- Latest and previous version
- Publisher, release date, release notes, homepage, description
- The single authoritative installer URL and its kind (MSI, MSIX, EXE, ...)
- Installer SHA-256 and architecture
- For Adobe Acrobat Reader, a verified MSP patch or EXE URL from Adobe

Quick Start:

Validate a package list:

    $ wingetaudit validate packages.yaml

Check every package and write reports:

    $ wingetaudit check packages.yaml --csv reports/packages.csv --html reports/packages.html

Package Structure:

cli : module
    Command-line interface with argparse.
core : module
    Per-package pipeline and list orchestration.
config : package
    YAML package list loading and validation.
parsing : package
    Parsers for `winget show` and `winget show --versions` output.
enrichment : package
    Architecture inference and Adobe installer resolution.
query : package
    winget query client and the PackageQuery protocol.
io : package
    HTTP probes and atomic report writes.
report : package
    CSV, HTML, and console renderers.

Public API:

    from wingetaudit.core import check_packages, resolve_package
    from wingetaudit.config import load_config, validate_config
    from wingetaudit.parsing import parse_show_output, previous_version
"""

__version__ = "0.1.0"
__license__ = "Apache-2.0"
__description__ = "winget package version and installer audit"

from wingetaudit.config import load_config, validate_config
from wingetaudit.core import check_config, check_packages, resolve_package
from wingetaudit.records import ERROR, UNKNOWN, InstallerKind, PackageRecord

__all__ = [
    "__version__",
    "__license__",
    "__description__",
    "ERROR",
    "UNKNOWN",
    "InstallerKind",
    "PackageRecord",
    "check_config",
    "check_packages",
    "load_config",
    "resolve_package",
    "validate_config",
]
