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

"""Command-line interface for wingetaudit.

Commands:

    check: Check every package in a package list and write reports
    show: Check a single package identifier and print its details
    validate: Validate a package list without running winget

Example:
    Check a package list and write both reports:
        ```bash
        $ wingetaudit check packages.yaml --csv out/packages.csv --html out/packages.html
        ```

    Check one package:
        ```bash
        $ wingetaudit show Adobe.Acrobat.Reader.64-bit --verbose
        ```

    Validate a package list:
        ```bash
        $ wingetaudit validate packages.yaml
        ```

Exit Codes:

- 0: Success (including lists with failed rows, unless --fail-on-error)
- 1: Configuration or report error, a failed `show`, or failed rows with
  --fail-on-error

Note:
    Verbose mode shows full tracebacks on errors. Debug mode implies
    verbose mode and also logs every parsed field and installer probe.
"""

from __future__ import annotations

import argparse
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
import sys
import traceback

from wingetaudit import __version__
from wingetaudit.config import load_config, validate_config
from wingetaudit.core import check_packages, resolve_package
from wingetaudit.exceptions import WingetAuditError
from wingetaudit.io.probe import DEFAULT_PROBE_TIMEOUT
from wingetaudit.logging import get_logger, set_global_logger
from wingetaudit.query import WingetClient
from wingetaudit.report import print_record, print_summary, write_csv, write_html


def _report_error(err: Exception, args: argparse.Namespace) -> int:
    print(f"Error: {err}")
    if getattr(args, "verbose", False) or getattr(args, "debug", False):
        traceback.print_exc()
    return 1


def cmd_check(args: argparse.Namespace) -> int:
    """Handler for 'wingetaudit check' command.

    Loads the package list, resolves every package, prints the summary
    table, and writes the CSV/HTML reports requested on the command line or
    in the package list's report section.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))

    config_path = Path(args.config).resolve()
    print(f"Checking packages from: {config_path}")
    print()

    try:
        config = load_config(config_path)
        result = check_packages(
            config.packages,
            WingetClient(config.winget, timeout=config.winget_timeout),
            probe_timeout=(
                args.probe_timeout
                if args.probe_timeout is not None
                else config.probe_timeout
            ),
            workers=args.workers if args.workers is not None else config.workers,
        )

        print()
        print_summary(result)

        csv_path = Path(args.csv) if args.csv else config.csv_path
        html_path = Path(args.html) if args.html else config.html_path
        if csv_path or html_path:
            print()
        if csv_path:
            print(f"CSV report:  {write_csv(result.records, csv_path)}")
        if html_path:
            print(f"HTML report: {write_html(result.records, html_path)}")
    except WingetAuditError as err:
        return _report_error(err, args)

    if args.fail_on_error and result.failed:
        print()
        print(f"[FAILED] {result.failed} package(s) could not be checked.")
        return 1

    print()
    print("[SUCCESS] Package check complete.")
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Handler for 'wingetaudit show' command.

    Resolves a single identifier through the full pipeline and prints every
    field of the resulting record.

    Returns:
        Exit code (0 if the package was found, 1 otherwise).
    """
    set_global_logger(get_logger(verbose=args.verbose, debug=args.debug))

    record = resolve_package(
        args.identifier,
        WingetClient(),
        probe_timeout=args.probe_timeout,
    )
    print_record(record)
    return 1 if record.failed else 0


def cmd_validate(args: argparse.Namespace) -> int:
    """Handler for 'wingetaudit validate' command.

    Returns:
        Exit code (0 for a valid package list, 1 for invalid).
    """
    set_global_logger(get_logger(verbose=args.verbose, debug=False))

    config_path = Path(args.config).resolve()
    print(f"Validating package list: {config_path}")
    print()

    result = validate_config(config_path)

    print("=" * 70)
    print("VALIDATION RESULTS")
    print("=" * 70)
    print(f"Package List:  {result.config_path}")
    print(f"Status:        {result.status.upper()}")
    print(f"Package Count: {result.package_count}")
    print()

    if result.warnings:
        print(f"Warnings ({len(result.warnings)}):")
        for warning in result.warnings:
            print(f"  [WARNING] {warning}")
        print()

    if result.errors:
        print(f"Errors ({len(result.errors)}):")
        for error in result.errors:
            print(f"  [X] {error}")
        print()

    print("=" * 70)

    if result.status == "valid":
        print()
        print("[SUCCESS] Package list is valid!")
        return 0
    print()
    print(f"[FAILED] Validation failed with {len(result.errors)} error(s).")
    return 1


def _installed_version() -> str:
    try:
        return version("wingetaudit")
    except PackageNotFoundError:
        return __version__


def _add_verbosity(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show winget commands, config loading and enrichment decisions",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="Show parsed fields and every installer probe (implies --verbose)",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wingetaudit",
        description="Check winget packages for versions and installer metadata",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"wingetaudit {_installed_version()}",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
        required=True,
    )

    # 'check' command
    parser_check = subparsers.add_parser(
        "check",
        help="Check every package in a package list",
        description="Query winget for each listed package and write reports.",
    )
    parser_check.add_argument("config", help="Path to the package list YAML file")
    parser_check.add_argument(
        "--csv", default=None, help="Write a CSV report (overrides report.csv)"
    )
    parser_check.add_argument(
        "--html", default=None, help="Write an HTML report (overrides report.html)"
    )
    parser_check.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Packages resolved in parallel (default: settings.workers or 1)",
    )
    parser_check.add_argument(
        "--probe-timeout",
        type=float,
        default=None,
        help="Seconds per installer probe (default: settings.probe_timeout or 5)",
    )
    parser_check.add_argument(
        "--fail-on-error",
        action="store_true",
        help="Exit with status 1 if any package could not be checked",
    )
    _add_verbosity(parser_check)
    parser_check.set_defaults(func=cmd_check)

    # 'show' command
    parser_show = subparsers.add_parser(
        "show",
        help="Check a single package identifier",
        description="Run the full pipeline for one winget identifier.",
    )
    parser_show.add_argument("identifier", help="Exact winget package identifier")
    parser_show.add_argument(
        "--probe-timeout",
        type=float,
        default=DEFAULT_PROBE_TIMEOUT,
        help=f"Seconds per installer probe (default: {DEFAULT_PROBE_TIMEOUT:g})",
    )
    _add_verbosity(parser_show)
    parser_show.set_defaults(func=cmd_show)

    # 'validate' command
    parser_validate = subparsers.add_parser(
        "validate",
        help="Validate a package list (no winget calls)",
        description="Check a package list for syntax and configuration errors.",
    )
    parser_validate.add_argument("config", help="Path to the package list YAML file")
    parser_validate.add_argument(
        "-v", "--verbose", action="store_true", help="Show validation progress"
    )
    parser_validate.set_defaults(func=cmd_validate)

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main entry point, registered as the 'wingetaudit' console script."""
    args = build_parser().parse_args(argv)
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
