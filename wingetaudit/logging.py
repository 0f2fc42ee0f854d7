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

"""Output interface for wingetaudit.

Library modules report progress through a small logger object instead of
printing directly, so the parsing and enrichment code stays quiet when it is
used programmatically. The CLI installs a configured logger globally before
running a command.

Output levels:

- step: Always printed (one line per package while checking a list)
- warning: Always printed (degraded results, such as an ERROR row)
- verbose: Printed when verbose mode is enabled
- debug: Printed when debug mode is enabled (implies verbose)

Example:
    Configure the global logger:
        ```python
        from wingetaudit.logging import get_logger, set_global_logger

        set_global_logger(get_logger(verbose=True))
        ```

    Use in library code:
        ```python
        from wingetaudit.logging import get_global_logger

        logger = get_global_logger()
        logger.step(3, 12, "Google.Chrome")
        logger.verbose("QUERY", "winget show --id Google.Chrome --exact")
        logger.debug("PARSE", "Installer Url adopted (rank MSIX)")
        ```

Note:
    The default global logger is silent. Nothing is printed until the CLI
    (or the caller) installs a DefaultLogger.
"""

from __future__ import annotations

import sys
from typing import Protocol


class Logger(Protocol):
    """Protocol for logger implementations."""

    def step(self, step: int, total: int, message: str) -> None:
        """Print a progress line.

        Args:
            step: Current step number (1-based).
            total: Total number of steps.
            message: Step description.
        """
        ...

    def warning(self, prefix: str, message: str) -> None:
        """Print a warning regardless of verbosity."""
        ...

    def verbose(self, prefix: str, message: str) -> None:
        """Print a verbose message (e.g., prefix "QUERY" or "ADOBE")."""
        ...

    def debug(self, prefix: str, message: str) -> None:
        """Print a debug message (e.g., prefix "PARSE" or "PROBE")."""
        ...


class DefaultLogger:
    """Logger that prints to stdout, warnings to stderr."""

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        """Initialize logger with verbosity settings.

        Args:
            verbose: If True, print verbose messages.
            debug: If True, print debug messages (implies verbose).
        """
        self._verbose = verbose or debug
        self._debug = debug

    def step(self, step: int, total: int, message: str) -> None:
        print(f"[{step}/{total}] {message}")

    def warning(self, prefix: str, message: str) -> None:
        print(f"[{prefix}] WARNING: {message}", file=sys.stderr)

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            print(f"[{prefix}] {message}")


class SilentLogger:
    """Logger that suppresses all output."""

    def step(self, step: int, total: int, message: str) -> None:
        pass

    def warning(self, prefix: str, message: str) -> None:
        pass

    def verbose(self, prefix: str, message: str) -> None:
        pass

    def debug(self, prefix: str, message: str) -> None:
        pass


_global_logger: Logger = SilentLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Create a stdout logger with the given verbosity.

    Args:
        verbose: If True, logger will print verbose messages.
        debug: If True, logger will print debug messages (implies verbose).

    Returns:
        A DefaultLogger configured with the specified verbosity.
    """
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    """Return the logger installed with set_global_logger() (silent by default)."""
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Install the logger used by library functions.

    Args:
        logger: Logger instance to use as the global logger.

    Example:
        Configure from parsed CLI arguments:
            ```python
            logger = get_logger(verbose=args.verbose, debug=args.debug)
            set_global_logger(logger)
            ```
    """
    global _global_logger
    _global_logger = logger
