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

"""HTTP existence probes for candidate installer URLs.

A probe answers one question: does this URL exist right now? It issues a
HEAD request, follows redirects, and reports True only for a 2xx response
received within the timeout. Every failure mode (DNS errors, refused
connections, timeouts, 403/404/5xx) is reported as False, never raised.

Probes are deliberately single-shot. Callers that have several candidate
URLs try them in order; there is no retry adapter on the probe session.

Example:
    >>> from wingetaudit.io import head_request
    >>> head_request("https://example.com/setup.exe", timeout=5)
    False
"""

from __future__ import annotations

from collections.abc import Callable

import requests

from wingetaudit import __version__
from wingetaudit.logging import get_global_logger

DEFAULT_PROBE_TIMEOUT = 5.0

Probe = Callable[[str, float], bool]


def make_session() -> requests.Session:
    """Create a requests.Session for probing vendor download hosts.

    Some CDNs reject requests without a browser-like User-Agent, so one is
    always sent. Accept-Encoding is pinned to identity because only the
    status line matters.
    """
    s = requests.Session()
    s.headers.update(
        {
            "User-Agent": f"wingetaudit/{__version__}",
            "Accept-Encoding": "identity",
        }
    )
    return s


def head_request(url: str, timeout: float = DEFAULT_PROBE_TIMEOUT) -> bool:
    """Check whether url responds with a 2xx status within timeout seconds.

    Args:
        url: Candidate URL to probe.
        timeout: Connect/read timeout for the single HEAD request.

    Returns:
        True if the server answered 2xx (after redirects), False otherwise.
    """
    logger = get_global_logger()
    logger.debug("PROBE", f"HEAD {url} (timeout {timeout}s)")

    try:
        with make_session() as session:
            resp = session.head(url, allow_redirects=True, timeout=timeout)
    except requests.RequestException as err:
        logger.debug("PROBE", f"HEAD {url} failed: {err}")
        return False

    logger.debug("PROBE", f"HEAD {url} -> {resp.status_code}")
    return 200 <= resp.status_code < 300
