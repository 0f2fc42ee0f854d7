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

"""Network and file I/O helpers for wingetaudit.

Public API:

head_request : function
    Probe a URL with a bounded-timeout HEAD request.
atomic_write_text : function
    Write a text file via a .part file and an atomic rename.
"""

from .files import atomic_write_text
from .probe import DEFAULT_PROBE_TIMEOUT, Probe, head_request, make_session

__all__ = [
    "DEFAULT_PROBE_TIMEOUT",
    "Probe",
    "atomic_write_text",
    "head_request",
    "make_session",
]
