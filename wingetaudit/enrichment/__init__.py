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

"""Enrichment steps applied to parsed package records.

architecture : module
    Infer a missing architecture from the download URL.
adobe : module
    Swap Acrobat Reader's installer for a verified MSP patch or EXE.

Each step takes a PackageRecord and returns a new one; none of them raise
for network or data problems.
"""

from .adobe import is_adobe_reader, resolve_adobe_installer
from .architecture import apply_architecture, infer_architecture

__all__ = [
    "apply_architecture",
    "infer_architecture",
    "is_adobe_reader",
    "resolve_adobe_installer",
]
