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

"""Package list configuration for wingetaudit.

Public API:

- load_config: Load a YAML package list into an AuditConfig
- validate_config: Report every problem in a package list without raising

Example:
    Basic usage:

        from pathlib import Path
        from wingetaudit.config import load_config

        config = load_config(Path("packages.yaml"))
        print(config.packages)  # ("Google.Chrome", "Mozilla.Firefox", ...)

"""

from .loader import AuditConfig, load_config, validate_config

__all__ = ["AuditConfig", "load_config", "validate_config"]
