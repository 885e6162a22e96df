# Copyright 2026 Firefly Software Solutions Inc.
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
"""HTTP client factory."""

from __future__ import annotations

import httpx

from sessionguard.client.adapters.httpx_adapter import HttpxClientAdapter
from sessionguard.config.properties.client import ClientProperties
from sessionguard.core.config import Config


def create_http_client(config: Config, transport: httpx.AsyncBaseTransport | None = None) -> HttpxClientAdapter:
    """Build the shared httpx adapter from ``sessionguard.client``."""
    return HttpxClientAdapter.from_properties(config.bind(ClientProperties), transport=transport)
