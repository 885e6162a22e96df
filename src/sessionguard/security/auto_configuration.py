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
"""Factories wiring a SessionAuthenticator from configuration."""

from __future__ import annotations

from sessionguard.client.ports.outbound import HttpClientPort
from sessionguard.config.properties.security import SessionAuthProperties
from sessionguard.core.config import Config
from sessionguard.security.authenticator import SessionAuthenticator


def create_authenticator(config: Config, http_client: HttpClientPort | None) -> SessionAuthenticator:
    """Bind ``sessionguard.security`` and build the authenticator.

    Raises ConfigurationException when *http_client* is missing.
    """
    properties = config.bind(SessionAuthProperties)
    return SessionAuthenticator(http_client, properties)
