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
"""Application bootstrap — builds the session authenticator from configuration."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import httpx
from starlette.middleware import Middleware

from sessionguard.client.adapters.httpx_adapter import HttpxClientAdapter
from sessionguard.client.auto_configuration import create_http_client
from sessionguard.core.config import Config
from sessionguard.logging import StructlogAdapter, configure_logging
from sessionguard.security.authenticator import SessionAuthenticator
from sessionguard.security.auto_configuration import create_authenticator
from sessionguard.web.middleware import session_auth_middleware


class SessionGuardApplication:
    """Owns the configured logging, the shared HTTP client and the authenticator.

    Startup sequence:
    1. Load configuration (packaged defaults, then *config_path* and profiles)
    2. Configure logging from ``sessionguard.logging``
    3. Create the shared httpx client from ``sessionguard.client``
    4. Create the authenticator from ``sessionguard.security``

    Usage::

        guard = SessionGuardApplication("sessionguard.yaml")
        app = Starlette(
            routes=[...],
            middleware=[guard.middleware(protected_patterns=["/orders*"])],
            on_shutdown=[guard.shutdown],
        )
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        active_profiles: list[str] | None = None,
        config: Config | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        if config is None:
            config = Config.from_file(config_path, active_profiles) if config_path else Config.defaults()
        self.config = config

        self._logging = configure_logging(self.config)
        self._logger = self._logging.get_logger("sessionguard.core")

        self._http_client = create_http_client(self.config, transport=transport)
        self._authenticator = create_authenticator(self.config, self._http_client)

        self._logger.info(
            "sessionguard_started",
            sources=self.config.loaded_sources,
            redirect_to_login_on_challenge=self._authenticator.redirect_to_login_on_challenge,
        )

    @property
    def logging(self) -> StructlogAdapter:
        return self._logging

    @property
    def http_client(self) -> HttpxClientAdapter:
        return self._http_client

    @property
    def authenticator(self) -> SessionAuthenticator:
        return self._authenticator

    def middleware(
        self,
        protected_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
    ) -> Middleware:
        return session_auth_middleware(self._authenticator, protected_patterns, exclude_patterns)

    async def shutdown(self) -> None:
        """Close the shared HTTP client."""
        await self._http_client.close()
        self._logger.info("sessionguard_stopped")
