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
"""SessionLookupClient — resolves a session token against the session service.

The session service lives on the same origin as the inbound request:
``GET {scheme}://{host[:port]}/session/{token}``.
"""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote, urlsplit

import httpx

from sessionguard.client.ports.outbound import HttpClientPort
from sessionguard.kernel.exceptions import SessionLookupException
from sessionguard.logging.masking import mask_token
from sessionguard.security.session import UserSession

logger = logging.getLogger(__name__)


class SessionLookupClient:
    """Performs the single outbound lookup for one authentication attempt.

    No retries: a failed lookup is final for that request.

    Args:
        http_client: Long-lived client shared across requests.
        session_path: Path of the session resource on the request's host.
    """

    def __init__(self, http_client: HttpClientPort, session_path: str = "/session") -> None:
        self._http_client = http_client
        self._session_path = "/" + session_path.strip("/")

    def lookup_url(self, request_url: Any, token: str) -> str:
        """Build the lookup URL from the inbound request URL.

        User-info in the request URL is dropped; only scheme, host and an
        explicit port are reused.

        >>> SessionLookupClient(None).lookup_url("https://example.com/a?b=1", "abc123")
        'https://example.com/session/abc123'
        """
        parts = urlsplit(str(request_url))
        host = parts.hostname or ""
        if ":" in host:
            host = f"[{host}]"
        authority = host if parts.port is None else f"{host}:{parts.port}"
        return f"{parts.scheme}://{authority}{self._session_path}/{quote(token, safe='')}"

    async def find_session(self, request_url: Any, token: str) -> UserSession | None:
        """Look up the session for *token*.

        Returns ``None`` for a non-success status or an empty/``null`` body.
        Raises :class:`SessionLookupException` for transport failures and
        malformed bodies. ``asyncio.CancelledError`` propagates unchanged.
        """
        url = self.lookup_url(request_url, token)
        try:
            response = await self._http_client.request("GET", url)
        except httpx.HTTPError as exc:
            raise SessionLookupException(
                f"Session lookup request failed: {exc.__class__.__name__}",
                code="SESSION_LOOKUP_TRANSPORT",
                context={"token": mask_token(token)},
            ) from exc

        if not response.is_success:
            logger.debug("Session lookup for %s returned HTTP %s", mask_token(token), response.status_code)
            return None

        if not response.content:
            return None

        try:
            payload = response.json()
        except ValueError as exc:
            raise SessionLookupException(
                "Session service returned a non-JSON body",
                code="SESSION_BODY_INVALID",
                context={"token": mask_token(token)},
            ) from exc

        return UserSession.from_payload(payload)
