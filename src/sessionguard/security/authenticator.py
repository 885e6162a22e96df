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
"""SessionAuthenticator — resolves the session cookie into a request identity.

Two operations, called by whatever HTTP layer hosts it:

- :meth:`SessionAuthenticator.authenticate` turns a request into an
  :data:`~sessionguard.security.identity.Identity`.
- :meth:`SessionAuthenticator.challenge` decides how an authorization denial
  is presented (raw 401 or a redirect to the login page).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from sessionguard.client.ports.outbound import HttpClientPort
from sessionguard.config.properties.security import SessionAuthProperties
from sessionguard.kernel.exceptions import ConfigurationException, SessionLookupException
from sessionguard.logging.masking import mask_token
from sessionguard.security.challenge import redirect_to_login_if_unauthorized
from sessionguard.security.cookies import get_session_token
from sessionguard.security.identity import ANONYMOUS, Authenticated, Identity
from sessionguard.security.session_client import SessionLookupClient

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SessionAuthenticator:
    """Authenticates requests by their ``X-Session-Token`` cookie.

    Built once per application with an explicit HTTP client; holds no
    per-request state, so one instance serves concurrent requests.

    Args:
        http_client: Client used for the session lookup. ``None`` or an object
            that is not an :class:`HttpClientPort` raises
            :class:`ConfigurationException`.
        properties: Cookie name, session path and challenge settings.
        clock: Returns the current aware datetime; used for cookie expiry.
    """

    def __init__(
        self,
        http_client: HttpClientPort | None,
        properties: SessionAuthProperties | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if http_client is None:
            raise ConfigurationException("Cannot resolve http client.", code="HTTP_CLIENT_MISSING")
        if not isinstance(http_client, HttpClientPort):
            raise ConfigurationException(
                f"{type(http_client).__name__} is not an HttpClientPort",
                code="HTTP_CLIENT_INVALID",
            )
        self._properties = properties or SessionAuthProperties()
        self._sessions = SessionLookupClient(http_client, self._properties.session_path)
        self._clock = clock

    @property
    def properties(self) -> SessionAuthProperties:
        return self._properties

    @property
    def redirect_to_login_on_challenge(self) -> bool:
        return self._properties.redirect_to_login_on_challenge

    async def authenticate(self, request: Any) -> Identity:
        """Resolve *request* to ``Authenticated`` or ``ANONYMOUS``.

        *request* needs ``headers`` and ``url``. No lookup is issued when the
        cookie is missing, empty or expired. Any lookup failure yields
        ``ANONYMOUS``; ``asyncio.CancelledError`` propagates.
        """
        token = get_session_token(request.headers, self._properties.cookie_name, now=self._clock())
        if token is None:
            return ANONYMOUS

        try:
            session = await self._sessions.find_session(request.url, token)
        except SessionLookupException as exc:
            logger.warning("Session lookup failed for %s: %s", mask_token(token), exc)
            return ANONYMOUS

        if session is None:
            logger.debug("No session for token %s", mask_token(token))
            return ANONYMOUS

        logger.debug("Authenticated %r via session token %s", session.user_full_name, mask_token(token))
        return Authenticated(token=token, user_full_name=session.user_full_name)

    def challenge(
        self,
        request: Any,
        prior_result: Any,
        redirect_to_login_on_challenge: bool | None = None,
    ) -> Any:
        """Decide the response for a request the pipeline has already answered.

        With redirects disabled (the default) *prior_result* is returned
        unchanged. With redirects enabled a 401 *prior_result* is superseded
        by a 302 to ``login_url`` carrying the original URL. Performs no I/O.
        """
        if redirect_to_login_on_challenge is None:
            redirect_to_login_on_challenge = self._properties.redirect_to_login_on_challenge
        if not redirect_to_login_on_challenge:
            return prior_result
        return redirect_to_login_if_unauthorized(
            request,
            prior_result,
            login_url=self._properties.login_url,
            return_url_parameter=self._properties.return_url_parameter,
        )
