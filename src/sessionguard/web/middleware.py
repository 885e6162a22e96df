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
"""Starlette middleware hosting SessionAuthenticator in the request pipeline."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from fnmatch import fnmatch

from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import JSONResponse, Response
from starlette.types import ASGIApp

from sessionguard.security.authenticator import SessionAuthenticator
from sessionguard.security.identity import ANONYMOUS

logger = logging.getLogger(__name__)


def _matches(path: str, patterns: Sequence[str]) -> bool:
    return any(fnmatch(path, p) for p in patterns)


def unauthorized_response(path: str) -> JSONResponse:
    """Build an RFC 7807 problem-detail 401 response."""
    return JSONResponse(
        {
            "type": "about:blank",
            "title": "Unauthorized",
            "status": 401,
            "detail": "Authentication is required to access this resource.",
            "instance": path,
        },
        status_code=401,
        media_type="application/problem+json",
    )


class SessionAuthenticationMiddleware(BaseHTTPMiddleware):
    """Populates ``request.state.identity`` and applies the login challenge.

    For every request outside ``exclude_patterns`` the authenticator runs
    before the route handler. Anonymous requests to ``protected_patterns``
    are answered with a 401 without reaching the handler. Every response,
    whether produced here or by the handler, then goes through
    :meth:`SessionAuthenticator.challenge`.

    Paths are matched with fnmatch globs.
    """

    def __init__(
        self,
        app: ASGIApp,
        authenticator: SessionAuthenticator,
        protected_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
    ) -> None:
        super().__init__(app)
        self._authenticator = authenticator
        self._protected_patterns = list(protected_patterns)
        self._exclude_patterns = list(exclude_patterns)

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        path = request.url.path
        if _matches(path, self._exclude_patterns):
            request.state.identity = ANONYMOUS
            return await call_next(request)

        identity = await self._authenticator.authenticate(request)
        request.state.identity = identity

        if not identity.is_authenticated and _matches(path, self._protected_patterns):
            logger.debug("Unauthenticated request for protected path %s", path)
            response: Response = unauthorized_response(path)
        else:
            response = await call_next(request)

        return self._authenticator.challenge(request, response)


def session_auth_middleware(
    authenticator: SessionAuthenticator,
    protected_patterns: Sequence[str] = (),
    exclude_patterns: Sequence[str] = (),
) -> Middleware:
    """Starlette ``Middleware`` entry for ``Starlette(middleware=[...])``."""
    return Middleware(
        SessionAuthenticationMiddleware,
        authenticator=authenticator,
        protected_patterns=protected_patterns,
        exclude_patterns=exclude_patterns,
    )
