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
"""Shared fixtures: an in-process session service behind httpx.MockTransport."""

from __future__ import annotations

from urllib.parse import urlsplit

import httpx
import pytest
from starlette.requests import Request

from sessionguard.client.adapters.httpx_adapter import HttpxClientAdapter
from sessionguard.config.properties.security import SessionAuthProperties
from sessionguard.security.authenticator import SessionAuthenticator


class FakeSessionService:
    """Answers ``GET /session/{token}`` from an in-memory dict and records every call."""

    def __init__(self) -> None:
        self.sessions: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []
        # Set to override the response for every call.
        self.response: httpx.Response | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.response is not None:
            return self.response
        token = request.url.path.rsplit("/", 1)[-1]
        session = self.sessions.get(token)
        if session is None:
            return httpx.Response(404)
        return httpx.Response(200, json=session)


def make_request(url: str = "https://example.com/orders", cookies: tuple[str, ...] = ()) -> Request:
    """Build a Starlette request with one raw ``Cookie`` header per entry of *cookies*."""
    parts = urlsplit(url)
    default_port = 443 if parts.scheme == "https" else 80
    headers = [(b"host", parts.netloc.encode())]
    headers += [(b"cookie", cookie.encode()) for cookie in cookies]
    scope = {
        "type": "http",
        "method": "GET",
        "scheme": parts.scheme,
        "server": (parts.hostname, parts.port or default_port),
        "path": parts.path or "/",
        "root_path": "",
        "query_string": parts.query.encode(),
        "headers": headers,
    }
    return Request(scope)


@pytest.fixture
def session_service() -> FakeSessionService:
    service = FakeSessionService()
    service.sessions["abc123"] = {"userFullName": "Jane Doe"}
    return service


@pytest.fixture
def http_client(session_service: FakeSessionService) -> HttpxClientAdapter:
    return HttpxClientAdapter(transport=httpx.MockTransport(session_service.handler))


@pytest.fixture
def authenticator(http_client: HttpxClientAdapter) -> SessionAuthenticator:
    return SessionAuthenticator(http_client)


@pytest.fixture
def redirecting_authenticator(http_client: HttpxClientAdapter) -> SessionAuthenticator:
    return SessionAuthenticator(http_client, SessionAuthProperties(redirect_to_login_on_challenge=True))


@pytest.fixture
def request_factory():
    return make_request
