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
"""Tests for SessionAuthenticationMiddleware inside a Starlette app."""

from __future__ import annotations

from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import JSONResponse, PlainTextResponse
from starlette.routing import Route
from starlette.testclient import TestClient

from sessionguard.security.identity import current_identity
from sessionguard.web.middleware import session_auth_middleware

SESSION_COOKIE = {"Cookie": "X-Session-Token=abc123"}


async def whoami(request: Request) -> JSONResponse:
    identity = current_identity(request)
    return JSONResponse({"authenticated": identity.is_authenticated, "claims": identity.claims})


async def admin(request: Request) -> PlainTextResponse:
    if not current_identity(request).is_authenticated:
        return PlainTextResponse("denied", status_code=401)
    return PlainTextResponse("welcome")


def _create_test_app(authenticator, **kwargs) -> Starlette:
    return Starlette(
        routes=[
            Route("/whoami", whoami),
            Route("/orders", whoami),
            Route("/admin", admin),
            Route("/health", whoami),
        ],
        middleware=[session_auth_middleware(authenticator, **kwargs)],
    )


class TestIdentityAssignment:
    def test_anonymous_without_cookie(self, authenticator, session_service):
        client = TestClient(_create_test_app(authenticator))

        response = client.get("/whoami")

        assert response.status_code == 200
        assert response.json() == {"authenticated": False, "claims": {}}
        assert session_service.requests == []

    def test_authenticated_with_valid_cookie(self, authenticator, session_service):
        client = TestClient(_create_test_app(authenticator))

        response = client.get("/whoami", headers=SESSION_COOKIE)

        assert response.json() == {
            "authenticated": True,
            "claims": {"token": "abc123", "userFullName": "Jane Doe"},
        }
        assert [str(r.url) for r in session_service.requests] == ["http://testserver/session/abc123"]

    def test_unknown_token_is_anonymous(self, authenticator):
        client = TestClient(_create_test_app(authenticator))

        response = client.get("/whoami", headers={"Cookie": "X-Session-Token=stale"})

        assert response.json()["authenticated"] is False

    def test_excluded_path_skips_lookup(self, authenticator, session_service):
        client = TestClient(_create_test_app(authenticator, exclude_patterns=["/health"]))

        response = client.get("/health", headers=SESSION_COOKIE)

        assert response.json()["authenticated"] is False
        assert session_service.requests == []


class TestProtectedPaths:
    def test_anonymous_gets_problem_detail(self, authenticator):
        client = TestClient(_create_test_app(authenticator, protected_patterns=["/orders*"]))

        response = client.get("/orders")

        assert response.status_code == 401
        assert response.headers["content-type"].startswith("application/problem+json")
        assert response.json()["instance"] == "/orders"

    def test_authenticated_reaches_handler(self, authenticator):
        client = TestClient(_create_test_app(authenticator, protected_patterns=["/orders*"]))

        response = client.get("/orders", headers=SESSION_COOKIE)

        assert response.status_code == 200
        assert response.json()["authenticated"] is True

    def test_unprotected_path_open_to_anonymous(self, authenticator):
        client = TestClient(_create_test_app(authenticator, protected_patterns=["/orders*"]))

        assert client.get("/whoami").status_code == 200


class TestChallengeInPipeline:
    def test_raw_401_without_redirect(self, authenticator):
        client = TestClient(_create_test_app(authenticator, protected_patterns=["/orders"]))

        response = client.get("/orders", follow_redirects=False)

        assert response.status_code == 401

    def test_redirect_to_login(self, redirecting_authenticator):
        client = TestClient(_create_test_app(redirecting_authenticator, protected_patterns=["/orders"]))

        response = client.get("/orders?page=2", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == "/login?returnUrl=http%3A%2F%2Ftestserver%2Forders%3Fpage%3D2"

    def test_handler_401_is_challenged(self, redirecting_authenticator):
        client = TestClient(_create_test_app(redirecting_authenticator))

        response = client.get("/admin", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"].startswith("/login?returnUrl=")

    def test_success_untouched_with_redirect_enabled(self, redirecting_authenticator):
        client = TestClient(_create_test_app(redirecting_authenticator))

        response = client.get("/admin", headers=SESSION_COOKIE, follow_redirects=False)

        assert response.status_code == 200
        assert response.text == "welcome"
