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
"""Tests for HttpxClientAdapter and the client factory."""

from __future__ import annotations

import httpx
import pytest

from sessionguard.client.adapters.httpx_adapter import HttpxClientAdapter
from sessionguard.client.auto_configuration import create_http_client
from sessionguard.client.ports.outbound import HttpClientPort
from sessionguard.core.config import Config


def _echo(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, json={"method": request.method, "url": str(request.url)})


class TestHttpxClientAdapter:
    def test_implements_port(self):
        assert isinstance(HttpxClientAdapter(), HttpClientPort)

    @pytest.mark.asyncio
    async def test_request_goes_through_transport(self):
        adapter = HttpxClientAdapter(transport=httpx.MockTransport(_echo))

        response = await adapter.request("GET", "https://example.com/session/t")

        assert response.json() == {"method": "GET", "url": "https://example.com/session/t"}
        await adapter.close()

    @pytest.mark.asyncio
    async def test_does_not_follow_redirects(self):
        calls: list[str] = []

        def _redirect(request: httpx.Request) -> httpx.Response:
            calls.append(str(request.url))
            return httpx.Response(302, headers={"location": "https://example.com/login"})

        adapter = HttpxClientAdapter(transport=httpx.MockTransport(_redirect))

        response = await adapter.request("GET", "https://example.com/session/t")

        assert response.status_code == 302
        assert calls == ["https://example.com/session/t"]

    @pytest.mark.asyncio
    async def test_stop_closes_client(self):
        adapter = HttpxClientAdapter(transport=httpx.MockTransport(_echo))
        await adapter.start()
        assert adapter.is_closed is False

        await adapter.stop()

        assert adapter.is_closed is True


class TestCreateHttpClient:
    @pytest.mark.asyncio
    async def test_timeout_from_config(self):
        adapter = create_http_client(Config({"sessionguard": {"client": {"timeout": 5}}}))

        assert adapter._client.timeout.read == 5
        await adapter.close()

    @pytest.mark.asyncio
    async def test_default_timeout(self):
        adapter = create_http_client(Config.defaults())

        assert adapter._client.timeout.connect == 30
        await adapter.close()
