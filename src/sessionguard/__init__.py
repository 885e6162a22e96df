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
"""sessionguard — session-cookie authentication for Starlette applications.

Resolves the ``X-Session-Token`` cookie against a same-origin session
service and attaches ``Authenticated`` or ``ANONYMOUS`` to each request.
"""

from sessionguard.client import HttpClientPort, HttpxClientAdapter, create_http_client
from sessionguard.core.application import SessionGuardApplication
from sessionguard.core.config import Config
from sessionguard.kernel.exceptions import ConfigurationException, SessionLookupException
from sessionguard.security import (
    ANONYMOUS,
    Anonymous,
    Authenticated,
    Identity,
    SessionAuthenticator,
    UserSession,
    create_authenticator,
    current_identity,
)
from sessionguard.web import SessionAuthenticationMiddleware, session_auth_middleware

__version__ = "0.1.0"

__all__ = [
    "ANONYMOUS",
    "Anonymous",
    "Authenticated",
    "Config",
    "ConfigurationException",
    "HttpClientPort",
    "HttpxClientAdapter",
    "Identity",
    "SessionAuthenticationMiddleware",
    "SessionAuthenticator",
    "SessionGuardApplication",
    "SessionLookupException",
    "UserSession",
    "create_authenticator",
    "create_http_client",
    "current_identity",
    "session_auth_middleware",
]
