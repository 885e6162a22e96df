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
"""sessionguard security — session-cookie authentication and login challenge."""

from sessionguard.security.authenticator import SessionAuthenticator
from sessionguard.security.auto_configuration import create_authenticator
from sessionguard.security.cookies import SESSION_TOKEN_COOKIE, get_session_token
from sessionguard.security.identity import (
    ANONYMOUS,
    Anonymous,
    Authenticated,
    Identity,
    current_identity,
)
from sessionguard.security.session import UserSession

__all__ = [
    "ANONYMOUS",
    "SESSION_TOKEN_COOKIE",
    "Anonymous",
    "Authenticated",
    "Identity",
    "SessionAuthenticator",
    "UserSession",
    "create_authenticator",
    "current_identity",
    "get_session_token",
]
