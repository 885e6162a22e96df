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
"""Session authentication configuration properties."""

from __future__ import annotations

from dataclasses import dataclass

from sessionguard.core.config import config_properties


@config_properties(prefix="sessionguard.security")
@dataclass
class SessionAuthProperties:
    """Configuration for session-cookie authentication (sessionguard.security.*).

    Attributes:
        cookie_name: Name of the cookie carrying the session token.
        session_path: Path prefix of the session service on the request's own host.
        redirect_to_login_on_challenge: Turn 401 challenges into a login redirect.
        login_url: Login page the challenge redirects to.
        return_url_parameter: Query parameter carrying the original request URL.
    """

    cookie_name: str = "X-Session-Token"
    session_path: str = "/session"
    redirect_to_login_on_challenge: bool = False
    login_url: str = "/login"
    return_url_parameter: str = "returnUrl"
