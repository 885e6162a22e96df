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
"""Challenge handling: turn a 401 into a redirect to the login page."""

from __future__ import annotations

from typing import Any
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from starlette.responses import RedirectResponse

UNAUTHORIZED = 401


def login_redirect_url(login_url: str, return_url: str, return_url_parameter: str = "returnUrl") -> str:
    """Append the original request URL to *login_url* as a query parameter.

    >>> login_redirect_url("/login", "https://example.com/orders?page=2")
    '/login?returnUrl=https%3A%2F%2Fexample.com%2Forders%3Fpage%3D2'
    """
    parts = urlsplit(login_url)
    query = parse_qsl(parts.query, keep_blank_values=True)
    query.append((return_url_parameter, return_url))
    return urlunsplit((parts.scheme, parts.netloc, parts.path, urlencode(query), parts.fragment))


def redirect_to_login_if_unauthorized(
    request: Any,
    prior_result: Any,
    login_url: str,
    return_url_parameter: str = "returnUrl",
) -> Any:
    """Supersede a 401 *prior_result* with a 302 to the login page.

    Any other status is passed through untouched.
    """
    if getattr(prior_result, "status_code", None) != UNAUTHORIZED:
        return prior_result
    location = login_redirect_url(login_url, str(request.url), return_url_parameter)
    return RedirectResponse(url=location, status_code=302)
