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
"""Session-token extraction from ``Cookie`` request headers.

Every ``Cookie`` header is parsed into a :class:`CookieHeaderValue`: the
cookies it carries plus any ``Expires``/``Max-Age``/``Domain``/``Path``
attributes. Headers whose expiry has passed are ignored; among the rest, the
first cookie whose name matches exactly wins.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from email.utils import parsedate_to_datetime
from typing import Any

logger = logging.getLogger(__name__)

SESSION_TOKEN_COOKIE = "X-Session-Token"

_ATTRIBUTES = frozenset({"expires", "max-age", "domain", "path", "secure", "httponly", "samesite"})


@dataclass
class CookieHeaderValue:
    """One parsed ``Cookie`` header."""

    cookies: list[tuple[str, str]] = field(default_factory=list)
    expires: datetime | None = None
    max_age: int | None = None
    domain: str | None = None
    path: str | None = None
    # An Expires/Max-Age attribute was present but could not be parsed
    malformed_expiry: bool = False

    def expiry(self, now: datetime) -> datetime | None:
        """Absolute expiry of this header, ``Max-Age`` taking precedence."""
        if self.max_age is not None:
            try:
                return now + timedelta(seconds=self.max_age)
            except OverflowError:
                # Beyond the datetime range in either direction
                return datetime.max.replace(tzinfo=timezone.utc) if self.max_age > 0 else datetime.min.replace(
                    tzinfo=timezone.utc
                )
        return self.expires

    def is_live(self, now: datetime) -> bool:
        """``True`` when the header carries no expiry or one in the future."""
        if self.malformed_expiry:
            return False
        if self.max_age is not None:
            return self.max_age > 0
        return self.expires is None or self.expires > now

    def get(self, name: str) -> str | None:
        for cookie_name, value in self.cookies:
            if cookie_name == name:
                return value
        return None


def _parse_expires(value: str) -> datetime | None:
    try:
        expires = parsedate_to_datetime(value)
    except (TypeError, ValueError):
        return None
    if expires.tzinfo is None:
        expires = expires.replace(tzinfo=timezone.utc)
    return expires


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] == '"':
        return value[1:-1]
    return value


def parse_cookie_header(header: str) -> CookieHeaderValue:
    """Parse a raw ``Cookie`` header value.

    >>> parse_cookie_header("a=1; X-Session-Token=abc").get("X-Session-Token")
    'abc'
    """
    parsed = CookieHeaderValue()
    for segment in header.split(";"):
        segment = segment.strip()
        if not segment:
            continue
        name, sep, value = segment.partition("=")
        name = name.strip()
        value = _unquote(value.strip()) if sep else ""
        attribute = name.lower()

        if attribute not in _ATTRIBUTES:
            if name:
                parsed.cookies.append((name, value))
            continue

        if attribute == "expires":
            parsed.expires = _parse_expires(value)
            if parsed.expires is None:
                parsed.malformed_expiry = True
        elif attribute == "max-age":
            try:
                parsed.max_age = int(value)
            except ValueError:
                parsed.malformed_expiry = True
        elif attribute == "domain":
            parsed.domain = value or None
        elif attribute == "path":
            parsed.path = value or None
    return parsed


def cookie_headers(headers: Any) -> list[str]:
    """All raw ``Cookie`` header values from a Starlette/httpx headers object or a mapping."""
    if hasattr(headers, "getlist"):
        return list(headers.getlist("cookie"))
    if hasattr(headers, "get_list"):
        return list(headers.get_list("cookie"))
    if isinstance(headers, Mapping):
        return [str(v) for k, v in headers.items() if str(k).lower() == "cookie"]
    if isinstance(headers, Iterable):
        return [str(v) for k, v in headers if str(k).lower() == "cookie"]
    raise TypeError(f"Unsupported headers type: {type(headers).__name__}")


def get_session_cookie(
    headers: Any,
    name: str = SESSION_TOKEN_COOKIE,
    now: datetime | None = None,
) -> tuple[str, str] | None:
    """Return the first live ``(name, value)`` cookie named exactly *name*."""
    now = now or datetime.now(timezone.utc)
    for raw in cookie_headers(headers):
        header = parse_cookie_header(raw)
        value = header.get(name)
        if value is None:
            continue
        if not header.is_live(now):
            logger.debug("Ignoring expired %s cookie header", name)
            continue
        return name, value
    return None


def get_session_token(
    headers: Any,
    name: str = SESSION_TOKEN_COOKIE,
    now: datetime | None = None,
) -> str | None:
    """The session token carried by *headers*, or ``None`` if missing or empty."""
    cookie = get_session_cookie(headers, name, now)
    if cookie is None or not cookie[1]:
        return None
    return cookie[1]
