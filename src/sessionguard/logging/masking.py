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
"""Token masking for log output."""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any

SENSITIVE_KEYS = frozenset({"token", "session_token", "cookie"})


def mask_token(token: str | None) -> str:
    """Keep the first four characters of a token, hide the rest.

    >>> mask_token("abc123def")
    'abc1*****'
    """
    if not token:
        return ""
    visible = token[:4]
    return visible + "*" * (len(token) - len(visible))


def mask_sensitive(event_dict: MutableMapping[str, Any]) -> MutableMapping[str, Any]:
    """Mask every sensitive key of *event_dict* in place."""
    for key in SENSITIVE_KEYS & event_dict.keys():
        value = event_dict[key]
        if isinstance(value, str):
            event_dict[key] = mask_token(value)
    return event_dict
