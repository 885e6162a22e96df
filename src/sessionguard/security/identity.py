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
"""Request identity: either ``Anonymous`` or ``Authenticated(token, user_full_name)``.

Exactly one of the two is attached to every authenticated-or-not request;
there is no partially populated identity.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, ClassVar, TypeAlias

AUTHENTICATION_TYPE = "custom_authentication"

TOKEN_CLAIM = "token"
USER_FULL_NAME_CLAIM = "userFullName"


@dataclass(frozen=True)
class Anonymous:
    """The unauthenticated identity. Carries no claims."""

    is_authenticated: ClassVar[bool] = False
    authentication_type: ClassVar[str | None] = None

    @property
    def claims(self) -> dict[str, str]:
        return {}


@dataclass(frozen=True)
class Authenticated:
    """An identity resolved from a valid session token.

    Attributes:
        token: The raw session token (excluded from ``repr``).
        user_full_name: Display name reported by the session service.
    """

    token: str = field(repr=False)
    user_full_name: str

    is_authenticated: ClassVar[bool] = True
    authentication_type: ClassVar[str | None] = AUTHENTICATION_TYPE

    def __post_init__(self) -> None:
        if not isinstance(self.token, str) or not self.token:
            raise ValueError("Authenticated identity requires a non-empty token")
        if not isinstance(self.user_full_name, str):
            raise ValueError("Authenticated identity requires a userFullName claim")

    @property
    def claims(self) -> dict[str, str]:
        """The two named claims: ``token`` and ``userFullName``."""
        return {TOKEN_CLAIM: self.token, USER_FULL_NAME_CLAIM: self.user_full_name}


Identity: TypeAlias = Anonymous | Authenticated

ANONYMOUS = Anonymous()


def current_identity(request: Any) -> Identity:
    """Return the identity assigned to *request*, or ``ANONYMOUS`` if none was."""
    identity = getattr(getattr(request, "state", None), "identity", None)
    if isinstance(identity, (Anonymous, Authenticated)):
        return identity
    return ANONYMOUS
