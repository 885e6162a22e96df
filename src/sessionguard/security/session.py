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
"""UserSession — the session record returned by the session service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from sessionguard.kernel.exceptions import SessionLookupException


class UserSession(BaseModel):
    """Session payload, e.g. ``{"userFullName": "Jane Doe", ...}``.

    Fetched fresh on every request and never stored. Unknown keys are ignored.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    user_full_name: str = Field(alias="userFullName")

    @classmethod
    def from_payload(cls, payload: Any) -> UserSession | None:
        """Build a session from decoded JSON.

        A JSON ``null`` body means "no session". Anything else that does not
        validate raises :class:`SessionLookupException`.
        """
        if payload is None:
            return None
        try:
            return cls.model_validate(payload)
        except ValidationError as exc:
            raise SessionLookupException(
                "Session service returned an invalid session body",
                code="SESSION_BODY_INVALID",
                context={"errors": exc.error_count()},
            ) from exc
