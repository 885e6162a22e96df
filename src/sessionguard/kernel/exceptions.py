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
"""Exception hierarchy for sessionguard.

All library exceptions inherit from SessionGuardException, so callers can
catch the base class or a specific category.

Categories:
- ConfigurationException: a required collaborator is missing or misconfigured
- InfrastructureException: Network and upstream service failures

Task cancellation is not part of this hierarchy: ``asyncio.CancelledError``
propagates untouched through every authentication step.
"""

from __future__ import annotations


# =============================================================================
# Base Exception
# =============================================================================


class SessionGuardException(Exception):
    """Base exception for all sessionguard errors.

    Carries an optional error code and context dict for structured error data.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "SESSION_LOOKUP_404").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Configuration Exceptions
# =============================================================================


class ConfigurationException(SessionGuardException):
    """A required collaborator (HTTP client, configuration section) is unavailable.

    Fatal: authentication cannot proceed until the application is fixed.
    """


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(SessionGuardException):
    """Infrastructure failures: network, upstream services."""


class ExternalServiceException(InfrastructureException):
    """Failure communicating with an external service."""


class SessionLookupException(ExternalServiceException):
    """The session service could not resolve a token.

    Raised for transport failures and malformed response bodies. The
    authenticator treats it exactly like "no session".
    """
