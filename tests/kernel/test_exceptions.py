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
"""Tests for the sessionguard exception hierarchy."""

from __future__ import annotations

import sessionguard.kernel as kernel
from sessionguard.kernel.exceptions import (
    ConfigurationException,
    ExternalServiceException,
    InfrastructureException,
    SessionGuardException,
    SessionLookupException,
)


class TestSessionGuardException:
    def test_basic_creation(self):
        exc = SessionGuardException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_code_and_context(self):
        exc = SessionLookupException("lookup failed", code="SESSION_LOOKUP_503", context={"status": 503})
        assert exc.code == "SESSION_LOOKUP_503"
        assert exc.context["status"] == 503

    def test_context_not_shared(self):
        SessionGuardException("a").context["key"] = "value"
        assert SessionGuardException("b").context == {}


class TestExceptionHierarchy:
    def test_configuration_is_sessionguard(self):
        assert issubclass(ConfigurationException, SessionGuardException)

    def test_lookup_is_infrastructure(self):
        assert issubclass(SessionLookupException, ExternalServiceException)
        assert issubclass(ExternalServiceException, InfrastructureException)
        assert issubclass(InfrastructureException, SessionGuardException)

    def test_kernel_exports_only_raised_categories(self):
        assert sorted(kernel.__all__) == [
            "ConfigurationException",
            "ExternalServiceException",
            "InfrastructureException",
            "SessionGuardException",
            "SessionLookupException",
        ]
