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
"""sessionguard logging — structlog configuration and token masking."""

from __future__ import annotations

from sessionguard.config.properties.logging import LoggingProperties
from sessionguard.core.config import Config
from sessionguard.logging.masking import mask_token
from sessionguard.logging.structlog_adapter import StructlogAdapter

__all__ = [
    "StructlogAdapter",
    "configure_logging",
    "mask_token",
]


def configure_logging(config: Config) -> StructlogAdapter:
    """Bind ``sessionguard.logging`` and install the structlog pipeline."""
    adapter = StructlogAdapter(config.bind(LoggingProperties))
    adapter.configure()
    return adapter
