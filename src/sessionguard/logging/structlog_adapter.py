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
"""StructlogAdapter — one structlog pipeline for structlog and stdlib loggers."""

from __future__ import annotations

import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

from sessionguard.config.properties.logging import LoggingProperties
from sessionguard.logging.masking import mask_sensitive


def _mask_sensitive_processor(
    logger: Any, method_name: str, event_dict: MutableMapping[str, Any]
) -> MutableMapping[str, Any]:
    return mask_sensitive(event_dict)


class StructlogAdapter:
    """Routes every log record through structlog processors.

    sessionguard modules log with ``logging.getLogger(__name__)``; those
    records reach the root handler and are rendered by a
    ``ProcessorFormatter`` sharing the same processor chain (token masking
    included) as loggers obtained from :meth:`get_logger`.
    """

    def __init__(self, properties: LoggingProperties | None = None) -> None:
        self._properties = properties or LoggingProperties()

    @property
    def properties(self) -> LoggingProperties:
        return self._properties

    @property
    def root_level(self) -> str:
        return str(self._properties.level.get("root", "INFO")).upper()

    def configure(self) -> None:
        shared: list[structlog.types.Processor] = [
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            _mask_sensitive_processor,
            structlog.processors.TimeStamper(fmt="iso"),
        ]
        if self._properties.format.lower() == "json":
            renderer: structlog.types.Processor = structlog.processors.JSONRenderer()
        else:
            renderer = structlog.dev.ConsoleRenderer()

        structlog.configure(
            processors=[*shared, structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(
            structlog.stdlib.ProcessorFormatter(
                processors=[structlog.stdlib.ProcessorFormatter.remove_processors_meta, renderer],
                foreign_pre_chain=shared,
            )
        )
        root = logging.getLogger()
        for existing in list(root.handlers):
            if getattr(existing, "_sessionguard", False):
                root.removeHandler(existing)
        handler._sessionguard = True  # type: ignore[attr-defined]
        root.addHandler(handler)
        root.setLevel(getattr(logging, self.root_level, logging.INFO))

        for module, level in self._properties.level.items():
            if module != "root":
                self.set_level(module, str(level))

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))
