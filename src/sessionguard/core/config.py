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
"""Configuration from packaged defaults, YAML/TOML files and environment variables."""

from __future__ import annotations

import dataclasses
import importlib.resources
import os
import re
import tomllib
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, get_type_hints

import yaml  # type: ignore[import-untyped]

from sessionguard.kernel.exceptions import ConfigurationException

T = TypeVar("T")

_PLACEHOLDER_RE = re.compile(r"\$\{([^}]+)\}")

_CONFIG_PROPERTIES_ATTR = "__sessionguard_config_prefix__"

_ENV_PREFIX = "SESSIONGUARD_"

_DEFAULTS_SOURCE = "sessionguard-defaults.yaml (framework defaults)"


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass as bindable to a configuration prefix.

    Usage:
        @config_properties(prefix="sessionguard.security")
        @dataclass
        class SessionAuthProperties:
            login_url: str = "/login"
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def _read(path: Path) -> dict[str, Any]:
    if path.suffix == ".toml":
        with open(path, "rb") as f:
            return tomllib.load(f) or {}
    with open(path) as f:
        return yaml.safe_load(f) or {}


def _env_key(key: str) -> str:
    """sessionguard.security.login_url -> SESSIONGUARD_SECURITY_LOGIN_URL"""
    return _ENV_PREFIX + key.removeprefix("sessionguard.").upper().replace(".", "_").replace("-", "_")


class Config:
    """Nested configuration with dot-notation access.

    Priority (highest wins):
    1. Environment variables (SESSIONGUARD_SECTION_KEY format)
    2. Configuration dict / file values
    3. Dataclass defaults
    """

    def __init__(self, data: dict[str, Any] | None = None, sources: list[str] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = sources or []

    @property
    def loaded_sources(self) -> list[str]:
        """Config sources that were merged, in merge order."""
        return list(self._loaded_sources)

    @classmethod
    def defaults(cls) -> Config:
        """Configuration holding only the packaged defaults."""
        resource = importlib.resources.files("sessionguard.resources").joinpath("sessionguard-defaults.yaml")
        with importlib.resources.as_file(resource) as p:
            return cls(_read(p), [_DEFAULTS_SOURCE])

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        active_profiles: list[str] | None = None,
        load_defaults: bool = True,
    ) -> Config:
        """Load *path* over the packaged defaults.

        Profile overlays ``{stem}-{profile}{suffix}`` next to *path* are
        merged after it, in the given order. A missing *path* is skipped.
        """
        path = Path(path)
        base = cls.defaults() if load_defaults else cls()
        data, sources = base._data, base._loaded_sources

        if path.exists():
            candidates = [(path, str(path))]
            for profile in active_profiles or []:
                overlay = path.parent / f"{path.stem}-{profile}{path.suffix}"
                candidates.append((overlay, f"{overlay} (profile: {profile})"))
            for candidate, label in candidates:
                if candidate.exists():
                    data = _deep_merge(data, _read(candidate))
                    sources.append(label)

        return cls(data, sources)

    def _lookup(self, key: str) -> Any:
        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict):
                return None
            current = current.get(part)
        return current

    def get(self, key: str, default: Any = None) -> Any:
        """Value at *key*, an env var override winning over the file value.

        String values may hold ``${ENV_VAR}``, ``${config.key}`` or
        ``${key:default}`` placeholders.
        """
        value = os.environ.get(_env_key(key))
        if value is None:
            value = self._lookup(key)
        if value is None:
            return default
        return self._resolve(value)

    def _resolve(self, value: Any) -> Any:
        if not isinstance(value, str) or "${" not in value:
            return value

        def _replace(match: re.Match[str]) -> str:
            ref, _, fallback = match.group(1).partition(":")
            found = os.environ.get(ref)
            if found is None:
                found = self._lookup(ref)
            if found is not None:
                return str(found)
            if match.group(1) != ref:
                return fallback
            raise ConfigurationException(
                f"Cannot resolve placeholder '{match.group(0)}': not found in environment or config"
            )

        return _PLACEHOLDER_RE.sub(_replace, value)

    def get_section(self, prefix: str) -> dict[str, Any]:
        section = self._lookup(prefix)
        return section if isinstance(section, dict) else {}

    def bind(self, config_cls: type[T]) -> T:
        """Build a @config_properties dataclass from its section.

        Each field may be overridden by its env var, e.g.
        ``SESSIONGUARD_SECURITY_REDIRECT_TO_LOGIN_ON_CHALLENGE=true``.
        """
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ConfigurationException(f"{config_cls.__name__} is not decorated with @config_properties")

        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(config_cls):  # type: ignore[arg-type]
            key = f"{prefix}.{field.name}"
            value = self.get(key)
            if value is None:
                continue
            expected = hints.get(field.name)
            if isinstance(value, str) and expected in (int, float):
                try:
                    value = expected(value)
                except ValueError as exc:
                    raise ConfigurationException(f"Invalid value {value!r} for '{key}'") from exc
            elif isinstance(value, str) and expected is bool:
                value = value.lower() in ("true", "1", "yes")
            kwargs[field.name] = value

        return config_cls(**kwargs)
