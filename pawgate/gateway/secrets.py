"""SecretsSource adapter — resolves configuration key → value.

Recognised keys::

    GATEWAY_SECRET_KEY        required at startup
    GATEWAY_PUBLISHABLE_KEY   required on first use
    GATEWAY_WEBHOOK_SECRET    required on first use
    RUNTIME_ENVIRONMENT       development | staging | production (default development)
    PLATFORM_FEE_PERCENTAGE   0-100 (default 10)
"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

SECRET_KEY = "GATEWAY_SECRET_KEY"
PUBLISHABLE_KEY = "GATEWAY_PUBLISHABLE_KEY"
WEBHOOK_SECRET = "GATEWAY_WEBHOOK_SECRET"
RUNTIME_ENVIRONMENT = "RUNTIME_ENVIRONMENT"
PLATFORM_FEE_PERCENTAGE = "PLATFORM_FEE_PERCENTAGE"


class SecretsSource(ABC):
    """Abstract contract for environment-scoped key/value configuration.

    Inject a concrete implementation into ``GatewayPolicy.initialize``.
    ``InMemorySecretsSource`` is the default for tests and local dev;
    ``EnvSecretsSource`` reads the process environment.
    """

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return the value for *key*, or *default* when it is not set."""
        ...

    def has(self, key: str) -> bool:
        """Return ``True`` if *key* is set to a non-blank value."""
        value = self.get(key)
        if value is None:
            return False
        return bool(str(value).strip())


class EnvSecretsSource(SecretsSource):
    """Reads ``os.environ`` on every lookup.

    When *dotenv_path* is given the file is loaded first with
    ``python-dotenv``; variables already in the environment win.
    """

    def __init__(self, dotenv_path: str | Path | None = None) -> None:
        if dotenv_path is not None:
            from dotenv import load_dotenv

            load_dotenv(dotenv_path, override=False)

    def get(self, key: str, default: Any = None) -> Any:
        return os.environ.get(key, default)


class InMemorySecretsSource(SecretsSource):
    """Mutable in-memory implementation — suitable for tests and local dev."""

    def __init__(self, values: dict[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def unset(self, key: str) -> None:
        self._values.pop(key, None)

    def __len__(self) -> int:
        return len(self._values)
