"""Configuration errors raised by the gateway policy."""

from __future__ import annotations


class ConfigError(Exception):
    """A payment gateway deployment defect.

    ``field`` is the logical credential/setting name (``secretKey``,
    ``publishableKey`` ...).  Messages never carry the configured value.
    """

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class MissingSecret(ConfigError):
    """A required secret is absent or empty."""

    def __init__(self, field: str, env_key: str | None = None) -> None:
        detail = f" (set {env_key})" if env_key else ""
        super().__init__(field, f"Missing required payment secret '{field}'{detail}")
        self.env_key = env_key


class InvalidSetting(ConfigError):
    """A setting is present but cannot be used."""

    def __init__(self, field: str, reason: str) -> None:
        super().__init__(field, f"Invalid payment setting '{field}': {reason}")
        self.reason = reason
