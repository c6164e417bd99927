"""Typed models for gateway credentials and the provider client descriptor."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, SecretStr, field_validator

API_VERSION = "2025-05-28.basil"
MAX_RETRIES = 3
TIMEOUT_MS = 20_000
DEFAULT_FEE_PERCENTAGE = 10.0


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class GatewayCredentials(BaseModel):
    """Primary credentials, read once when the policy is initialized.

    The publishable key and webhook secret are looked up on demand by
    ``GatewayPolicy`` and are deliberately not part of this snapshot.
    """

    model_config = ConfigDict(frozen=True)

    secret_key: SecretStr
    environment: str = Environment.DEVELOPMENT.value
    fee_percentage: float = Field(default=DEFAULT_FEE_PERCENTAGE, ge=0.0, le=100.0)

    @field_validator("secret_key")
    @classmethod
    def _secret_key_not_blank(cls, value: SecretStr) -> SecretStr:
        if not value.get_secret_value().strip():
            raise ValueError("secret_key must be non-empty")
        return value

    @field_validator("environment", mode="before")
    @classmethod
    def _default_environment(cls, value: object) -> object:
        # Unset and empty both mean development.
        if value is None or (isinstance(value, str) and not value):
            return Environment.DEVELOPMENT.value
        if isinstance(value, Environment):
            return value.value
        return value

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION.value


class ClientDescriptor(BaseModel):
    """Immutable settings handed to the payment provider client."""

    model_config = ConfigDict(frozen=True)

    api_version: str = API_VERSION
    max_retries: int = Field(default=MAX_RETRIES, ge=0)
    timeout_ms: int = Field(default=TIMEOUT_MS, gt=0)
    telemetry_enabled: bool = False

    @classmethod
    def for_credentials(cls, credentials: GatewayCredentials) -> "ClientDescriptor":
        return cls(telemetry_enabled=credentials.is_production)

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_ms / 1000
