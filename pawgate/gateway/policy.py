"""Gateway policy — validated payment configuration for the whole process.

Construct exactly once at startup and pass the instance to every request
handler that needs it::

    policy = GatewayPolicy.initialize(EnvSecretsSource(".env"))
    descriptor = policy.client_descriptor()

Validation happens in two tiers.  ``GATEWAY_SECRET_KEY`` (and a malformed
``PLATFORM_FEE_PERCENTAGE``) abort ``initialize``; the publishable key and
webhook secret are looked up on each access and fail only at that call site.
"""

from __future__ import annotations

import logging

from pydantic import ValidationError

from . import secrets as keys
from .errors import InvalidSetting, MissingSecret
from .models import DEFAULT_FEE_PERCENTAGE, ClientDescriptor, GatewayCredentials
from .secrets import SecretsSource

logger = logging.getLogger(__name__)


def _parse_fee_percentage(raw: object) -> float:
    if raw is None or (isinstance(raw, str) and not raw.strip()):
        return DEFAULT_FEE_PERCENTAGE
    if isinstance(raw, bool):
        raise InvalidSetting("feePercentage", "expected a number")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise InvalidSetting("feePercentage", "expected a number") from None
    if not 0.0 <= value <= 100.0:
        raise InvalidSetting("feePercentage", "must be between 0 and 100")
    return value


def _read_secret(secrets: SecretsSource, field: str, env_key: str) -> str:
    # Single read: the checked value is the returned value.
    value = secrets.get(env_key)
    if value is None or not str(value).strip():
        raise MissingSecret(field, env_key)
    return str(value)


_FIELD_NAMES = {
    "secret_key": "secretKey",
    "environment": "environment",
    "fee_percentage": "feePercentage",
}


class GatewayPolicy:
    """Validated payment gateway configuration, shared read-only by all callers.

    Build through ``initialize``; the constructor takes already-validated
    parts.  Every accessor is a read over immutable state or a single lookup
    in the injected ``SecretsSource``, so no locking is needed.
    """

    def __init__(
        self,
        credentials: GatewayCredentials,
        descriptor: ClientDescriptor,
        secrets: SecretsSource,
    ) -> None:
        self._credentials = credentials
        self._descriptor = descriptor
        self._secrets = secrets

    @classmethod
    def initialize(cls, secrets: SecretsSource) -> "GatewayPolicy":
        """Read and validate the primary credentials from *secrets*.

        Raises
        ------
        MissingSecret
            ``GATEWAY_SECRET_KEY`` is absent or blank.
        InvalidSetting
            ``PLATFORM_FEE_PERCENTAGE`` is not a number in ``[0, 100]``.
        """
        secret_key = _read_secret(secrets, "secretKey", keys.SECRET_KEY)

        environment = secrets.get(keys.RUNTIME_ENVIRONMENT, "development")
        if environment is not None and not isinstance(environment, str):
            raise InvalidSetting("environment", "expected a string")

        fee_percentage = _parse_fee_percentage(secrets.get(keys.PLATFORM_FEE_PERCENTAGE))
        try:
            credentials = GatewayCredentials(
                secret_key=secret_key,
                environment=environment,
                fee_percentage=fee_percentage,
            )
        except ValidationError as exc:
            errors = exc.errors()
            loc = str(errors[0]["loc"][0]) if errors and errors[0]["loc"] else ""
            raise InvalidSetting(_FIELD_NAMES.get(loc, "credentials"), "failed validation") from exc

        descriptor = ClientDescriptor.for_credentials(credentials)
        logger.info("Payment gateway initialized in %s mode", credentials.environment)
        return cls(credentials, descriptor, secrets)

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def credentials(self) -> GatewayCredentials:
        return self._credentials

    @property
    def environment(self) -> str:
        return self._credentials.environment

    def client_descriptor(self) -> ClientDescriptor:
        return self._descriptor

    def publishable_key(self) -> str:
        return self._lookup("publishableKey", keys.PUBLISHABLE_KEY)

    def webhook_secret(self) -> str:
        """Return the webhook signing secret.

        Only for verifying inbound webhook signatures; never echo it.
        """
        return self._lookup("webhookSecret", keys.WEBHOOK_SECRET)

    def is_test_mode(self) -> bool:
        return not self._credentials.is_production

    def application_fee_percentage(self) -> float:
        return self._credentials.fee_percentage

    def _lookup(self, field: str, env_key: str) -> str:
        return _read_secret(self._secrets, field, env_key)

    def __repr__(self) -> str:
        return (
            f"GatewayPolicy(environment={self.environment!r}, "
            f"test_mode={self.is_test_mode()}, descriptor={self._descriptor!r})"
        )
