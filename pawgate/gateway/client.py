"""Payment provider client factory (Stripe SDK)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .policy import GatewayPolicy


def build_provider_client(policy: "GatewayPolicy"):
    """Return a ``stripe.StripeClient`` configured from *policy*.

    Retries, timeout and API version come from the policy's
    ``ClientDescriptor``; transport is httpx.  This is the only place the
    secret key leaves the policy.
    """
    try:
        import stripe  # type: ignore[import]
    except ImportError as exc:  # pragma: no cover
        raise ImportError("stripe is required. Install with: pip install stripe") from exc

    descriptor = policy.client_descriptor()
    stripe.enable_telemetry = descriptor.telemetry_enabled
    http_client = stripe.HTTPXClient(
        timeout=descriptor.timeout_seconds,
        allow_sync_methods=True,
    )
    return stripe.StripeClient(
        policy.credentials.secret_key.get_secret_value(),
        stripe_version=descriptor.api_version,
        max_network_retries=descriptor.max_retries,
        http_client=http_client,
    )
