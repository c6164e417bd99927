"""Inbound webhook signature verification."""

from __future__ import annotations

import logging

from pawgate.gateway.policy import GatewayPolicy

logger = logging.getLogger(__name__)

DEFAULT_TOLERANCE_SECONDS = 300


class InvalidWebhookSignature(Exception):
    """The payload did not come from the gateway, or could not be parsed."""


class WebhookVerifier:
    """Checks webhook callbacks against the policy's webhook secret.

    The secret is fetched from the policy on every call, so a missing
    ``GATEWAY_WEBHOOK_SECRET`` surfaces as ``MissingSecret`` here rather
    than at startup.
    """

    def __init__(self, policy: GatewayPolicy, tolerance: int = DEFAULT_TOLERANCE_SECONDS) -> None:
        self._policy = policy
        self._tolerance = tolerance

    def verify(self, payload: bytes | str, signature: str | None):
        """Return the verified ``stripe.Event`` for *payload*."""
        try:
            import stripe  # type: ignore[import]
        except ImportError as exc:  # pragma: no cover
            raise ImportError("stripe is required. Install with: pip install stripe") from exc

        secret = self._policy.webhook_secret()
        if not signature:
            raise InvalidWebhookSignature("Missing webhook signature header")

        try:
            event = stripe.Webhook.construct_event(
                payload, signature, secret, tolerance=self._tolerance
            )
        except stripe.SignatureVerificationError as exc:
            raise InvalidWebhookSignature("Invalid webhook signature") from exc
        except ValueError as exc:
            raise InvalidWebhookSignature("Malformed webhook payload") from exc

        logger.info("Verified webhook event %s (%s)", event["id"], event["type"])
        return event
