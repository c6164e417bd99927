"""Donation request-path helpers built on the gateway policy."""

from .fees import FeeBreakdown, compute_fee_breakdown, platform_fee_for
from .guard import PaymentUnavailable, config_error_guard, payment_unavailable_on_config_error
from .webhooks import InvalidWebhookSignature, WebhookVerifier

__all__ = [
    "compute_fee_breakdown",
    "config_error_guard",
    "FeeBreakdown",
    "InvalidWebhookSignature",
    "payment_unavailable_on_config_error",
    "PaymentUnavailable",
    "platform_fee_for",
    "WebhookVerifier",
]
