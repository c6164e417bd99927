"""Platform fee split for a single donation."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from pydantic import BaseModel, Field

from pawgate.gateway.policy import GatewayPolicy

_CENT = Decimal("0.01")


class FeeBreakdown(BaseModel):
    amount: Decimal = Field(gt=0)
    fee_percentage: Decimal = Field(ge=0, le=100)
    platform_fee: Decimal
    shelter_amount: Decimal
    amount_minor_units: int = Field(description="Charge amount in cents, as sent to the provider.")


def _to_decimal(value: float | int | str | Decimal, label: str) -> Decimal:
    # str() first so floats like 0.1 keep their printed value.
    try:
        result = value if isinstance(value, Decimal) else Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"{label} must be a number, got {value!r}") from None
    if not result.is_finite():
        raise ValueError(f"{label} must be a finite number, got {value!r}")
    return result


def compute_fee_breakdown(
    amount: float | int | str | Decimal,
    fee_percentage: float | int | str | Decimal,
) -> FeeBreakdown:
    """Split *amount* into the platform's cut and the shelter's share.

    ``platform_fee = amount * fee_percentage / 100``, rounded half-up to
    cents; the shelter receives the remainder.
    """
    amount_d = _to_decimal(amount, "Donation amount")
    pct = _to_decimal(fee_percentage, "Fee percentage")
    if amount_d <= 0:
        raise ValueError("Donation amount must be positive")
    if not Decimal(0) <= pct <= Decimal(100):
        raise ValueError("Fee percentage must be between 0 and 100")

    platform_fee = (amount_d * pct / Decimal(100)).quantize(_CENT, rounding=ROUND_HALF_UP)
    shelter_amount = (amount_d - platform_fee).quantize(_CENT, rounding=ROUND_HALF_UP)
    minor_units = int((amount_d * 100).quantize(Decimal(1), rounding=ROUND_HALF_UP))
    if minor_units < 1:
        raise ValueError("Donation amount must be at least one cent")

    return FeeBreakdown(
        amount=amount_d,
        fee_percentage=pct,
        platform_fee=platform_fee,
        shelter_amount=shelter_amount,
        amount_minor_units=minor_units,
    )


def platform_fee_for(policy: GatewayPolicy, amount: float | int | str | Decimal) -> FeeBreakdown:
    return compute_fee_breakdown(amount, policy.application_fee_percentage())
