#!/usr/bin/env python
"""Validate payment gateway configuration and print a summary.

Usage:
    python run_gateway_check.py [--env-file .env] [--amount 25]

Exits non-zero when a required secret is missing.  Secret values are
never printed.
"""

from __future__ import annotations

import argparse
import logging
import sys

from dotenv import load_dotenv

from pawgate.donations import platform_fee_for
from pawgate.gateway import ConfigError, EnvSecretsSource, GatewayPolicy


def print_summary(policy: GatewayPolicy, amount: str | None) -> None:
    sep = "─" * 72
    descriptor = policy.client_descriptor()

    print(f"\n{sep}")
    print("  PAYMENT GATEWAY CONFIGURATION")
    print(sep)
    print(f"  Environment : {policy.environment}")
    print(f"  Mode        : {'TEST' if policy.is_test_mode() else 'LIVE'}")
    print(f"  API version : {descriptor.api_version}")
    print(f"  Retries     : {descriptor.max_retries}")
    print(f"  Timeout     : {descriptor.timeout_ms} ms")
    print(f"  Telemetry   : {descriptor.telemetry_enabled}")
    print(f"  Fee         : {policy.application_fee_percentage():g}%")

    for label, accessor in (("Publishable", policy.publishable_key), ("Webhook", policy.webhook_secret)):
        try:
            accessor()
            status = "configured"
        except ConfigError as exc:
            status = f"MISSING ({exc.field})"
        print(f"  {label:<12}: {status}")

    if amount:
        breakdown = platform_fee_for(policy, amount)
        print(sep)
        print(f"  Donation    : {breakdown.amount}")
        print(f"  Platform fee: {breakdown.platform_fee}")
        print(f"  To shelter  : {breakdown.shelter_amount}")

    print(sep + "\n")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--env-file", default=".env", help="dotenv file to load (default: .env)")
    parser.add_argument("--amount", default=None, help="show the fee split for this donation amount")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    load_dotenv(args.env_file)

    try:
        policy = GatewayPolicy.initialize(EnvSecretsSource())
    except ConfigError as exc:
        print(f"Configuration error: {exc}")
        sys.exit(1)

    try:
        print_summary(policy, args.amount)
    except ValueError as exc:
        print(f"Invalid donation amount: {exc}")
        sys.exit(2)


if __name__ == "__main__":
    main()
