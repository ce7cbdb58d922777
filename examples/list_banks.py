#!/usr/bin/env python3
"""
List Banks
==========

Connects to the payment gateway using PAYMENT_GATEWAY_* environment
variables (or a .env file) and prints every registered bank.

Run:
    PAYMENT_GATEWAY_API_KEY=... python examples/list_banks.py
"""

import logging
import sys

from payment_gateway import PaymentException, PaymentGatewayClient


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    with PaymentGatewayClient() as client:
        print(f"Gateway: {client.base_url}")
        print("-" * 40)
        try:
            banks = client.banks.list()
        except PaymentException as e:
            print(f"Error: {e}", file=sys.stderr)
            return 1

        if not banks:
            print("No banks registered.")
        for bank in banks:
            print(f"  {bank.sort_code:<8} {bank.name} ({bank.country})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
