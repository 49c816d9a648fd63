"""Quick read-only smoke test against a Liquidity API sandbox.

Credentials come from the usual ``LIQUIDITY_*`` variables (``.env`` is
honoured). Only GET endpoints are called, so it is safe to point at a shared
sandbox:

    LIQUIDITY_API_KEY=... python scripts/smoke_liquidity.py USD BTC
"""
from __future__ import annotations

import logging
import sys
from typing import List

from common.logging import configure_logging
from liquidity import LiquidityClient, LiquidityError

_LOG = logging.getLogger("smoke_liquidity")


def main(argv: List[str]) -> int:
    configure_logging(service_name="liquidity-smoke")
    currencies = argv or ["USD"]

    with LiquidityClient.from_env() as client:
        _LOG.info("base url: %s", client.base_url)
        try:
            floats = client.floats.list_floats(currencies)
        except LiquidityError as exc:
            _LOG.error("floats lookup failed: %s", exc)
            return 1

    for fl in floats.data or []:
        _LOG.info("float %s %s balance=%s default=%s", fl.float_id, fl.currency, fl.balance, fl.is_default)
    print("LIQUIDITY SMOKE: OK")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
