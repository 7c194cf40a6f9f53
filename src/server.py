"""Protean Engine runner for Nexora domains.

Starts Engine workers that process events asynchronously: the outbox
processor publishes raised events to the broker, and stream subscriptions
feed them to event handlers and projectors, including the cross-domain
handlers in Ordering, Notifications and the Seller Dashboard.

Usage:
    python src/server.py                         # Run every domain engine
    python src/server.py --domain notifications  # Run one domain engine
    python src/server.py --domain ordering --test-mode
"""

import argparse
import asyncio
import importlib

from protean.server.engine import Engine

DOMAIN_NAMES = ["auth", "catalogue", "cart", "ordering", "payments", "notifications", "seller_dashboard"]


def _get_domain(name):
    """Import and initialize a domain by name."""
    if name not in DOMAIN_NAMES:
        raise ValueError(f"Unknown domain: {name}")

    domain = getattr(importlib.import_module(f"{name}.domain"), name)
    domain.init()
    return domain


async def run(domain_names, test_mode=False, debug=False):
    engines = [Engine(_get_domain(name), test_mode=test_mode, debug=debug) for name in domain_names]
    await asyncio.gather(*(engine.run() for engine in engines))


def main():
    parser = argparse.ArgumentParser(description="Nexora Engine runner")
    parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        help="Run a single domain engine (default: run all)",
    )
    parser.add_argument("--test-mode", action="store_true", help="Process pending messages once and exit")
    parser.add_argument("--debug", action="store_true", help="Verbose engine logging")
    args = parser.parse_args()

    domain_names = [args.domain] if args.domain else DOMAIN_NAMES

    asyncio.run(run(domain_names, test_mode=args.test_mode, debug=args.debug))


if __name__ == "__main__":
    main()
