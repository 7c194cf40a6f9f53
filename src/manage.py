"""Nexora database management CLI.

Creates and drops the tables of every domain whose database provider is SQL.

Usage:
    python src/manage.py setup-db                    # Create all tables
    python src/manage.py drop-db                     # Drop all tables
    python src/manage.py setup-db --domain ordering  # One domain only
"""

import argparse
import importlib
import sys

from shared.db import drop_db, setup_db

DOMAIN_NAMES = ["auth", "catalogue", "cart", "ordering", "payments", "notifications", "seller_dashboard"]


def _domains(names=None):
    for name in names or DOMAIN_NAMES:
        domain = getattr(importlib.import_module(f"{name}.domain"), name)
        print(f"Initializing {name} domain...")
        domain.init()
        yield name, domain


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    for name, domain in _domains(domains):
        print(f"Creating {name} database schema...")
        setup_db(domain)
        print(f"  {name} schema ready.")
    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    for name, domain in _domains(domains):
        print(f"Dropping {name} database schema...")
        drop_db(domain)
        print(f"  {name} schema dropped.")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Nexora database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for command, help_text in (("setup-db", "Create all database tables"), ("drop-db", "Drop all database tables")):
        sub = subparsers.add_parser(command, help=help_text)
        sub.add_argument(
            "--domain",
            choices=DOMAIN_NAMES,
            nargs="*",
            help="Specific domain(s) to target (default: all)",
        )

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
