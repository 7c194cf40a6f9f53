"""Seller Dashboard bounded context: read models for sellers.

Nothing here is written through commands. Product and order events from the
Catalogue and Ordering domains are folded into per-seller projections, which
the dashboard endpoints query.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__, domain="seller_dashboard")

seller_dashboard = Domain(name="seller_dashboard")
