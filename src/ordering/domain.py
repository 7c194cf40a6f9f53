"""Ordering bounded context: order placement and the order lifecycle.

Orders are placed from the caller's cart (read over HTTP together with the
catalogue), confirmed when the payments context reports a completed payment,
and then shipped and delivered by sellers or admins.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__, domain="ordering")

ordering = Domain(name="ordering")
