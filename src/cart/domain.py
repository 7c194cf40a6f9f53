"""Cart bounded context: one shopping cart per user.

The ordering context reads the cart over HTTP when an order is placed.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__, domain="cart")

cart = Domain(name="cart")
