"""Payments bounded context: Razorpay-backed payment for placed orders.

A payment is opened against a gateway order for the order total and
completed once the gateway's checkout signature has been verified.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__, domain="payments")

payments = Domain(name="payments")
