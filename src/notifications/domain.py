"""Notifications bounded context: emails triggered by other domains' events.

Consumes UserRegistered from Auth and PaymentCompleted / PaymentFailed from
Payments, renders an email per event and records whether it was sent.
"""

from protean.domain import Domain
from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__, domain="notifications")

notifications = Domain(name="notifications")
