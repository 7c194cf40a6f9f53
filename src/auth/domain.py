"""Auth bounded context: user accounts, credentials and address book.

Registration raises UserRegistered, which the Notifications domain turns
into a welcome email.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__, domain="auth")

auth = Domain(name="auth")
