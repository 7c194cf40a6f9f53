"""Catalogue bounded context: products listed by sellers.

Sellers create, update and delete their own products; shoppers search and
browse them. Product images are stored through a pluggable image storage.
"""

from protean.domain import Domain

from shared.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__, domain="catalogue")

catalogue = Domain(name="catalogue")
