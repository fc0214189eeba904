"""Storefront bounded context — book catalogue, basket, comments and members.

The basket is held by the client (cookie) and never stored here; the catalogue,
comments and members are standard CQRS aggregates.
"""

from protean.domain import Domain

from storefront.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

logger = get_logger(__name__)

# Domain Composition Root
storefront = Domain(name="storefront")
