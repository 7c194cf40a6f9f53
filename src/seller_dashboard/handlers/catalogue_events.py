"""Inbound cross-domain event handler: Seller Dashboard reacts to Catalogue events."""

import structlog
from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain
from protean.utils.mixins import handle
from shared.events.catalogue import ProductCreated, ProductDeleted, ProductUpdated

from seller_dashboard.domain import seller_dashboard
from seller_dashboard.projections.seller_product import SellerProduct

logger = structlog.get_logger(__name__)

seller_dashboard.register_external_event(ProductCreated, "Catalogue.ProductCreated.v1")
seller_dashboard.register_external_event(ProductUpdated, "Catalogue.ProductUpdated.v1")
seller_dashboard.register_external_event(ProductDeleted, "Catalogue.ProductDeleted.v1")


@seller_dashboard.event_handler(stream_category="catalogue::product")
class CatalogueEventsHandler:
    """Keeps SellerProduct in step with the catalogue."""

    @handle(ProductCreated)
    def on_product_created(self, event: ProductCreated) -> None:
        current_domain.repository_for(SellerProduct).add(
            SellerProduct(
                product_id=str(event.product_id),
                seller_id=str(event.seller_id),
                title=event.title,
                price_amount=event.price_amount,
                price_currency=event.price_currency,
                stock=event.stock or 0,
                created_at=event.created_at,
                updated_at=event.created_at,
            )
        )

    @handle(ProductUpdated)
    def on_product_updated(self, event: ProductUpdated) -> None:
        repo = current_domain.repository_for(SellerProduct)
        try:
            view = repo.get(str(event.product_id))
        except ObjectNotFoundError:
            view = SellerProduct(product_id=str(event.product_id), seller_id=str(event.seller_id), title=event.title)

        view.title = event.title
        view.price_amount = event.price_amount
        view.price_currency = event.price_currency
        view.stock = event.stock or 0
        view.updated_at = event.updated_at
        repo.add(view)

    @handle(ProductDeleted)
    def on_product_deleted(self, event: ProductDeleted) -> None:
        repo = current_domain.repository_for(SellerProduct)
        try:
            view = repo.get(str(event.product_id))
        except ObjectNotFoundError:
            logger.warning("Deleted product was never seen", product_id=str(event.product_id))
            return

        view.deleted = True
        view.updated_at = event.deleted_at
        repo.add(view)
