"""Product updates and deletion: commands and handler.

Only the seller who listed a product may change or delete it.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Float, Identifier, Integer, String
from protean.utils.globals import current_domain

from catalogue.domain import catalogue, logger
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class UpdateProduct:
    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)
    title: String(max_length=200)
    description: String(max_length=500)
    price_amount: Float()
    price_currency: String(max_length=3)
    stock: Integer(min_value=0)


@catalogue.command(part_of="Product")
class DeleteProduct:
    product_id: Identifier(required=True)
    seller_id: Identifier(required=True)


def _owned_product(repo, product_id, seller_id):
    product = repo.get(product_id)
    if not product.is_owned_by(seller_id):
        raise ValidationError({"seller_id": ["Only the owning seller can modify this product"]})
    return product


@catalogue.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(UpdateProduct)
    def update_product(self, command):
        repo = current_domain.repository_for(Product)
        product = _owned_product(repo, command.product_id, command.seller_id)

        changes = {
            field: getattr(command, field)
            for field in ("title", "description", "price_amount", "price_currency", "stock")
            if getattr(command, field) is not None
        }
        product.update(**changes)
        repo.add(product)
        logger.info("Product updated", product_id=str(product.id), fields=sorted(changes))

    @handle(DeleteProduct)
    def delete_product(self, command):
        repo = current_domain.repository_for(Product)
        product = _owned_product(repo, command.product_id, command.seller_id)
        product.delete()
        repo.add(product)
        logger.info("Product deleted", product_id=str(product.id))
