"""Product creation: command and handler."""

import json

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from catalogue.domain import catalogue, logger
from catalogue.product.product import Product


@catalogue.command(part_of="Product")
class CreateProduct:
    seller_id: Identifier(required=True)
    title: String(required=True, max_length=200)
    description: String(max_length=500)
    price_amount: Float(required=True)
    price_currency: String(max_length=3)
    stock: Integer(min_value=0)
    images: Text()  # JSON list of {url, thumbnail, id}


@catalogue.command_handler(part_of=Product)
class CreateProductHandler:
    @handle(CreateProduct)
    def create_product(self, command):
        product = Product.create(
            seller_id=command.seller_id,
            title=command.title,
            description=command.description,
            price_amount=command.price_amount,
            price_currency=command.price_currency,
            stock=command.stock,
            images=json.loads(command.images) if command.images else [],
        )
        current_domain.repository_for(Product).add(product)
        logger.info("Product created", product_id=str(product.id), seller_id=str(command.seller_id))
        return str(product.id)
