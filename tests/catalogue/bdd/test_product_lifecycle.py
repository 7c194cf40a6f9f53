"""BDD tests for the product lifecycle."""

from catalogue.product.product import Product
from protean.exceptions import ValidationError
from pytest_bdd import parsers, scenarios, when

scenarios("features/product_lifecycle.feature")


# ---------------------------------------------------------------------------
# When steps
# ---------------------------------------------------------------------------
@when(parsers.cfparse('the seller lists "{title}" at {amount:g} {currency}'), target_fixture="product")
def list_product(title, amount, currency, error):
    try:
        return Product.create(seller_id="seller-1", title=title, price_amount=amount, price_currency=currency)
    except ValidationError as exc:
        error["exc"] = exc


@when(parsers.cfparse("the price is changed to {amount:g}"))
def change_price(product, amount, error):
    try:
        product.update(price_amount=amount)
    except ValidationError as exc:
        error["exc"] = exc


@when("the product is deleted")
def delete_product(product):
    product.delete()
