"""In-memory cart and catalogue clients for development and testing."""

from ordering.clients.port import (
    CartClient,
    CartLine,
    ProductCatalog,
    ProductSnapshot,
    UpstreamServiceError,
)


class FakeCartClient(CartClient):
    def __init__(self) -> None:
        self.carts: dict[str, list[CartLine]] = {}
        self.error: str | None = None
        self.calls: list[str] = []

    def set_cart(self, token: str, lines: list[tuple[str, int]]) -> None:
        self.carts[token] = [CartLine(product_id=str(p), quantity=q) for p, q in lines]

    def fail_with(self, message: str | None) -> None:
        self.error = message

    async def get_cart(self, token: str) -> list[CartLine]:
        self.calls.append(token)
        if self.error:
            raise UpstreamServiceError(self.error)
        return list(self.carts.get(token, []))


class FakeProductCatalog(ProductCatalog):
    def __init__(self) -> None:
        self.products: dict[str, ProductSnapshot] = {}
        self.error: str | None = None

    def add_product(
        self, product_id: str, title: str, price_amount: float, stock: int = 10, price_currency: str = "INR"
    ) -> ProductSnapshot:
        snapshot = ProductSnapshot(
            product_id=str(product_id),
            title=title,
            stock=stock,
            price_amount=price_amount,
            price_currency=price_currency,
        )
        self.products[str(product_id)] = snapshot
        return snapshot

    def fail_with(self, message: str | None) -> None:
        self.error = message

    async def get_product(self, product_id: str, token: str) -> ProductSnapshot:
        if self.error:
            raise UpstreamServiceError(self.error)
        try:
            return self.products[str(product_id)]
        except KeyError:
            raise UpstreamServiceError("Request failed with status code 404") from None
