"""HTTP adapters for the cart and catalogue services."""

import os

import httpx
import structlog

from ordering.clients.port import (
    CartClient,
    CartLine,
    ProductCatalog,
    ProductSnapshot,
    UpstreamServiceError,
)

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 10.0


async def _get_json(url: str, token: str, timeout: float) -> dict:
    headers = {"Authorization": f"Bearer {token}"}
    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(url, headers=headers)
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.error("Upstream request rejected", url=url, status=exc.response.status_code)
        raise UpstreamServiceError(f"Request failed with status code {exc.response.status_code}") from exc
    except httpx.RequestError as exc:
        logger.error("Upstream service unreachable", url=url, error=str(exc))
        raise UpstreamServiceError(str(exc) or exc.__class__.__name__) from exc
    return response.json()


class HttpCartClient(CartClient):
    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> "HttpCartClient":
        return cls(os.getenv("CART_SERVICE_URL", "http://localhost:8000"))

    async def get_cart(self, token: str) -> list[CartLine]:
        payload = await _get_json(f"{self.base_url}/api/cart", token, self.timeout)
        items = payload.get("cart", {}).get("items", [])
        return [CartLine(product_id=str(item["productId"]), quantity=int(item["quantity"])) for item in items]


class HttpProductCatalog(ProductCatalog):
    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> "HttpProductCatalog":
        return cls(os.getenv("PRODUCT_SERVICE_URL", "http://localhost:8000"))

    async def get_product(self, product_id: str, token: str) -> ProductSnapshot:
        payload = await _get_json(f"{self.base_url}/api/products/{product_id}", token, self.timeout)
        product = payload["product"]
        return ProductSnapshot(
            product_id=str(product["_id"]),
            title=product["title"],
            stock=int(product.get("stock") or 0),
            price_amount=float(product["price"]["amount"]),
            price_currency=product["price"].get("currency", "INR"),
        )
