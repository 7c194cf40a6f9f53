"""Upstream client factories.

get_cart_client() / get_product_catalog() return the HTTP adapters unless a
test or a local run has installed something else with the setters.
"""

from ordering.clients.port import CartClient, ProductCatalog

_cart_client: CartClient | None = None
_product_catalog: ProductCatalog | None = None


def get_cart_client() -> CartClient:
    global _cart_client
    if _cart_client is None:
        from ordering.clients.http_adapter import HttpCartClient

        _cart_client = HttpCartClient.from_env()
    return _cart_client


def set_cart_client(client: CartClient) -> None:
    global _cart_client
    _cart_client = client


def get_product_catalog() -> ProductCatalog:
    global _product_catalog
    if _product_catalog is None:
        from ordering.clients.http_adapter import HttpProductCatalog

        _product_catalog = HttpProductCatalog.from_env()
    return _product_catalog


def set_product_catalog(catalog: ProductCatalog) -> None:
    global _product_catalog
    _product_catalog = catalog


def reset_clients() -> None:
    global _cart_client, _product_catalog
    _cart_client = None
    _product_catalog = None
