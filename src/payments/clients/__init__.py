"""Order client factory: HTTP by default, swappable with set_order_client()."""

from payments.clients.port import OrderClient

_order_client: OrderClient | None = None


def get_order_client() -> OrderClient:
    global _order_client
    if _order_client is None:
        from payments.clients.http_adapter import HttpOrderClient

        _order_client = HttpOrderClient.from_env()
    return _order_client


def set_order_client(client: OrderClient) -> None:
    global _order_client
    _order_client = client


def reset_order_client() -> None:
    global _order_client
    _order_client = None
