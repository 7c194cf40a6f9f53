"""HTTP adapter for the ordering service."""

import os

import httpx
import structlog

from payments.clients.port import OrderClient, OrderServiceError, OrderSummary

logger = structlog.get_logger(__name__)


class HttpOrderClient(OrderClient):
    def __init__(self, base_url: str, timeout: float = 10.0) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> "HttpOrderClient":
        return cls(os.getenv("ORDER_SERVICE_URL", "http://localhost:8000"))

    async def get_order(self, order_id: str, token: str) -> OrderSummary:
        url = f"{self.base_url}/api/orders/{order_id}"
        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, headers={"Authorization": f"Bearer {token}"})
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error("Order service rejected request", order_id=order_id, status=exc.response.status_code)
            raise OrderServiceError(f"Request failed with status code {exc.response.status_code}") from exc
        except httpx.RequestError as exc:
            logger.error("Order service unreachable", order_id=order_id, error=str(exc))
            raise OrderServiceError(str(exc) or exc.__class__.__name__) from exc

        order = response.json()["order"]
        return OrderSummary(
            order_id=str(order["_id"]),
            user_id=str(order["user"]),
            status=order["status"],
            total_amount=float(order["totalPrice"]["amount"]),
            currency=order["totalPrice"].get("currency", "INR"),
        )
