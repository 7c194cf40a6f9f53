"""Razorpay payment gateway adapter.

Talks to the Orders API over HTTP with the key id/secret as basic auth and
verifies checkout signatures locally with the key secret.
"""

import hmac
import os

import httpx
import structlog

from payments.gateway.port import GatewayOrder, PaymentGateway, PaymentGatewayError, compute_signature

logger = structlog.get_logger(__name__)

ORDERS_URL = "https://api.razorpay.com/v1/orders"


class RazorpayGateway(PaymentGateway):
    def __init__(self, key_id: str, key_secret: str, timeout: float = 15.0) -> None:
        self.key_id = key_id
        self.key_secret = key_secret
        self.timeout = timeout

    @classmethod
    def from_env(cls) -> "RazorpayGateway":
        return cls(
            key_id=os.environ["RAZORPAY_KEY_ID"],
            key_secret=os.environ["RAZORPAY_KEY_SECRET"],
        )

    async def create_order(self, amount: int, currency: str, receipt: str) -> GatewayOrder:
        payload = {"amount": amount, "currency": currency, "receipt": receipt}
        try:
            async with httpx.AsyncClient(timeout=self.timeout, auth=(self.key_id, self.key_secret)) as client:
                response = await client.post(ORDERS_URL, json=payload)
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Razorpay rejected order creation",
                status=exc.response.status_code,
                body=exc.response.text[:500],
            )
            raise PaymentGatewayError(f"Gateway order failed with status {exc.response.status_code}") from exc
        except httpx.RequestError as exc:
            logger.error("Razorpay unreachable", error=str(exc))
            raise PaymentGatewayError(f"Gateway unreachable: {exc}") from exc

        body = response.json()
        return GatewayOrder(
            id=body["id"],
            amount=int(body["amount"]),
            currency=body["currency"],
            receipt=body.get("receipt"),
            status=body.get("status", "created"),
        )

    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        expected = compute_signature(self.key_secret, order_id, payment_id)
        return hmac.compare_digest(expected, signature or "")
