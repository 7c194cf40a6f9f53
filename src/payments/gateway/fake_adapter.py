"""Configurable fake payment gateway for development and testing.

Gateway orders are made up locally; signatures are real HMACs over a known
test secret, so a test can produce a valid one with `sign()`.
"""

import hmac
from uuid import uuid4

from payments.gateway.port import GatewayOrder, PaymentGateway, PaymentGatewayError, compute_signature

TEST_KEY_SECRET = "test_key_secret"


class FakeGateway(PaymentGateway):
    """Configurable fake payment gateway."""

    def __init__(self, key_secret: str = TEST_KEY_SECRET) -> None:
        self.key_secret = key_secret
        self.should_succeed: bool = True
        self.failure_reason: str = "Gateway unavailable"
        self.calls: list[dict] = []

    def configure(self, should_succeed: bool, failure_reason: str = "Gateway unavailable") -> None:
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def sign(self, order_id: str, payment_id: str) -> str:
        return compute_signature(self.key_secret, order_id, payment_id)

    async def create_order(self, amount: int, currency: str, receipt: str) -> GatewayOrder:
        self.calls.append({"method": "create_order", "amount": amount, "currency": currency, "receipt": receipt})
        if not self.should_succeed:
            raise PaymentGatewayError(self.failure_reason)
        return GatewayOrder(id=f"order_{uuid4().hex[:14]}", amount=amount, currency=currency, receipt=receipt)

    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        self.calls.append({"method": "verify_payment_signature", "order_id": order_id, "payment_id": payment_id})
        return hmac.compare_digest(self.sign(order_id, payment_id), signature or "")
