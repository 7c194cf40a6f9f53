"""Payment gateway port (abstract interface).

Checkout happens in the gateway's own widget: the backend creates a gateway
order for the amount due, and the widget later hands back a payment id and a
signature that prove the buyer paid for that order.
"""

import hashlib
import hmac
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class GatewayOrder:
    """A gateway-side order the checkout widget pays against."""

    id: str
    amount: int  # smallest currency unit
    currency: str
    receipt: str | None = None
    status: str = "created"


class PaymentGatewayError(Exception):
    """Raised when the gateway rejects a request or cannot be reached."""


def compute_signature(secret: str, order_id: str, payment_id: str) -> str:
    """HMAC-SHA256 of "<order_id>|<payment_id>", hex encoded."""
    message = f"{order_id}|{payment_id}".encode()
    return hmac.new(secret.encode(), message, hashlib.sha256).hexdigest()


class PaymentGateway(ABC):
    """Abstract payment gateway interface."""

    @abstractmethod
    async def create_order(self, amount: int, currency: str, receipt: str) -> GatewayOrder:
        """Create a gateway order for `amount` in the smallest currency unit."""
        ...

    @abstractmethod
    def verify_payment_signature(self, order_id: str, payment_id: str, signature: str) -> bool:
        """Check the signature the checkout widget returned for a payment."""
        ...
