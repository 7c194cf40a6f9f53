"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own state. State tracks tokens and
ids returned by earlier requests so follow-up requests can use them.
"""

from dataclasses import dataclass, field


@dataclass
class SellerState:
    token: str | None = None
    product_ids: list[str] = field(default_factory=list)


@dataclass
class JourneyState:
    """One buyer's trip from registration to a verified payment."""

    seller_token: str | None = None
    buyer_token: str | None = None
    product_id: str | None = None
    order_id: str | None = None
    payment_id: str | None = None
    razorpay_order_id: str | None = None

    @property
    def buyer_headers(self) -> dict:
        return {"Authorization": f"Bearer {self.buyer_token}"}

    @property
    def seller_headers(self) -> dict:
        return {"Authorization": f"Bearer {self.seller_token}"}
