"""Port for reading the order a payment is for."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class OrderSummary:
    order_id: str
    user_id: str
    status: str
    total_amount: float
    currency: str


class OrderServiceError(Exception):
    """Raised when the order cannot be fetched."""


class OrderClient(ABC):
    @abstractmethod
    async def get_order(self, order_id: str, token: str) -> OrderSummary:
        """Fetch the order as its owner sees it."""
        ...
