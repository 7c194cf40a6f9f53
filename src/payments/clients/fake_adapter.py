"""In-memory order client for development and testing."""

from payments.clients.port import OrderClient, OrderServiceError, OrderSummary


class FakeOrderClient(OrderClient):
    def __init__(self) -> None:
        self.orders: dict[str, OrderSummary] = {}
        self.calls: list[dict] = []

    def add_order(
        self, order_id: str, user_id: str, total_amount: float, currency: str = "INR", status: str = "PENDING"
    ) -> OrderSummary:
        summary = OrderSummary(
            order_id=str(order_id),
            user_id=str(user_id),
            status=status,
            total_amount=total_amount,
            currency=currency,
        )
        self.orders[str(order_id)] = summary
        return summary

    async def get_order(self, order_id: str, token: str) -> OrderSummary:
        self.calls.append({"order_id": order_id, "token": token})
        try:
            return self.orders[str(order_id)]
        except KeyError:
            raise OrderServiceError("Request failed with status code 404") from None
