"""Cross-domain load test scenario: the buyer's path to a paid order.

Thread: Auth -> Catalogue -> Cart -> Ordering -> Payments

1. Register a seller and list a product
2. Register a buyer
3. Add the product to the buyer's cart
4. Place an order from the cart
5. Initiate a payment for the order
6. Verify the payment with a gateway signature

Verification signs with LOADTEST_GATEWAY_SECRET, which must match the
secret of the gateway the server runs with (the fake gateway by default).
"""

import os
import random

from locust import HttpUser, SequentialTaskSet, between, task
from payments.gateway.fake_adapter import TEST_KEY_SECRET
from payments.gateway.port import compute_signature

from loadtests.data_generators import address_data, product_form, register_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import JourneyState

GATEWAY_SECRET = os.getenv("LOADTEST_GATEWAY_SECRET", TEST_KEY_SECRET)


class OrderToPaymentJourney(SequentialTaskSet):
    def on_start(self):
        self.state = JourneyState()

    def _register(self, role):
        with self.client.post(
            "/api/auth/register",
            json=register_data(role=role),
            catch_response=True,
            name=f"[E2E] POST /api/auth/register [{role}]",
        ) as resp:
            if resp.status_code == 201:
                return resp.json()["token"]
            resp.failure(f"Register {role} failed: {extract_error_detail(resp)}")
            self.interrupt()

    @task
    def list_product(self):
        self.state.seller_token = self._register("seller")
        with self.client.post(
            "/api/products",
            data=product_form(),
            headers=self.state.seller_headers,
            catch_response=True,
            name="[E2E] POST /api/products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_id = resp.json()["data"]["_id"]
            else:
                resp.failure(f"Create product failed: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def register_buyer(self):
        self.state.buyer_token = self._register("user")

    @task
    def add_to_cart(self):
        with self.client.post(
            "/api/cart/items",
            json={"productId": self.state.product_id, "qty": random.randint(1, 3)},
            headers=self.state.buyer_headers,
            catch_response=True,
            name="[E2E] POST /api/cart/items",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Add to cart failed: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def place_order(self):
        with self.client.post(
            "/api/orders",
            json={"shippingAddress": address_data()},
            headers=self.state.buyer_headers,
            catch_response=True,
            name="[E2E] POST /api/orders",
        ) as resp:
            if resp.status_code == 201:
                self.state.order_id = resp.json()["order"]["_id"]
            else:
                resp.failure(f"Place order failed: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def initiate_payment(self):
        with self.client.post(
            f"/api/payments/create/{self.state.order_id}",
            headers=self.state.buyer_headers,
            catch_response=True,
            name="[E2E] POST /api/payments/create/{order_id}",
        ) as resp:
            if resp.status_code == 201:
                payment = resp.json()["payment"]
                self.state.payment_id = payment["_id"]
                self.state.razorpay_order_id = payment["razorpayOrderId"]
            else:
                resp.failure(f"Initiate payment failed: {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def verify_payment(self):
        gateway_payment_id = f"pay_lt{random.randint(10**9, 10**10)}"
        with self.client.post(
            "/api/payments/verify",
            json={
                "razorpayOrderId": self.state.razorpay_order_id,
                "paymentId": gateway_payment_id,
                "signature": compute_signature(GATEWAY_SECRET, self.state.razorpay_order_id, gateway_payment_id),
            },
            headers=self.state.buyer_headers,
            catch_response=True,
            name="[E2E] POST /api/payments/verify",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Verify payment failed: {extract_error_detail(resp)}")

    @task
    def check_order(self):
        self.client.get(
            f"/api/orders/{self.state.order_id}",
            headers=self.state.buyer_headers,
            name="[E2E] GET /api/orders/{id}",
        )
        self.interrupt()


class CrossDomainUser(HttpUser):
    wait_time = between(1.0, 3.0)
    tasks = [OrderToPaymentJourney]
