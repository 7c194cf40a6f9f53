"""Catalogue load test scenarios.

A seller listing products and shoppers browsing the catalogue. Seller steps
execute in order; each depends on the previous step succeeding.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import product_form, register_data, search_term
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import SellerState


class SellerListingJourney(SequentialTaskSet):
    """Register Seller -> Create Product x2 -> Update Stock -> List Own Products."""

    def on_start(self):
        self.state = SellerState()

    def _headers(self):
        return {"Authorization": f"Bearer {self.state.token}"}

    @task
    def register_seller(self):
        with self.client.post(
            "/api/auth/register",
            json=register_data(role="seller"),
            catch_response=True,
            name="POST /api/auth/register [seller]",
        ) as resp:
            if resp.status_code == 201:
                self.state.token = resp.json()["token"]
            else:
                resp.failure(f"Register seller failed: {extract_error_detail(resp)}")
                self.interrupt()

    def _create_product(self):
        with self.client.post(
            "/api/products",
            data=product_form(),
            headers=self._headers(),
            catch_response=True,
            name="POST /api/products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_ids.append(resp.json()["data"]["_id"])
            else:
                resp.failure(f"Create product failed: {extract_error_detail(resp)}")

    @task
    def create_first_product(self):
        self._create_product()

    @task
    def create_second_product(self):
        self._create_product()

    @task
    def update_stock(self):
        if not self.state.product_ids:
            self.interrupt()
        with self.client.patch(
            f"/api/products/{random.choice(self.state.product_ids)}",
            json={"stock": random.randint(10, 100)},
            headers=self._headers(),
            catch_response=True,
            name="PATCH /api/products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update product failed: {extract_error_detail(resp)}")

    @task
    def list_own_products(self):
        with self.client.get(
            "/api/products/seller",
            headers=self._headers(),
            catch_response=True,
            name="GET /api/products/seller",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"List seller products failed: {extract_error_detail(resp)}")
        self.interrupt()


class CatalogueBrowser(SequentialTaskSet):
    """Search -> Filter by Price -> Open a Product."""

    @task
    def search(self):
        self.products = []
        with self.client.get(
            "/api/products",
            params={"q": search_term()},
            catch_response=True,
            name="GET /api/products?q",
        ) as resp:
            if resp.status_code == 200:
                self.products = resp.json()["data"]
            else:
                resp.failure(f"Search failed: {extract_error_detail(resp)}")

    @task
    def filter_by_price(self):
        with self.client.get(
            "/api/products",
            params={"minprice": 100, "maxprice": 2000, "limit": 20},
            catch_response=True,
            name="GET /api/products?minprice&maxprice",
        ) as resp:
            if resp.status_code == 200:
                self.products = self.products or resp.json()["data"]
            else:
                resp.failure(f"Price filter failed: {extract_error_detail(resp)}")

    @task
    def open_product(self):
        if self.products:
            product_id = random.choice(self.products)["_id"]
            self.client.get(f"/api/products/{product_id}", name="GET /api/products/{id}")
        self.interrupt()


class CatalogueUser(HttpUser):
    """Sellers listing and shoppers browsing, browsing weighted heavier."""

    wait_time = between(0.5, 2.0)
    tasks = {
        CatalogueBrowser: 4,
        SellerListingJourney: 1,
    }
