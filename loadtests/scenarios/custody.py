"""Custody load test scenarios.

Two stateful SequentialTaskSet journeys: the full custody chain from
manufacturer to customer (happy path), and a rejection journey that drives
the precondition checks without changing any state.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import bottle_batch, chain_accounts, shipment_id
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import CustodyState


def _as(account: str) -> dict:
    return {"X-Account": account}


class _CustodyJourney(SequentialTaskSet):
    """Registers a fresh account per role before the journey starts."""

    def on_start(self):
        self.state = CustodyState(accounts=chain_accounts())
        for role, account in self.state.accounts.items():
            with self.client.post(
                f"/members/{role}s",
                headers=_as(account),
                catch_response=True,
                name="POST /members/{role}",
            ) as resp:
                if resp.status_code != 201:
                    resp.failure(f"Register {role} failed: {resp.status_code} — {extract_error_detail(resp)}")
                    self.interrupt()

    def register_bottles(self):
        manufacturer = self.state.accounts["manufacturer"]
        for bottle_id in bottle_batch():
            with self.client.post(
                "/bottles",
                json={"bottle_id": bottle_id},
                headers=_as(manufacturer),
                catch_response=True,
                name="POST /bottles",
            ) as resp:
                if resp.status_code == 201:
                    self.state.bottle_ids.append(bottle_id)
                else:
                    resp.failure(f"Register bottle failed: {resp.status_code} — {extract_error_detail(resp)}")
                    self.interrupt()


class CustodyChainJourney(_CustodyJourney):
    """Register bottles -> Ship -> Pickup -> Scan -> Deliver -> Sell.

    Every bottle changes hands three times, producing one event per
    registration, shipment status change and sale.
    """

    @task
    def register(self):
        self.register_bottles()

    @task
    def ship(self):
        self.state.shipment_id = shipment_id()
        with self.client.post(
            "/shipments",
            json={
                "shipment_id": self.state.shipment_id,
                "carrier": self.state.accounts["carrier"],
                "retailer": self.state.accounts["retailer"],
                "bottle_ids": self.state.bottle_ids,
            },
            headers=_as(self.state.accounts["manufacturer"]),
            catch_response=True,
            name="POST /shipments",
        ) as resp:
            if resp.status_code != 201:
                resp.failure(f"Register shipment failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    def _track(self, operation: str, expected: str):
        with self.client.put(
            f"/shipments/{self.state.shipment_id}/track",
            json={"operation": operation},
            headers=_as(self.state.accounts["carrier"]),
            catch_response=True,
            name=f"PUT /shipments/{{id}}/track [{operation}]",
        ) as resp:
            if resp.status_code == 200 and resp.json()["status"] == expected:
                self.state.shipment_status = expected
            else:
                resp.failure(f"{operation} failed: {resp.status_code} — {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def pickup(self):
        self._track("Pickup", "InTransit")

    @task
    def scan(self):
        self._track("Scan", "InTransit")

    @task
    def deliver(self):
        self._track("Deliver", "Delivered")

    @task
    def sell(self):
        sold = random.sample(self.state.bottle_ids, k=random.randint(1, len(self.state.bottle_ids)))
        with self.client.post(
            "/sales",
            json={"customer": self.state.accounts["customer"], "bottle_ids": sold},
            headers=_as(self.state.accounts["retailer"]),
            catch_response=True,
            name="POST /sales",
        ) as resp:
            if resp.status_code == 201:
                self.state.sale_id = resp.json()["sale_id"]
            else:
                resp.failure(f"Sale failed: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def verify_customer_holdings(self):
        with self.client.get(
            "/bottles",
            params={"owner": self.state.accounts["customer"]},
            catch_response=True,
            name="GET /bottles?owner=",
        ) as resp:
            if resp.status_code != 200 or not resp.json()["bottle_ids"]:
                resp.failure(f"Customer holds nothing: {resp.status_code} — {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class RejectedCommandsJourney(_CustodyJourney):
    """Register bottles -> ship via an unknown carrier -> sell unshipped bottles.

    Both commands must be rejected with 400 and leave the bottles with the
    manufacturer.
    """

    @task
    def register(self):
        self.register_bottles()

    @task
    def ship_via_unknown_carrier(self):
        with self.client.post(
            "/shipments",
            json={
                "shipment_id": shipment_id(),
                "carrier": "carrier-unregistered",
                "retailer": self.state.accounts["retailer"],
                "bottle_ids": self.state.bottle_ids,
            },
            headers=_as(self.state.accounts["manufacturer"]),
            catch_response=True,
            name="POST /shipments [rejected]",
        ) as resp:
            if resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Expected 400, got {resp.status_code}")

    @task
    def sell_unshipped(self):
        with self.client.post(
            "/sales",
            json={"customer": self.state.accounts["customer"], "bottle_ids": self.state.bottle_ids[:1]},
            headers=_as(self.state.accounts["retailer"]),
            catch_response=True,
            name="POST /sales [rejected]",
        ) as resp:
            if resp.status_code == 400:
                resp.success()
            else:
                resp.failure(f"Expected 400, got {resp.status_code}")

    @task
    def verify_manufacturer_holdings(self):
        with self.client.get(
            "/bottles",
            params={"owner": self.state.accounts["manufacturer"]},
            catch_response=True,
            name="GET /bottles?owner=",
        ) as resp:
            if resp.status_code != 200 or resp.json()["bottle_ids"] != self.state.bottle_ids:
                resp.failure("Rejected commands moved bottles")

    @task
    def done(self):
        self.interrupt()


class CustodyUser(HttpUser):
    """Locust user simulating custody chain traffic.

    Weighted distribution:
    - 80% Full custody chain (happy path)
    - 20% Rejected commands
    """

    wait_time = between(0.5, 2.0)
    tasks = {
        CustodyChainJourney: 8,
        RejectedCommandsJourney: 2,
    }
