"""Faker-based data generators for Locust load test scenarios.

Every generated id stays within the 36-byte identifier limit and is unique
per call, so concurrent users never collide on member, bottle or shipment
ids.
"""

import random
import uuid

from faker import Faker

fake = Faker()

MAX_BOTTLES_PER_SHIPMENT = 5


def account_id(role: str) -> str:
    """Account ids like 'carrier-swift-a1b2c3d4'."""
    slug = fake.user_name().lower()[:12]
    return f"{role}-{slug}-{uuid.uuid4().hex[:8]}"


def bottle_id() -> str:
    """Serial-style bottle ids like 'BTL-3F9A1C0D2B'."""
    return f"BTL-{uuid.uuid4().hex[:10].upper()}"


def shipment_id() -> str:
    return f"SHP-{uuid.uuid4().hex[:12].upper()}"


def bottle_batch(max_size: int = MAX_BOTTLES_PER_SHIPMENT) -> list[str]:
    """A batch of fresh bottle ids that fits in one shipment."""
    return [bottle_id() for _ in range(random.randint(1, max_size))]


def chain_accounts() -> dict[str, str]:
    """One fresh account per supply-chain role."""
    return {
        "manufacturer": account_id("manufacturer"),
        "carrier": account_id("carrier"),
        "retailer": account_id("retailer"),
        "customer": account_id("customer"),
    }
