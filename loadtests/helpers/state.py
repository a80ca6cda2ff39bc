"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance maintains its own state — no cross-user sharing.
State tracks the accounts and ids created so follow-up operations can
reference them.
"""

from dataclasses import dataclass, field


@dataclass
class CustodyState:
    """Tracks one bottle batch through the custody chain."""

    accounts: dict[str, str] = field(default_factory=dict)
    bottle_ids: list[str] = field(default_factory=list)
    shipment_id: str | None = None
    shipment_status: str = "Pending"
    sale_id: str | None = None
