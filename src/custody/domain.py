"""Custody bounded context — Membership, Bottle Registry and Shipment Ledger.

Tracks who holds each bottle as it moves manufacturer → carrier → retailer →
customer. Every command authorizes the caller against the membership
registry, validates the target records, then stages all of its writes in a
single unit of work before raising its event.
"""

from protean.domain import Domain

from custody.utils.logging import configure_logging, get_logger

configure_logging()

logger = get_logger(__name__)

custody = Domain(name="custody")
