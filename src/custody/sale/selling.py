"""Sale to customer — command and handler.

The retailer may only sell bottles it currently owns, which it can only have
come to own through a delivered shipment addressed to it. All bottles are
checked before any of them changes hands.
"""

import structlog
from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from custody.bottle import registry as bottle_registry
from custody.domain import custody
from custody.membership.registry import ensure_customer, ensure_retailer
from custody.sale.sale import Sale
from custody.shared.identifiers import parse_id_list

logger = structlog.get_logger(__name__)


@custody.command(part_of="Sale")
class SellToCustomer:
    """Sell bottles held by the retailer to a registered customer."""

    retailer = Identifier(required=True)
    customer = Identifier()
    bottle_ids = Text(sanitize=False)  # JSON list of bottle ids


@custody.command_handler(part_of=Sale)
class SellToCustomerHandler:
    @handle(SellToCustomer)
    def sell_to_customer(self, command):
        retailer = str(command.retailer)
        customer = str(command.customer) if command.customer else None
        ensure_retailer(retailer)
        ensure_customer(customer)

        # Repeats collapse to a single transfer
        bottle_ids = list(dict.fromkeys(parse_id_list(command.bottle_ids)))
        for bottle_id in bottle_ids:
            bottle = bottle_registry.check_present(bottle_id)
            bottle.assert_shipped()
            bottle.assert_owned_by(retailer)

        for bottle_id in bottle_ids:
            bottle_registry.transfer_ownership(bottle_id, customer)

        sale = Sale.record(retailer=retailer, customer=customer, bottle_ids=bottle_ids)
        current_domain.repository_for(Sale).add(sale)

        logger.info(
            "Bottles sold to customer",
            sale_id=str(sale.id),
            retailer=retailer,
            customer=customer,
            bottle_count=len(bottle_ids),
        )
        return str(sale.id)
