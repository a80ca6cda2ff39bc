"""Sale aggregate — the record of a retailer handing bottles to a customer.

A sale is the last custody transfer. The bottles' owner field is what
authorizes the sale; this record keeps the customer-side trail and is the
source of the batched sale event.
"""

import json
from datetime import UTC, datetime

from protean.fields import DateTime, Identifier, Text

from custody.domain import custody
from custody.sale.events import BottlesSoldToCustomer


@custody.aggregate
class Sale:
    retailer = Identifier(required=True)
    customer = Identifier(required=True)
    bottles = Text(required=True, sanitize=False)  # JSON list of bottle ids
    sold_at = DateTime(required=True)

    @classmethod
    def record(cls, retailer: str, customer: str, bottle_ids: list[str]):
        now = datetime.now(UTC)
        sale = cls(
            retailer=retailer,
            customer=customer,
            bottles=json.dumps(list(bottle_ids)),
            sold_at=now,
        )
        sale.raise_(
            BottlesSoldToCustomer(
                sale_id=str(sale.id),
                customer=customer,
                retailer=retailer,
                bottle_count=len(bottle_ids),
                sold_at=now,
            )
        )
        return sale

    @property
    def bottle_ids(self) -> list[str]:
        return json.loads(self.bottles) if self.bottles else []
