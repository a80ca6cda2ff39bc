"""Repository for the Sale aggregate."""

from custody.domain import custody
from custody.sale.sale import Sale


@custody.repository(part_of=Sale)
class SaleRepository:
    def sales_to_customer(self, account: str) -> list[Sale]:
        """Sales made to ``account``, oldest first."""
        sales = self._dao.query.filter(customer=account).all().items
        return sorted(sales, key=lambda s: s.sold_at)
