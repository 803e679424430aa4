# app/repositories/memory.py

from decimal import Decimal
from itertools import count
from typing import Any, Dict, List, Optional

from app.database import utcnow
from app.models.customers import Customer
from app.models.sales import Sale, SaleStatus
from app.models.interactions import Interaction
from app.repositories.base import CrmRepository


class InMemoryRepository(CrmRepository):
    """Dict-backed CrmRepository.

    Records are plain (transient) model instances keyed by id. Useful for
    exercising the service layer without a database.
    """

    def __init__(self):
        self._customers: Dict[int, Customer] = {}
        self._sales: Dict[int, Sale] = {}
        self._interactions: Dict[int, Interaction] = {}
        self._ids = {
            "customers": count(1),
            "sales": count(1),
            "interactions": count(1),
        }

    def _insert(self, table: Dict[int, Any], model, **fields: Any):
        record = model(
            id=next(self._ids[model.__tablename__]),
            created_at=utcnow(),
            **fields,
        )
        table[record.id] = record
        return record

    @staticmethod
    def _apply(record, changes: Dict[str, Any]):
        for field, value in changes.items():
            setattr(record, field, value)
        return record

    # Customers
    def add_customer(self, **fields: Any) -> Customer:
        return self._insert(self._customers, Customer, **fields)

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        return self._customers.get(customer_id)

    def list_customers(self) -> List[Customer]:
        return list(self._customers.values())

    def update_customer(self, customer: Customer, changes: Dict[str, Any]) -> Customer:
        return self._apply(customer, changes)

    # Sales
    def add_sale(self, **fields: Any) -> Sale:
        fields.setdefault("status", SaleStatus.PENDING)
        return self._insert(self._sales, Sale, **fields)

    def get_sale(self, sale_id: int) -> Optional[Sale]:
        return self._sales.get(sale_id)

    def list_sales(self, customer_id: Optional[int] = None) -> List[Sale]:
        return [
            sale for sale in self._sales.values()
            if customer_id is None or sale.customer_id == customer_id
        ]

    def update_sale(self, sale: Sale, changes: Dict[str, Any]) -> Sale:
        return self._apply(sale, changes)

    # Interactions
    def add_interaction(self, **fields: Any) -> Interaction:
        return self._insert(self._interactions, Interaction, **fields)

    def get_interaction(self, interaction_id: int) -> Optional[Interaction]:
        return self._interactions.get(interaction_id)

    def list_interactions(
        self,
        customer_id: Optional[int] = None,
        newest_first: bool = False,
        limit: Optional[int] = None,
    ) -> List[Interaction]:
        results = [
            interaction for interaction in self._interactions.values()
            if customer_id is None or interaction.customer_id == customer_id
        ]

        if newest_first:
            results.sort(key=lambda x: (x.date, x.id), reverse=True)

        if limit is not None:
            results = results[:limit]

        return results

    def update_interaction(self, interaction: Interaction, changes: Dict[str, Any]) -> Interaction:
        return self._apply(interaction, changes)

    # Aggregates
    def count_customers(self) -> int:
        return len(self._customers)

    def count_sales(self, status: Optional[SaleStatus] = None) -> int:
        return sum(
            1 for sale in self._sales.values()
            if status is None or sale.status == status
        )

    def sum_sale_amounts(self) -> Decimal:
        total = sum((sale.amount for sale in self._sales.values()), Decimal("0"))
        return total.quantize(Decimal("0.01"))

    def count_interactions(self) -> int:
        return len(self._interactions)
