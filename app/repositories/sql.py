# app/repositories/sql.py

import logging
from decimal import Decimal
from typing import Any, Dict, List, Optional

from sqlalchemy import func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.customers import Customer
from app.models.sales import Sale, SaleStatus
from app.models.interactions import Interaction
from app.repositories.base import CrmRepository

logger = logging.getLogger(__name__)

CENT = Decimal("0.01")

# Integer primary keys are signed 64-bit; larger ids cannot exist in the table
MAX_ID = 2**63 - 1


def _storable(record_id: int) -> bool:
    return 0 < record_id <= MAX_ID


class SqlAlchemyRepository(CrmRepository):
    """CrmRepository backed by a request-scoped SQLAlchemy session."""

    def __init__(self, db: Session):
        self.db = db

    # =========================================================
    # WRITE HELPERS
    # =========================================================
    def _insert(self, record):
        try:
            self.db.add(record)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Insert into {record.__tablename__} failed")
            raise
        return record

    def _apply(self, record, changes: Dict[str, Any]):
        try:
            for field, value in changes.items():
                setattr(record, field, value)
            self.db.commit()
            self.db.refresh(record)
        except SQLAlchemyError:
            self.db.rollback()
            logger.exception(f"Update of {record.__tablename__} id={record.id} failed")
            raise
        return record

    # =========================================================
    # CUSTOMERS
    # =========================================================
    def add_customer(self, **fields: Any) -> Customer:
        return self._insert(Customer(**fields))

    def get_customer(self, customer_id: int) -> Optional[Customer]:
        if not _storable(customer_id):
            return None
        return self.db.query(Customer).filter(Customer.id == customer_id).first()

    def customer_exists(self, customer_id: int) -> bool:
        if not _storable(customer_id):
            return False
        return (
            self.db.query(Customer.id)
            .filter(Customer.id == customer_id)
            .first()
        ) is not None

    def list_customers(self) -> List[Customer]:
        return self.db.query(Customer).order_by(Customer.id).all()

    def update_customer(self, customer: Customer, changes: Dict[str, Any]) -> Customer:
        return self._apply(customer, changes)

    # =========================================================
    # SALES
    # =========================================================
    def add_sale(self, **fields: Any) -> Sale:
        return self._insert(Sale(**fields))

    def get_sale(self, sale_id: int) -> Optional[Sale]:
        if not _storable(sale_id):
            return None
        return self.db.query(Sale).filter(Sale.id == sale_id).first()

    def list_sales(self, customer_id: Optional[int] = None) -> List[Sale]:
        if customer_id is not None and not _storable(customer_id):
            return []

        query = self.db.query(Sale)

        if customer_id is not None:
            query = query.filter(Sale.customer_id == customer_id)

        return query.order_by(Sale.id).all()

    def update_sale(self, sale: Sale, changes: Dict[str, Any]) -> Sale:
        return self._apply(sale, changes)

    # =========================================================
    # INTERACTIONS
    # =========================================================
    def add_interaction(self, **fields: Any) -> Interaction:
        return self._insert(Interaction(**fields))

    def get_interaction(self, interaction_id: int) -> Optional[Interaction]:
        if not _storable(interaction_id):
            return None
        return self.db.query(Interaction).filter(Interaction.id == interaction_id).first()

    def list_interactions(
        self,
        customer_id: Optional[int] = None,
        newest_first: bool = False,
        limit: Optional[int] = None,
    ) -> List[Interaction]:
        if customer_id is not None and not _storable(customer_id):
            return []

        query = self.db.query(Interaction)

        if customer_id is not None:
            query = query.filter(Interaction.customer_id == customer_id)

        if newest_first:
            query = query.order_by(Interaction.date.desc(), Interaction.id.desc())
        else:
            query = query.order_by(Interaction.id)

        if limit is not None:
            query = query.limit(limit)

        return query.all()

    def update_interaction(self, interaction: Interaction, changes: Dict[str, Any]) -> Interaction:
        return self._apply(interaction, changes)

    # =========================================================
    # AGGREGATES
    # =========================================================
    def count_customers(self) -> int:
        return self.db.query(func.count(Customer.id)).scalar() or 0

    def count_sales(self, status: Optional[SaleStatus] = None) -> int:
        query = self.db.query(func.count(Sale.id))

        if status is not None:
            query = query.filter(Sale.status == status)

        return query.scalar() or 0

    def sum_sale_amounts(self) -> Decimal:
        if not self.db.get_bind().dialect.supports_native_decimal:
            # SQLite would SUM in float; add the per-row Decimals here instead
            amounts = self.db.query(Sale.amount).all()
            total = sum((row.amount for row in amounts), Decimal("0"))
        else:
            total = (
                self.db.query(func.coalesce(func.sum(Sale.amount), 0))
                .scalar()
            )

        return Decimal(total).quantize(CENT)

    def count_interactions(self) -> int:
        return self.db.query(func.count(Interaction.id)).scalar() or 0
