# app/repositories/base.py
"""Storage interface used by the service layer.

Services never talk to a database session directly; they receive a
``CrmRepository`` and only use the capability methods below. Records handed
back are ``Customer``/``Sale``/``Interaction`` model instances (attached to a
session or not, depending on the implementation).
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Dict, List, Optional

from app.models.customers import Customer
from app.models.sales import Sale, SaleStatus
from app.models.interactions import Interaction


class CrmRepository(ABC):

    # ----------------------------
    # Customers
    # ----------------------------
    @abstractmethod
    def add_customer(self, **fields: Any) -> Customer: ...

    @abstractmethod
    def get_customer(self, customer_id: int) -> Optional[Customer]: ...

    @abstractmethod
    def list_customers(self) -> List[Customer]: ...

    @abstractmethod
    def update_customer(self, customer: Customer, changes: Dict[str, Any]) -> Customer: ...

    def customer_exists(self, customer_id: int) -> bool:
        return self.get_customer(customer_id) is not None

    # ----------------------------
    # Sales
    # ----------------------------
    @abstractmethod
    def add_sale(self, **fields: Any) -> Sale: ...

    @abstractmethod
    def get_sale(self, sale_id: int) -> Optional[Sale]: ...

    @abstractmethod
    def list_sales(self, customer_id: Optional[int] = None) -> List[Sale]: ...

    @abstractmethod
    def update_sale(self, sale: Sale, changes: Dict[str, Any]) -> Sale: ...

    # ----------------------------
    # Interactions
    # ----------------------------
    @abstractmethod
    def add_interaction(self, **fields: Any) -> Interaction: ...

    @abstractmethod
    def get_interaction(self, interaction_id: int) -> Optional[Interaction]: ...

    @abstractmethod
    def list_interactions(
        self,
        customer_id: Optional[int] = None,
        newest_first: bool = False,
        limit: Optional[int] = None,
    ) -> List[Interaction]:
        """List interactions by id, or by date descending when ``newest_first``."""

    @abstractmethod
    def update_interaction(self, interaction: Interaction, changes: Dict[str, Any]) -> Interaction: ...

    # ----------------------------
    # Aggregates
    # ----------------------------
    @abstractmethod
    def count_customers(self) -> int: ...

    @abstractmethod
    def count_sales(self, status: Optional[SaleStatus] = None) -> int: ...

    @abstractmethod
    def sum_sale_amounts(self) -> Decimal:
        """Sum of every sale amount regardless of status, quantized to cents; ``Decimal("0.00")`` when empty."""

    @abstractmethod
    def count_interactions(self) -> int: ...
