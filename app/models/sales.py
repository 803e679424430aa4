# models/sales.py

import enum

from sqlalchemy import CheckConstraint, Column, Enum, Index, Integer, DateTime, ForeignKey, Numeric, String
from sqlalchemy.orm import relationship

from app.database import Base, utcnow


class SaleStatus(str, enum.Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class Sale(Base):
    __tablename__ = "sales"

    id = Column(Integer, primary_key=True, index=True)

    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)

    product_service = Column(String, nullable=False)

    amount = Column(Numeric(10, 2), nullable=False)

    date = Column(DateTime(timezone=True), nullable=False)

    status = Column(
        Enum(
            SaleStatus,
            name="sale_status",
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
        default=SaleStatus.PENDING,
        index=True,
    )

    created_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    customer = relationship("Customer", back_populates="sales")

    __table_args__ = (
        Index("ix_sales_customer_date", "customer_id", "date"),
        CheckConstraint("amount >= 0", name="ck_sale_amount_non_negative"),
    )
