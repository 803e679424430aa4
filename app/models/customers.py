# app/models/customers.py

from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.orm import relationship

from app.database import Base, utcnow


class Customer(Base):
    __tablename__ = "customers"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False)
    phone = Column(String, nullable=False)
    company = Column(String, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    sales = relationship("Sale", back_populates="customer", order_by="Sale.id")
    interactions = relationship("Interaction", back_populates="customer", order_by="Interaction.id")
