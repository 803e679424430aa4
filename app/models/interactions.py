# models/interactions.py

import enum

from sqlalchemy import Column, Enum, Index, Integer, DateTime, ForeignKey, Text
from sqlalchemy.orm import relationship

from app.database import Base, utcnow


class InteractionType(str, enum.Enum):
    CALL = "Call"
    EMAIL = "Email"
    MEETING = "Meeting"


class Interaction(Base):
    __tablename__ = "interactions"

    id = Column(Integer, primary_key=True, index=True)

    customer_id = Column(Integer, ForeignKey("customers.id"), nullable=False, index=True)

    type = Column(
        Enum(
            InteractionType,
            name="interaction_type",
            values_callable=lambda e: [member.value for member in e],
        ),
        nullable=False,
    )

    date = Column(DateTime(timezone=True), nullable=False, index=True)

    summary = Column(Text, nullable=False)

    created_at = Column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False,
    )

    customer = relationship("Customer", back_populates="interactions")

    # Recent-activity lookups sort by date within a customer
    __table_args__ = (
        Index("ix_interactions_customer_date", "customer_id", "date"),
    )
