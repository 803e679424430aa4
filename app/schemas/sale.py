# schemas/sale.py

from pydantic import BaseModel, Field, field_validator
from datetime import datetime
from decimal import Decimal, ROUND_HALF_UP

from app.models.sales import SaleStatus
from app.schemas.common import normalize_timestamp

CENT = Decimal("0.01")


def _to_cents(value: Decimal | None) -> Decimal | None:
    if value is None:
        return None
    value = value.quantize(CENT, rounding=ROUND_HALF_UP)
    if value <= 0:
        raise ValueError("Amount must be positive")
    return value


class SaleCreate(BaseModel):
    customer_id: int
    product_service: str = Field(..., min_length=1, description="Product/Service is required")

    amount: Decimal = Field(
        ...,
        gt=0,
        lt=100_000_000,
        description="Amount must be positive and below 100 million"
    )

    date: datetime
    status: SaleStatus = SaleStatus.PENDING

    @field_validator("amount")
    @classmethod
    def amount_to_cents(cls, value):
        return _to_cents(value)

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, value):
        return normalize_timestamp(value)


class SaleUpdate(BaseModel):
    product_service: str | None = Field(None, min_length=1)
    amount: Decimal | None = Field(None, gt=0, lt=100_000_000)
    date: datetime | None = None
    status: SaleStatus | None = None

    @field_validator("amount")
    @classmethod
    def amount_to_cents(cls, value):
        return _to_cents(value)

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, value):
        return normalize_timestamp(value)


class SaleResponse(BaseModel):
    id: int
    customer_id: int
    product_service: str
    amount: float
    date: datetime
    status: SaleStatus
    created_at: datetime

    @field_validator("date", "created_at")
    @classmethod
    def timestamps_to_utc(cls, value):
        return normalize_timestamp(value)

    class Config:
        from_attributes = True
