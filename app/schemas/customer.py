# schemas/customer.py

from pydantic import BaseModel, EmailStr, Field, field_validator
from datetime import datetime
from typing import List

from app.schemas.sale import SaleResponse
from app.schemas.interaction import InteractionResponse
from app.schemas.common import normalize_timestamp


class CustomerCreate(BaseModel):
    name: str = Field(..., min_length=1, description="Name is required")
    email: EmailStr = Field(..., description="Customer's email address")
    phone: str = Field(..., min_length=1, description="Phone is required")
    company: str = Field(..., min_length=1, description="Company is required")


class CustomerUpdate(BaseModel):
    name: str | None = Field(None, min_length=1)
    email: EmailStr | None = None
    phone: str | None = Field(None, min_length=1)
    company: str | None = Field(None, min_length=1)


class CustomerResponse(BaseModel):
    id: int
    name: str
    email: str
    phone: str
    company: str
    created_at: datetime

    @field_validator("created_at")
    @classmethod
    def created_at_to_utc(cls, value):
        return normalize_timestamp(value)

    class Config:
        from_attributes = True


class CustomerWithRelationsResponse(CustomerResponse):
    sales: List[SaleResponse] = []
    interactions: List[InteractionResponse] = []
