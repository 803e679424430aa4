# schemas/interaction.py

from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from app.models.interactions import InteractionType
from app.schemas.common import normalize_timestamp


class InteractionCreate(BaseModel):
    customer_id: int
    type: InteractionType
    date: datetime
    summary: str = Field(..., min_length=1, description="Summary is required")

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, value):
        return normalize_timestamp(value)


class InteractionUpdate(BaseModel):
    type: InteractionType | None = None
    date: datetime | None = None
    summary: str | None = Field(None, min_length=1)

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, value):
        return normalize_timestamp(value)


class InteractionResponse(BaseModel):
    id: int
    customer_id: int
    type: InteractionType
    date: datetime
    summary: str
    created_at: datetime

    @field_validator("date", "created_at")
    @classmethod
    def timestamps_to_utc(cls, value):
        return normalize_timestamp(value)

    class Config:
        from_attributes = True
