# schemas/dashboard.py

from pydantic import BaseModel, Field
from typing import List

from app.schemas.interaction import InteractionResponse


class DashboardOverviewResponse(BaseModel):
    total_customers: int
    total_sales: int
    total_sales_amount: float
    pending_sales: int
    completed_sales: int
    cancelled_sales: int
    total_interactions: int
    recent_interactions: List[InteractionResponse] = Field(default_factory=list, max_length=5)
