# app/routers/customers.py

from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from app.core.deps import get_repository
from app.core.config import settings
from app.core.rate_limiter import limiter
from app.repositories.base import CrmRepository
from app.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
    CustomerWithRelationsResponse,
)
from app.schemas.sale import SaleResponse
from app.schemas.interaction import InteractionResponse
from app.services import customers as customer_service
from app.services import sales as sale_service
from app.services import interactions as interaction_service

router = APIRouter(
    prefix="/customers",
    tags=["Customers"],
)


@router.post(
    "",
    response_model=CustomerResponse,
    status_code=status.HTTP_201_CREATED,
)
@limiter.limit(settings.WRITE_RATE_LIMIT)
def create_customer(
    request: Request,
    customer_data: CustomerCreate,
    repo: CrmRepository = Depends(get_repository),
):
    return customer_service.create_customer(repo, customer_data)


@router.get("", response_model=list[CustomerResponse])
def list_customers(repo: CrmRepository = Depends(get_repository)):
    return customer_service.get_customers(repo)


# Unknown ids answer 200 with a null body, not 404
@router.get("/{customer_id}", response_model=Optional[CustomerResponse])
def get_customer(
    customer_id: int,
    repo: CrmRepository = Depends(get_repository),
):
    return customer_service.get_customer(repo, customer_id)


@router.put("/{customer_id}", response_model=CustomerResponse)
@limiter.limit(settings.WRITE_RATE_LIMIT)
def update_customer(
    request: Request,
    customer_id: int,
    customer_data: CustomerUpdate,
    repo: CrmRepository = Depends(get_repository),
):
    return customer_service.update_customer(repo, customer_id, customer_data)


@router.get(
    "/{customer_id}/relations",
    response_model=Optional[CustomerWithRelationsResponse],
)
def get_customer_with_relations(
    customer_id: int,
    repo: CrmRepository = Depends(get_repository),
):
    return customer_service.get_customer_with_relations(repo, customer_id)


@router.get("/{customer_id}/sales", response_model=list[SaleResponse])
def list_customer_sales(
    customer_id: int,
    repo: CrmRepository = Depends(get_repository),
):
    return sale_service.get_sales_by_customer(repo, customer_id)


@router.get("/{customer_id}/interactions", response_model=list[InteractionResponse])
def list_customer_interactions(
    customer_id: int,
    repo: CrmRepository = Depends(get_repository),
):
    return interaction_service.get_interactions_by_customer(repo, customer_id)
