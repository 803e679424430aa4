# app/routers/sales.py

from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from app.core.deps import get_repository
from app.core.config import settings
from app.core.rate_limiter import limiter
from app.repositories.base import CrmRepository
from app.schemas.sale import SaleCreate, SaleUpdate, SaleResponse
from app.services import sales as sale_service

router = APIRouter(prefix="/sales", tags=["Sales"])


@router.post("", response_model=SaleResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.WRITE_RATE_LIMIT)
def create_sale(
    request: Request,
    sale_data: SaleCreate,
    repo: CrmRepository = Depends(get_repository),
):
    return sale_service.create_sale(repo, sale_data)


@router.get("", response_model=list[SaleResponse])
def list_sales(repo: CrmRepository = Depends(get_repository)):
    return sale_service.get_sales(repo)


@router.get("/{sale_id}", response_model=Optional[SaleResponse])
def get_sale(
    sale_id: int,
    repo: CrmRepository = Depends(get_repository),
):
    return sale_service.get_sale(repo, sale_id)


@router.put("/{sale_id}", response_model=SaleResponse)
@limiter.limit(settings.WRITE_RATE_LIMIT)
def update_sale(
    request: Request,
    sale_id: int,
    sale_data: SaleUpdate,
    repo: CrmRepository = Depends(get_repository),
):
    return sale_service.update_sale(repo, sale_id, sale_data)
