# app/routers/interactions.py

from typing import Optional

from fastapi import APIRouter, Depends, Request, status

from app.core.deps import get_repository
from app.core.config import settings
from app.core.rate_limiter import limiter
from app.repositories.base import CrmRepository
from app.schemas.interaction import (
    InteractionCreate,
    InteractionUpdate,
    InteractionResponse,
)
from app.services import interactions as interaction_service

router = APIRouter(
    prefix="/interactions",
    tags=["Interactions"],
)


@router.post("", response_model=InteractionResponse, status_code=status.HTTP_201_CREATED)
@limiter.limit(settings.WRITE_RATE_LIMIT)
def create_interaction(
    request: Request,
    interaction_data: InteractionCreate,
    repo: CrmRepository = Depends(get_repository),
):
    return interaction_service.create_interaction(repo, interaction_data)


@router.get("", response_model=list[InteractionResponse])
def list_interactions(repo: CrmRepository = Depends(get_repository)):
    return interaction_service.get_interactions(repo)


@router.get("/{interaction_id}", response_model=Optional[InteractionResponse])
def get_interaction(
    interaction_id: int,
    repo: CrmRepository = Depends(get_repository),
):
    return interaction_service.get_interaction(repo, interaction_id)


@router.put("/{interaction_id}", response_model=InteractionResponse)
@limiter.limit(settings.WRITE_RATE_LIMIT)
def update_interaction(
    request: Request,
    interaction_id: int,
    interaction_data: InteractionUpdate,
    repo: CrmRepository = Depends(get_repository),
):
    return interaction_service.update_interaction(repo, interaction_id, interaction_data)
