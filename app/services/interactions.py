# app/services/interactions.py

import logging
from typing import List, Optional

from app.core.exceptions import NotFoundError, ReferentialIntegrityError
from app.repositories.base import CrmRepository
from app.schemas.interaction import (
    InteractionCreate,
    InteractionUpdate,
    InteractionResponse,
)

logger = logging.getLogger(__name__)


def create_interaction(repo: CrmRepository, data: InteractionCreate) -> InteractionResponse:
    # Checked up front so every backend reports the same error
    if not repo.customer_exists(data.customer_id):
        logger.warning(f"Interaction rejected: customer id={data.customer_id} does not exist")
        raise ReferentialIntegrityError(
            f"Customer with id {data.customer_id} does not exist"
        )

    interaction = repo.add_interaction(**data.model_dump())
    logger.info(f"Created interaction id={interaction.id} customer_id={interaction.customer_id}")

    return InteractionResponse.model_validate(interaction)


def get_interactions(repo: CrmRepository) -> List[InteractionResponse]:
    return [InteractionResponse.model_validate(i) for i in repo.list_interactions()]


def get_interaction(repo: CrmRepository, interaction_id: int) -> Optional[InteractionResponse]:
    interaction = repo.get_interaction(interaction_id)
    return InteractionResponse.model_validate(interaction) if interaction else None


def get_interactions_by_customer(repo: CrmRepository, customer_id: int) -> List[InteractionResponse]:
    """Interactions for one customer, most recent first."""
    return [
        InteractionResponse.model_validate(i)
        for i in repo.list_interactions(customer_id=customer_id, newest_first=True)
    ]


def update_interaction(
    repo: CrmRepository,
    interaction_id: int,
    data: InteractionUpdate,
) -> InteractionResponse:
    interaction = repo.get_interaction(interaction_id)

    if interaction is None:
        logger.warning(f"Update rejected: interaction id={interaction_id} not found")
        raise NotFoundError(f"Interaction with id {interaction_id} not found")

    changes = data.model_dump(exclude_none=True)
    interaction = repo.update_interaction(interaction, changes)
    logger.info(f"Updated interaction id={interaction_id} fields={sorted(changes)}")

    return InteractionResponse.model_validate(interaction)
