# app/services/customers.py

import logging
from typing import List, Optional

from app.core.exceptions import NotFoundError
from app.repositories.base import CrmRepository
from app.schemas.customer import (
    CustomerCreate,
    CustomerUpdate,
    CustomerResponse,
    CustomerWithRelationsResponse,
)
from app.schemas.sale import SaleResponse
from app.schemas.interaction import InteractionResponse

logger = logging.getLogger(__name__)


def create_customer(repo: CrmRepository, data: CustomerCreate) -> CustomerResponse:
    customer = repo.add_customer(**data.model_dump())
    logger.info(f"Created customer id={customer.id}")
    return CustomerResponse.model_validate(customer)


def get_customers(repo: CrmRepository) -> List[CustomerResponse]:
    return [CustomerResponse.model_validate(c) for c in repo.list_customers()]


def get_customer(repo: CrmRepository, customer_id: int) -> Optional[CustomerResponse]:
    if customer_id <= 0:
        return None

    customer = repo.get_customer(customer_id)
    if customer is None:
        return None

    return CustomerResponse.model_validate(customer)


def update_customer(
    repo: CrmRepository,
    customer_id: int,
    data: CustomerUpdate,
) -> CustomerResponse:
    customer = repo.get_customer(customer_id) if customer_id > 0 else None

    if customer is None:
        logger.warning(f"Update rejected: customer id={customer_id} not found")
        raise NotFoundError(f"Customer with id {customer_id} not found")

    changes = data.model_dump(exclude_none=True)
    customer = repo.update_customer(customer, changes)
    logger.info(f"Updated customer id={customer_id} fields={sorted(changes)}")

    return CustomerResponse.model_validate(customer)


def get_customer_with_relations(
    repo: CrmRepository,
    customer_id: int,
) -> Optional[CustomerWithRelationsResponse]:
    """Customer plus every sale and interaction that references it."""
    if customer_id <= 0:
        return None

    customer = repo.get_customer(customer_id)
    if customer is None:
        return None

    sales = repo.list_sales(customer_id=customer_id)
    interactions = repo.list_interactions(customer_id=customer_id)

    return CustomerWithRelationsResponse(
        **CustomerResponse.model_validate(customer).model_dump(),
        sales=[SaleResponse.model_validate(s) for s in sales],
        interactions=[InteractionResponse.model_validate(i) for i in interactions],
    )
