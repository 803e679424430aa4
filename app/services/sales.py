# app/services/sales.py

import logging
from typing import List, Optional

from app.core.exceptions import NotFoundError, ReferentialIntegrityError
from app.repositories.base import CrmRepository
from app.schemas.sale import SaleCreate, SaleUpdate, SaleResponse

logger = logging.getLogger(__name__)


def create_sale(repo: CrmRepository, data: SaleCreate) -> SaleResponse:
    if not repo.customer_exists(data.customer_id):
        logger.warning(f"Sale rejected: customer id={data.customer_id} does not exist")
        raise ReferentialIntegrityError(
            f"Customer with id {data.customer_id} does not exist"
        )

    sale = repo.add_sale(**data.model_dump())
    logger.info(f"Created sale id={sale.id} customer_id={sale.customer_id} amount={sale.amount}")

    return SaleResponse.model_validate(sale)


def get_sales(repo: CrmRepository) -> List[SaleResponse]:
    return [SaleResponse.model_validate(s) for s in repo.list_sales()]


def get_sale(repo: CrmRepository, sale_id: int) -> Optional[SaleResponse]:
    sale = repo.get_sale(sale_id)
    return SaleResponse.model_validate(sale) if sale else None


def get_sales_by_customer(repo: CrmRepository, customer_id: int) -> List[SaleResponse]:
    return [
        SaleResponse.model_validate(s)
        for s in repo.list_sales(customer_id=customer_id)
    ]


def update_sale(repo: CrmRepository, sale_id: int, data: SaleUpdate) -> SaleResponse:
    sale = repo.get_sale(sale_id)

    if sale is None:
        logger.warning(f"Update rejected: sale id={sale_id} not found")
        raise NotFoundError(f"Sale with id {sale_id} not found")

    changes = data.model_dump(exclude_none=True)
    sale = repo.update_sale(sale, changes)
    logger.info(f"Updated sale id={sale_id} fields={sorted(changes)}")

    return SaleResponse.model_validate(sale)
