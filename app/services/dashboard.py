# =========================================================
# DASHBOARD OVERVIEW
#
# Point-in-time summary across customers, sales and
# interactions. Each figure is its own query; nothing here
# wraps them in a transaction, so concurrent writes may
# show up in some figures and not others.
#
# Schema-safe: amount is always a number (never None)
# =========================================================

import logging

from app.models.sales import SaleStatus
from app.repositories.base import CrmRepository
from app.schemas.dashboard import DashboardOverviewResponse
from app.schemas.interaction import InteractionResponse

logger = logging.getLogger(__name__)

RECENT_INTERACTIONS_LIMIT = 5


def get_dashboard_overview(repo: CrmRepository) -> DashboardOverviewResponse:
    total_sales_amount = repo.sum_sale_amounts()

    recent_interactions = repo.list_interactions(
        newest_first=True,
        limit=RECENT_INTERACTIONS_LIMIT,
    )

    overview = DashboardOverviewResponse(
        total_customers=repo.count_customers(),
        total_sales=repo.count_sales(),
        total_sales_amount=total_sales_amount,
        pending_sales=repo.count_sales(SaleStatus.PENDING),
        completed_sales=repo.count_sales(SaleStatus.COMPLETED),
        cancelled_sales=repo.count_sales(SaleStatus.CANCELLED),
        total_interactions=repo.count_interactions(),
        recent_interactions=[
            InteractionResponse.model_validate(i) for i in recent_interactions
        ],
    )

    logger.info(
        f"Dashboard overview: customers={overview.total_customers} "
        f"sales={overview.total_sales} interactions={overview.total_interactions}"
    )

    return overview
