"""Statistics routes: dataset overview and revenue performance."""

from typing import Annotated

from fastapi import APIRouter, Depends

from marketing_api.api.auth import get_current_user
from marketing_api.core.store import DataStore, get_store
from marketing_api.models import Account
from marketing_api.schemas.stats import (
    PerformanceData,
    PerformanceResponse,
    StatsOverviewResponse,
    TopCampaign,
)
from marketing_api.services.campaigns import top_campaigns_by_revenue

router = APIRouter()


@router.get("/overview", response_model=StatsOverviewResponse)
def get_overview(
    _user: Annotated[Account, Depends(get_current_user)],
    store: Annotated[DataStore, Depends(get_store)],
) -> StatsOverviewResponse:
    return StatsOverviewResponse(data=store.get_marketing_stats())


@router.get("/performance", response_model=PerformanceResponse)
def get_performance(
    _user: Annotated[Account, Depends(get_current_user)],
    store: Annotated[DataStore, Depends(get_store)],
    period: str = "all",
) -> PerformanceResponse:
    """
    Aggregate revenue figures plus the five highest-revenue campaigns.
    period is echoed back; the dataset is static so it does not narrow the figures.
    """
    stats = store.get_marketing_stats()
    top = top_campaigns_by_revenue(store.list_campaigns())
    return PerformanceResponse(
        data=PerformanceData(
            total_revenue=stats.total_revenue,
            total_spend=stats.total_spend,
            total_conversions=stats.total_conversions,
            average_roas=stats.average_roas,
            top_performing_campaigns=[
                TopCampaign(
                    id=c.id, name=c.name, revenue=c.revenue, roas=c.roas, status=c.status
                )
                for c in top
            ],
        ),
        period=period,
    )
