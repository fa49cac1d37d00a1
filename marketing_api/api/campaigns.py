"""Campaign routes: filtered, paginated listing and lookup by id."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from marketing_api.api.auth import get_current_user
from marketing_api.core.store import DataStore, get_store
from marketing_api.models import Account
from marketing_api.schemas.campaigns import (
    AppliedFilters,
    CampaignListResponse,
    CampaignResponse,
    Pagination,
)
from marketing_api.services.campaigns import (
    DEFAULT_LIMIT,
    DEFAULT_PAGE,
    CampaignFilters,
    get_campaign,
    list_campaigns,
)

router = APIRouter()


@router.get("", response_model=CampaignListResponse)
def get_campaigns(
    _user: Annotated[Account, Depends(get_current_user)],
    store: Annotated[DataStore, Depends(get_store)],
    status: str | None = None,
    medium: str | None = None,
    category: str | None = None,
    page: Annotated[int, Query(ge=1)] = DEFAULT_PAGE,
    limit: Annotated[int, Query(ge=1)] = DEFAULT_LIMIT,
) -> CampaignListResponse:
    """
    List campaigns, optionally filtered.

    status and medium match exactly (case-insensitive); category matches any
    product_category containing it (case-insensitive). Pages are 1-indexed.
    """
    filters = CampaignFilters(status=status, medium=medium, category=category)
    result = list_campaigns(store, filters, page=page, limit=limit)
    return CampaignListResponse(
        data=result.items,
        pagination=Pagination(
            current=result.page,
            total=result.total_pages,
            total_campaigns=result.total_items,
            showing=len(result.items),
        ),
        filters=AppliedFilters(status=status, medium=medium, category=category),
    )


@router.get("/{campaign_id}", response_model=CampaignResponse)
def get_campaign_by_id(
    campaign_id: int,
    _user: Annotated[Account, Depends(get_current_user)],
    store: Annotated[DataStore, Depends(get_store)],
) -> CampaignResponse:
    """Return one campaign; 404 if the id is unknown."""
    return CampaignResponse(data=get_campaign(store, campaign_id))
