"""Campaign filtering, pagination and top-performer ranking over the in-memory store."""

import math
from collections.abc import Iterable
from dataclasses import dataclass

from marketing_api.core.errors import NotFound
from marketing_api.core.store import DataStore
from marketing_api.models import Campaign

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
TOP_PERFORMERS_COUNT = 5


@dataclass(frozen=True)
class CampaignFilters:
    """Optional filters; None or empty means 'do not filter on this field'."""

    status: str | None = None
    medium: str | None = None
    category: str | None = None


@dataclass(frozen=True)
class CampaignPage:
    items: list[Campaign]
    page: int
    total_pages: int
    total_items: int


def filter_campaigns(
    campaigns: Iterable[Campaign], filters: CampaignFilters
) -> list[Campaign]:
    """
    Apply filters: status and medium match case-insensitively on the whole value,
    category matches case-insensitively as a substring of product_category.
    """
    result = list(campaigns)
    if filters.status:
        status = filters.status.lower()
        result = [c for c in result if c.status.lower() == status]
    if filters.medium:
        medium = filters.medium.lower()
        result = [c for c in result if c.medium.lower() == medium]
    if filters.category:
        category = filters.category.lower()
        result = [c for c in result if category in c.product_category.lower()]
    return result


def paginate(
    campaigns: list[Campaign], page: int = DEFAULT_PAGE, limit: int = DEFAULT_LIMIT
) -> CampaignPage:
    """Slice a 1-indexed page. Pages past the end are empty; total_pages is ceil(count / limit)."""
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be >= 1")
    start = (page - 1) * limit
    return CampaignPage(
        items=campaigns[start : start + limit],
        page=page,
        total_pages=math.ceil(len(campaigns) / limit),
        total_items=len(campaigns),
    )


def list_campaigns(
    store: DataStore,
    filters: CampaignFilters,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_LIMIT,
) -> CampaignPage:
    return paginate(filter_campaigns(store.list_campaigns(), filters), page, limit)


def get_campaign(store: DataStore, campaign_id: int) -> Campaign:
    """Return the campaign with campaign_id. Raises NotFound if there is none."""
    campaign = store.get_campaign(campaign_id)
    if campaign is None:
        raise NotFound("Campaign not found")
    return campaign


def top_campaigns_by_revenue(
    campaigns: Iterable[Campaign], count: int = TOP_PERFORMERS_COUNT
) -> list[Campaign]:
    """Highest revenue first; ties keep dataset order. Does not reorder the input."""
    return sorted(campaigns, key=lambda c: c.revenue, reverse=True)[:count]
