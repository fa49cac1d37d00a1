"""Response schemas for campaign endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from marketing_api.models import Campaign


class Pagination(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    current: int = Field(..., description="Requested page (1-indexed)")
    total: int = Field(..., description="Number of pages")
    total_campaigns: int = Field(
        ..., alias="totalCampaigns", description="Campaigns matching the filters"
    )
    showing: int = Field(..., description="Campaigns on this page")


class AppliedFilters(BaseModel):
    status: str | None = None
    medium: str | None = None
    category: str | None = None


class CampaignListResponse(BaseModel):
    success: bool = True
    data: list[Campaign]
    pagination: Pagination
    filters: AppliedFilters


class CampaignResponse(BaseModel):
    success: bool = True
    data: Campaign
