"""Response schemas for statistics and company endpoints."""

from pydantic import BaseModel, ConfigDict, Field

from marketing_api.models import CompanyInfo, MarketingStats


class StatsOverviewResponse(BaseModel):
    success: bool = True
    data: MarketingStats


class TopCampaign(BaseModel):
    id: int
    name: str
    revenue: int
    roas: float
    status: str


class PerformanceData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total_revenue: int = Field(..., alias="totalRevenue")
    total_spend: int = Field(..., alias="totalSpend")
    total_conversions: int = Field(..., alias="totalConversions")
    average_roas: float = Field(..., alias="averageROAS")
    top_performing_campaigns: list[TopCampaign] = Field(
        ..., alias="topPerformingCampaigns"
    )


class PerformanceResponse(BaseModel):
    success: bool = True
    data: PerformanceData
    period: str


class CompanyResponse(BaseModel):
    success: bool = True
    data: CompanyInfo
