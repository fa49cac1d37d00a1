"""Marketing dataset records: campaigns, aggregate statistics and company info."""

from pydantic import BaseModel, ConfigDict


class Campaign(BaseModel):
    """One marketing campaign. Missing numeric fields default to 0."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int
    name: str
    status: str = ""
    medium: str = ""
    product_category: str = ""
    budget: int = 0
    spend: int = 0
    impressions: int = 0
    clicks: int = 0
    conversions: int = 0
    revenue: int = 0
    roas: float = 0
    ctr: float = 0
    start_date: str | None = None
    end_date: str | None = None
    target_audience: str | None = None


class MarketingStats(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    total_campaigns: int = 0
    active_campaigns: int = 0
    total_budget: int = 0
    total_spend: int = 0
    total_revenue: int = 0
    total_conversions: int = 0
    average_roas: float = 0
    average_ctr: float = 0


class CompanyInfo(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str
    industry: str | None = None
    founded: int | None = None
    headquarters: str | None = None
    website: str | None = None
    description: str | None = None
