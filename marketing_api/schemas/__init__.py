"""Pydantic request/response schemas."""

from marketing_api.schemas.auth import LoginRequest, LoginResponse, UsersListResponse
from marketing_api.schemas.campaigns import (
    AppliedFilters,
    CampaignListResponse,
    CampaignResponse,
    Pagination,
)
from marketing_api.schemas.stats import (
    CompanyResponse,
    PerformanceData,
    PerformanceResponse,
    StatsOverviewResponse,
    TopCampaign,
)

__all__ = [
    "AppliedFilters",
    "CampaignListResponse",
    "CampaignResponse",
    "CompanyResponse",
    "LoginRequest",
    "LoginResponse",
    "Pagination",
    "PerformanceData",
    "PerformanceResponse",
    "StatsOverviewResponse",
    "TopCampaign",
    "UsersListResponse",
]
