"""Structured record types loaded from the JSON dataset."""

from marketing_api.models.account import ADMIN_ROLE, Account, Identity, Role
from marketing_api.models.campaign import Campaign, CompanyInfo, MarketingStats

__all__ = [
    "ADMIN_ROLE",
    "Account",
    "Campaign",
    "CompanyInfo",
    "Identity",
    "MarketingStats",
    "Role",
]
