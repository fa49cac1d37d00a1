"""Immutable in-memory store for the JSON dataset, loaded once at startup."""

import json
import logging
from pathlib import Path
from typing import TypeVar

from fastapi import Request
from pydantic import BaseModel, ConfigDict, ValidationError

from marketing_api.models import Account, Campaign, CompanyInfo, Identity, MarketingStats

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

USERS_FILE = "users.json"
OBFUSCATED_USERS_FILE = "encrypted-users.json"
MARKETING_DATA_FILE = "marketing-data.json"


class DataLoadError(Exception):
    """Raised when a dataset file is missing, is not JSON, or has an invalid shape."""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        self.message = message
        self.cause = cause
        super().__init__(message)


class _AccountsFile(BaseModel):
    users: list[Account] = []


class _MarketingFile(BaseModel):
    company_info: CompanyInfo
    marketing_stats: MarketingStats = MarketingStats()
    campaigns: list[Campaign] = []


class DataStore(BaseModel):
    """
    Read-only view of all records. Built once, shared by every request, never mutated.

    accounts: plaintext-secret accounts (users.json)
    obfuscated_accounts: accounts whose secret is obfuscated (encrypted-users.json)
    """

    model_config = ConfigDict(frozen=True)

    accounts: tuple[Account, ...] = ()
    obfuscated_accounts: tuple[Account, ...] = ()
    campaigns: tuple[Campaign, ...] = ()
    stats: MarketingStats = MarketingStats()
    company: CompanyInfo

    def list_campaigns(self) -> tuple[Campaign, ...]:
        return self.campaigns

    def get_campaign(self, campaign_id: int) -> Campaign | None:
        for campaign in self.campaigns:
            if campaign.id == campaign_id:
                return campaign
        return None

    def get_marketing_stats(self) -> MarketingStats:
        return self.stats

    def list_users(self) -> list[Identity]:
        """Plaintext-collection accounts with their secrets stripped."""
        return [account.to_identity() for account in self.accounts]

    def get_company_info(self) -> CompanyInfo:
        return self.company


def _read_json(path: Path) -> object:
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except FileNotFoundError as e:
        raise DataLoadError(f"Data file not found: {path}", cause=e) from e
    except json.JSONDecodeError as e:
        raise DataLoadError(f"Data file is not valid JSON: {path} ({e})", cause=e) from e


def _validate(model: type[ModelT], data: object, path: Path) -> ModelT:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DataLoadError(
            f"Data file has invalid records: {path} ({e.error_count()} errors)", cause=e
        ) from e


def load_store(data_dir: Path) -> DataStore:
    """
    Load users, obfuscated users and marketing data from data_dir.
    Raises DataLoadError if any file is missing or malformed.
    """
    users_path = data_dir / USERS_FILE
    obfuscated_path = data_dir / OBFUSCATED_USERS_FILE
    marketing_path = data_dir / MARKETING_DATA_FILE

    users = _validate(_AccountsFile, _read_json(users_path), users_path)
    obfuscated = _validate(_AccountsFile, _read_json(obfuscated_path), obfuscated_path)
    marketing = _validate(_MarketingFile, _read_json(marketing_path), marketing_path)

    plain_names = {a.username for a in users.users}
    shared = sorted(plain_names.intersection(a.username for a in obfuscated.users))
    if shared:
        # Login prefers the plaintext record for these usernames.
        logger.warning("Usernames present in both account files: %s", ", ".join(shared))

    store = DataStore(
        accounts=tuple(users.users),
        obfuscated_accounts=tuple(obfuscated.users),
        campaigns=tuple(marketing.campaigns),
        stats=marketing.marketing_stats,
        company=marketing.company_info,
    )
    logger.info(
        "Data loaded: campaigns=%s, accounts=%s, obfuscated_accounts=%s, company=%s",
        len(store.campaigns),
        len(store.accounts),
        len(store.obfuscated_accounts),
        store.company.name,
    )
    return store


def get_store(request: Request) -> DataStore:
    """Dependency that returns the store attached to the app at startup."""
    return request.app.state.store
