"""User management routes (admin only)."""

from typing import Annotated

from fastapi import APIRouter, Depends

from marketing_api.api.auth import require_admin
from marketing_api.core.store import DataStore, get_store
from marketing_api.models import Account
from marketing_api.schemas.auth import UsersListResponse

router = APIRouter()


@router.get("", response_model=UsersListResponse)
def list_users(
    _admin: Annotated[Account, Depends(require_admin)],
    store: Annotated[DataStore, Depends(get_store)],
) -> UsersListResponse:
    """List plaintext-collection users without their secrets (admin only)."""
    return UsersListResponse(data=store.list_users())
