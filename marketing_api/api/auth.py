"""Login route and auth dependencies (get_current_user, require_admin)."""

from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from marketing_api.core.config import Settings, get_app_settings
from marketing_api.core.store import DataStore, get_store
from marketing_api.models import ADMIN_ROLE, Account
from marketing_api.schemas.auth import LoginRequest, LoginResponse
from marketing_api.services import auth as auth_service

router = APIRouter()
security = HTTPBearer(auto_error=False)


@router.post("/login", response_model=LoginResponse)
def login(
    store: Annotated[DataStore, Depends(get_store)],
    body: LoginRequest | None = None,
) -> LoginResponse:
    """
    Check username and password against both account files.
    The returned token is the account's own secret; send it back as Bearer <token>.
    """
    body = body or LoginRequest()
    result = auth_service.login(store, body.username, body.password)
    return LoginResponse(user=result.identity, token=result.token)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    store: Annotated[DataStore, Depends(get_store)],
    settings: Annotated[Settings, Depends(get_app_settings)],
) -> Account:
    """Dependency: resolve the account whose secret matches the bearer token (401 otherwise)."""
    return auth_service.authenticate(
        store,
        auth_service.bearer_token(credentials),
        resolve_obfuscated=settings.AUTH_RESOLVE_OBFUSCATED_TOKENS,
    )


def require_admin(
    current_user: Annotated[Account, Depends(get_current_user)],
) -> Account:
    """Dependency: pass the token's account through only if its role is admin (403 otherwise)."""
    auth_service.authorize(current_user, ADMIN_ROLE)
    return current_user
