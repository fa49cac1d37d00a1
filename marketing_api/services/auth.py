"""
Authentication and authorization gate: login, bearer-token validation and role checks.

The bearer token handed out at login is the account's plaintext secret. There is no
session table, expiry or revocation; a leaked token is a leaked password. A signed
session token would be required before running this anywhere that matters.
"""

import logging
from dataclasses import dataclass

from fastapi.security import HTTPAuthorizationCredentials

from marketing_api.core.errors import (
    BadRequest,
    Forbidden,
    InvalidCredentials,
    InvalidToken,
    Unauthenticated,
)
from marketing_api.core.obfuscation import DecodeError, deobfuscate
from marketing_api.core.store import DataStore
from marketing_api.models import Account, Identity

logger = logging.getLogger(__name__)

BEARER_SCHEME = "Bearer"


@dataclass(frozen=True)
class LoginResult:
    identity: Identity
    token: str


def _plain_secret(account: Account) -> str | None:
    """Deobfuscate an obfuscated account's secret; None if the stored value is malformed."""
    try:
        return deobfuscate(account.password)
    except DecodeError as e:
        logger.warning(
            "Undecodable obfuscated secret",
            extra={"username": account.username, "reason": e.message},
        )
        return None


def login(store: DataStore, username: str | None, password: str | None) -> LoginResult:
    """
    Verify credentials against plaintext accounts first, then obfuscated accounts.

    Raises BadRequest if either field is missing or empty, and InvalidCredentials for
    both unknown usernames and wrong passwords.
    """
    if not username or not password:
        raise BadRequest("Username and password required")

    account = next(
        (a for a in store.accounts if a.username == username and a.password == password),
        None,
    )
    if account is None:
        candidate = next(
            (a for a in store.obfuscated_accounts if a.username == username), None
        )
        if candidate is not None and _plain_secret(candidate) == password:
            account = candidate

    if account is None:
        logger.warning("Login failed", extra={"username": username})
        raise InvalidCredentials()

    logger.info("Login succeeded", extra={"username": username, "role": account.role})
    # The password just matched, so it is the plaintext secret and doubles as the token.
    return LoginResult(identity=account.to_identity(), token=password)


def bearer_token(credentials: HTTPAuthorizationCredentials | None) -> str | None:
    """Token from an Authorization header parsed by HTTPBearer; None unless the scheme is exactly 'Bearer'."""
    if credentials is None or credentials.scheme != BEARER_SCHEME:
        return None
    return credentials.credentials


def authenticate(
    store: DataStore,
    token: str | None,
    resolve_obfuscated: bool = True,
) -> Account:
    """
    Resolve the account owning the bearer token by a linear scan of account secrets.

    Plaintext accounts are scanned first. With resolve_obfuscated, tokens minted at
    login for obfuscated accounts are accepted too; otherwise they fail as InvalidToken.
    A missing or empty token raises Unauthenticated.
    """
    if not token:
        raise Unauthenticated()

    for account in store.accounts:
        if account.password == token:
            return account

    if resolve_obfuscated:
        for account in store.obfuscated_accounts:
            if _plain_secret(account) == token:
                return account

    raise InvalidToken()


def authorize(identity: Identity, required_role: str | None = None) -> None:
    """Raise Forbidden unless identity has required_role. No required role always passes."""
    if required_role is None:
        return
    if identity.role != required_role:
        message = "Admin access required" if required_role == "admin" else "Access denied"
        raise Forbidden(message)
