"""Account records (authentication and RBAC) and the secret-free Identity view."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

Role = Literal["admin", "user"]

ADMIN_ROLE: Role = "admin"


class Identity(BaseModel):
    """
    An account without its secret; the only account shape ever returned to clients.

    role: 'admin' or 'user'
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: int | None = None
    username: str = Field(..., min_length=1)
    role: Role = "user"
    name: str | None = None
    email: str | None = None
    department: str | None = None


class Account(Identity):
    """
    Authenticable identity as stored in users.json or encrypted-users.json.

    password holds the plain secret or its obfuscated form, depending on which
    collection the account was loaded from.
    """

    password: str = Field(..., min_length=1, repr=False)

    def to_identity(self) -> Identity:
        return Identity.model_validate(self.model_dump(exclude={"password"}))
