"""Request/response schemas for auth endpoints."""

from pydantic import BaseModel, Field

from marketing_api.models import Identity


class LoginRequest(BaseModel):
    """Credentials for login. Both are required; emptiness is checked by the login service."""

    username: str | None = Field(default=None, description="Username")
    password: str | None = Field(default=None, description="Password")


class LoginResponse(BaseModel):
    """Identity and bearer token returned after successful login."""

    message: str = Field(default="Login successful")
    user: Identity = Field(..., description="Logged-in account, without its secret")
    token: str = Field(..., description="Send as 'Authorization: Bearer <token>'")


class UsersListResponse(BaseModel):
    """Response for GET /users (admin only)."""

    success: bool = True
    data: list[Identity]
