"""Error taxonomy translated into JSON error responses by the app's exception handlers."""


class ApiError(Exception):
    """Base error carrying a client-safe message and the HTTP status to answer with."""

    status_code: int = 500
    default_message: str = "Something went wrong!"

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        self.message = message or self.default_message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class BadRequest(ApiError):
    status_code = 400
    default_message = "Bad request"


class NotFound(ApiError):
    status_code = 404
    default_message = "Not found"


class AuthError(ApiError):
    """Raised by the authentication and authorization gate."""

    status_code = 401
    # Sent as WWW-Authenticate when set.
    challenge: str | None = None


class InvalidCredentials(AuthError):
    """Unknown username and wrong password both end here, with the same message."""

    default_message = "Invalid credentials"


class Unauthenticated(AuthError):
    default_message = "Authentication required"
    challenge = "Bearer"


class InvalidToken(AuthError):
    default_message = "Invalid token"
    challenge = "Bearer"


class Forbidden(AuthError):
    status_code = 403
    default_message = "Admin access required"
