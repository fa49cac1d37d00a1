"""FastAPI application entrypoint. No business logic; only wiring, middleware and error translation."""

import logging

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from marketing_api.api import router as api_router
from marketing_api.core.config import Settings, get_settings
from marketing_api.core.errors import ApiError
from marketing_api.core.store import DataStore, load_store

logger = logging.getLogger(__name__)


def _register_exception_handlers(app: FastAPI) -> None:
    """Every error leaves the app as JSON with an 'error' field."""

    @app.exception_handler(ApiError)
    async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
        challenge = getattr(exc, "challenge", None)
        headers = {"WWW-Authenticate": challenge} if challenge else None
        return JSONResponse({"error": exc.message}, status_code=exc.status_code, headers=headers)

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.info(
            "Rejected request parameters",
            extra={"path": request.url.path, "error_count": len(exc.errors())},
        )
        return JSONResponse({"error": "Invalid request parameters"}, status_code=400)

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        if exc.status_code == 404:
            return JSONResponse(
                {
                    "error": "Endpoint not found",
                    "path": request.url.path,
                    "method": request.method,
                },
                status_code=404,
            )
        return JSONResponse(
            {"error": str(exc.detail)}, status_code=exc.status_code, headers=exc.headers
        )

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled exception on %s %s: %s", request.method, request.url.path, exc
        )
        return JSONResponse({"error": "Something went wrong!"}, status_code=500)


def create_app(store: DataStore | None = None, settings: Settings | None = None) -> FastAPI:
    """
    Build the application around an immutable data store.
    When store is None it is loaded from settings.DATA_DIR.
    """
    settings = settings or get_settings()
    if store is None:
        store = load_store(settings.DATA_DIR)

    app = FastAPI(
        title="Amana Marketing API",
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        debug=settings.DEBUG,
    )
    app.state.store = store
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ALLOW_ORIGINS,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    _register_exception_handlers(app)
    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/")
    def root() -> dict[str, object]:
        """Root route; service name, version and the main endpoints."""
        prefix = settings.API_PREFIX
        return {
            "message": "Amana Marketing API Server",
            "version": settings.APP_VERSION,
            "endpoints": {
                "auth": f"{prefix}/auth/login",
                "campaigns": f"{prefix}/campaigns",
                "stats": f"{prefix}/stats",
                "users": f"{prefix}/users",
            },
        }

    return app
