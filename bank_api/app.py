import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from bank_api.core.config import get_settings
from bank_api.core.logging_config import setup_logging
from bank_api.db.create_tables import create_all
from bank_api.routers import users as users_router
from bank_api.services.user_service import BusinessError, NotFoundError, UserService

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR_MESSAGE = "Unexpected server error, see the logs."


def _register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(BusinessError)
    async def business_error_handler(request: Request, exc: BusinessError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"detail": exc.message},
        )

    @app.exception_handler(NotFoundError)
    async def not_found_handler(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})

    @app.exception_handler(Exception)
    async def unexpected_error_handler(request: Request, exc: Exception):
        logger.exception("Unexpected error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": UNEXPECTED_ERROR_MESSAGE},
        )


def create_app(user_service: UserService | None = None, *, init_db: bool = True) -> FastAPI:
    """Factory compatible with ``uvicorn bank_api.app:create_app --factory``."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file or None)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if init_db:
            create_all(seed=settings.seed_reserved_user)
        yield

    app = FastAPI(title="Bank Profile API", lifespan=lifespan)

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update({"http://localhost:8000", "http://127.0.0.1:8000"})
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["*"],
        )

    app.state.user_service = user_service or UserService()
    _register_exception_handlers(app)
    app.include_router(users_router.router)
    return app
