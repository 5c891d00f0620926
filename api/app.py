"""FastAPI application for the budget HTTP API."""

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from api.routes import router
from errors import NotFoundError, StorageError, ValidationError
from logger import get_logger
from services.base import Services

logger = get_logger()


def create_app(services: Services) -> FastAPI:
    """Build the API application around a services container.

    Args:
        services: Services used by every request handler.

    Returns:
        Configured FastAPI application.
    """
    app = FastAPI(title="Budgetbook")
    app.state.services = services

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["Content-Type"],
    )

    @app.exception_handler(RequestValidationError)
    async def handle_bad_body(request: Request, exc: RequestValidationError):
        fields = ", ".join(
            ".".join(str(part) for part in error["loc"] if part != "body")
            for error in exc.errors()
        )
        return PlainTextResponse(
            f"Invalid request: {fields or 'malformed body'}",
            status_code=status.HTTP_400_BAD_REQUEST,
        )

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        logger.warning(f"{request.method} {request.url.path} rejected: {exc}")
        return PlainTextResponse(str(exc), status_code=status.HTTP_400_BAD_REQUEST)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return PlainTextResponse(str(exc), status_code=status.HTTP_404_NOT_FOUND)

    @app.exception_handler(StorageError)
    async def handle_storage_error(request: Request, exc: StorageError):
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
        return PlainTextResponse(
            "An unexpected storage error occurred.",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    app.include_router(router)
    return app
