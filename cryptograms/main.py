import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cryptograms.api.v1.router import api_router
from cryptograms.core.config import get_settings
from cryptograms.core.exceptions import (
    CryptogramError,
    EngineNotFoundError,
    InvalidKeyError,
    KeyGenerationError,
    NotFoundError,
    StorageError,
    TokenNotFoundError,
    ValidationError,
)
from cryptograms.core.logging import configure_logging
from cryptograms.db.session import dispose_db, init_db
from cryptograms.models.schemas import ErrorResponse
from cryptograms.services.corpus.quotes import get_corpus, get_words

logger = logging.getLogger(__name__)

# Most specific first; the first match wins
ERROR_STATUS: list[tuple[type[CryptogramError], int]] = [
    (InvalidKeyError, status.HTTP_400_BAD_REQUEST),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (TokenNotFoundError, status.HTTP_404_NOT_FOUND),
    (EngineNotFoundError, status.HTTP_404_NOT_FOUND),
    (StorageError, status.HTTP_503_SERVICE_UNAVAILABLE),
    (KeyGenerationError, status.HTTP_500_INTERNAL_SERVER_ERROR),
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Handle application startup and shutdown."""
    # Startup: a missing or malformed corpus stops the process here
    configure_logging(get_settings())
    get_corpus()
    get_words()
    await init_db()
    yield
    # Shutdown
    await dispose_db()


async def handle_cryptogram_error(request: Request, exc: CryptogramError) -> JSONResponse:
    """Translate a core error into an ErrorResponse."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    for error_class, code in ERROR_STATUS:
        if isinstance(exc, error_class):
            status_code = code
            break

    if status_code >= 500:
        logger.warning("%s on %s: %s", type(exc).__name__, request.url.path, exc.message)

    body = ErrorResponse(
        error=type(exc).__name__,
        message=exc.message,
        details=exc.details,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Cryptogram API. Generates enciphered quotations for cipher "
            "competitions and returns the plaintext for grading."
        ),
        version=settings.api_version,
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CryptogramError, handle_cryptogram_error)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "cryptograms.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
