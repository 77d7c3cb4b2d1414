"""FastAPI application entry point."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.dependencies import get_translation_wrapper
from app.api.routes import health, translations
from app.core.config import settings
from app.core.logging import setup_logging, get_logger
from app.models.schemas import ErrorResponse
from app.services.exceptions import TranslationError

# Setup logging
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan."""
    # Startup
    try:
        setup_logging()
        logger.info("Logging initialized successfully")

        # Missing credentials or endpoints abort startup here
        get_translation_wrapper().initialize()
        logger.info("Translation providers initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}")
        raise

    yield

    logger.info("All API services shut down")


# Initialize FastAPI app
app = FastAPI(
    title=settings.app_name,
    description=settings.app_description,
    version=settings.app_version,
    docs_url=settings.docs_url,
    redoc_url=settings.redoc_url,
    openapi_url=settings.openapi_url,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_methods=settings.cors_method_list,
    allow_headers=settings.cors_header_list,
)


def _error_response(status_code: int, error: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorResponse(error=error, details=details).model_dump(exclude_none=True),
    )


@app.exception_handler(TranslationError)
async def translation_exception_handler(request, exc: TranslationError):
    """Handle translation pipeline errors."""
    logger.warning(
        "Translation request failed with %s (%d): %s",
        exc.code,
        exc.status_code,
        exc.detail or exc.message,
    )
    return _error_response(exc.status_code, exc.message, exc.detail)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request, exc: RequestValidationError):
    """Report unreadable request bodies as client errors."""
    messages = [
        f"{'.'.join(str(part) for part in error.get('loc', ()))}: {error.get('msg')}"
        for error in exc.errors()
    ]
    return _error_response(400, "Invalid request body", "; ".join(messages) or None)


@app.exception_handler(Exception)
async def general_exception_handler(request, exc):
    """Handle general exceptions."""
    logger.error("Unhandled error on %s", request.url.path, exc_info=exc)
    details = str(exc) if settings.is_development else None
    return _error_response(500, "Internal server error", details)


# Include routers
app.include_router(health.router)
app.include_router(translations.router)
