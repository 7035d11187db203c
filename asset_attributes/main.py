from typing import Optional
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from loguru import logger
from asset_attributes.core.config import settings
from asset_attributes.core.errors import (
    AssetConfigError,
    ImmutableEntityError,
    InvalidInputError,
    NotFoundError,
    ReferentialGuardError,
)
from asset_attributes.core.log import setup_logging
from asset_attributes.api.v1.api import api_router
from asset_attributes.engine.store import AttributeStore

# Checked in order; the first matching class decides the status code
ERROR_STATUS = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ReferentialGuardError, status.HTTP_409_CONFLICT),
    (ImmutableEntityError, status.HTTP_403_FORBIDDEN),
    (InvalidInputError, 422),
)

async def asset_config_error_handler(request: Request, exc: AssetConfigError) -> JSONResponse:
    status_code = next(
        (code for error_class, code in ERROR_STATUS if isinstance(exc, error_class)),
        status.HTTP_400_BAD_REQUEST,
    )
    logger.debug(f"{request.method} {request.url.path} -> {status_code}: {exc.message}")
    return JSONResponse(status_code=status_code, content={"detail": exc.message})

def create_app(store: Optional[AttributeStore] = None) -> FastAPI:
    """
    Build the API. Without a store the first request creates the
    process-wide one backed by the configured database.
    """
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Attribute configuration and inheritance service for asset categories",
        version=settings.VERSION,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(AssetConfigError, asset_config_error_handler)

    # Include API router with prefix
    app.include_router(api_router, prefix=settings.API_V1_STR)

    app.state.store = store

    @app.get("/")
    def root():
        return {"message": "Welcome to the Asset Attributes API"}

    return app

app = create_app()
