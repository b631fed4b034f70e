"""FastAPI application entry point."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator
from uuid import uuid4

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from assetlens.api.v1.endpoints import health
from assetlens.api.v1.router import api_router
from assetlens.core.config import settings
from assetlens.core.database import close_database, init_database
from assetlens.core.exceptions import AppError
from assetlens.utils.logging import get_logger
from assetlens.utils.responses import create_error_detail

LOGGER = get_logger(__name__, level=settings.log_level)


class RootResponse(BaseModel):
    """Root endpoint response payload."""

    message: str = Field(..., description="Service status message")
    version: str = Field(..., description="Running application version")
    docs: str = Field(..., description="Path to the interactive API docs")
    health: str = Field(..., description="Path to the health check endpoint")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    LOGGER.info("Validating configuration...")
    if not settings.providers.marketcheck_api_key:
        LOGGER.error("MARKETCHECK_API_KEY is missing; vehicle valuations will fail")
    if not settings.providers.regrid_api_token:
        LOGGER.error("REGRID_API_TOKEN is missing; land assessments will fail")

    LOGGER.info(
        "Starting application",
        extra={
            "app_name": settings.app_name,
            "version": settings.app_version,
            "environment": settings.environment,
            "storage_backend": settings.storage_backend,
        },
    )

    if settings.storage_backend == "sql":
        try:
            await init_database(create_tables=True)
            LOGGER.info("Database initialized successfully")
        except Exception as e:
            LOGGER.error(f"Database initialization failed: {e}", exc_info=True)

    yield

    LOGGER.info("Shutting down application")
    if settings.storage_backend == "sql":
        await close_database()


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Vehicle valuation and land assessment backend",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)


@app.middleware("http")
async def add_correlation_id(request: Request, call_next):
    correlation_id = request.headers.get("X-Correlation-ID", str(uuid4()))
    request.state.request_id = correlation_id
    response = await call_next(request)
    response.headers["X-Correlation-ID"] = correlation_id
    return response


app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
    expose_headers=["X-Correlation-ID"],
)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    """Translate application errors into problem details with a user-safe message."""
    if exc.status_code >= 500:
        LOGGER.error(f"{type(exc).__name__} on {request.url.path}: {exc}", exc_info=exc.original_error)
    else:
        LOGGER.warning(f"{type(exc).__name__} on {request.url.path}: {exc}")

    error_detail = create_error_detail(
        title=type(exc).__name__.removesuffix("Error") or "Error",
        status=exc.status_code,
        detail=exc.user_message,
        request=request,
    )
    return JSONResponse(status_code=exc.status_code, content={"detail": error_detail.model_dump(mode="json")})


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Reject malformed form data with 400 and the field errors."""
    error_detail = create_error_detail(
        title="Invalid Request",
        status=status.HTTP_400_BAD_REQUEST,
        detail="Invalid information provided. Please check all fields and try again.",
        request=request,
    )
    content = {"detail": error_detail.model_dump(mode="json")}
    content["errors"] = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


# Include routers
app.include_router(api_router, prefix=settings.api_v1_prefix)
app.include_router(health.router, prefix="/health", tags=["Health"])


@app.get(
    "/",
    response_model=RootResponse,
    tags=["Root"],
    summary="Root endpoint",
    description="Get basic information about the API",
    operation_id="get_public_root_metadata",
)
async def root() -> RootResponse:
    """Root endpoint.

    Returns:
        RootResponse: Basic API information
    """
    return RootResponse(
        message="Server is running",
        version=settings.app_version,
        docs="/docs",
        health="/health",
    )


def run() -> None:
    import uvicorn

    uvicorn.run(
        "assetlens.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
