"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .logging_config import configure_logging, get_logger
from .routers import functions_router, health_router

# Configure structured logging at application startup
configure_logging(
    log_level=settings.log_level,
    json_logs=settings.log_json,
    service=settings.app_name,
    version=settings.app_version,
)

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan context manager."""
    logger.info(
        "app.startup",
        app_name=settings.app_name,
        version=settings.app_version,
        source_backend=settings.acronym_source_backend,
        disabled=settings.acronym_disabled,
    )

    yield

    logger.info("app.shutdown")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# When CORS_ALLOW_ALL=true, allows all origins (["*"])
# Otherwise, uses comma-separated CORS_ORIGINS list
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Health check router (no prefix)
app.include_router(health_router)

# Parser function API
app.include_router(functions_router)


@app.get("/")
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {"message": "Acronym Service API"}
