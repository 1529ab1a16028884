"""FastAPI application entry point."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from drinkplanner.config import get_settings
from drinkplanner.logging_config import configure_logging, get_logger
from drinkplanner.routers import measurements_router

settings = get_settings()

# Configure logging on module load
configure_logging(log_level=settings.log_level)
logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    logger.info(
        f"Starting Drinkplanner API "
        f"(servings {settings.servings_min}-{settings.servings_max})"
    )

    yield

    logger.info("Shutting down Drinkplanner API")


app = FastAPI(
    title="Drinkplanner API",
    description="Ingredient parsing, serving scaling and metric conversion for drink recipes",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(measurements_router)


@app.get("/health")
async def health_check() -> dict:
    """Basic health check endpoint."""
    return {"status": "ok", "service": "drinkplanner-api"}


@app.get("/")
async def root() -> dict:
    """Root endpoint with API information."""
    return {
        "name": "Drinkplanner API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
