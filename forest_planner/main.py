"""
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import Limiter, _rate_limit_exceeded_handler
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from forest_planner.config import settings
from forest_planner.middleware.error_handler import ErrorHandlerMiddleware
from forest_planner.api.v1.routers import plans, species
from forest_planner.infrastructure.species_catalog import get_species_catalog

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)

# Rate limiter
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[f"{settings.rate_limit_requests}/minute"],
    enabled=settings.rate_limit_enabled,
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events using the modern FastAPI pattern.
    """
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Log level: {settings.log_level}")
    logger.info(f"Grid cells: {settings.cell_side_ft:g}x{settings.cell_side_ft:g} ft, "
                f"default land: {settings.default_property_size_acres:g} acre(s)")
    logger.info(f"Rate limit: {settings.rate_limit_requests} requests/minute "
                f"(enabled={settings.rate_limit_enabled})")
    get_species_catalog()

    yield

    # Shutdown
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Food Forest Planning API

    Lay out perennial species on a grid representing your land and get
    biodiversity, yield, layering, companion-planting and economic feedback.

    ## Features

    - **Land-sized grid**: 9x9 ft cells derived from acres or length x width
    - **Layer caps**: at most 1 Canopy, 4 Shrub and 7 of any other layer per cell
    - **Scores**: biodiversity, maturity-scaled yield and vertical structure
    - **Companion analysis**: every pair of placed plants, plus suggestions
    - **Economics**: income per species, net profit and ROI over the forest age
    - **Exports**: plant coordinates as CSV, the plan drawing as SVG
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)
app.add_middleware(SlowAPIMiddleware)

# Add CORS middleware with configurable origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Add global error handling middleware
app.add_middleware(ErrorHandlerMiddleware)

# Include routers
app.include_router(species.router, prefix="/api/v1")
app.include_router(plans.router, prefix="/api/v1")


@app.get("/", tags=["health"])
async def root():
    """
    Root endpoint for health check.

    Returns:
        Status message
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
        "version": settings.app_version,
    }


@app.get("/health", tags=["health"])
async def health_check():
    """
    Health check endpoint.

    Returns:
        Health status
    """
    return {
        "status": "healthy",
        "service": settings.app_name,
    }
