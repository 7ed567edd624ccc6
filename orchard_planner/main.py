"""
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from orchard_planner.config import settings
from orchard_planner.api.rate_limit import limiter
from orchard_planner.middleware.error_handler import ErrorHandlerMiddleware
from orchard_planner.api.v1.routers import density, income, layout, plants

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.log_level.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan context manager.

    Handles startup and shutdown events using the modern FastAPI pattern.
    """
    # Startup
    logger.info(f"Starting {settings.app_name} v{settings.app_version}")
    logger.info(f"Log level: {settings.log_level}")
    logger.info(f"Density config: bed_width={settings.bed_width_ft}ft, "
                f"grid={settings.grid_spacing_ft}ft, "
                f"default_utilization={settings.default_utilization}")
    if settings.rate_limit_enabled:
        logger.info(f"Rate limit: {settings.rate_limit_requests} requests/minute")
    else:
        logger.info("Rate limit: disabled")

    yield

    # Shutdown
    logger.info("Shutdown complete")


# Create FastAPI application
app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Planning API for Palekar food forest orchards

    This API computes plant density and income projections for 24x24 and
    36x36 ft K-module layouts.

    ## Features

    - **Plant Density**: Counts per bed, per K-module, per acre and per farm
    - **Tiling De-duplication**: Plants shared by neighbouring modules are
      counted once when scaling to acres
    - **Income Projection**: Ten-year income with per-category maturity ramps
    - **Farm Reports**: Density and income per farm zone
    - **Orchard Layout**: Bed and trench geometry for a designer canvas
    - **Rate Limiting**: Protects the API from abuse

    ## Density Algorithm

    1. Generates plant placements for each bed archetype (1-4)
    2. Sums placements per bed and per K-module
    3. Drops the shared bottom row and the shared last bed for tiling
    4. Tiles modules per acre: floor(43560 / K²) theoretical modules
    5. Applies the land utilization factor (default 82%)
    6. Scales linearly to the farm size in acres
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    lifespan=lifespan,
)

# Add rate limiter to app state
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

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
app.include_router(density.router, prefix="/api/v1")
app.include_router(income.router, prefix="/api/v1")
app.include_router(plants.router, prefix="/api/v1")
app.include_router(layout.router, prefix="/api/v1")


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
