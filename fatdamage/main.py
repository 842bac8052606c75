"""
FastAPI application entry point for the fatigue damage service.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fatdamage.config import get_settings
from fatdamage.core.curves import CurveFactory
from contextlib import asynccontextmanager
import logging

logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    logger.info(f"Starting {settings.app_name} API")
    logger.info(f"Endurance curves available: {', '.join(CurveFactory.list_stress_types())}")

    yield

    logger.info(f"Shutting down {settings.app_name} API")


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Rainflow counting and Palmgren-Miner fatigue damage per EN 1993-1-9",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
    debug=settings.debug,
    lifespan=lifespan
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Import and include routers
from fatdamage.api import rainflow, damage

app.include_router(
    rainflow.router,
    prefix="/api",
    tags=["rainflow"]
)
app.include_router(
    damage.router,
    prefix="/api",
    tags=["damage"]
)


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "curves_registered": len(CurveFactory.list_stress_types())
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": f"{settings.app_name} API",
        "version": settings.app_version,
        "docs": "/api/docs",
        "endpoints": {
            "extrema": "/api/rainflow/extrema",
            "rainflow": "/api/rainflow/count",
            "matrix": "/api/rainflow/matrix",
            "endurance": "/api/damage/endurance",
            "damage": "/api/damage/accumulate",
            "curves": "/api/damage/curves"
        }
    }
