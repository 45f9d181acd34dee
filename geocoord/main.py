"""geocoord — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geocoord.config import settings
from geocoord.infrastructure.api.routes_distance import router as distance_router
from geocoord.infrastructure.api.routes_health import router as health_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    logger.info(
        "Distance service ready (earth radius %.1f m, Vincenty cap %d iterations)",
        settings.earth_radius_m,
        settings.vincenty_max_iterations,
    )
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="geocoord — Coordinate Distance Service",
        description="Haversine, spherical law of cosines and Vincenty distances between coordinates",
        version="0.1.0",
        debug=settings.debug,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register routers
    app.include_router(health_router, prefix="/api")
    app.include_router(distance_router, prefix="/api")

    return app


app = create_app()
