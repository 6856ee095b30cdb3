"""FastAPI application entrypoint — lifespan, routers, middleware."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cropwater import __version__
from cropwater.config import get_settings
from cropwater.middleware.logging import RequestLoggingMiddleware, configure_structured_logging
from cropwater.routes import calculations, crops
from cropwater.services import catalog

logger = logging.getLogger("cropwater")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup / shutdown lifecycle.

    The crop catalog is built at import time, so startup only configures
    logging and reports what was loaded.
    """
    configure_structured_logging()
    settings = get_settings()
    logger.info(
        "CropWater starting",
        extra={
            "log_level": settings.log_level,
            "crops": len(catalog.CROPS),
            "default_et0_mm_day": settings.default_et0_mm_day,
        },
    )

    yield

    logger.info("CropWater shutting down")


app = FastAPI(
    title="CropWater API",
    description=(
        "Crop water-demand estimates from reference evapotranspiration (ET₀) "
        "using the FAO-56 crop-coefficient method."
    ),
    version=__version__,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ── Middleware ──────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(RequestLoggingMiddleware, api_prefix=get_settings().api_prefix)


# ── Health check ────────────────────────────────────────────────────────────
@app.get("/health", tags=["system"])
async def health_check() -> dict[str, str]:
    """Basic health check — verifies the API process is alive."""
    return {
        "status": "ok",
        "service": "cropwater",
        "version": __version__,
    }


# ── Router registration ────────────────────────────────────────────────────
_prefix = get_settings().api_prefix
app.include_router(crops.router, prefix=_prefix)
app.include_router(calculations.router, prefix=_prefix)
