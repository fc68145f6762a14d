"""
PageCarbon Backend — Main Application
FastAPI server exposing the page weight audit.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pagecarbon.core.config import settings
from pagecarbon.api.routes import audit
from pagecarbon.schemas.schemas import HealthResponse

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown."""
    logger.info(f"Starting {settings.APP_NAME} v{settings.APP_VERSION}")
    logger.info(f"Environment: {settings.ENVIRONMENT}")
    logger.info(
        f"Coefficients: {settings.ENERGY_KWH_PER_GB} kWh/GB, "
        f"{settings.CARBON_G_PER_KWH} gCO2/kWh, ${settings.COST_USD_PER_GB}/GB"
    )
    logger.info(f"Probe concurrency: {settings.AUDIT_CONCURRENCY}")

    yield

    logger.info(f"Shutting down {settings.APP_NAME}")


app = FastAPI(
    title=settings.APP_NAME,
    description=(
        "Estimates the bandwidth, carbon emissions and data cost of loading a web page "
        "by sizing its stylesheets, scripts and images."
    ),
    version=settings.APP_VERSION,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json",
)

# ── CORS ─────────────────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ── Routes ───────────────────────────────────────────────────────────────────
app.include_router(audit.router, prefix="/api", tags=["Audit"])


# ── Health Check ─────────────────────────────────────────────────────────────
@app.get("/api/health", response_model=HealthResponse, tags=["Health"])
async def health_check():
    return HealthResponse(
        ok=True,
        version=settings.APP_VERSION,
        environment=settings.ENVIRONMENT,
    )
