# app/main.py
import datetime
import time
from contextlib import asynccontextmanager
from fastapi import FastAPI
from app.core.config import settings
from app.core.logging import configure_logging
from app.core.version import VERSION, get_version
from app.api.endpoints import wallet
from app.api.models.wallet import HealthResponse
import logging

configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

STARTED_AT = time.monotonic()


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Release the provider HTTP session if a request ever built the resolver
    if wallet.get_resolver.cache_info().currsize:
        wallet.get_resolver().close()


app = FastAPI(
    lifespan=lifespan,
    title=settings.PROJECT_NAME,
    version=VERSION,
    openapi_url=f"{settings.API_STR}/openapi.json" # Standard location for OpenAPI spec
)

# The prefix ensures all routes start with /api
app.include_router(wallet.router, prefix=f"{settings.API_STR}", tags=["wallet"])

@app.get("/", summary="Health Check", tags=["default"])
def read_root():
    """ Basic health check endpoint. """
    logger.info("Root endpoint '/' accessed.")
    return {"status": "ok", "message": f"Welcome to {settings.PROJECT_NAME}", "version": get_version()}


@app.get("/health", response_model=HealthResponse, summary="Liveness", tags=["default"])
def health() -> HealthResponse:
    """Local liveness check; does not contact the wallet provider."""
    return HealthResponse(
        status="ok",
        version=get_version(),
        timestamp=datetime.datetime.now(datetime.timezone.utc).isoformat(),
        uptime=round(time.monotonic() - STARTED_AT, 3),
    )

