import structlog
from fastapi import FastAPI

from src.api.cors import router as cors_api_router
from src.core.config import config
from src.core.utils.logging import configure_logging

# --- Application Setup ---

configure_logging(config.logging)
logger = structlog.get_logger(__name__)

app = FastAPI(
    title="Gateway CORS Reconciler",
    description="Keeps API gateway OPTIONS methods in sync with declared CORS configuration.",
    version="0.1.0",
)

# --- Include Routers ---

app.include_router(cors_api_router, prefix="/api/v1")

# --- Root Endpoint ---


@app.get("/", tags=["Health Check"])
async def read_root():
    """A simple health check endpoint to confirm the service is running."""
    return {"status": "ok", "message": "CORS reconciler is running."}


# --- Application Lifecycle ---


@app.on_event("startup")
async def startup_event():
    """Application startup logic."""
    config.validate()
    logger.info("cors_reconciler_starting", environment=config.environment, region=config.gateway.region)
