"""
Secret Manager Resolver - FastAPI Application

Sidecar entry point that resolves Secret Manager references for a host
configuration loader.
"""

from contextlib import asynccontextmanager
import logging
import os

from fastapi import FastAPI
from dotenv import load_dotenv

# Load environment variables (GCP_SECRET_MANAGER_PREFIX, GOOGLE_APPLICATION_CREDENTIALS)
load_dotenv()

logging.basicConfig(
    level=logging.DEBUG if os.getenv("DEBUG", "False").lower() == "true" else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    from api.dependencies import get_secret_source

    source = get_secret_source()
    logger.info("Starting Secret Manager Resolver with prefix: %s", source.prefix)

    yield

    logger.info("Shutting down Secret Manager Resolver...")


app = FastAPI(
    title="Secret Manager Resolver",
    description="Resolves prefixed references to Google Cloud Secret Manager values",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "Secret Manager Resolver",
        "version": "0.1.0",
    }


@app.get("/health")
async def health_check():
    """Detailed health check."""
    from api.dependencies import get_secret_source

    try:
        prefix = get_secret_source().prefix
        resolver_status = "configured" if prefix else "disabled (empty prefix)"
    except Exception as e:
        resolver_status = f"error: {str(e)[:50]}"

    return {
        "status": "healthy" if resolver_status == "configured" else "degraded",
        "resolver": resolver_status,
    }


from api.routes.secrets import router as secrets_router
app.include_router(secrets_router)


if __name__ == "__main__":
    import uvicorn

    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))

    uvicorn.run("api.main:app", host=host, port=port)
