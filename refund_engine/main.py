"""
FastAPI Main Application
Refund eligibility checks for investment reversal requests
"""

from fastapi import FastAPI
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from refund_engine.config import settings
from refund_engine.core.logging import get_logger, setup_logging
from refund_engine.domain.services.config_engine import ConfigEngine

setup_logging(settings.LOG_LEVEL)
logger = get_logger(__name__)


# Global instances
config_engine: ConfigEngine | None = None


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan manager
    Loads refund rule configuration once at startup
    """
    global config_engine

    logger.info("🚀 Starting Refund Eligibility Assistant...")
    config_engine = ConfigEngine(settings.config_dir)
    config_engine.load_all()
    logger.info(f"✅ Refund rules loaded: {', '.join(config_engine.timezone_labels)}")

    yield

    logger.info("Shutting down Refund Eligibility Assistant")
    config_engine = None


app = FastAPI(
    title="Refund Eligibility Assistant",
    description="Refund eligibility rules for investment reversal requests",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/health")
async def health_check():
    return {
        "status": "ok" if config_engine is not None else "not_ready",
        "config_loaded": config_engine is not None,
        "environment": settings.APP_ENV,
    }


# Import and include routers
from refund_engine.api.routes import config as config_routes, eligibility

app.include_router(eligibility.router, prefix="/api/v1/eligibility", tags=["Eligibility"])
app.include_router(config_routes.router, prefix="/api/v1/config", tags=["Config"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("refund_engine.main:app", host=settings.API_HOST, port=settings.API_PORT, reload=settings.DEBUG)
