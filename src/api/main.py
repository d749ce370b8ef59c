import logging
import sys
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI

from src.api.deps import get_rules, get_settings

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()

    # Load rules on startup (fail-fast)
    try:
        get_rules(settings)
        logger.info("Rules loaded from %s", settings.rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.critical("Rules load failed: %s", e)
        sys.exit(1)

    yield


app = FastAPI(
    title="Numeric Worksheet API",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

# --- Routers ---
from src.api.routes import (  # noqa: E402
    numeric,
    payroll,
    rainfall,
    stats,
    table,
    text,
    weather,
)

app.include_router(numeric.router, prefix="/api/numeric", tags=["Numeric"])
app.include_router(stats.router, prefix="/api/stats", tags=["Stats"])
app.include_router(table.router, prefix="/api/table", tags=["Table"])
app.include_router(text.router, prefix="/api/text", tags=["Text"])
app.include_router(weather.router, prefix="/api/weather", tags=["Weather"])
app.include_router(rainfall.router, prefix="/api/rainfall", tags=["Rainfall"])
app.include_router(payroll.router, prefix="/api/payroll", tags=["Payroll"])


@app.get("/health")
def health_check() -> dict[str, Any]:
    """Health check endpoint."""
    return {"status": "ok", "service": "api"}
