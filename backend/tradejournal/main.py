"""
Trade Journal Backend - FastAPI Application

Main entry point for the backend API.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI

from tradejournal.core.config import settings
from tradejournal.core.cors import (
    ANALYSIS_PATH,
    CORS_ALLOW_HEADERS,
    CORS_ALLOW_METHODS,
    EmptyPreflightCORSMiddleware,
    analysis_cors_headers,
)
from tradejournal.api.v1 import router as api_v1_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    # Startup
    print(f"Starting {settings.app_name} v{settings.app_version}")
    print(f"Environment: {settings.environment}")
    print(f"Allowed origin: {settings.allowed_origin}")

    # Initialize SQLite database
    from tradejournal.db.database import init_db, close_db
    await init_db()
    print("Database initialized")

    # Build the analysis pipeline once; a missing key disables only this path
    from tradejournal.services.analysis import init_analysis_service, close_analysis_service
    analysis_service = init_analysis_service(settings)
    if await analysis_service.health_check():
        print(f"AI gateway configured (model: {settings.ai_gateway_model})")
    else:
        print("AI gateway key missing - trade analysis disabled")

    yield

    # Shutdown
    print("Shutting down...")
    await close_analysis_service()
    await close_db()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="""
    Crypto Trade Journal API

    ## Architecture
    - **Risk Engine**: Dollar and account-percent risk per trade (pure Python)
    - **Trade Store**: Create, list and delete logged trades (SQLite)
    - **Trade Analysis**: Validated batches of trades sent to an AI gateway for feedback

    ## Core Principles
    - Risk is computed once, when a trade is logged
    - AI comments, never calculates
    - Every analysis failure comes back as {"error": ...}
    """,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    EmptyPreflightCORSMiddleware,
    allow_origins=[settings.allowed_origin],
    allow_methods=CORS_ALLOW_METHODS,
    allow_headers=CORS_ALLOW_HEADERS,
    path_headers={ANALYSIS_PATH: analysis_cors_headers(settings)},
)

# Include API routes
app.include_router(api_v1_router, prefix="/api/v1")


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    from tradejournal.services.analysis import get_analysis_service

    return {
        "status": "healthy",
        "app": settings.app_name,
        "version": settings.app_version,
        "environment": settings.environment,
        "analysis_enabled": await get_analysis_service().health_check(),
    }


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Trade Journal Backend API",
        "docs": "/docs",
        "health": "/health",
    }
