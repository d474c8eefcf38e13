"""
ESG Risk Report FastAPI Application

Main FastAPI app with CORS, startup, and router registration.
"""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from dotenv import load_dotenv

from .routers import report
from ..utils.config import ReportConfig

load_dotenv()

logger = logging.getLogger(__name__)
config = ReportConfig.from_env()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup/shutdown."""
    # Startup
    logger.info("[INFO] Starting ESG Risk Report API")
    logger.info(f"[INFO] CORS origins: {', '.join(config.cors_origins)}")
    yield
    # Shutdown
    logger.info("[INFO] Shutting down ESG Risk Report API")


app = FastAPI(
    title="ESG Risk Report API",
    description="API for parsing and serving payment-gated ESG risk reports per industry and country",
    version="1.0.0",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins,
    allow_credentials=config.cors_allow_credentials,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(report.router, prefix="/api/report", tags=["report"])


@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "name": "ESG Risk Report API",
        "version": "1.0.0",
        "status": "running"
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}
