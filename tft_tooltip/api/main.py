"""
FastAPI main application.
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tft_tooltip import __version__
from .config import settings
from .routes import data, tooltip

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title="TFT Tooltip API",
    description="Teamfight Tactics ability tooltip resolution API",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)

# CORS configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register routers
app.include_router(data.router, prefix="/api/data", tags=["Data"])
app.include_router(tooltip.router, prefix="/api/tooltip", tags=["Tooltip"])


@app.get("/")
async def root():
    """API status check."""
    return {
        "status": "ok",
        "name": "TFT Tooltip API",
        "version": __version__,
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}
