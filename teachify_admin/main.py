"""FastAPI application exposing the Teachify health endpoints."""

import logging

from fastapi import FastAPI

from teachify_admin.api import health
from teachify_admin.config import get_settings
from teachify_admin.logging import setup_logging

setup_logging(get_settings().LOG_LEVEL)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Teachify Admin API",
    description="Health endpoints for the Teachify student management system",
    version="1.0.0",
    docs_url="/api/docs",
    redoc_url="/api/redoc",
)

app.include_router(health.router, prefix="/api", tags=["Health"])
