"""Dependency wiring for FastAPI endpoints."""

from __future__ import annotations

import logging
import os

from coproscope.services.analysis import AnalysisService

logger = logging.getLogger(__name__)

DEFAULT_CORS_ORIGINS = "http://localhost:3000"


def create_analysis_service() -> AnalysisService:
    """Create the AnalysisService used by the API."""
    return AnalysisService()


def get_cors_origins() -> list[str]:
    """Read allowed CORS origins from COPROSCOPE_CORS_ORIGINS.

    The variable holds a comma-separated list; it defaults to the local
    frontend dev server.
    """
    raw = os.environ.get("COPROSCOPE_CORS_ORIGINS", DEFAULT_CORS_ORIGINS)
    origins = [origin.strip() for origin in raw.split(",") if origin.strip()]
    if not origins:
        logger.warning("COPROSCOPE_CORS_ORIGINS is empty; cross-origin requests are disabled")
    return origins
