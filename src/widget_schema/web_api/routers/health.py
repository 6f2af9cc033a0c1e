"""
Health Check Router
===================
Endpoints for health checks and readiness probes.
"""
from fastapi import APIRouter

from widget_schema import __version__
from widget_schema.catalog import DATA_TYPES

router = APIRouter()


@router.get("/health")
async def health_check():
    """
    Health check endpoint.
    Returns OK if the service is running.
    """
    return {"status": "ok", "version": __version__}


@router.get("/ready")
async def readiness_check():
    """
    Readiness check endpoint.
    Ready once the data-type catalog is loaded.
    """
    return {"status": "ready" if DATA_TYPES else "loading"}
