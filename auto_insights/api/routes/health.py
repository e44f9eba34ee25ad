"""
Health check and status API routes.
"""

from fastapi import APIRouter

from auto_insights.core.config import get_settings

router = APIRouter(tags=["health"])


@router.get("/info")
async def api_info():
    """
    Get API information.
    """
    settings = get_settings()
    return {
        "name": settings.api.title,
        "version": settings.api.version,
        "description": "Statistics, trends, anomalies and correlations turned into insights",
        "endpoints": {
            "generate": "/api/v1/insights/generate",
        },
    }
