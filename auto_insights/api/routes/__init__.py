"""
API Routes for Auto Insights.

Aggregates all route modules into a single router.
"""

from fastapi import APIRouter

from auto_insights.api.routes import health, insights

router = APIRouter()
router.include_router(insights.router)
router.include_router(health.router)

__all__ = ["router"]
