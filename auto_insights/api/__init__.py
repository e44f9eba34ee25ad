"""
Auto Insights API Package.

FastAPI application exposing insight generation over inline datasets.
"""

from auto_insights.api.app import app, create_app

__all__ = ["app", "create_app"]
