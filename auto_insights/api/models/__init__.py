"""
Pydantic models for API requests and responses.
"""

from auto_insights.api.models.requests import (
    GenerateInsightsRequest,
    InsightOptionsRequest,
)
from auto_insights.api.models.responses import (
    ErrorResponse,
    GenerateInsightsResponse,
    InsightResponse,
)

__all__ = [
    # Requests
    "GenerateInsightsRequest",
    "InsightOptionsRequest",
    # Responses
    "ErrorResponse",
    "GenerateInsightsResponse",
    "InsightResponse",
]
