"""
Insights API routes.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from auto_insights.api.exceptions import ValidationError
from auto_insights.api.models.requests import GenerateInsightsRequest
from auto_insights.api.models.responses import (
    ErrorResponse,
    GenerateInsightsResponse,
    InsightResponse,
)
from auto_insights.core.config import get_settings
from auto_insights.insights.engine import InsightsEngine

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/insights", tags=["insights"])


def get_engine() -> InsightsEngine:
    """Engine built from the current settings."""
    return InsightsEngine(get_settings())


@router.post(
    "/generate",
    response_model=GenerateInsightsResponse,
    responses={400: {"model": ErrorResponse}},
)
def generate_insights(
    request: GenerateInsightsRequest,
    engine: InsightsEngine = Depends(get_engine),
):
    """
    Generate insights for the requested columns of an inline dataset.

    The summary insight comes first, followed by per-column insights and
    then correlation insights. Nothing is stored; ids are stable across
    identical requests so the caller can match them against saved state.
    """
    if not request.column_names:
        raise ValidationError("At least one column name is required", field="column_names")
    if not request.rows:
        raise ValidationError("Dataset has no rows", field="rows")

    report = engine.generate(
        request.rows,
        request.column_names,
        request.options.to_options(),
    )

    logger.info(
        f"Dataset {request.dataset_id or '<inline>'}: {report.count} insights "
        f"for {len(report.columns_analyzed)} columns"
    )

    return GenerateInsightsResponse(
        insights=[InsightResponse.from_insight(i) for i in report.insights],
        count=report.count,
        generated_at=datetime.now(timezone.utc),
        dataset_id=request.dataset_id,
        columns_analyzed=report.columns_analyzed,
        skipped_columns=report.skipped_columns,
        rows_analyzed=report.rows_analyzed,
    )
