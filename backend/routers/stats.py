"""Dashboard stats endpoints over the daily coverage/usage snapshots."""

import logging

from fastapi import APIRouter, Depends, Query, Request

from config import Settings, get_settings
from errors import MissingParameterError
from models.stats import (
    AggregateSummary,
    ApiTableResponse,
    ScatterResponse,
    TrendResponse,
)
from rate_limit import limiter, request_limit
from services.aggregator import CoverageAggregator
from services.snapshot_loader import SnapshotLoader

logger = logging.getLogger(__name__)

router = APIRouter(tags=["stats"])


def get_aggregator(settings: Settings = Depends(get_settings)) -> CoverageAggregator:
    loader = SnapshotLoader(
        settings.DATA_DIR,
        coverage_pattern=settings.COVERAGE_FILE_PATTERN,
        usage_pattern=settings.USAGE_FILE_PATTERN,
    )
    return CoverageAggregator(loader, max_range_days=settings.MAX_RANGE_DAYS)


def _require_range(start: str | None, end: str | None) -> tuple[str, str]:
    if not start or not start.strip() or not end or not end.strip():
        raise MissingParameterError("Missing start or end date")
    return start, end


def _require_date(date: str | None) -> str:
    if not date or not date.strip():
        raise MissingParameterError("Missing date")
    return date


# --- Routes ---

@router.get("/summary", response_model=AggregateSummary)
@limiter.limit(request_limit)
async def summary(
    request: Request,
    start: str | None = Query(None, description="First day, YYYY-MM-DD"),
    end: str | None = Query(None, description="Last day (inclusive), YYYY-MM-DD"),
    aggregator: CoverageAggregator = Depends(get_aggregator),
):
    """Total APIs, average coverage and total calls across a date range."""
    logger.info(f"Summary requested: start={start} end={end}")
    start, end = _require_range(start, end)
    return await aggregator.summary(start, end)


@router.get("/coverage-usage", response_model=ScatterResponse)
@limiter.limit(request_limit)
async def coverage_usage(
    request: Request,
    date: str | None = Query(None, description="Day, YYYY-MM-DD"),
    aggregator: CoverageAggregator = Depends(get_aggregator),
):
    """Coverage vs. usage pairs for the scatter plot."""
    logger.info(f"Coverage/usage requested: date={date}")
    date = _require_date(date)
    return ScatterResponse(data=await aggregator.coverage_usage(date))


@router.get("/coverage-trends", response_model=TrendResponse)
@limiter.limit(request_limit)
async def coverage_trends(
    request: Request,
    start: str | None = Query(None),
    end: str | None = Query(None),
    aggregator: CoverageAggregator = Depends(get_aggregator),
):
    """Average coverage per day; days without coverage data are omitted."""
    logger.info(f"Coverage trends requested: start={start} end={end}")
    start, end = _require_range(start, end)
    return TrendResponse(data=await aggregator.coverage_trends(start, end))


@router.get("/apis", response_model=ApiTableResponse)
@limiter.limit(request_limit)
async def api_table(
    request: Request,
    date: str | None = Query(None),
    aggregator: CoverageAggregator = Depends(get_aggregator),
):
    """Per-API table for a single day."""
    logger.info(f"API table requested: date={date}")
    date = _require_date(date)
    return ApiTableResponse(data=await aggregator.api_table(date))
