from models.snapshot import CoverageRecord, UsageRecord, DailySnapshot
from models.stats import AggregateSummary, TrendPoint, ScatterPoint, ApiRow

__all__ = [
    "CoverageRecord",
    "UsageRecord",
    "DailySnapshot",
    "AggregateSummary",
    "TrendPoint",
    "ScatterPoint",
    "ApiRow",
]
