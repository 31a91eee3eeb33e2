import logging

from models.snapshot import DailySnapshot
from models.stats import AggregateSummary, ApiRow, ScatterPoint, TrendPoint
from services.date_range import expand_date_range, parse_day
from services.metrics import coverage_percent, index_usage
from services.snapshot_loader import SnapshotLoader

logger = logging.getLogger(__name__)


class CoverageAggregator:
    """
    Read-only roll-ups of daily coverage/usage snapshots for the dashboard.

    Every query re-reads its days from the loader. Coverage records with a
    zero full_size are left out of coverage averages and flagged in the
    per-API outputs instead of producing NaN.
    """

    def __init__(self, loader: SnapshotLoader, max_range_days: int | None = None):
        self.loader = loader
        self.max_range_days = max_range_days

    async def summary(self, start: str, end: str) -> AggregateSummary:
        days = expand_date_range(start, end, self.max_range_days)
        snapshots = await self.loader.load_many(days)
        return summarize(snapshots)

    async def coverage_usage(self, day: str) -> list[ScatterPoint]:
        snapshot = await self._load_day(day)
        usage = index_usage(snapshot.usage)

        points = []
        for name, record in snapshot.coverage.items():
            item = usage.get(name)
            pct = coverage_percent(record)
            points.append(ScatterPoint(
                name=name,
                coverage=pct,
                usage=item.usage_count if item else 0,
                flagged=pct is None,
            ))
        return points

    async def coverage_trends(self, start: str, end: str) -> list[TrendPoint]:
        days = expand_date_range(start, end, self.max_range_days)
        snapshots = await self.loader.load_many(days)

        trends = []
        for snapshot in snapshots:
            pcts = _computable_percents(snapshot)
            if not pcts:
                continue
            trends.append(TrendPoint(date=snapshot.day, avg_coverage=sum(pcts) / len(pcts)))
        return trends

    async def api_table(self, day: str) -> list[ApiRow]:
        snapshot = await self._load_day(day)
        usage = index_usage(snapshot.usage)

        rows = []
        for name, record in snapshot.coverage.items():
            item = usage.get(name)
            pct = coverage_percent(record)
            rows.append(ApiRow(
                name=name,
                coverage_percent=round(pct, 1) if pct is not None else None,
                usage_count=item.usage_count if item else 0,
                total_clients=item.total_clients if item else 0,
                apidoc=record.apidoc,
                full_size=record.full_size,
                covered_lines=record.covered_lines,
                flagged=pct is None,
            ))
        return rows

    async def _load_day(self, day: str) -> DailySnapshot:
        key = parse_day(day).isoformat()
        return await self.loader.load(key)


def summarize(snapshots: list[DailySnapshot]) -> AggregateSummary:
    """
    Cross-day summary over already-loaded snapshots.

    Coverage and usage contribute independently: a day without coverage for
    an API still adds that API's calls, as long as the API appears in the
    coverage map of some day in the range.
    """
    all_names: set[str] = set()
    for snapshot in snapshots:
        all_names.update(snapshot.coverage)

    total_coverage = 0.0
    count = 0
    total_calls = 0
    zero_size: set[str] = set()

    for snapshot in snapshots:
        usage = index_usage(snapshot.usage)
        for name in all_names:
            record = snapshot.coverage.get(name)
            if record is not None:
                pct = coverage_percent(record)
                if pct is None:
                    zero_size.add(name)
                else:
                    total_coverage += pct
                    count += 1
            item = usage.get(name)
            if item is not None:
                total_calls += item.usage_count

    if zero_size:
        logger.info(f"Skipped zero-size coverage records for {len(zero_size)} API(s)")

    return AggregateSummary(
        total_apis=len(all_names),
        avg_coverage=total_coverage / count if count else 0.0,
        total_calls=total_calls,
        zero_size_apis=sorted(zero_size),
    )


def _computable_percents(snapshot: DailySnapshot) -> list[float]:
    pcts = (coverage_percent(record) for record in snapshot.coverage.values())
    return [p for p in pcts if p is not None]
