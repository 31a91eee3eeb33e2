from models.snapshot import CoverageRecord, UsageRecord


def coverage_percent(record: CoverageRecord) -> float | None:
    """Covered share of the API in percent, or None for a zero-size record."""
    if record.is_zero_size:
        return None
    return record.covered_lines / record.full_size * 100


def find_usage(usage: list[UsageRecord], api_name: str) -> UsageRecord | None:
    """First usage record for api_name, in file order."""
    for item in usage:
        if item.api_name == api_name:
            return item
    return None


def index_usage(usage: list[UsageRecord]) -> dict[str, UsageRecord]:
    """
    Name-indexed usage lookup for repeated per-API queries.

    On duplicate names the first record wins, so index_usage(u).get(name)
    returns the same record as find_usage(u, name).
    """
    index: dict[str, UsageRecord] = {}
    for item in usage:
        index.setdefault(item.api_name, item)
    return index
