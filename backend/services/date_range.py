from datetime import date, datetime, timedelta

from errors import InvalidDateError


def parse_day(value: str) -> date:
    """Parse an ISO date (optionally with a time-of-day, which is dropped)."""
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(str(value), "empty")
    text = value.strip()
    try:
        return datetime.fromisoformat(text).date()
    except ValueError as e:
        raise InvalidDateError(value, str(e)) from e


def expand_date_range(start: str, end: str, max_days: int | None = None) -> list[str]:
    """
    Return every calendar day from start to end inclusive as YYYY-MM-DD.

    An inverted range is empty, not an error. Uses civil-calendar arithmetic
    on plain dates, so DST transitions cannot skip or repeat a day.
    """
    start_day = parse_day(start)
    end_day = parse_day(end)
    if start_day > end_day:
        return []

    span = (end_day - start_day).days + 1
    if max_days is not None and span > max_days:
        raise InvalidDateError(
            f"{start}..{end}", f"range spans {span} days, limit is {max_days}"
        )

    return [(start_day + timedelta(days=i)).isoformat() for i in range(span)]
