import asyncio
import json
import logging
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter, ValidationError

from errors import MalformedSnapshotError
from models.snapshot import CoverageMap, DailySnapshot, UsageList

logger = logging.getLogger(__name__)


class SnapshotLoader:
    """
    Reads the per-day coverage and usage files from a snapshot directory.

    A missing file yields an empty half of the snapshot. A file that exists
    but cannot be parsed is logged as a warning and also treated as empty,
    so one bad day never aborts a range query.
    """

    def __init__(
        self,
        data_dir: str | Path,
        coverage_pattern: str = "api_coverage_{date}.json",
        usage_pattern: str = "api_usage_{date}.json",
    ):
        self.data_dir = Path(data_dir)
        self.coverage_pattern = coverage_pattern
        self.usage_pattern = usage_pattern

    def coverage_path(self, day: str) -> Path:
        return self.data_dir / self.coverage_pattern.format(date=day)

    def usage_path(self, day: str) -> Path:
        return self.data_dir / self.usage_pattern.format(date=day)

    async def load(self, day: str) -> DailySnapshot:
        coverage, usage = await asyncio.gather(
            asyncio.to_thread(self._read, self.coverage_path(day), CoverageMap, dict),
            asyncio.to_thread(self._read, self.usage_path(day), UsageList, list),
        )
        return DailySnapshot(day=day, coverage=coverage, usage=usage)

    async def load_many(self, days: list[str]) -> list[DailySnapshot]:
        """Load all days concurrently; results keep the order of `days`."""
        return list(await asyncio.gather(*(self.load(day) for day in days)))

    def _read(self, path: Path, adapter: TypeAdapter, empty: type) -> Any:
        if not path.is_file():
            logger.debug(f"No snapshot at {path}")
            return empty()
        try:
            return self._parse(path, adapter)
        except MalformedSnapshotError as e:
            logger.warning(f"Ignoring snapshot: {e}")
            return empty()

    @staticmethod
    def _parse(path: Path, adapter: TypeAdapter) -> Any:
        try:
            raw = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError) as e:
            raise MalformedSnapshotError(str(path), f"unreadable: {e}") from e
        except json.JSONDecodeError as e:
            raise MalformedSnapshotError(str(path), f"invalid JSON: {e}") from e

        try:
            return adapter.validate_python(raw)
        except ValidationError as e:
            raise MalformedSnapshotError(
                str(path), f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}"
            ) from e
