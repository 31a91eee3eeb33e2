import json
from pathlib import Path

import pytest

from services.aggregator import CoverageAggregator
from services.snapshot_loader import SnapshotLoader


class SnapshotDir:
    """Writes coverage/usage snapshot files the way the upstream jobs do."""

    def __init__(self, root: Path):
        self.root = root

    def coverage(self, day: str, records: dict) -> Path:
        path = self.root / f"api_coverage_{day}.json"
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    def usage(self, day: str, records: list) -> Path:
        path = self.root / f"api_usage_{day}.json"
        path.write_text(json.dumps(records), encoding="utf-8")
        return path

    def raw(self, name: str, text: str) -> Path:
        path = self.root / name
        path.write_text(text, encoding="utf-8")
        return path


def cov(full_size: int, covered_lines: int, apidoc: str = "") -> dict:
    return {"full_size": full_size, "covered_lines": covered_lines, "apidoc": apidoc}


def use(api_name: str, usage_count, total_clients=0) -> dict:
    return {"api_name": api_name, "usage_count": usage_count, "total_clients": total_clients}


@pytest.fixture
def snapshots(tmp_path) -> SnapshotDir:
    return SnapshotDir(tmp_path)


@pytest.fixture
def loader(tmp_path) -> SnapshotLoader:
    return SnapshotLoader(tmp_path)


@pytest.fixture
def aggregator(loader) -> CoverageAggregator:
    return CoverageAggregator(loader, max_range_days=1830)
