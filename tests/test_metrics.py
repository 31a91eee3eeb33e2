import pytest

from models.snapshot import CoverageRecord, UsageRecord, coerce_count
from services.metrics import coverage_percent, find_usage, index_usage


def test_coverage_percent():
    assert coverage_percent(CoverageRecord(full_size=200, covered_lines=50)) == 25.0
    assert coverage_percent(CoverageRecord(full_size=10, covered_lines=10)) == 100.0


def test_zero_size_has_no_percent():
    assert coverage_percent(CoverageRecord(full_size=0, covered_lines=0)) is None


@pytest.mark.parametrize(
    "raw,expected",
    [
        (12, 12),
        ("42", 42),
        ("17 calls", 17),
        (3.9, 3),
        ("abc", 0),
        (None, 0),
        (-4, 0),
        ("-4", 0),
        (True, 0),
        (float("nan"), 0),
        ({"n": 1}, 0),
    ],
)
def test_coerce_count(raw, expected):
    assert coerce_count(raw) == expected


def test_usage_record_defaults_missing_counts():
    record = UsageRecord.model_validate({"api_name": "A"})
    assert record.usage_count == 0
    assert record.total_clients == 0


def test_find_usage_first_match():
    usage = [
        UsageRecord(api_name="A", usage_count=1),
        UsageRecord(api_name="B", usage_count=2),
        UsageRecord(api_name="A", usage_count=3),
    ]
    assert find_usage(usage, "A").usage_count == 1
    assert find_usage(usage, "C") is None


def test_index_usage_keeps_first_duplicate():
    usage = [
        UsageRecord(api_name="A", usage_count=1),
        UsageRecord(api_name="A", usage_count=3),
    ]
    index = index_usage(usage)
    assert index["A"].usage_count == 1
    assert index["A"] is find_usage(usage, "A")
