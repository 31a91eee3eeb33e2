"""Daily snapshot records as written by the upstream coverage/usage jobs."""

import math
import re
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, field_validator, model_validator

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_count(value: Any) -> int:
    """Coerce an upstream counter to a non-negative int, 0 when unusable."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        return max(int(value), 0) if math.isfinite(value) else 0
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        return max(int(match.group(1)), 0) if match else 0
    return 0


class CoverageRecord(BaseModel):
    full_size: int = Field(..., ge=0)
    covered_lines: int = Field(..., ge=0)
    apidoc: str = ""

    @field_validator("apidoc", mode="before")
    @classmethod
    def _apidoc_text(cls, value: Any) -> Any:
        return "" if value is None else value

    @model_validator(mode="after")
    def _covered_within_size(self):
        if self.full_size > 0 and self.covered_lines > self.full_size:
            raise ValueError(
                f"covered_lines ({self.covered_lines}) exceeds full_size ({self.full_size})"
            )
        return self

    @property
    def is_zero_size(self) -> bool:
        return self.full_size == 0


class UsageRecord(BaseModel):
    api_name: str
    usage_count: int = 0
    total_clients: int = 0

    @field_validator("usage_count", "total_clients", mode="before")
    @classmethod
    def _coerce(cls, value: Any) -> int:
        return coerce_count(value)


class DailySnapshot(BaseModel):
    day: str
    coverage: dict[str, CoverageRecord] = Field(default_factory=dict)
    usage: list[UsageRecord] = Field(default_factory=list)


CoverageMap = TypeAdapter(dict[str, CoverageRecord])
UsageList = TypeAdapter(list[UsageRecord])
