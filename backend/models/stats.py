"""Response shapes served to the dashboard."""

from pydantic import BaseModel, Field


class AggregateSummary(BaseModel):
    total_apis: int = Field(0, alias="totalAPIs")
    avg_coverage: float = Field(0.0, alias="avgCoverage")
    total_calls: int = Field(0, alias="totalCalls")
    # APIs whose coverage record had full_size == 0 somewhere in the range
    zero_size_apis: list[str] = Field(default_factory=list, alias="zeroSizeAPIs")

    model_config = {"populate_by_name": True}


class TrendPoint(BaseModel):
    date: str
    avg_coverage: float = Field(..., alias="avgCoverage")

    model_config = {"populate_by_name": True}


class ScatterPoint(BaseModel):
    name: str
    coverage: float | None
    usage: int
    flagged: bool = False


class ApiRow(BaseModel):
    name: str
    coverage_percent: float | None = Field(..., alias="coveragePercent")
    usage_count: int = Field(0, alias="usageCount")
    total_clients: int = Field(0, alias="totalClients")
    apidoc: str = ""
    full_size: int = Field(..., alias="fullSize")
    covered_lines: int = Field(..., alias="coveredLines")
    flagged: bool = False

    model_config = {"populate_by_name": True}


class ScatterResponse(BaseModel):
    data: list[ScatterPoint]


class TrendResponse(BaseModel):
    data: list[TrendPoint]


class ApiTableResponse(BaseModel):
    data: list[ApiRow]
