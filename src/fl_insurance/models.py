"""Pydantic models for parsed records and summary outputs.

`InsuranceRecord` is the validated form of one CSV data row. The remaining
models describe the aggregates written to the report files and are used by
tests to check their shape.
"""

from __future__ import annotations

from decimal import Decimal
from pydantic import BaseModel, Field, ConfigDict

class InsuranceRecord(BaseModel):
    """One insured property.

    Attributes:
        county: County name, whitespace-trimmed.
        tiv_2011: Total insured value for 2011.
        tiv_2012: Total insured value for 2012.
    """
    model_config = ConfigDict(extra="forbid", frozen=True)
    county: str
    tiv_2011: float = Field(..., allow_inf_nan=False)
    tiv_2012: float = Field(..., allow_inf_nan=False)

class CountyDelta(BaseModel):
    """Aggregated `tiv_2012 - tiv_2011` for one county."""
    model_config = ConfigDict(extra="forbid", frozen=True)
    county: str
    value: Decimal

class InsuranceSummary(BaseModel):
    """All three aggregates computed from one record set."""
    model_config = ConfigDict(extra="forbid")
    county_count: int = Field(..., ge=0)
    tiv_2012_total: Decimal
    top_counties: list[CountyDelta] = Field(default_factory=list, max_length=10)
