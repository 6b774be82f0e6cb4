"""Aggregation functions over loaded insurance records.

Functions in this module are pure: they take the record list and return
plain Python values. Monetary sums are computed with `Decimal` in an exact
context. Each float is converted through its shortest repr, so `0.1` sums
as ``Decimal("0.1")`` rather than its binary expansion.

Expectations:
- Input: list of `InsuranceRecord` in file order
- Outputs: int / Decimal / list of `CountyDelta`, documented per function
"""
from __future__ import annotations

import decimal
from contextlib import contextmanager
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Iterator, Sequence

import pandas as pd

from fl_insurance.models import CountyDelta, InsuranceRecord, InsuranceSummary

TOP_N = 10
CENTS = Decimal("0.01")


@contextmanager
def exact_context() -> Iterator[decimal.Context]:
    """Decimal context wide enough that additions of float values never round."""
    with decimal.localcontext() as ctx:
        ctx.prec = decimal.MAX_PREC
        ctx.Emax = decimal.MAX_EMAX
        ctx.Emin = decimal.MIN_EMIN
        yield ctx


def to_decimal(value: float) -> Decimal:
    """Convert a float to Decimal via its shortest round-tripping repr."""
    return Decimal(repr(value))


def decimal_sum(values: Iterable[Decimal]) -> Decimal:
    """Sum Decimals exactly, starting from ``Decimal(0)``."""
    with exact_context():
        return sum(values, Decimal(0))


def format_amount(value: Decimal) -> str:
    """Render `value` with exactly two decimals, rounding half up.

    A result that rounds to zero is rendered unsigned (``0.00``).
    """
    with exact_context():
        q = value.quantize(CENTS, rounding=ROUND_HALF_UP)
    if q.is_zero():
        q = q.copy_abs()
    return f"{q:f}"


def records_frame(records: Sequence[InsuranceRecord]) -> pd.DataFrame:
    """Build a DataFrame with `county` and the Decimal `delta` per record."""
    return pd.DataFrame(
        {
            "county": [r.county for r in records],
            "delta": [to_decimal(r.tiv_2012) - to_decimal(r.tiv_2011) for r in records],
        },
        columns=["county", "delta"],
    )


# =========================================================
# AGGREGATES
# =========================================================

def count_distinct_counties(records: Sequence[InsuranceRecord]) -> int:
    """Return the number of distinct county names (exact, case-sensitive)."""
    if not records:
        return 0
    return int(pd.Series([r.county for r in records], dtype=object).nunique())


def total_tiv_2012(records: Sequence[InsuranceRecord]) -> Decimal:
    """Return the exact Decimal sum of `tiv_2012` over all records."""
    return decimal_sum(to_decimal(r.tiv_2012) for r in records)


def top_counties_by_delta(records: Sequence[InsuranceRecord], limit: int = TOP_N) -> list[CountyDelta]:
    """Rank counties by summed `tiv_2012 - tiv_2011`, highest first.

    Groups keep the order in which each county first appears, and the sort is
    stable, so counties with equal totals stay in first-appearance order.

    Args:
        records: Loaded records.
        limit: Maximum number of counties returned.

    Returns:
        Up to `limit` `CountyDelta` rows in descending order of `value`.
    """
    if not records or limit <= 0:
        return []

    with exact_context():
        df = records_frame(records)
        totals = (
            df.groupby("county", sort=False)["delta"]
            .agg(decimal_sum)
            .sort_values(ascending=False, kind="stable")
            .head(limit)
        )

    return [CountyDelta(county=str(county), value=value) for county, value in totals.items()]


def build_summary(records: Sequence[InsuranceRecord]) -> InsuranceSummary:
    """Compute every aggregate for `records`."""
    return InsuranceSummary(
        county_count=count_distinct_counties(records),
        tiv_2012_total=total_tiv_2012(records),
        top_counties=top_counties_by_delta(records),
    )
