from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from fl_insurance.exceptions import SchemaError
from fl_insurance.ingest.parse_csv import build_column_index, load_records, parse_number, parse_records
from fl_insurance.models import InsuranceRecord

HEADER = "policyID,statecode,county,eq_site_limit,tiv_2011,tiv_2012,line"


def test_build_column_index_trims_names() -> None:
    assert build_column_index(" county , tiv_2011,tiv_2012 \r\n") == {
        "county": 0,
        "tiv_2011": 1,
        "tiv_2012": 2,
    }


def test_parse_records_resolves_columns_by_name() -> None:
    lines = [
        HEADER + "\n",
        "119736,FL,CLAY COUNTY,498960,79520.76,86854.48,Residential\n",
        "448094,FL, CLAY COUNTY ,1322376.3,1322376.3,1438163.57,Residential\n",
    ]
    assert parse_records(lines) == [
        InsuranceRecord(county="CLAY COUNTY", tiv_2011=79520.76, tiv_2012=86854.48),
        InsuranceRecord(county="CLAY COUNTY", tiv_2011=1322376.3, tiv_2012=1438163.57),
    ]


def test_parse_records_skips_malformed_rows() -> None:
    lines = [
        "county,tiv_2011,tiv_2012",
        "Dade,abc,10",
        "Dade,10,n/a",
        "Dade,10",
        "",
        "Dade,10,",
        "Dade,nan,5",
        "Dade,1_000,2",
        "Dade,1,2_5",
        "Dade,infinity,2",
        "Lee,1,2",
    ]
    assert parse_records(lines) == [InsuranceRecord(county="Lee", tiv_2011=1.0, tiv_2012=2.0)]


def test_parse_records_requires_all_fields_up_to_county() -> None:
    lines = ["tiv_2011,tiv_2012,county", "1,2", "1,2,Lee"]
    assert [r.county for r in parse_records(lines)] == ["Lee"]


def test_parse_records_keeps_file_order_and_duplicates() -> None:
    lines = ["county,tiv_2011,tiv_2012", "B,1,1", "A,2,2", "B,1,1"]
    assert [r.county for r in parse_records(lines)] == ["B", "A", "B"]


def test_parse_records_empty_input_yields_nothing() -> None:
    assert parse_records([]) == []


def test_parse_records_header_only_yields_nothing() -> None:
    assert parse_records(["county,tiv_2011,tiv_2012\n"]) == []


def test_parse_records_missing_column_raises() -> None:
    with pytest.raises(SchemaError) as exc:
        parse_records(["county,tiv_2012", "Dade,1"])
    assert exc.value.missing == ("tiv_2011",)


def test_load_records_from_archive(make_archive: Callable[..., Path], dade_lee_csv: str) -> None:
    records = load_records(make_archive(dade_lee_csv))
    assert [(r.county, r.tiv_2011, r.tiv_2012) for r in records] == [
        ("Dade", 100.0, 150.0),
        ("Dade", 50.0, 40.0),
        ("Lee", 10.0, 5.0),
    ]


def test_load_records_handles_crlf(make_archive: Callable[..., Path]) -> None:
    records = load_records(make_archive("county,tiv_2011,tiv_2012\r\nLee,1.5,2.5\r\n"))
    assert records == [InsuranceRecord(county="Lee", tiv_2011=1.5, tiv_2012=2.5)]


def test_parse_number_rejects_digit_separators() -> None:
    assert parse_number(" 1000.5 ") == 1000.5
    with pytest.raises(ValueError):
        parse_number("1_000")
