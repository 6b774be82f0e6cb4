"""Parsing helpers for the insurance CSV.

The header row is resolved into column positions once, then every data row is
split on commas and validated into an `InsuranceRecord`. Rows that are too
short or whose numeric fields do not parse are dropped without raising.

Numbers are read with `float()`, except that underscore digit separators
(``1_000``) are rejected, as are non-finite values (``nan``, ``inf``). A row
holding such a value is treated as malformed.

Known limitation: rows are split naively on ``,``. Quoted fields containing
commas are not supported and usually end up discarded as malformed.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from fl_insurance.exceptions import SchemaError
from fl_insurance.ingest.archive import open_first_entry
from fl_insurance.models import InsuranceRecord

log = logging.getLogger(__name__)

COUNTY = "county"
TIV_2011 = "tiv_2011"
TIV_2012 = "tiv_2012"
REQUIRED_COLUMNS = (COUNTY, TIV_2011, TIV_2012)


def _split_row(line: str) -> list[str]:
    """Split a CSV line on commas, dropping trailing empty fields."""
    fields = line.rstrip("\r\n").split(",")
    while fields and fields[-1] == "":
        fields.pop()
    return fields


def build_column_index(header: str) -> dict[str, int]:
    """Map each trimmed header name to its position (later duplicates win)."""
    return {name.strip(): i for i, name in enumerate(header.rstrip("\r\n").split(","))}


def resolve_required(columns: dict[str, int]) -> tuple[int, int, int]:
    """Return the positions of county, tiv_2011 and tiv_2012.

    Raises:
        SchemaError: if any required column is missing.
    """
    missing = [c for c in REQUIRED_COLUMNS if c not in columns]
    if missing:
        raise SchemaError(missing)
    return columns[COUNTY], columns[TIV_2011], columns[TIV_2012]


def parse_number(text: str) -> float:
    """Parse a numeric field; raises ValueError on underscores or bad syntax."""
    if "_" in text:
        raise ValueError(f"digit separators are not accepted: {text!r}")
    return float(text)


def _parse_row(fields: list[str], county_idx: int, tiv_2011_idx: int, tiv_2012_idx: int) -> InsuranceRecord | None:
    try:
        return InsuranceRecord(
            county=fields[county_idx].strip(),
            tiv_2011=parse_number(fields[tiv_2011_idx]),
            tiv_2012=parse_number(fields[tiv_2012_idx]),
        )
    except ValueError:
        # covers pydantic ValidationError (non-finite values)
        return None


def parse_records(lines: Iterable[str]) -> list[InsuranceRecord]:
    """Parse CSV text lines into records, preserving file order.

    Args:
        lines: Iterable of text lines; the first one is the header.

    Returns:
        List of valid records. Empty if there is no header or no data row.

    Raises:
        SchemaError: if the header lacks a required column.
    """
    it = iter(lines)
    header = next(it, None)
    if header is None:
        log.info("Input is empty; no records loaded")
        return []

    county_idx, tiv_2011_idx, tiv_2012_idx = resolve_required(build_column_index(header))
    min_fields = max(county_idx, tiv_2011_idx, tiv_2012_idx) + 1

    records: list[InsuranceRecord] = []
    bad = 0
    for line in it:
        fields = _split_row(line)
        if len(fields) < min_fields:
            bad += 1
            continue

        rec = _parse_row(fields, county_idx, tiv_2011_idx, tiv_2012_idx)
        if rec is None:
            bad += 1
            continue
        records.append(rec)

    log.info("Loaded %d records (discarded %d malformed rows)", len(records), bad)
    return records


def load_records(archive_path: Path) -> list[InsuranceRecord]:
    """Read the first entry of `archive_path` and parse it into records."""
    with open_first_entry(archive_path) as stream:
        return parse_records(stream)
