"""Render aggregates to text and write the report files.

Module notes:
- Renderers return the exact file content; no trailing newline is added.
- `write_report` overwrites the target and lets OS errors propagate.
"""
from __future__ import annotations

import logging
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from fl_insurance.aggregate.summaries import format_amount
from fl_insurance.models import CountyDelta, InsuranceSummary

log = logging.getLogger(__name__)

COUNT_FILE = "count.txt"
TOTAL_FILE = "tiv2012.txt"
RANKING_FILE = "most_valuable.txt"
RANKING_HEADER = "country,value"


def render_count(count: int) -> str:
    return str(count)


def render_total(total: Decimal) -> str:
    return format_amount(total)


def render_ranking(rows: Iterable[CountyDelta]) -> str:
    """Render the ranking as a CSV header plus one `<county>,<value>` line per row.

    An empty ranking still yields the header followed by a newline.
    """
    body = "\n".join(f"{row.county},{format_amount(row.value)}" for row in rows)
    return f"{RANKING_HEADER}\n{body}"


def write_report(path: Path, content: str) -> Path:
    """Write `content` to `path` as UTF-8, replacing any existing file.

    Args:
        path: Target file.
        content: Exact text to write (no newline translation).

    Returns:
        The path written.

    Raises:
        OSError: if the file cannot be written.
    """
    with open(path, "w", encoding="utf-8", newline="") as fh:
        fh.write(content)
    log.info("Wrote %s (%d chars)", path, len(content))
    return path


def write_summary(summary: InsuranceSummary, out_dir: Path) -> list[Path]:
    """Write the three report files for `summary` into `out_dir`, in order.

    A failure stops at the file being written; earlier files are kept.
    """
    return [
        write_report(out_dir / COUNT_FILE, render_count(summary.county_count)),
        write_report(out_dir / TOTAL_FILE, render_total(summary.tiv_2012_total)),
        write_report(out_dir / RANKING_FILE, render_ranking(summary.top_counties)),
    ]
