"""Command-line interface for running the insurance report.

`main` loads settings, applies any command-line overrides, configures logging
and calls `run_report`, which sequences load → aggregate → write.
"""
from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from fl_insurance.aggregate.summaries import build_summary
from fl_insurance.config import Settings, get_settings
from fl_insurance.exceptions import InsuranceReportError
from fl_insurance.ingest.parse_csv import load_records
from fl_insurance.logging_config import configure_logging
from fl_insurance.report.write import write_summary

log = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Processing completed successfully."


def run_report(settings: Settings) -> list[Path]:
    """Load the archive, compute every aggregate and write the report files.

    Args:
        settings: Resolved settings with archive and output locations.

    Returns:
        Paths of the written report files.

    Raises:
        OSError: on any read or write failure.
        InsuranceReportError: on an empty archive or missing columns.
    """
    records = load_records(settings.archive_path)
    summary = build_summary(records)
    log.info(
        "Summary: counties=%d tiv_2012_total=%s top=%d",
        summary.county_count,
        summary.tiv_2012_total,
        len(summary.top_counties),
    )
    paths = write_summary(summary, settings.output_dir)
    log.info("Report generation complete.")
    return paths


# --------------------------------------------------
# CLI
# --------------------------------------------------
def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser.

    Every option is optional; the defaults come from `get_settings`.
    """
    p = argparse.ArgumentParser(
        prog="fl-insurance",
        description="Summarise the Florida insurance CSV archive into text reports.",
    )
    p.add_argument("--archive", type=Path, default=None, help="zip archive with the CSV")
    p.add_argument("--output-dir", type=Path, default=None, help="directory for report files")
    p.add_argument("--log-file", type=Path, default=None, help="also write logs to this file")
    return p


def main(argv: list[str] | None = None) -> None:
    """CLI entry point: parse args, configure logging and run the report.

    Exits with status 1 after printing a diagnostic to stderr if the run fails.
    """
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except RuntimeError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    if args.archive is not None:
        settings = replace(settings, archive_path=args.archive)
    if args.output_dir is not None:
        settings = replace(settings, output_dir=args.output_dir)

    configure_logging(args.log_file, settings.log_level)

    try:
        run_report(settings)
    except (OSError, InsuranceReportError) as e:
        log.debug("Run aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(1) from e

    print(SUCCESS_MESSAGE)


if __name__ == "__main__":
    main()
