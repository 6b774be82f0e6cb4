"""Configuration helpers and Settings container.

This module provides a small `Settings` dataclass and `get_settings` which
reads optional environment overrides. With nothing set, the defaults point at
`FL_insurance.csv.zip` and the current working directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import logging
import os

from dotenv import load_dotenv

# Explicitly load .env from project root
PROJECT_ROOT = Path(__file__).resolve().parents[2]
load_dotenv(PROJECT_ROOT / ".env")

DEFAULT_ARCHIVE = "FL_insurance.csv.zip"

@dataclass(frozen=True)
class Settings:
    """Container for pipeline configuration read from the environment.

    Attributes:
        archive_path: Zip archive holding the insurance CSV.
        output_dir: Directory receiving the three report files.
        log_level: Root logging level.
    """
    archive_path: Path
    output_dir: Path
    log_level: int = logging.INFO


def get_settings() -> Settings:
    """Read environment variables and return a frozen `Settings` object.

    Raises:
        RuntimeError: if `FL_INSURANCE_LOG_LEVEL` is not a known level name.
    """
    archive_path = Path(os.getenv("FL_INSURANCE_ARCHIVE", DEFAULT_ARCHIVE))
    output_dir = Path(os.getenv("FL_INSURANCE_OUTPUT_DIR", "."))
    level_name = os.getenv("FL_INSURANCE_LOG_LEVEL", "INFO").strip().upper()

    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise RuntimeError(
            f"FL_INSURANCE_LOG_LEVEL={level_name!r} is not a logging level "
            "(expected DEBUG, INFO, WARNING, ERROR or CRITICAL)."
        )

    return Settings(
        archive_path=archive_path,
        output_dir=output_dir,
        log_level=level,
    )
