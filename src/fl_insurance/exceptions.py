"""Exception hierarchy for the insurance report pipeline.

Every fatal condition derives from `InsuranceReportError`. Archive problems
also derive from the matching builtin (`FileNotFoundError`, `OSError`) so
callers that only handle I/O failures still catch them.
"""

from __future__ import annotations

from typing import Iterable


class InsuranceReportError(Exception):
    """Base class for pipeline failures that abort a run."""


class ArchiveEmptyError(InsuranceReportError, FileNotFoundError):
    """The input archive has no entries."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Archive contains no entries: {path}")
        self.path = path


class ArchiveReadError(InsuranceReportError, OSError):
    """The input archive exists but cannot be read as a zip file."""


class SchemaError(InsuranceReportError):
    """Required columns are missing from the CSV header."""

    def __init__(self, missing: Iterable[str]) -> None:
        self.missing = tuple(missing)
        super().__init__(
            "Required columns not found in CSV header: " + ", ".join(self.missing)
        )
