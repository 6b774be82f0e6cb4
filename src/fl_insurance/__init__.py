"""fl_insurance package.

Contains modules for reading the zipped Florida insurance CSV, parsing rows
into validated records, computing county-level summaries, and writing the
plain-text reports.

Architecture:
- Archive → Records → Summaries → report files
- Decimal arithmetic is used for every monetary aggregate
- Pydantic models validate records and summary rows
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
