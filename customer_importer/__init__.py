"""
Customer Importer - count customer emails per domain from CSV exports.

This package reads a CSV file with a header row, picks the email column by
name, validates and deduplicates addresses, and returns the number of
distinct emails per domain sorted by domain name. It provides:

- A single-pass record aggregator with optional skipping of invalid or
  duplicate emails
- Stream and file-backed CSV readers
- An import service with JSON persistence
- A typer CLI with rich table output
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from customer_importer.aggregator import RecordAggregator
from customer_importer.config import Settings, get_settings
from customer_importer.domain import (
    DomainCount,
    DuplicateEmailError,
    EmptyInputError,
    FieldNotFoundError,
    ImporterError,
    ImportOptions,
    InvalidEmailError,
    MalformedRecordError,
    NoValidEmailsError,
    SourceNotFoundError,
    SourcePermissionError,
    UnknownEncodingError,
    is_valid_email,
)
from customer_importer.importer import (
    ImportReport,
    import_file,
    import_from_file,
    import_from_stream,
    persist_results,
    run_import,
)
from customer_importer.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Aggregation
    "RecordAggregator",
    "DomainCount",
    "ImportOptions",
    "is_valid_email",
    # Import service
    "ImportReport",
    "import_file",
    "import_from_file",
    "import_from_stream",
    "persist_results",
    "run_import",
    # Errors
    "ImporterError",
    "EmptyInputError",
    "FieldNotFoundError",
    "MalformedRecordError",
    "InvalidEmailError",
    "DuplicateEmailError",
    "NoValidEmailsError",
    "SourceNotFoundError",
    "SourcePermissionError",
    "UnknownEncodingError",
    # Logging
    "configure_logging",
    "get_logger",
]
