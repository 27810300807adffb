"""
Domain package for the customer importer.

Exports the data definitions, validation helpers and error taxonomy shared by
the aggregator, readers and CLI. Keep this package free of I/O.
"""

from customer_importer.domain.errors import (
    DuplicateEmailError,
    EmptyInputError,
    FieldNotFoundError,
    ImporterError,
    InvalidEmailError,
    MalformedRecordError,
    NoValidEmailsError,
    SourceNotFoundError,
    SourcePermissionError,
    UnknownEncodingError,
)
from customer_importer.domain.models import (
    AggregationState,
    DomainCount,
    ImportOptions,
    ImportSummary,
    Row,
)
from customer_importer.domain.validator import extract_domain, is_valid_email

__all__ = [
    # Models
    "AggregationState",
    "DomainCount",
    "ImportOptions",
    "ImportSummary",
    "Row",
    # Validation
    "extract_domain",
    "is_valid_email",
    # Errors
    "DuplicateEmailError",
    "EmptyInputError",
    "FieldNotFoundError",
    "ImporterError",
    "InvalidEmailError",
    "MalformedRecordError",
    "NoValidEmailsError",
    "SourceNotFoundError",
    "SourcePermissionError",
    "UnknownEncodingError",
]
