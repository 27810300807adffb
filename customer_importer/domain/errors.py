"""
Error taxonomy for the customer importer.

Every failure raised by the aggregator, readers and file factory derives from
`ImporterError`, which carries the 1-based line (header is line 1) and the
resolved email column index so callers can locate the offending record.

Skippable errors (`InvalidEmailError`, `DuplicateEmailError`) are swallowed by
the aggregator when the matching option is enabled; everything else aborts the
run.
"""

from __future__ import annotations

from typing import Optional


class ImporterError(Exception):
    """Base class for all importer failures."""

    message: str = "Import failed"

    def __init__(
        self,
        message: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        self.message = message or self.message
        self.line = line
        self.column = column
        super().__init__(self.message)

    def at(self, line: int, column: Optional[int]) -> "ImporterError":
        """Attach a record location and return self (for `raise err.at(...)`)."""
        self.line = line
        self.column = column
        return self

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"line {self.line}: {self.message}"
        return f"line {self.line}, column {self.column}: {self.message}"


class EmptyInputError(ImporterError):
    message = "Input is empty"


class FieldNotFoundError(ImporterError):
    def __init__(self, field_name: str, line: Optional[int] = None) -> None:
        self.field_name = field_name
        super().__init__(f"Header doesn't contain field '{field_name}'", line=line)


class MalformedRecordError(ImporterError):
    def __init__(
        self,
        line: Optional[int] = None,
        column: Optional[int] = None,
        expected: Optional[int] = None,
        actual: Optional[int] = None,
        reason: Optional[str] = None,
    ) -> None:
        self.expected = expected
        self.actual = actual
        if reason is None:
            reason = f"wrong number of fields (expected {expected}, got {actual})"
        super().__init__(f"Malformed record: {reason}", line=line, column=column)


class InvalidEmailError(ImporterError):
    def __init__(
        self, email: str, line: Optional[int] = None, column: Optional[int] = None
    ) -> None:
        self.email = email
        super().__init__(f"Email is not valid: '{email}'", line=line, column=column)


class DuplicateEmailError(ImporterError):
    def __init__(
        self, email: str, line: Optional[int] = None, column: Optional[int] = None
    ) -> None:
        self.email = email
        super().__init__(f"Email already added: '{email}'", line=line, column=column)


class NoValidEmailsError(ImporterError):
    message = "No valid emails found"


class SourceNotFoundError(ImporterError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Input file not found: {path}")


class SourcePermissionError(ImporterError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Permission denied reading input file: {path}")


class UnknownEncodingError(ImporterError):
    def __init__(self, encoding: str) -> None:
        self.encoding = encoding
        super().__init__(f"Unknown input encoding: {encoding}")


__all__ = [
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
]
