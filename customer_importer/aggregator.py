"""
Record aggregator: folds CSV rows into a per-domain count of distinct emails.

Usage:
    from customer_importer.aggregator import RecordAggregator
    from customer_importer.domain.models import ImportOptions

    aggregator = RecordAggregator("email", ImportOptions(skip_duplicate_emails=True))
    result = aggregator.run([["name", "email"], ["Ann", "ann@a.io"]])
    # [DomainCount(domain='a.io', count=1)]

Each `run` call starts from a fresh `AggregationState`; nothing is shared
between runs. The first non-skippable error aborts the run.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from customer_importer.domain.errors import (
    DuplicateEmailError,
    EmptyInputError,
    FieldNotFoundError,
    InvalidEmailError,
    MalformedRecordError,
    NoValidEmailsError,
)
from customer_importer.domain.models import (
    AggregationState,
    DomainCount,
    ImportOptions,
    ImportSummary,
    Row,
)
from customer_importer.domain.validator import extract_domain
from customer_importer.utils.logging import get_logger

log = get_logger(__name__)

HEADER_LINE = 1


class RecordAggregator:
    """
    Count distinct, valid emails per domain for a single configured column.

    Parameters
    ----------
    email_field : str
        Header name of the column holding the email address.
    options : ImportOptions | None
        Skip flags; both default to off.
    """

    def __init__(self, email_field: str, options: Optional[ImportOptions] = None) -> None:
        if not email_field:
            raise ValueError("email_field must be a non-empty column name")
        self.email_field = email_field
        self.options = options or ImportOptions()
        self._column: Optional[int] = None
        self._width: Optional[int] = None
        self._state = AggregationState()

    @property
    def column_index(self) -> Optional[int]:
        """Resolved email column index, or None before `resolve`."""
        return self._column

    def resolve(self, header: Row) -> int:
        """Return the index of the first header field equal to `email_field`."""
        for index, name in enumerate(header):
            if name == self.email_field:
                self._column = index
                self._width = len(header)
                return index
        raise FieldNotFoundError(self.email_field, line=HEADER_LINE)

    def process_row(self, row: Row, line_number: int) -> None:
        """Fold one data row into the state, raising on non-skippable errors."""
        if self._column is None or self._width is None:
            raise RuntimeError("resolve() must be called before process_row()")

        state = self._state
        column = self._column
        state.line = line_number
        state.rows_processed += 1

        if len(row) != self._width:
            raise MalformedRecordError(
                line=line_number, column=column, expected=self._width, actual=len(row)
            )

        email = row[column]

        if email in state.seen_emails:
            if self.options.skip_duplicate_emails:
                state.skipped_duplicate += 1
                log.debug("Skipping duplicate email", extra={"line": line_number})
                return
            raise DuplicateEmailError(email, line=line_number, column=column)

        try:
            domain = extract_domain(email)
        except InvalidEmailError as exc:
            if self.options.skip_invalid_emails:
                state.skipped_invalid += 1
                log.debug("Skipping invalid email", extra={"line": line_number})
                return
            raise exc.at(line_number, column)

        state.seen_emails.add(email)
        state.domain_counter[domain] += 1

    def finalize(self) -> List[DomainCount]:
        """Return counts sorted by domain; fail if nothing was counted."""
        counter = self._state.domain_counter
        if not counter:
            raise NoValidEmailsError(line=self._state.line, column=self._column)
        return [DomainCount(domain=domain, count=count) for domain, count in sorted(counter.items())]

    def summary(self) -> ImportSummary:
        state = self._state
        return ImportSummary(
            rows_processed=state.rows_processed,
            rows_counted=sum(state.domain_counter.values()),
            skipped_invalid=state.skipped_invalid,
            skipped_duplicate=state.skipped_duplicate,
            domains=len(state.domain_counter),
        )

    def run(self, rows: Iterable[Row]) -> List[DomainCount]:
        """
        Aggregate a header row followed by data rows.

        Raises
        ------
        EmptyInputError
            If `rows` yields no header.
        ImporterError
            The first non-skippable error, with line and column set.
        """
        self._state = AggregationState()
        self._column = None
        self._width = None

        iterator = iter(rows)
        header = next(iterator, None)
        if header is None:
            raise EmptyInputError(line=HEADER_LINE)

        self._state.line = HEADER_LINE
        self.resolve(header)

        line_number = HEADER_LINE
        while True:
            try:
                row = next(iterator)
            except StopIteration:
                break
            except MalformedRecordError as exc:
                # Parse failures from the reader know the line, not the column.
                if exc.column is None:
                    exc.column = self._column
                raise
            line_number += 1
            self.process_row(row, line_number)

        return self.finalize()


__all__ = ["RecordAggregator"]
