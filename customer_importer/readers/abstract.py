"""
Abstract row-reader interfaces for the customer importer.

Concrete readers (in-memory stream, file-backed) implement the RowReader
protocol: `read_row()` returns the next record as a list of strings, or None
once the input is exhausted. Parse failures raise `MalformedRecordError`.
"""

from __future__ import annotations

import abc
from typing import Iterator, Optional, Protocol, runtime_checkable

from customer_importer.domain.models import Row


@runtime_checkable
class RowReader(Protocol):
    """
    Common interface for sequential record sources.

    Rows are produced strictly in order and never revisited; the first row is
    the header.
    """

    def read_row(self) -> Optional[Row]:
        """
        Return the next record, or None at end of input.

        Raises
        ------
        MalformedRecordError
            If the underlying data cannot be parsed as a record.
        """
        ...

    def __iter__(self) -> Iterator[Row]:
        ...


class AbstractRowReader(abc.ABC):
    """
    ABC helper for class-based readers.

    Subclasses implement `read_row`; iteration is derived from it.
    """

    @abc.abstractmethod
    def read_row(self) -> Optional[Row]:  # pragma: no cover - interface only
        """Return the next record, or None at end of input."""
        raise NotImplementedError

    def __iter__(self) -> Iterator[Row]:
        while True:
            row = self.read_row()
            if row is None:
                return
            yield row


__all__ = [
    "RowReader",
    "AbstractRowReader",
]
