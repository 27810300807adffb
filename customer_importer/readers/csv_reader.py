"""
CSV readers: a stream-backed reader and a file-backed context manager.

Both yield rows as lists of strings. Blank lines are not records: they are
skipped and do not advance the record counter, so the record number reported
in errors matches the line number the aggregator uses.
"""

from __future__ import annotations

import csv
from types import TracebackType
from typing import BinaryIO, Iterable, Optional, Type

from customer_importer.domain.errors import MalformedRecordError
from customer_importer.domain.models import Row
from customer_importer.infrastructure.file_factory import (
    PathLike,
    check_encoding,
    decode_lines,
    open_binary,
)
from customer_importer.readers.abstract import AbstractRowReader
from customer_importer.utils.logging import get_logger

log = get_logger(__name__)


class CsvRowReader(AbstractRowReader):
    """
    Read comma-separated records from an already open text stream.

    The stream is not closed by this reader; whoever opened it owns it.
    """

    def __init__(self, stream: Iterable[str], delimiter: str = ",") -> None:
        self._reader = csv.reader(stream, delimiter=delimiter, strict=True)
        self.records_read = 0

    def read_row(self) -> Optional[Row]:
        while True:
            try:
                row = next(self._reader)
            except StopIteration:
                return None
            except csv.Error as exc:
                raise MalformedRecordError(line=self.records_read + 1, reason=str(exc)) from exc
            except UnicodeDecodeError as exc:
                raise MalformedRecordError(
                    line=self.records_read + 1, reason=f"undecodable input ({exc.reason})"
                ) from exc
            if not row:
                continue
            self.records_read += 1
            return row


class CsvFileReader(AbstractRowReader):
    """
    File-backed CSV reader.

    Use as a context manager; the file is opened on enter and closed on every
    exit path. Unknown encodings, missing files and unreadable files raise
    `UnknownEncodingError`, `SourceNotFoundError` or `SourcePermissionError`
    on enter.
    """

    def __init__(self, path: PathLike, encoding: str = "utf-8", delimiter: str = ",") -> None:
        self.path = path
        self.encoding = encoding
        self.delimiter = delimiter
        self._stream: Optional[BinaryIO] = None
        self._rows: Optional[CsvRowReader] = None

    def open(self) -> "CsvFileReader":
        if self._stream is None:
            encoding = check_encoding(self.encoding)
            self._stream = open_binary(self.path)
            self._rows = CsvRowReader(
                decode_lines(self._stream, encoding), delimiter=self.delimiter
            )
            log.debug("Reading CSV file", extra={"path": str(self.path)})
        return self

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
        self._stream = None
        self._rows = None

    @property
    def closed(self) -> bool:
        return self._stream is None

    def read_row(self) -> Optional[Row]:
        if self._rows is None:
            raise RuntimeError("CsvFileReader must be opened before reading")
        return self._rows.read_row()

    def __enter__(self) -> "CsvFileReader":
        return self.open()

    def __exit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        self.close()


__all__ = ["CsvRowReader", "CsvFileReader"]
