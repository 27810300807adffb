"""
File access factory for the customer importer.

Opens input files for CSV reading and translates OS-level failures into the
importer error taxonomy, so callers see `SourceNotFoundError`,
`SourcePermissionError` and `UnknownEncodingError` instead of raw `OSError`
or `LookupError`.

Files are opened in binary and decoded one physical line at a time, so a
decoding failure surfaces while the record holding the bad bytes is read.

Usage:
    from customer_importer.infrastructure.file_factory import decode_lines, open_binary

    stream = open_binary("customers.csv")
    try:
        for line in decode_lines(stream, "utf-8"):
            ...
    finally:
        stream.close()
"""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import BinaryIO, Iterator, Union

from customer_importer.domain.errors import (
    SourceNotFoundError,
    SourcePermissionError,
    UnknownEncodingError,
)
from customer_importer.utils.logging import get_logger

log = get_logger(__name__)

PathLike = Union[str, Path]


def check_encoding(encoding: str) -> str:
    """Return the canonical codec name, raising UnknownEncodingError if unknown."""
    try:
        return codecs.lookup(encoding).name
    except LookupError as exc:
        raise UnknownEncodingError(encoding) from exc


def open_binary(path: PathLike) -> BinaryIO:
    """
    Open `path` for binary reading.

    The caller owns the returned stream and must close it.
    """
    source = Path(path)
    try:
        stream = source.open("rb")
    except FileNotFoundError as exc:
        raise SourceNotFoundError(str(source)) from exc
    except (PermissionError, IsADirectoryError) as exc:
        raise SourcePermissionError(str(source)) from exc
    log.debug("Opened input file", extra={"path": str(source)})
    return stream


def decode_lines(stream: BinaryIO, encoding: str) -> Iterator[str]:
    """
    Yield decoded text for each physical line of `stream`.

    Raises UnicodeDecodeError when the line containing undecodable bytes is
    reached, not before.
    """
    decoder = codecs.getincrementaldecoder(encoding)()
    for raw in stream:
        text = decoder.decode(raw)
        if text:
            yield text
    tail = decoder.decode(b"", final=True)
    if tail:
        yield tail


__all__ = ["PathLike", "check_encoding", "decode_lines", "open_binary"]
