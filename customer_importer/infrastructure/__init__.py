"""
Infrastructure package for the customer importer.

Centralizes file access concerns (opening, decoding, error translation). Keep
this layer focused on I/O and resource management, decoupled from the
aggregation logic.
"""

from customer_importer.infrastructure.file_factory import (
    check_encoding,
    decode_lines,
    open_binary,
)

__all__ = [
    "check_encoding",
    "decode_lines",
    "open_binary",
]
