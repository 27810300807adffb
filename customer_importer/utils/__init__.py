"""
Utilities package for the customer importer.

Exports shared helpers for cross-cutting concerns. Keep this package free of
domain-specific logic.
"""

from customer_importer.utils.logging import JsonFormatter, configure_logging, get_logger

__all__ = [
    "JsonFormatter",
    "configure_logging",
    "get_logger",
]
