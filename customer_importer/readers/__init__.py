"""
Readers package for the customer importer.

Re-exports the abstract interfaces and the concrete CSV readers so downstream
code can import from `customer_importer.readers` directly.
"""

from customer_importer.readers.abstract import AbstractRowReader, RowReader
from customer_importer.readers.csv_reader import CsvFileReader, CsvRowReader

__all__ = [
    # Abstracts
    "AbstractRowReader",
    "RowReader",
    # Concrete readers
    "CsvFileReader",
    "CsvRowReader",
]
