"""
Pytest configuration for the customer importer.

Provides fixtures for:
- Settings isolation (env vars and the cached settings instance)
- Building CSV text and files from header/row fragments
- Generated customer datasets
"""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import Callable, Generator, List

import pytest

from customer_importer.config import get_settings

CUSTOMERS_HEADER = "first_name,last_name,email,gender,ip_address"

_SETTINGS_ENV_VARS = [
    "IMPORTER_EMAIL_FIELD",
    "IMPORTER_SKIP_INVALID",
    "IMPORTER_SKIP_DUPLICATES",
    "IMPORTER_DELIMITER",
    "IMPORTER_ENCODING",
    "APP_ENV",
    "LOG_LEVEL",
    "LOG_JSON",
]


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """
    Clear importer env vars and the settings cache around every test.

    Also drops root handlers installed by `configure_logging`, which may point
    at streams swapped in by the CLI runner.
    """
    for name in _SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
    root = logging.getLogger()
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)


def _customer_csv(records: List[str], header: str = CUSTOMERS_HEADER) -> str:
    return "\n".join([header, *records]) + "\n"


@pytest.fixture
def customer_csv() -> Callable[..., str]:
    """
    Build CSV text from data lines, prefixed with the customers header.
    """
    return _customer_csv


@pytest.fixture
def customer_stream(customer_csv: Callable[..., str]) -> Callable[..., io.StringIO]:
    """
    Build an in-memory text stream from data lines.
    """

    def make(records: List[str], header: str = CUSTOMERS_HEADER) -> io.StringIO:
        return io.StringIO(customer_csv(records, header=header), newline="")

    return make


@pytest.fixture
def customer_file(tmp_path: Path, customer_csv: Callable[..., str]) -> Callable[..., Path]:
    """
    Write data lines to a CSV file under tmp_path and return its path.
    """

    def make(records: List[str], header: str = CUSTOMERS_HEADER, name: str = "customers.csv") -> Path:
        path = tmp_path / name
        path.write_text(customer_csv(records, header=header), encoding="utf-8")
        return path

    return make


@pytest.fixture
def generated_customers(tmp_path: Path) -> Path:
    """
    Generate a small deterministic customers dataset (200 rows, no bad emails).
    """
    from scripts.generate_data import _generate_rows_csv

    csv_path = tmp_path / "generated.csv"
    _generate_rows_csv(csv_path, rows=200, seed=42)
    return csv_path
