"""
Import service: wires readers to the aggregator, times the run and persists results.

Usage (example from CLI):
    from customer_importer.importer import import_from_file

    domains = import_from_file("customers.csv", "email")
    for item in domains:
        print(item.domain, item.count)

`run_import` returns a full `ImportReport` (domains, counters, duration);
`persist_results` writes that report as JSON.
"""

from __future__ import annotations

import json
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from pydantic import BaseModel, Field

from customer_importer.aggregator import RecordAggregator
from customer_importer.domain.errors import ImporterError
from customer_importer.domain.models import DomainCount, ImportOptions, ImportSummary
from customer_importer.infrastructure.file_factory import PathLike
from customer_importer.readers.abstract import RowReader
from customer_importer.readers.csv_reader import CsvFileReader, CsvRowReader
from customer_importer.utils.logging import get_logger

log = get_logger(__name__)


class ImportReport(BaseModel):
    """Outcome of one successful import run."""

    source: str
    email_field: str
    domains: List[DomainCount]
    summary: ImportSummary
    duration_seconds: float = Field(0.0, ge=0.0)

    model_config = {
        "frozen": True,
    }

    def to_payload(self) -> Dict[str, Any]:
        payload = self.model_dump(mode="json")
        payload["duration_seconds"] = round(self.duration_seconds, 4)
        return payload


def run_import(
    reader: RowReader,
    email_field: str,
    options: Optional[ImportOptions] = None,
    source: str = "<stream>",
) -> ImportReport:
    """
    Aggregate every row of `reader` and return a report.

    Parameters
    ----------
    reader : RowReader
        Record source; its first row must be the header.
    email_field : str
        Header name of the email column.
    options : ImportOptions | None
        Skip flags; defaults to raising on every per-row error.
    source : str
        Label used in logs and in the report.

    Raises
    ------
    ImporterError
        The first non-skippable error of the run.
    """
    aggregator = RecordAggregator(email_field, options)
    log.info(
        f"[IMPORT START] {source}",
        extra={"source": source, "email_field": email_field},
    )
    start_time = time.perf_counter()
    try:
        domains = aggregator.run(reader)
    except ImporterError as exc:
        log.info(
            f"[IMPORT FAILED] {source}",
            extra={"source": source, "error_type": type(exc).__name__, "error": str(exc)},
        )
        raise
    duration_seconds = time.perf_counter() - start_time

    summary = aggregator.summary()
    log.info(
        f"[IMPORT COMPLETE] {source}",
        extra={
            "source": source,
            "rows": summary.rows_processed,
            "domains": summary.domains,
            "skipped_invalid": summary.skipped_invalid,
            "skipped_duplicate": summary.skipped_duplicate,
            "duration": round(duration_seconds, 4),
        },
    )
    return ImportReport(
        source=source,
        email_field=email_field,
        domains=domains,
        summary=summary,
        duration_seconds=duration_seconds,
    )


def import_from_stream(
    stream: TextIO,
    email_field: str,
    options: Optional[ImportOptions] = None,
    delimiter: str = ",",
) -> List[DomainCount]:
    """Import from an open text stream; the stream is left open."""
    report = run_import(CsvRowReader(stream, delimiter=delimiter), email_field, options)
    return report.domains


def import_file(
    path: PathLike,
    email_field: str,
    options: Optional[ImportOptions] = None,
    encoding: str = "utf-8",
    delimiter: str = ",",
) -> ImportReport:
    """Import from a CSV file, closing it on every exit path, and return the report."""
    with CsvFileReader(path, encoding=encoding, delimiter=delimiter) as reader:
        return run_import(reader, email_field, options, source=str(path))


def import_from_file(
    path: PathLike,
    email_field: str,
    options: Optional[ImportOptions] = None,
    encoding: str = "utf-8",
    delimiter: str = ",",
) -> List[DomainCount]:
    """Import from a CSV file and return the sorted domain counts."""
    return import_file(path, email_field, options, encoding=encoding, delimiter=delimiter).domains


def persist_results(report: ImportReport, output_path: PathLike) -> Path:
    """Write `report` as JSON to `output_path`, creating parent directories."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(report.to_payload(), f, indent=2, sort_keys=True)
    log.info("Results persisted", extra={"path": str(path)})
    return path


__all__ = [
    "ImportReport",
    "import_file",
    "import_from_file",
    "import_from_stream",
    "persist_results",
    "run_import",
]
