from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Optional

import typer

from customer_importer.config import get_settings
from customer_importer.domain.errors import ImporterError
from customer_importer.domain.models import ImportOptions
from customer_importer.importer import import_file, persist_results
from customer_importer.reporter import print_results
from customer_importer.utils.logging import configure_logging, get_logger

app = typer.Typer(help="Count customer emails per domain from a CSV file.")

log = get_logger(__name__)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"field={settings.email_field} | "
        f"skip_invalid={settings.skip_invalid_emails} "
        f"skip_duplicates={settings.skip_duplicate_emails} | "
        f"delimiter={settings.csv_delimiter!r} encoding={settings.input_encoding} | "
        f"env={settings.app_env} log_level={settings.log_level}"
    )


@app.command()
def run(
    path: Path = typer.Argument(..., help="CSV file with a header row."),
    field: Optional[str] = typer.Option(
        None,
        "--field",
        "-f",
        help="Header name of the email column (default from settings).",
    ),
    skip_invalid: bool = typer.Option(
        False,
        "--skip-invalid",
        help="Ignore rows with syntactically invalid emails instead of failing.",
    ),
    skip_duplicates: bool = typer.Option(
        False,
        "--skip-duplicates",
        help="Ignore rows whose email was already counted instead of failing.",
    ),
    delimiter: Optional[str] = typer.Option(
        None,
        "--delimiter",
        "-d",
        help="Single-character field delimiter (default from settings).",
    ),
    encoding: Optional[str] = typer.Option(
        None,
        "--encoding",
        help="Input file encoding (default from settings).",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the result as JSON instead of a table.",
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional path to also write the JSON result to.",
    ),
) -> None:
    """
    Import a CSV file and print the number of distinct emails per domain.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.json_logs)

    options = ImportOptions(
        skip_invalid_emails=skip_invalid or settings.skip_invalid_emails,
        skip_duplicate_emails=skip_duplicates or settings.skip_duplicate_emails,
    )
    effective_delimiter = delimiter or settings.csv_delimiter
    if len(effective_delimiter) != 1:
        raise typer.BadParameter("delimiter must be a single character", param_hint="--delimiter")
    email_field = field if field is not None else settings.email_field
    if not email_field:
        raise typer.BadParameter("email field name must not be empty", param_hint="--field")

    try:
        report = import_file(
            path,
            email_field,
            options,
            encoding=encoding or settings.input_encoding,
            delimiter=effective_delimiter,
        )
    except ImporterError as exc:
        log.error("Import failed", extra={"error_type": type(exc).__name__})
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(json.dumps(report.to_payload(), indent=2))
    else:
        print_results(report)

    if output is not None:
        written = persist_results(report, output)
        typer.echo(f"Results written to {written}", err=True)


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
