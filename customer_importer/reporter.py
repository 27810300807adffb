from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from customer_importer.importer import ImportReport


def build_table(report: ImportReport) -> Table:
    """
    Build a rich table of domain counts.

    Rows keep the report order (domain ascending); the share column is the
    domain's fraction of all counted emails.
    """
    summary = report.summary
    title = "Emails by Domain"
    title = f"{title}\n[dim]Source: {report.source} │ Field: {report.email_field}[/dim]"

    caption_parts = [
        f"{summary.rows_processed:,} rows",
        f"{summary.rows_counted:,} counted",
    ]
    if summary.skipped_invalid:
        caption_parts.append(f"{summary.skipped_invalid:,} invalid skipped")
    if summary.skipped_duplicate:
        caption_parts.append(f"{summary.skipped_duplicate:,} duplicates skipped")
    caption_parts.append(f"{report.duration_seconds:.3f}s")

    table = Table(
        title=title,
        box=box.ROUNDED,
        caption=" │ ".join(caption_parts),
    )

    table.add_column("Domain", style="cyan", no_wrap=True)
    table.add_column("Emails", justify="right", style="magenta")
    table.add_column("Share %", justify="right", style="green")

    total = summary.rows_counted or 1
    for item in report.domains:
        share = item.count / total * 100
        table.add_row(item.domain, f"{item.count:,}", f"{share:.1f}")

    return table


def print_results(report: ImportReport, console: Optional[Console] = None) -> None:
    """Render an import report as a rich table."""
    console = console or Console()
    console.print(build_table(report))
