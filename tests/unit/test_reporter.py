from __future__ import annotations

import io

from rich.console import Console

from customer_importer.domain.models import DomainCount, ImportSummary
from customer_importer.importer import ImportReport
from customer_importer.reporter import build_table, print_results


def _report() -> ImportReport:
    return ImportReport(
        source="customers.csv",
        email_field="email",
        domains=[DomainCount(domain="a.io", count=3), DomainCount(domain="b.io", count=1)],
        summary=ImportSummary(rows_processed=5, rows_counted=4, skipped_duplicate=1, domains=2),
        duration_seconds=0.01,
    )


def test_build_table_caption_summarizes_run():
    caption = str(build_table(_report()).caption)

    assert "5 rows" in caption
    assert "4 counted" in caption
    assert "1 duplicates skipped" in caption
    assert "invalid skipped" not in caption


def test_print_results_lists_domains_and_shares():
    buffer = io.StringIO()
    print_results(_report(), console=Console(file=buffer, width=120))
    text = buffer.getvalue()

    assert "a.io" in text
    assert "b.io" in text
    assert "75.0" in text
    assert "25.0" in text
    assert text.index("a.io") < text.index("b.io")
