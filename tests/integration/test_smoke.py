"""
End-to-end CLI tests for the customer importer.

These run the typer app against real CSV files under tmp_path and verify that:
1. A clean dataset imports and renders
2. Skip flags and settings are honoured
3. Importer errors map to exit code 1 with the location in the message
"""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from customer_importer.main import app

ROW = "Mildred,Hernandez,{email},Female,38.194.51.128"

runner = CliRunner()


@pytest.fixture
def quiet_logs(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "WARNING")


class TestRunCommand:
    """Test the `run` command."""

    def test_run_prints_table(self, generated_customers: Path):
        result = runner.invoke(app, ["run", str(generated_customers)])
        assert result.exit_code == 0, result.output
        assert "Emails by Domain" in result.output
        assert "github.io" in result.output

    def test_run_json_output(self, customer_file, quiet_logs):
        path = customer_file([ROW.format(email="b@b.io"), ROW.format(email="a@a.io")])
        result = runner.invoke(app, ["run", str(path), "--json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.stdout)
        assert payload["domains"] == [
            {"domain": "a.io", "count": 1},
            {"domain": "b.io", "count": 1},
        ]

    def test_run_persists_output(self, customer_file, tmp_path: Path, quiet_logs):
        path = customer_file([ROW.format(email="a@a.io")])
        out = tmp_path / "results" / "latest.json"
        result = runner.invoke(app, ["run", str(path), "--output", str(out)])
        assert result.exit_code == 0, result.output
        assert json.loads(out.read_text(encoding="utf-8"))["domains"][0]["domain"] == "a.io"

    def test_run_duplicate_fails_with_location(self, customer_file, quiet_logs):
        path = customer_file([ROW.format(email="a@a.io"), ROW.format(email="a@a.io")])
        result = runner.invoke(app, ["run", str(path)])
        assert result.exit_code == 1
        assert "line 3, column 2" in result.output

    def test_run_skip_duplicates_flag(self, customer_file, quiet_logs):
        path = customer_file([ROW.format(email="a@a.io"), ROW.format(email="a@a.io")])
        result = runner.invoke(app, ["run", str(path), "--skip-duplicates", "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["domains"] == [{"domain": "a.io", "count": 1}]

    def test_run_skip_invalid_from_settings(self, customer_file, monkeypatch, quiet_logs):
        monkeypatch.setenv("IMPORTER_SKIP_INVALID", "1")
        path = customer_file([ROW.format(email="aa.io"), ROW.format(email="b@b.io")])
        result = runner.invoke(app, ["run", str(path), "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["summary"]["skipped_invalid"] == 1

    def test_run_custom_field(self, customer_file, quiet_logs):
        path = customer_file(["x@x.io"], header="contact")
        result = runner.invoke(app, ["run", str(path), "--field", "contact", "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["email_field"] == "contact"

    def test_run_missing_field(self, customer_file, quiet_logs):
        path = customer_file([ROW.format(email="a@a.io")])
        result = runner.invoke(app, ["run", str(path), "-f", "mail"])
        assert result.exit_code == 1
        assert "mail" in result.output

    def test_run_missing_file(self, tmp_path: Path, quiet_logs):
        result = runner.invoke(app, ["run", str(tmp_path / "nonexisting.csv")])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_run_unknown_encoding_reports_error(self, customer_file, quiet_logs):
        path = customer_file([ROW.format(email="a@a.io")])
        result = runner.invoke(app, ["run", str(path), "--encoding", "nope"])
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "nope" in result.output

    def test_run_unknown_encoding_from_settings(self, customer_file, monkeypatch, quiet_logs):
        monkeypatch.setenv("IMPORTER_ENCODING", "nope")
        path = customer_file([ROW.format(email="a@a.io")])
        result = runner.invoke(app, ["run", str(path)])
        assert result.exit_code == 1
        assert "Unknown input encoding" in result.output

    def test_run_rejects_empty_field(self, customer_file, quiet_logs):
        path = customer_file([ROW.format(email="a@a.io")])
        result = runner.invoke(app, ["run", str(path), "--field", ""])
        assert result.exit_code == 2

    def test_run_rejects_long_delimiter(self, customer_file, quiet_logs):
        path = customer_file([ROW.format(email="a@a.io")])
        result = runner.invoke(app, ["run", str(path), "--delimiter", ";;"])
        assert result.exit_code == 2


class TestInfoCommand:
    def test_info_shows_effective_settings(self, monkeypatch):
        monkeypatch.setenv("IMPORTER_EMAIL_FIELD", "contact_email")
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "field=contact_email" in result.output
