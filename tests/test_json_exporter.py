"""Tests for the JSON report exporter."""
import json

from adapters.json_exporter import export_report_json
from core.domain import ReportBuilder


class TestExportReportJson:

    def test_writes_utf8_json(self, tmp_path, sample_fields):
        report = ReportBuilder().title(sample_fields["title"]).author(sample_fields["author"]).build()
        target = tmp_path / "nested" / "dir" / "report.json"

        written = export_report_json(report=report, output_path=target)

        assert written == target
        text = target.read_text(encoding="utf-8")
        assert "Ana López" in text
        assert text.endswith("\n")
        assert json.loads(text) == {
            "author": "Ana López",
            "body": None,
            "date": None,
            "title": "Informe de Ventas Q1 2025",
        }

    def test_keys_are_sorted(self, tmp_path):
        target = tmp_path / "r.json"
        export_report_json(report=ReportBuilder().build(), output_path=target)
        keys = list(json.loads(target.read_text(encoding="utf-8")))
        assert keys == sorted(keys)
