"""Tests for the command-line entry point."""

import csv
import io
import json

import pytest

from diligence.__main__ import main, render
from diligence.catalog import MULTI_REGION
from diligence.engine import generate_script
from tests.helpers import make_inputs

INPUTS = {
    "transaction_type": "full-acquisition",
    "product_type": "b2b-saas",
    "tech_archetype": "modern-cloud-native",
    "headcount": "51-200",
    "revenue_range": "5-25m",
    "growth_stage": "scaling",
    "company_age": "5-10yr",
    "geographies": ["us", "eu"],
}


@pytest.fixture
def inputs_file(tmp_path):
    path = tmp_path / "inputs.json"
    path.write_text(json.dumps(INPUTS), encoding="utf-8")
    return path


class TestMain:
    """Running the CLI end to end."""

    def test_missing_inputs_file(self, tmp_path):
        assert main(["--inputs", str(tmp_path / "missing.json")]) == 1

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "inputs.json"
        path.write_text("{not json", encoding="utf-8")
        assert main(["--inputs", str(path)]) == 1

    def test_invalid_inputs(self, tmp_path):
        path = tmp_path / "inputs.json"
        path.write_text(json.dumps({"transaction_type": "carve-out"}), encoding="utf-8")
        assert main(["--inputs", str(path)]) == 1

    def test_json_output_file(self, inputs_file, tmp_path):
        output = tmp_path / "out" / "script.json"
        assert main(["-i", str(inputs_file), "-f", "json", "-o", str(output)]) == 0

        body = json.loads(output.read_text(encoding="utf-8"))
        assert 15 <= body["metadata"]["total_questions"] <= 20
        assert body["metadata"]["inputs"]["geographies"] == ["us", "eu"]

    def test_text_summary_to_stdout(self, inputs_file, capsys):
        assert main(["-i", str(inputs_file)]) == 0
        out = capsys.readouterr().out
        assert "TECHNICAL DUE DILIGENCE SCRIPT" in out
        assert "Total questions:" in out

    def test_text_to_file_writes_markdown(self, inputs_file, tmp_path):
        output = tmp_path / "script.md"
        assert main(["-i", str(inputs_file), "-o", str(output)]) == 0
        assert output.read_text(encoding="utf-8").startswith("# Technical Due Diligence Script")

    def test_sync_geo(self, inputs_file, capsys):
        assert main(["-i", str(inputs_file), "--sync-geo"]) == 0
        assert json.loads(capsys.readouterr().out) == ["us", "eu", MULTI_REGION]


class TestRender:
    """Output formats."""

    @pytest.fixture
    def script(self):
        return generate_script(make_inputs(transaction_type="carve-out", tech_archetype="hybrid-legacy"))

    def test_csv(self, script):
        rows = list(csv.reader(io.StringIO(render(script, "csv"))))
        assert rows[0] == ["Section", "ID", "Priority", "Audience", "Text", "Rationale"]
        question_rows = [r for r in rows[1:] if r[0] != "Risk Anchors"]
        assert len(question_rows) == script.metadata.total_questions

    def test_markdown_sections(self, script):
        text = render(script, "markdown")
        for group in script.topics:
            assert group.topic_label in text
        assert "## Risk Anchors" in text

    def test_unknown_format(self, script):
        with pytest.raises(ValueError):
            render(script, "pdf")
