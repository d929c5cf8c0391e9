"""Unit tests for the validate-data command."""

import json

import pytest
from click.testing import CliRunner

from freelancerpro.cli import cli


@pytest.fixture
def invoke(mock_env, tmp_path):
    runner = CliRunner()

    def _invoke(*args):
        return runner.invoke(cli, ["--data-dir", str(tmp_path), *args])

    return _invoke


class TestValidateDataCommand:
    """Test suite for validate-data command."""

    def test_empty_store_is_consistent(self, invoke):
        result = invoke("validate-data")
        assert result.exit_code == 0
        assert "Data is consistent" in result.output

    def test_demo_data_is_consistent(self, invoke):
        invoke("seed-demo", "--yes")
        result = invoke("validate-data")
        assert result.exit_code == 0
        assert "No issues found" in result.output

    def test_dangling_references_are_warnings(self, invoke):
        invoke("seed-demo", "--yes")
        invoke("delete-client", "client-3")
        result = invoke("validate-data")
        assert result.exit_code == 0
        assert "quotes[quote-1].client_id" in result.output

    def test_severity_filter_hides_warnings(self, invoke):
        invoke("seed-demo", "--yes")
        invoke("delete-client", "client-3")
        result = invoke("validate-data", "--severity", "error")
        assert result.exit_code == 0
        assert "quote-1" not in result.output

    def test_duplicate_ids_fail(self, invoke, tmp_path):
        invoke("seed-demo", "--yes")
        path = tmp_path / "freelancer_app_data.json"
        doc = json.loads(path.read_text(encoding="utf-8"))
        doc["tasks"][1]["id"] = "task-1"
        path.write_text(json.dumps(doc), encoding="utf-8")

        result = invoke("validate-data")
        assert result.exit_code == 1
        assert "Integrity errors found" in result.output

    def test_corrupt_document(self, invoke, tmp_path):
        (tmp_path / "freelancer_app_data.json").write_text("{broken", encoding="utf-8")
        result = invoke("validate-data")
        assert result.exit_code == 5
        assert "Corrupt Data" in result.output
