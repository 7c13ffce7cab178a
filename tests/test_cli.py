"""Tests for the command line interface."""

import json

import pytest
from typer.testing import CliRunner

from caseflow_forms.cli import app

runner = CliRunner()


@pytest.fixture
def write_json(tmp_path):
    def _write(data, name="submission.json"):
        path = tmp_path / name
        path.write_text(json.dumps(data) if not isinstance(data, str) else data, encoding="utf-8")
        return str(path)
    return _write


class TestSchemaCommands:
    def test_types(self):
        result = runner.invoke(app, ["types"])
        assert result.exit_code == 0
        assert "RESIDENCE" in result.output
        assert "NOC" in result.output

    def test_sections_for_form_type(self):
        result = runner.invoke(app, ["sections", "RESIDENCE", "--form-type", "SHIFTED"])
        assert result.exit_code == 0
        assert "Shifting Details" in result.output
        assert "Document Verification" not in result.output

    def test_unknown_verification_type(self):
        result = runner.invoke(app, ["sections", "UNKNOWN_TYPE"])
        assert result.exit_code == 1
        assert "Unknown verification type" in result.output

    def test_invalid_form_type(self):
        result = runner.invoke(app, ["sections", "RESIDENCE", "-f", "SIDEWAYS"])
        assert result.exit_code == 1
        assert "Invalid form type" in result.output


class TestSubmissionCommands:
    def test_render(self, write_json, residence_positive_submission):
        path = write_json(residence_positive_submission)
        result = runner.invoke(app, ["render", "RESIDENCE", "POSITIVE", path])
        assert result.exit_code == 0
        assert "Basic Information" in result.output
        assert "Ravi Kumar" in result.output

    def test_map_without_completion(self, write_json):
        path = write_json({"outcome": "POSITIVE", "finalStatus": "Approved"})
        result = runner.invoke(app, ["map", "DSA_CONNECTOR", path, "--no-complete"])
        assert result.exit_code == 0
        assert '"final_status": "Approved"' in result.output
        assert '"outcome"' not in result.output

    def test_map_with_completion(self, write_json):
        path = write_json({"finalStatus": "Positive"})
        result = runner.invoke(app, ["map", "OFFICE", path, "--form-type", "UNTRACEABLE"])
        assert result.exit_code == 0
        assert '"contact_person": null' in result.output

    def test_validate_invalid_submission(self, write_json):
        path = write_json({})
        result = runner.invoke(app, ["validate", "OFFICE", "UNTRACEABLE", path])
        assert result.exit_code == 1
        assert "contactPerson" in result.output
        assert "Coverage:" in result.output

    def test_validate_valid_submission(self, write_json, residence_positive_submission):
        path = write_json(residence_positive_submission)
        result = runner.invoke(app, ["validate", "RESIDENCE", "POSITIVE", path, "--report"])
        assert result.exit_code == 0
        assert "Valid submission" in result.output
        assert "Field coverage report" in result.output

    def test_detect(self, write_json):
        path = write_json({"outcome": "UNTRACEABLE", "callRemark": "not reachable"})
        result = runner.invoke(app, ["detect", "RESIDENCE", path])
        assert result.exit_code == 0
        assert "UNTRACEABLE" in result.output
        assert "outcome_mapping" in result.output


class TestSubmissionFiles:
    def test_invalid_json(self, write_json):
        path = write_json("{not json")
        result = runner.invoke(app, ["validate", "RESIDENCE", "POSITIVE", path])
        assert result.exit_code == 1
        assert "Invalid JSON" in result.output

    def test_json_must_be_an_object(self, write_json):
        path = write_json([1, 2, 3])
        result = runner.invoke(app, ["map", "RESIDENCE", path])
        assert result.exit_code == 1
        assert "must contain a JSON object" in result.output

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["detect", "RESIDENCE", str(tmp_path / "absent.json")])
        assert result.exit_code == 1
        assert "Cannot read" in result.output
