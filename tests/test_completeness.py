"""Tests for destination completeness and coverage reporting."""

import logging

from caseflow_forms.config import Settings
from caseflow_forms.models.enums import FormType
from caseflow_forms.services.completeness import (
    CompletenessPopulator,
    compute_coverage,
    coverage_report,
)


class TestCompletenessPopulator:
    """Every known column present after population."""

    def test_missing_columns_default_to_none(self, config, settings):
        schema = config.schema_for("DSA_CONNECTOR")
        record = CompletenessPopulator(schema, settings).populate({"final_status": "Positive"}, "POSITIVE")

        assert record["final_status"] == "Positive"
        for column in schema.all_columns:
            assert column in record
        assert record["connector_rating"] is None

    def test_extra_columns_included(self, config):
        schema = config.schema_for("DSA_CONNECTOR")
        assert "connector_license_number" in schema.all_columns
        assert schema.all_columns.index("final_status") < schema.all_columns.index("connector_category")

    def test_existing_values_kept(self, config, settings):
        schema = config.schema_for("RESIDENCE")
        record = CompletenessPopulator(schema, settings).populate(
            {"house_status": "Opened", "custom_column": "x"}, FormType.POSITIVE
        )
        assert record["house_status"] == "Opened"
        assert record["custom_column"] == "x"

    def test_input_not_mutated(self, config, settings):
        schema = config.schema_for("RESIDENCE")
        mapped = {"house_status": "Opened"}
        CompletenessPopulator(schema, settings).populate(mapped, "POSITIVE")
        assert mapped == {"house_status": "Opened"}

    def test_missing_relevant_columns_logged(self, config, settings, caplog):
        schema = config.schema_for("DSA_CONNECTOR")
        with caplog.at_level(logging.WARNING):
            CompletenessPopulator(schema, settings).populate({}, "POSITIVE")
        assert "Missing relevant field for POSITIVE DSA_CONNECTOR form: connector_code" in caplog.text

    def test_relevance_warnings_can_be_disabled(self, config, caplog):
        schema = config.schema_for("DSA_CONNECTOR")
        quiet = Settings(_env_file=None, warn_on_missing_relevant_columns=False)
        with caplog.at_level(logging.WARNING):
            CompletenessPopulator(schema, quiet).populate({}, "POSITIVE")
        assert "Missing relevant field" not in caplog.text

    def test_relevance_from_required_fields(self, config, settings):
        schema = config.schema_for("RESIDENCE")
        missing = CompletenessPopulator(schema, settings).missing_relevant_columns(
            {"address_locatable": "Yes"}, "UNTRACEABLE"
        )
        assert "address_locatable" not in missing
        assert "call_remark" in missing
        assert "final_status" in missing

    def test_unknown_form_type_uses_default(self, config, settings):
        populator = CompletenessPopulator(config.schema_for("RESIDENCE"), settings)
        assert populator.resolve_form_type("bogus") is FormType.POSITIVE
        assert populator.resolve_form_type(None) is FormType.POSITIVE
        assert populator.resolve_form_type("shifted") is FormType.SHIFTED


class TestCoverage:
    def test_counts(self):
        coverage = compute_coverage({"a": 1, "b": None, "c": 0, "d": None})
        assert coverage.total_fields == 4
        assert coverage.populated_fields == 2
        assert coverage.defaulted_fields == 2
        assert coverage.coverage_percentage == 50

    def test_empty_record(self):
        assert compute_coverage({}).coverage_percentage == 0

    def test_report_lists_columns(self):
        report = coverage_report({"final_status": "Positive", "locality": None}, "RESIDENCE", "Positive & Door Locked")
        assert "Field coverage report - RESIDENCE / Positive & Door Locked" in report
        assert "Coverage: 50%" in report
        assert "  - final_status" in report.split("Defaulted to null:")[0]
        assert "  - locality" in report.split("Defaulted to null:")[1]

    def test_engine_report_uses_form_label(self, engine):
        report = engine.coverage_report({"finalStatus": "Positive"}, "RESIDENCE", "SHIFTED")
        assert report.startswith("Field coverage report - RESIDENCE / Shifted & Door Lock")
