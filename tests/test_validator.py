"""Tests for required-field and conditional validation."""

from datetime import date

import pytest

from caseflow_forms.models.enums import FormType
from caseflow_forms.models.mapping import (
    ComparisonRule,
    ConditionalRule,
    LengthRule,
    RangeRule,
    SchemaConfigurationError,
)
from caseflow_forms.services.validator import FormValidator, validate_and_prepare

from conftest import make_field, make_schema


class TestRequiredFields:
    """Missing required fields make a submission invalid."""

    def test_empty_untraceable_office_submission(self, engine):
        result = engine.validate({}, "OFFICE", "UNTRACEABLE")
        assert not result.is_valid
        for name in ("contactPerson", "callRemark", "finalStatus"):
            assert name in result.missing_fields

    def test_complete_submission_is_valid(self, engine, residence_positive_submission):
        result = engine.validate(residence_positive_submission, "RESIDENCE", "POSITIVE")
        assert result.is_valid
        assert result.missing_fields == []
        assert result.warnings == []

    def test_missing_fields_keep_required_order(self, engine, config):
        result = engine.validate({}, "RESIDENCE", FormType.SHIFTED)
        required = list(config.schema_for("RESIDENCE").required_fields[FormType.SHIFTED])
        assert result.missing_fields == required

    def test_zero_and_false_count_as_present(self):
        schema = make_schema(
            [make_field("staffSeen", "Main", 1)],
            required_fields={FormType.POSITIVE: ["staffSeen", "ownPremises"]},
        )
        result = FormValidator(schema).validate({"staffSeen": 0, "ownPremises": False}, "POSITIVE")
        assert result.is_valid

    def test_blank_strings_count_as_missing(self, engine, residence_positive_submission):
        submission = dict(residence_positive_submission, houseStatus="   ", locality=None)
        result = engine.validate(submission, "RESIDENCE", "POSITIVE")
        assert result.missing_fields == ["houseStatus", "locality"]

    def test_unknown_form_type_has_no_requirements(self, engine):
        result = engine.validate({}, "RESIDENCE", "SOMETHING_ELSE")
        assert result.is_valid

    def test_unknown_verification_type(self, engine):
        result = engine.validate({}, "UNKNOWN_TYPE", "POSITIVE")
        assert result.is_valid
        assert result.warnings == []


class TestConditionalRules:
    """Conditional rules only warn."""

    def test_warning_does_not_invalidate(self, engine, residence_positive_submission):
        submission = dict(residence_positive_submission)
        del submission["documentType"]
        result = engine.validate(submission, "RESIDENCE", "POSITIVE")
        assert result.is_valid
        assert result.warnings == ["documentType should be specified when documentShownStatus is Yes"]

    def test_rules_only_run_for_their_form_type(self, engine):
        result = engine.validate({"documentShownStatus": "Yes"}, "RESIDENCE", "SHIFTED")
        assert result.warnings == []

    def test_custom_message(self, engine):
        result = engine.validate({"officeStatus": "Opened"}, "OFFICE", "POSITIVE")
        assert "staffSeen should be specified when office is opened" in result.warnings

    def test_presence_rule(self):
        rule = ConditionalRule(when="totalStaff", then="salesStaff")
        assert rule.check({"totalStaff": 12}) == "salesStaff should be specified when totalStaff is provided"
        assert rule.check({"totalStaff": 12, "salesStaff": 0}) is None
        assert rule.check({}) is None


class TestValidateAndPrepare:
    """Validation together with the complete storage record."""

    def test_record_has_every_column(self, engine, config, residence_positive_submission):
        result, record = engine.validate_and_prepare(residence_positive_submission, "RESIDENCE", "POSITIVE")
        schema = config.schema_for("RESIDENCE")

        assert set(schema.all_columns) <= set(record)
        assert "outcome" not in record
        assert record["total_family_members"] == 4
        assert result.coverage.total_fields == len(record)
        assert result.coverage.populated_fields == sum(1 for v in record.values() if v is not None)

    def test_to_dict_includes_coverage(self, engine):
        result, _ = engine.validate_and_prepare({"finalStatus": "Positive"}, "OFFICE", "UNTRACEABLE")
        data = result.to_dict()
        assert data["isValid"] is False
        assert "fieldCoverage" in data
        assert data["fieldCoverage"]["populatedFields"] == 1

    def test_unknown_verification_type(self, engine):
        result, record = engine.validate_and_prepare({"a": 1}, "UNKNOWN_TYPE", "POSITIVE")
        assert record == {}
        assert result.coverage.total_fields == 0


class TestPrepareRules:
    """Range, consistency and every-form-type rules checked while preparing a record."""

    def warnings(self, engine, submission, verification_type, form_type):
        result, _ = engine.validate_and_prepare(submission, verification_type, form_type)
        return result.warnings

    def test_hold_reason_on_every_form_type(self, engine):
        warnings = self.warnings(engine, {"finalStatus": "Hold"}, "RESIDENCE", "SHIFTED")
        assert "holdReason should be specified when finalStatus is Hold" in warnings
        assert engine.validate({"finalStatus": "Hold"}, "RESIDENCE", "SHIFTED").warnings == []

    def test_hold_reason_given(self, engine):
        warnings = self.warnings(engine, {"finalStatus": "Hold", "holdReason": "Customer away"}, "OFFICE", "NSP")
        assert warnings == []

    def test_unknown_form_type_keeps_unscoped_rules(self, engine):
        submission = {"finalStatus": "Hold", "totalFamilyMembers": 80}
        warnings = self.warnings(engine, submission, "RESIDENCE", "SOMETHING_ELSE")
        assert warnings == ["holdReason should be specified when finalStatus is Hold"]

    def test_closed_house_needs_staying_person(self, engine):
        warnings = self.warnings(engine, {"houseStatus": "Closed"}, "RESIDENCE", "NSP")
        assert warnings == ["stayingPersonName should be specified when house status is Closed"]

    def test_family_size_out_of_range(self, engine):
        warnings = self.warnings(engine, {"totalFamilyMembers": 80}, "RESIDENCE", "POSITIVE")
        assert "totalFamilyMembers should be between 1 and 50" in warnings
        assert engine.validate({"totalFamilyMembers": 80}, "RESIDENCE", "POSITIVE").warnings == []

    def test_zero_is_checked_against_the_range(self, engine):
        warnings = self.warnings(engine, {"staffStrength": "0"}, "OFFICE", "POSITIVE")
        assert "staffStrength should be between 1 and 10000" in warnings

    def test_unparseable_number_skips_the_range(self, engine):
        assert self.warnings(engine, {"totalFamilyMembers": "many"}, "RESIDENCE", "POSITIVE") == []

    def test_expiry_before_issue_date(self, engine):
        submission = {"apfIssueDate": "2024-06-01", "apfExpiryDate": "2024-01-01"}
        warnings = self.warnings(engine, submission, "PROPERTY_APF", "POSITIVE")
        assert "apfExpiryDate should be after apfIssueDate" in warnings

    def test_expiry_after_issue_date(self, engine):
        submission = {"apfIssueDate": "2024-01-01", "apfExpiryDate": "2029-01-01"}
        assert self.warnings(engine, submission, "PROPERTY_APF", "POSITIVE") == []

    def test_tpc_confirmation_needs_name_first(self, engine):
        warnings = self.warnings(engine, {"tpcMetPerson1": "Neighbour"}, "RESIDENCE", "POSITIVE")
        assert warnings == ["tpcName1 should be specified when tpcMetPerson1 is selected"]

        warnings = self.warnings(
            engine, {"tpcMetPerson1": "Neighbour", "tpcName1": "Anil"}, "RESIDENCE", "POSITIVE",
        )
        assert warnings == ["tpcConfirmation1 should be specified when TPC person 1 is provided"]

    def test_scaled_comparison(self, engine):
        submission = {"monthlyBusinessVolume": "100,000", "annualTurnover": 500000}
        warnings = self.warnings(engine, submission, "DSA_CONNECTOR", "POSITIVE")
        assert "monthlyBusinessVolume seems inconsistent with annualTurnover" in warnings

        submission["annualTurnover"] = 1200000
        assert self.warnings(engine, submission, "DSA_CONNECTOR", "POSITIVE") == []

    def test_annual_income_matches_monthly(self, engine):
        consistent = {"monthlyIncome": 50000, "annualIncome": "600000"}
        assert self.warnings(engine, consistent, "PROPERTY_INDIVIDUAL", "POSITIVE") == []

        inconsistent = {"monthlyIncome": 50000, "annualIncome": 500000}
        warnings = self.warnings(engine, inconsistent, "PROPERTY_INDIVIDUAL", "POSITIVE")
        assert warnings == ["annualIncome should be 12 times monthlyIncome"]

    def test_contact_number_length(self, engine):
        warnings = self.warnings(engine, {"contactNumber": "98765"}, "DSA_CONNECTOR", "POSITIVE")
        assert warnings == ["contactNumber should be 10 digits"]
        assert self.warnings(engine, {"contactNumber": "9876543210"}, "DSA_CONNECTOR", "POSITIVE") == []

    def test_schema_without_prepare_rules_uses_conditional_rules(self, engine):
        warnings = self.warnings(engine, {"businessStatus": "Opened"}, "BUSINESS", "POSITIVE")
        assert warnings == ["staffSeen should be specified when business is opened"]


class TestRuleKinds:
    def test_range_rule(self):
        rule = RangeRule(field="propertyAge", minimum=0, maximum=200)
        assert rule.check({"propertyAge": 250}) == "propertyAge should be between 0 and 200"
        assert rule.check({"propertyAge": 0}) is None
        assert rule.check({"propertyAge": True}) is None
        assert rule.check({}) is None

    def test_comparison_skips_mixed_kinds(self):
        rule = ComparisonRule(left="apfExpiryDate", op="<=", right="apfIssueDate")
        assert rule.check({"apfExpiryDate": "2024-01-01", "apfIssueDate": 5}) is None
        assert rule.check({"apfExpiryDate": date(2024, 1, 1), "apfIssueDate": "2024-01-01"}) == (
            "apfExpiryDate is inconsistent with apfIssueDate"
        )

    def test_comparison_rejects_unknown_operator(self):
        with pytest.raises(SchemaConfigurationError, match="unknown operator"):
            ComparisonRule(left="a", op="=>", right="b")

    def test_length_rule(self):
        rule = LengthRule(field="pinCode", length=6)
        assert rule.check({"pinCode": 56001}) == "pinCode should be 6 characters"
        assert rule.check({"pinCode": " 560001 "}) is None
        assert rule.check({"pinCode": ""}) is None

    def test_unscoped_rule_applies_to_every_form_type(self):
        rule = ConditionalRule(when="a", then="b", form_type=None)
        assert all(rule.applies_to(form_type) for form_type in FormType)
        assert rule.applies_to(None)
        assert not ConditionalRule(when="a", then="b").applies_to(FormType.NSP)

    def test_prepare_rules_replace_conditional_rules(self):
        schema = make_schema(
            [make_field("a", "Main", 1)],
            conditional_rules=[ConditionalRule(when="a", then="b")],
            prepare_rules=[RangeRule(field="a", minimum=1, maximum=5)],
        )
        result, _ = validate_and_prepare(schema, {"a": 9, "finalStatus": "Positive"}, "POSITIVE")
        assert result.warnings == ["a should be between 1 and 5"]
        assert FormValidator(schema).validate({"a": 9}, "POSITIVE").warnings == [
            "b should be specified when a is provided"
        ]
