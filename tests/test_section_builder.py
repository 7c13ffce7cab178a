"""Tests for building display sections from a submission."""

import pytest

from caseflow_forms.config import Settings
from caseflow_forms.models.enums import FormType
from caseflow_forms.schemas import ALL_SCHEMAS
from caseflow_forms.services.section_builder import section_id


class TestBuildSections:
    """Sections rendered for one submission."""

    def test_sections_follow_projection(self, engine, residence_positive_submission):
        sections = engine.build_sections(residence_positive_submission, "RESIDENCE", "POSITIVE")
        assert [s.title for s in sections] == engine.get_sections("RESIDENCE", "POSITIVE")
        assert [s.order for s in sections] == list(range(1, len(sections) + 1))

    def test_every_applicable_field_is_shown(self, engine):
        """Fields appear whether or not the submission has a value."""
        sections = engine.build_sections({}, "RESIDENCE", "POSITIVE")
        shown = [f.name for s in sections for f in s.fields]
        expected = [d.name for d in engine.get_field_definitions("RESIDENCE", "POSITIVE")]
        assert sorted(shown) == sorted(expected)

    def test_missing_and_empty_values_display_placeholder(self, engine):
        sections = engine.build_sections({"customerName": "", "metPersonName": None}, "RESIDENCE", "POSITIVE")
        basic = sections[0]
        by_name = {f.name: f for f in basic.fields}
        assert by_name["customerName"].value is None
        assert by_name["customerName"].display_value == "Not provided"
        assert by_name["metPersonName"].display_value == "Not provided"

    def test_present_values_kept_as_submitted(self, engine, residence_positive_submission):
        sections = engine.build_sections(residence_positive_submission, "RESIDENCE", "POSITIVE")
        fields = {f.name: f for s in sections for f in s.fields}
        assert fields["totalFamilyMembers"].value == "4"
        assert fields["customerName"].display_value == "Ravi Kumar"

    def test_zero_is_a_value(self, engine):
        sections = engine.build_sections({"totalFamilyMembers": 0}, "RESIDENCE", FormType.POSITIVE)
        fields = {f.name: f for s in sections for f in s.fields}
        assert fields["totalFamilyMembers"].value == 0
        assert fields["totalFamilyMembers"].display_value == 0

    def test_section_metadata(self, engine):
        sections = engine.build_sections({}, "RESIDENCE", "POSITIVE")
        first, second, third = sections[:3]

        assert first.id == "basic_information"
        assert first.is_required is True
        assert second.is_required is False
        assert first.description == "Basic Information fields for POSITIVE verification"
        assert first.default_expanded and second.default_expanded
        assert third.default_expanded is False

    def test_expanded_section_count_setting(self, config):
        from caseflow_forms.services.engine import VerificationFormEngine

        engine = VerificationFormEngine(config, Settings(_env_file=None, expanded_section_count=0))
        sections = engine.build_sections({}, "RESIDENCE", "POSITIVE")
        assert not any(s.default_expanded for s in sections)

    def test_unknown_type_builds_nothing(self, engine):
        assert engine.build_sections({"a": 1}, "UNKNOWN_TYPE", "POSITIVE") == []

    def test_to_dict_uses_camel_case(self, engine, residence_positive_submission):
        section = engine.build_sections(residence_positive_submission, "RESIDENCE", "POSITIVE")[0]
        data = section.to_dict()
        assert data["defaultExpanded"] is True
        assert data["fields"][0]["displayValue"] == "Ravi Kumar"
        assert data["fields"][0]["validation"] == {"isValid": True, "errors": []}


def test_section_id_collapses_whitespace():
    assert section_id("Third  Party Confirmation") == "third_party_confirmation"


@pytest.mark.parametrize("schema", ALL_SCHEMAS, ids=lambda s: s.verification_type.value)
@pytest.mark.parametrize("form_type", list(FormType), ids=lambda f: f.value)
def test_every_field_has_a_display_value(engine, schema, form_type):
    submission = {"customerName": "Ravi Kumar", "remarks": "", "totalFamilyMembers": 0}
    sections = engine.build_sections(submission, schema.verification_type, form_type)
    assert sections
    for section in sections:
        assert section.fields
        for populated in section.fields:
            assert populated.display_value is not None
