"""Tests for field definition lookup and section projection."""

import logging

import pytest

from caseflow_forms.models.enums import FormType, VerificationType
from caseflow_forms.models.mapping import FormSchemaConfig
from caseflow_forms.schemas import ALL_SCHEMAS
from caseflow_forms.services.registry import FieldSchemaRegistry
from caseflow_forms.services.section_builder import SectionBuilder

from conftest import make_field, make_schema


class TestSections:
    """Section lists per verification and form type."""

    def test_document_verification_only_for_positive_residence(self, engine):
        """Residence POSITIVE shows document checks, SHIFTED does not."""
        assert "Document Verification" in engine.get_sections("RESIDENCE", "POSITIVE")
        assert "Document Verification" not in engine.get_sections("RESIDENCE", "SHIFTED")

    def test_sections_in_first_seen_order(self, engine):
        sections = engine.get_sections(VerificationType.RESIDENCE, FormType.POSITIVE)
        assert sections[0] == "Basic Information"
        assert sections.index("Location Details") < sections.index("Area Assessment")
        assert len(sections) == len(set(sections))

    def test_filtered_sections_subset_of_unfiltered(self, engine, config):
        """Every form type sees a subset of the full section list."""
        for schema in config:
            everything = set(engine.get_sections(schema.verification_type))
            for form_type in FormType:
                assert set(engine.get_sections(schema.verification_type, form_type)) <= everything

    def test_unknown_verification_type_gives_empty_lists(self, engine):
        assert engine.get_sections("UNKNOWN_TYPE", "POSITIVE") == []
        assert engine.get_field_definitions("UNKNOWN_TYPE") == []
        assert engine.get_fields_for_section("UNKNOWN_TYPE", "Basic Information") == []

    def test_aliases_resolve_case_insensitively(self, engine):
        canonical = engine.get_sections("RESIDENCE_CUM_OFFICE", "POSITIVE")
        assert engine.get_sections("Residence cum Office", "POSITIVE") == canonical
        assert engine.get_sections("residence-cum-office", "POSITIVE") == canonical
        assert engine.get_sections("dsa/dst connector") == engine.get_sections("DSA_CONNECTOR")


class TestFieldDefinitions:
    """Form-type filtering and ordering of field definitions."""

    def test_unfiltered_returns_every_definition(self, engine, config):
        schema = config.schema_for("RESIDENCE")
        assert engine.get_field_definitions("RESIDENCE") == list(schema.fields)

    def test_filtered_fields_apply_to_form_type(self, engine):
        for definition in engine.get_field_definitions("OFFICE", FormType.SHIFTED):
            assert definition.applies_to(FormType.SHIFTED)

    def test_untraceable_contact_fields_hidden_for_positive(self, engine):
        positive = {d.name for d in engine.get_field_definitions("OFFICE", "POSITIVE")}
        untraceable = {d.name for d in engine.get_field_definitions("OFFICE", "UNTRACEABLE")}
        assert "contactPerson" not in positive
        assert "contactPerson" in untraceable

    def test_unknown_form_type_keeps_unrestricted_fields(self, engine):
        fields = engine.get_field_definitions("RESIDENCE", "SOMETHING_ELSE")
        assert fields
        assert all(d.applicable_form_types is None for d in fields)

    def test_fields_for_section_sorted_by_order(self, engine):
        fields = engine.get_fields_for_section("RESIDENCE", "Location Details", "POSITIVE")
        orders = [d.order for d in fields]
        assert orders == sorted(orders)
        assert all(d.section == "Location Details" for d in fields)

    def test_order_ties_keep_schema_order(self):
        schema = make_schema([
            make_field("b", "Main", 2),
            make_field("first", "Main", 1),
            make_field("second", "Main", 1),
        ])
        registry = FieldSchemaRegistry(FormSchemaConfig([schema]))
        names = [d.name for d in registry.get_fields_for_section("RESIDENCE", "Main")]
        assert names == ["first", "second", "b"]


class TestDuplicateFields:
    """A key defined twice for the same form type."""

    def test_first_definition_wins_with_warning(self, caplog):
        schema = make_schema([
            make_field("outcome", "Basic Information", 1),
            make_field("houseStatus", "Property Details", 1, [FormType.POSITIVE]),
            make_field("houseStatus", "Residence Details", 1, [FormType.POSITIVE, FormType.NSP]),
        ])
        registry = FieldSchemaRegistry(FormSchemaConfig([schema]))

        with caplog.at_level(logging.WARNING):
            fields = registry.get_field_definitions("RESIDENCE", "POSITIVE")

        house = [d for d in fields if d.name == "houseStatus"]
        assert len(house) == 1
        assert house[0].section == "Property Details"
        assert "Duplicate field 'houseStatus'" in caplog.text
        assert "Residence Details" not in registry.get_sections("RESIDENCE", "POSITIVE")

    def test_no_conflict_when_only_one_applies(self, caplog):
        schema = make_schema([
            make_field("houseStatus", "Property Details", 1, [FormType.POSITIVE]),
            make_field("houseStatus", "Residence Details", 1, [FormType.NSP]),
        ])
        registry = FieldSchemaRegistry(FormSchemaConfig([schema]))

        with caplog.at_level(logging.WARNING):
            fields = registry.get_field_definitions("RESIDENCE", "NSP")

        assert [d.section for d in fields] == ["Residence Details"]
        assert "Duplicate field" not in caplog.text

    def test_section_build_warns_once(self, caplog, settings):
        schema = make_schema([
            make_field("outcome", "Basic Information", 1),
            make_field("houseStatus", "Property Details", 1, [FormType.POSITIVE]),
            make_field("houseStatus", "Residence Details", 1, [FormType.POSITIVE, FormType.NSP]),
            make_field("locality", "Location Details", 1),
        ])
        builder = SectionBuilder(FieldSchemaRegistry(FormSchemaConfig([schema])), settings)

        with caplog.at_level(logging.WARNING):
            sections = builder.build({}, "RESIDENCE", "POSITIVE")

        assert [s.title for s in sections] == ["Basic Information", "Property Details", "Location Details"]
        duplicates = [r for r in caplog.records if "Duplicate field 'houseStatus'" in r.getMessage()]
        assert len(duplicates) == 1



FORM_TYPE_GRID = [
    pytest.param(schema.verification_type, form_type, id=f"{schema.verification_type.value}-{form_type.value}")
    for schema in ALL_SCHEMAS
    for form_type in FormType
]


class TestProjectionGrid:
    """Section views stay inside the projection for every type and form type."""

    @pytest.mark.parametrize("verification_type, form_type", FORM_TYPE_GRID)
    def test_section_fields_partition_the_projection(self, engine, verification_type, form_type):
        projected = engine.get_field_definitions(verification_type, form_type)
        by_section = [
            definition
            for section in engine.get_sections(verification_type, form_type)
            for definition in engine.get_fields_for_section(verification_type, section, form_type)
        ]
        assert all(definition in projected for definition in by_section)
        assert len(by_section) == len(projected)
