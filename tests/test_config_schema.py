"""Tests for schema configuration checks and settings."""

import pytest

from caseflow_forms.config import Settings
from caseflow_forms.models.enums import FormType, VerificationType
from caseflow_forms.models.mapping import (
    ConditionalRule,
    FieldMappingTable,
    FormSchemaConfig,
    Mapped,
    RangeRule,
    SchemaConfigurationError,
)
from caseflow_forms.schemas import ALL_SCHEMAS

from conftest import make_field, make_schema


class TestFormSchemaConfig:
    def test_shipped_config_covers_every_type(self, config):
        assert len(config) == len(VerificationType)
        for vtype in VerificationType:
            assert vtype in config
        assert config.default_schema.verification_type is VerificationType.RESIDENCE

    def test_duplicate_schema_rejected(self):
        schema = make_schema([make_field("a", "Main", 1)])
        with pytest.raises(SchemaConfigurationError, match="Duplicate schema"):
            FormSchemaConfig([schema, schema])

    def test_alias_collision_rejected(self):
        first = make_schema([make_field("a", "Main", 1)], aliases=("HOME",))
        second = make_schema(
            [make_field("a", "Main", 1)],
            verification_type=VerificationType.OFFICE,
            aliases=("home",),
        )
        with pytest.raises(SchemaConfigurationError, match="Alias 'home'"):
            FormSchemaConfig([first, second])

    def test_default_type_must_have_schema(self):
        schema = make_schema([make_field("a", "Main", 1)], verification_type=VerificationType.OFFICE)
        with pytest.raises(SchemaConfigurationError, match="Default verification type"):
            FormSchemaConfig([schema])

    def test_resolve_type(self, config):
        assert config.resolve_type("  residence  ") is VerificationType.RESIDENCE
        assert config.resolve_type("DSA/DST Connector") is VerificationType.DSA_CONNECTOR
        assert config.resolve_type("") is None
        assert config.resolve_type(None) is None


class TestSchemaChecks:
    def test_field_applying_to_nothing_rejected(self):
        with pytest.raises(SchemaConfigurationError, match="applies to no form type"):
            make_schema([make_field("a", "Main", 1, form_types=[])])

    def test_required_keys_must_be_form_types(self):
        with pytest.raises(SchemaConfigurationError, match="not a FormType"):
            make_schema([make_field("a", "Main", 1)], required_fields={"POSITIVE": ["a"]})

    def test_rule_form_type_checked(self):
        rule = ConditionalRule(when="a", then="b", form_type="POSITIVE")
        with pytest.raises(SchemaConfigurationError, match="unknown form type"):
            make_schema([make_field("a", "Main", 1)], conditional_rules=[rule])

    def test_prepare_rule_form_type_checked(self):
        rule = RangeRule(field="a", minimum=1, maximum=5, form_type="NSP")
        with pytest.raises(SchemaConfigurationError, match="unknown form type"):
            make_schema([make_field("a", "Main", 1)], prepare_rules=[rule])

    def test_rule_for_every_form_type_accepted(self):
        rule = ConditionalRule(when="a", then="b", form_type=None)
        schema = make_schema([make_field("a", "Main", 1)], conditional_rules=[rule], prepare_rules=[rule])
        assert schema.prepare_rules == (rule,)

    def test_mapping_entries_checked(self):
        with pytest.raises(SchemaConfigurationError, match="must be Mapped, Ignored or Passthrough"):
            FieldMappingTable({"a": "column_a"})

    def test_mapping_table_is_read_only(self):
        table = FieldMappingTable({"a": Mapped("col_a")})
        with pytest.raises(TypeError):
            table._entries["b"] = Mapped("col_b")

    @pytest.mark.parametrize("schema", ALL_SCHEMAS, ids=lambda s: s.verification_type.value)
    def test_shipped_required_lists_cover_every_form_type(self, schema):
        assert set(schema.required_fields) == set(FormType)


class TestSettings:
    def test_defaults(self, settings):
        assert settings.default_table_name == "residenceVerificationReports"
        assert settings.not_provided_text == "Not provided"
        assert settings.expanded_section_count == 2

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("CASEFLOW_NOT_PROVIDED_TEXT", "-")
        assert Settings(_env_file=None).not_provided_text == "-"
