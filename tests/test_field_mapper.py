"""Tests for mapping submissions to storage columns."""

import logging

import pytest

from caseflow_forms.models.mapping import (
    IGNORED,
    PASSTHROUGH,
    FieldMappingTable,
    Mapped,
)
from caseflow_forms.models.enums import CoercionKind, VerificationType
from caseflow_forms.schemas import ALL_SCHEMAS
from caseflow_forms.services.field_mapper import FieldMapper

from conftest import make_field, make_schema


class TestMapToStorage:
    """Key translation and value coercion."""

    def test_outcome_is_dropped(self, engine):
        record = engine.map_to_storage({"outcome": "POSITIVE", "finalStatus": "Approved"}, "DSA_CONNECTOR")
        assert record == {"final_status": "Approved"}

    def test_ui_state_keys_are_dropped(self, engine):
        record = engine.map_to_storage(
            {"images": ["a.jpg"], "caseId": "C-1", "isValid": True, "remarks": "ok"},
            "RESIDENCE",
        )
        assert record == {"remarks": "ok"}

    def test_verification_method_kept_only_for_residence(self, engine):
        """Residence stores the submitted method; other types derive it server-side."""
        submission = {"verificationMethod": "Physical", "remarks": "ok"}
        assert engine.map_to_storage(submission, "RESIDENCE") == {"verificationMethod": "Physical", "remarks": "ok"}
        assert engine.map_to_storage(submission, "OFFICE") == {"remarks": "ok"}

    @pytest.mark.parametrize(
        "schema",
        [s for s in ALL_SCHEMAS if s.verification_type is not VerificationType.RESIDENCE],
        ids=lambda s: s.verification_type.value,
    )
    def test_verification_method_ignored_outside_residence(self, schema):
        assert schema.mapping.resolve("verificationMethod") is IGNORED

    def test_values_coerced_by_pinned_kind(self, engine):
        record = engine.map_to_storage(
            {"totalFamilyMembers": "4", "totalEarning": "50,000", "applicantDob": "1/15/1990"},
            "RESIDENCE",
        )
        assert record == {
            "total_family_members": 4,
            "total_earning": 50000.0,
            "applicant_dob": "1990-01-15",
        }

    def test_unmapped_keys_pass_through(self, engine):
        record = engine.map_to_storage({"brandNewField": " value "}, "RESIDENCE")
        assert record == {"brandNewField": "value"}

    def test_legacy_alias_lands_in_canonical_column(self, engine):
        record = engine.map_to_storage({"familyMembers": "3", "applicantName": "Asha"}, "RESIDENCE")
        assert record == {"total_family_members": 3, "met_person_name": "Asha"}

    def test_last_write_wins_between_aliases(self, engine):
        record = engine.map_to_storage({"metPersonName": "First", "applicantName": "Second"}, "RESIDENCE")
        assert record["met_person_name"] == "Second"

    def test_recommendation_status_is_normalised(self, engine):
        record = engine.map_to_storage({"recommendationStatus": "negative"}, "OFFICE")
        assert record == {"final_status": "Negative"}

    def test_multiselect_is_joined(self, engine):
        record = engine.map_to_storage(
            {"propertyDocuments": ["Sale Deed", "Tax Receipt"]},
            "PROPERTY_INDIVIDUAL",
        )
        assert record == {"property_documents": "Sale Deed,Tax Receipt"}

    def test_unknown_verification_type(self, engine, caplog):
        with caplog.at_level(logging.WARNING):
            assert engine.map_to_storage({"finalStatus": "Positive"}, "UNKNOWN_TYPE") == {}
        assert "No mapping table for verification type: UNKNOWN_TYPE" in caplog.text

    def test_submission_not_mutated(self, engine, residence_positive_submission):
        before = dict(residence_positive_submission)
        engine.map_to_storage(residence_positive_submission, "RESIDENCE", "POSITIVE")
        assert residence_positive_submission == before


class TestStrictMapping:
    """Residence-cum-office only stores keys it knows."""

    def test_unknown_key_skipped_with_warning(self, engine, caplog):
        with caplog.at_level(logging.WARNING):
            record = engine.map_to_storage(
                {"houseStatus": "Opened", "mysteryField": "x"},
                "RESIDENCE_CUM_OFFICE",
            )
        assert record == {"house_status": "Opened"}
        assert "Unmapped residence-cum-office field: mysteryField - skipping" in caplog.text

    def test_explicitly_ignored_key_is_silent(self, engine, caplog):
        with caplog.at_level(logging.WARNING):
            record = engine.map_to_storage({"outcome": "POSITIVE"}, "RESIDENCE_CUM_OFFICE")
        assert record == {}
        assert "Unmapped" not in caplog.text


class TestFieldMapper:
    """Mapper behaviour over a hand-built table."""

    def test_entry_kinds(self):
        schema = make_schema(
            [make_field("count", "Main", 1)],
            mapping=FieldMappingTable({
                "count": Mapped("item_count", CoercionKind.INTEGER),
                "note": PASSTHROUGH,
                "debug": IGNORED,
            }),
        )
        record = FieldMapper(schema).map_to_storage({"count": "7", "note": "hi", "debug": "x"})
        assert record == {"item_count": 7, "note": "hi"}

    def test_declared_value_type_used_without_pinned_kind(self):
        from caseflow_forms.models.enums import ValueType

        schema = make_schema(
            [make_field("visitDate", "Main", 1, value_type=ValueType.DATE)],
            mapping=FieldMappingTable({"visitDate": Mapped("visit_date")}),
        )
        assert FieldMapper(schema).map_to_storage({"visitDate": "Jan 2, 2025"}) == {"visit_date": "2025-01-02"}
