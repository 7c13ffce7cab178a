"""Pytest configuration and shared fixtures."""

import pytest

from caseflow_forms.config import Settings
from caseflow_forms.models.enums import FormType, ValueType, VerificationType
from caseflow_forms.models.fields import FieldDefinition
from caseflow_forms.models.mapping import (
    IGNORED,
    FieldMappingTable,
    Mapped,
    VerificationSchema,
)
from caseflow_forms.schemas import load_default_config
from caseflow_forms.services.engine import VerificationFormEngine


@pytest.fixture
def settings() -> Settings:
    """Settings built from defaults only, ignoring any local .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def config():
    """The shipped schema configuration."""
    return load_default_config()


@pytest.fixture
def engine(config, settings) -> VerificationFormEngine:
    """Engine over the shipped schemas with default settings."""
    return VerificationFormEngine(config, settings)


@pytest.fixture
def residence_positive_submission() -> dict:
    """A complete RESIDENCE / POSITIVE submission as a mobile client sends it."""
    return {
        "outcome": "POSITIVE",
        "customerName": "Ravi Kumar",
        "addressLocatable": "Easy to Locate",
        "addressRating": "Good",
        "houseStatus": "Opened",
        "metPersonName": "Ravi Kumar",
        "metPersonRelation": "Self",
        "totalFamilyMembers": "4",
        "workingStatus": "Salaried",
        "stayingPeriod": "5 years",
        "stayingStatus": "Owned",
        "documentShownStatus": "Yes",
        "documentType": "Aadhaar",
        "tpcMetPerson1": "Neighbour",
        "locality": "Residential",
        "addressStructure": "G+2",
        "politicalConnection": "No",
        "dominatedArea": "No",
        "feedbackFromNeighbour": "Positive",
        "otherObservation": "Well maintained",
        "finalStatus": "Positive",
        "images": ["img-1.jpg"],
    }


def make_field(name, section, order, form_types=None, value_type=ValueType.TEXT, required=False):
    return FieldDefinition(
        id=name,
        name=name,
        label=name,
        value_type=value_type,
        is_required=required,
        section=section,
        order=order,
        applicable_form_types=frozenset(form_types) if form_types is not None else None,
    )


def make_schema(
    fields,
    verification_type=VerificationType.RESIDENCE,
    mapping=None,
    required_fields=None,
    **kwargs,
) -> VerificationSchema:
    """Small hand-built schema for tests that need control over the tables."""
    return VerificationSchema(
        verification_type=verification_type,
        table_name=f"{verification_type.value.lower()}Reports",
        fields=fields,
        mapping=mapping or FieldMappingTable({"outcome": IGNORED, "finalStatus": Mapped("final_status")}),
        required_fields=required_fields or {FormType.POSITIVE: ["finalStatus"]},
        **kwargs,
    )
