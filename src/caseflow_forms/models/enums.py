"""
Enum definitions for the verification-form engine.

This module centralizes the enum types shared by the schema tables, the
mapper and the validators so that verification types, form types and
value kinds are spelled the same way everywhere.
"""

import enum
from typing import Optional


class VerificationType(enum.Enum):
    """Top-level case category; selects the field schema table."""

    RESIDENCE = "RESIDENCE"
    OFFICE = "OFFICE"
    BUSINESS = "BUSINESS"
    BUILDER = "BUILDER"
    RESIDENCE_CUM_OFFICE = "RESIDENCE_CUM_OFFICE"
    NOC = "NOC"
    PROPERTY_APF = "PROPERTY_APF"
    PROPERTY_INDIVIDUAL = "PROPERTY_INDIVIDUAL"
    DSA_CONNECTOR = "DSA_CONNECTOR"


class FormType(enum.Enum):
    """Sub-outcome variant of a verification (which form the agent filled)."""

    POSITIVE = "POSITIVE"  # Positive & Door Locked
    SHIFTED = "SHIFTED"  # Shifted & Door Lock
    NSP = "NSP"  # Not staying permanently
    ENTRY_RESTRICTED = "ENTRY_RESTRICTED"  # ERT
    UNTRACEABLE = "UNTRACEABLE"

    @property
    def label(self) -> str:
        return FORM_TYPE_LABELS[self]

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["FormType"]:
        """Case-insensitive lookup; returns None for unknown or empty values."""
        if not value:
            return None
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            return None


FORM_TYPE_LABELS = {
    FormType.POSITIVE: "Positive & Door Locked",
    FormType.SHIFTED: "Shifted & Door Lock",
    FormType.NSP: "NSP & Door Lock",
    FormType.ENTRY_RESTRICTED: "Entry Restricted (ERT)",
    FormType.UNTRACEABLE: "Untraceable",
}

# Outcome strings recorded against a detected form type
FORM_TYPE_OUTCOMES = {
    FormType.POSITIVE: "Positive & Door Locked",
    FormType.SHIFTED: "Shifted & Door Lock",
    FormType.NSP: "NSP & Door Lock",
    FormType.ENTRY_RESTRICTED: "ERT",
    FormType.UNTRACEABLE: "Untraceable",
}


class ValueType(enum.Enum):
    """Declared input type of a form field."""

    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    MULTISELECT = "multiselect"
    DATE = "date"
    BOOLEAN = "boolean"
    TEXTAREA = "textarea"


class CoercionKind(enum.Enum):
    """Storage representation a raw value is coerced into."""

    TEXT = "text"  # trimmed string
    INTEGER = "integer"  # counts, years, floors
    DECIMAL = "decimal"  # areas, amounts, currency
    DATE = "date"  # ISO calendar date (YYYY-MM-DD)
    BOOLEAN = "boolean"
    STATUS = "status"  # final status vocabulary (Positive/Negative/Refer/Fraud/Hold)


# Input type -> storage kind, used when a mapping entry does not pin a kind
VALUE_TYPE_COERCION = {
    ValueType.TEXT: CoercionKind.TEXT,
    ValueType.NUMBER: CoercionKind.INTEGER,
    ValueType.SELECT: CoercionKind.TEXT,
    ValueType.MULTISELECT: CoercionKind.TEXT,
    ValueType.DATE: CoercionKind.DATE,
    ValueType.BOOLEAN: CoercionKind.BOOLEAN,
    ValueType.TEXTAREA: CoercionKind.TEXT,
}


class DetectionMethod(enum.Enum):
    """How a form type was inferred from a submission."""

    OUTCOME_MAPPING = "outcome_mapping"
    LEGACY_MAPPING = "legacy_mapping"
    FIELD_INDICATORS = "field_indicators"
    PATTERN_ANALYSIS = "pattern_analysis"
    DEFAULT_FALLBACK = "default_fallback"
