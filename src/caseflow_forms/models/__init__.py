"""
Data model for the verification-form engine.

This module exports the enums, field models and mapping tables.
"""

# Enums
from caseflow_forms.models.enums import (
    CoercionKind,
    DetectionMethod,
    FormType,
    ValueType,
    VerificationType,
)

# Field models
from caseflow_forms.models.fields import (
    FieldCoverage,
    FieldDefinition,
    FieldValidation,
    PopulatedField,
    Section,
    ValidationResult,
    is_blank,
    read_field_value,
)

# Mapping tables
from caseflow_forms.models.mapping import (
    IGNORED,
    PASSTHROUGH,
    ComparisonRule,
    ConditionalRule,
    FieldMappingTable,
    FormSchemaConfig,
    Ignored,
    LengthRule,
    Mapped,
    MappingEntry,
    Passthrough,
    RangeRule,
    Rule,
    SchemaConfigurationError,
    VerificationSchema,
)

__all__ = [
    # Enums
    "CoercionKind",
    "DetectionMethod",
    "FormType",
    "ValueType",
    "VerificationType",
    # Field models
    "FieldCoverage",
    "FieldDefinition",
    "FieldValidation",
    "PopulatedField",
    "Section",
    "ValidationResult",
    "is_blank",
    "read_field_value",
    # Mapping tables
    "IGNORED",
    "PASSTHROUGH",
    "ComparisonRule",
    "ConditionalRule",
    "FieldMappingTable",
    "FormSchemaConfig",
    "Ignored",
    "LengthRule",
    "Mapped",
    "MappingEntry",
    "Passthrough",
    "RangeRule",
    "Rule",
    "SchemaConfigurationError",
    "VerificationSchema",
]
