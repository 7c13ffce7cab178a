"""
Service layer for the verification-form engine.
"""

from caseflow_forms.services.coercion import SchemaCoercer, ValueCoercer, coerce_value
from caseflow_forms.services.completeness import (
    CompletenessPopulator,
    compute_coverage,
    coverage_report,
)
from caseflow_forms.services.engine import VerificationFormEngine, get_engine
from caseflow_forms.services.field_mapper import FieldMapper
from caseflow_forms.services.form_type_detection import (
    UNIVERSAL_OUTCOME_MAPPING,
    FormTypeDetector,
    FormTypeResult,
)
from caseflow_forms.services.registry import FieldSchemaRegistry
from caseflow_forms.services.section_builder import SectionBuilder
from caseflow_forms.services.validator import FormValidator, validate_and_prepare

__all__ = [
    # Engine facade
    "VerificationFormEngine",
    "get_engine",
    # Schema projection and display
    "FieldSchemaRegistry",
    "SectionBuilder",
    # Storage mapping
    "FieldMapper",
    "ValueCoercer",
    "SchemaCoercer",
    "coerce_value",
    "CompletenessPopulator",
    "compute_coverage",
    "coverage_report",
    # Validation
    "FormValidator",
    "validate_and_prepare",
    # Form type detection
    "FormTypeDetector",
    "FormTypeResult",
    "UNIVERSAL_OUTCOME_MAPPING",
]
