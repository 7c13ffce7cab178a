"""
Verification form engine.

Single entry point used by presentation and persistence callers. The engine
holds an immutable schema configuration and the settings it was built with;
every call is a pure function of its arguments and those tables.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from caseflow_forms.config import Settings, get_settings
from caseflow_forms.models.enums import FormType
from caseflow_forms.models.fields import FieldDefinition, Section, ValidationResult
from caseflow_forms.models.mapping import FormSchemaConfig, VerificationSchema
from caseflow_forms.schemas import load_default_config
from caseflow_forms.services.coercion import SchemaCoercer
from caseflow_forms.services.completeness import CompletenessPopulator, compute_coverage, coverage_report
from caseflow_forms.services.field_mapper import FieldMapper
from caseflow_forms.services.form_type_detection import FormTypeDetector, FormTypeResult
from caseflow_forms.services.registry import FieldSchemaRegistry, FormTypeKey, TypeKey
from caseflow_forms.services.section_builder import SectionBuilder
from caseflow_forms.services.validator import FormValidator, validate_and_prepare

logger = logging.getLogger(__name__)


class VerificationFormEngine:
    """Schema lookup, section building, storage mapping and validation."""

    def __init__(self, config: Optional[FormSchemaConfig] = None, settings: Optional[Settings] = None):
        self.config = config if config is not None else load_default_config()
        self.settings = settings or get_settings()
        self.registry = FieldSchemaRegistry(self.config)
        self.section_builder = SectionBuilder(self.registry, self.settings)

    def schema_for(self, verification_type: TypeKey) -> Optional[VerificationSchema]:
        return self.config.schema_for(verification_type)

    # ========================================================================
    # DISPLAY
    # ========================================================================

    def get_field_definitions(self, verification_type: TypeKey, form_type: FormTypeKey = None) -> List[FieldDefinition]:
        return self.registry.get_field_definitions(verification_type, form_type)

    def get_sections(self, verification_type: TypeKey, form_type: FormTypeKey = None) -> List[str]:
        return self.registry.get_sections(verification_type, form_type)

    def get_fields_for_section(
        self,
        verification_type: TypeKey,
        section: str,
        form_type: FormTypeKey = None,
    ) -> List[FieldDefinition]:
        return self.registry.get_fields_for_section(verification_type, section, form_type)

    def build_sections(
        self,
        submission: Mapping[str, Any],
        verification_type: TypeKey,
        form_type: FormTypeKey,
    ) -> List[Section]:
        return self.section_builder.build(submission, verification_type, form_type)

    # ========================================================================
    # STORAGE
    # ========================================================================

    def map_to_storage(
        self,
        submission: Mapping[str, Any],
        verification_type: TypeKey,
        form_type: FormTypeKey = None,
    ) -> Dict[str, Any]:
        """
        Map a submission to storage columns.

        With a form type the record is also completed with every known
        column. An unknown verification type maps to an empty record.
        """
        schema = self.schema_for(verification_type)
        if schema is None:
            logger.warning(f"No mapping table for verification type: {verification_type}")
            return {}
        record = FieldMapper(schema).map_to_storage(submission)
        if form_type is None:
            return record
        return CompletenessPopulator(schema, self.settings).populate(record, form_type)

    def populate_all_columns(
        self,
        record: Mapping[str, Any],
        verification_type: TypeKey,
        form_type: FormTypeKey,
    ) -> Dict[str, Any]:
        schema = self.schema_for(verification_type)
        if schema is None:
            return dict(record)
        return CompletenessPopulator(schema, self.settings).populate(record, form_type)

    def coerce(self, field_key: str, value: Any, verification_type: TypeKey) -> Any:
        """Coerce one value the way ``map_to_storage`` would."""
        schema = self.schema_for(verification_type) or self.config.default_schema
        return SchemaCoercer(schema).coerce(field_key, value)

    def table_name_for(self, verification_type: TypeKey) -> str:
        schema = self.schema_for(verification_type)
        if schema is None:
            return self.settings.default_table_name
        return schema.table_name

    def available_columns(self, verification_type: TypeKey) -> List[str]:
        schema = self.schema_for(verification_type)
        if schema is None:
            return []
        return sorted(set(schema.mapping.destination_columns()))

    def mapped_incoming_fields(self, verification_type: TypeKey) -> List[str]:
        schema = self.schema_for(verification_type)
        if schema is None:
            return []
        return schema.mapping.mapped_keys()

    # ========================================================================
    # VALIDATION
    # ========================================================================

    def validate(
        self,
        submission: Mapping[str, Any],
        verification_type: TypeKey,
        form_type: FormTypeKey,
    ) -> ValidationResult:
        schema = self.schema_for(verification_type)
        if schema is None:
            return ValidationResult()
        return FormValidator(schema).validate(submission, form_type)

    def validate_and_prepare(
        self,
        submission: Mapping[str, Any],
        verification_type: TypeKey,
        form_type: FormTypeKey,
    ) -> Tuple[ValidationResult, Dict[str, Any]]:
        schema = self.schema_for(verification_type)
        if schema is None:
            result = ValidationResult(coverage=compute_coverage({}))
            return result, {}
        return validate_and_prepare(schema, submission, form_type, self.settings)

    def coverage_report(
        self,
        submission: Mapping[str, Any],
        verification_type: TypeKey,
        form_type: FormTypeKey,
    ) -> str:
        _, record = self.validate_and_prepare(submission, verification_type, form_type)
        schema = self.schema_for(verification_type)
        type_name = schema.verification_type.value if schema else str(verification_type)
        return coverage_report(record, type_name, self.form_type_label(form_type))

    # ========================================================================
    # FORM TYPES
    # ========================================================================

    def form_type_label(self, form_type: FormTypeKey) -> str:
        """Human-readable label; unknown codes are returned unchanged."""
        parsed = form_type if isinstance(form_type, FormType) else FormType.parse(form_type)
        if parsed is None:
            return "" if form_type is None else str(form_type)
        return parsed.label

    def valid_form_types(self, verification_type: TypeKey) -> List[str]:
        if self.schema_for(verification_type) is None:
            return []
        return [form_type.value for form_type in FormType]

    def is_valid_form_type(self, verification_type: TypeKey, form_type: FormTypeKey) -> bool:
        parsed = form_type if isinstance(form_type, FormType) else FormType.parse(form_type)
        return parsed is not None and parsed.value in self.valid_form_types(verification_type)

    def detect_form_type(self, submission: Mapping[str, Any], verification_type: TypeKey) -> FormTypeResult:
        return FormTypeDetector(self.schema_for(verification_type)).detect(submission)

    def analyze_form_type_detection(self, submission: Mapping[str, Any], verification_type: TypeKey) -> Dict[str, Any]:
        return FormTypeDetector(self.schema_for(verification_type)).analyze(submission)


# Global engine instance, built on first use
_engine: Optional[VerificationFormEngine] = None


def get_engine() -> VerificationFormEngine:
    """Get the engine built from the shipped schemas and global settings."""
    global _engine
    if _engine is None:
        _engine = VerificationFormEngine()
    return _engine
