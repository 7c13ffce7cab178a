"""
Field-level data model shared by the registry, section builder and validators.

FieldDefinition rows are static schema data. PopulatedField, Section and
ValidationResult are built fresh for every submission and handed to the
caller; nothing here holds submission state between calls.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Mapping, Optional

from caseflow_forms.models.enums import FormType, ValueType


@dataclass(frozen=True)
class FieldDefinition:
    """Definition of one form field with its display metadata."""

    id: str                             # Stable identifier (usually == name)
    name: str                           # Key the mobile client submits
    label: str                          # Human-readable label
    value_type: ValueType               # Declared input type
    is_required: bool                   # Marked required on the form
    section: str                        # Section title the field renders under
    order: int                          # Position inside its section
    applicable_form_types: Optional[FrozenSet[FormType]] = None  # None = every form type

    def applies_to(self, form_type: Optional[FormType]) -> bool:
        """True when the field is shown for ``form_type`` (None = unrestricted)."""
        if self.applicable_form_types is None:
            return True
        return form_type is not None and form_type in self.applicable_form_types


def read_field_value(submission: Mapping[str, Any], definition: FieldDefinition) -> Any:
    """
    Read a field's value from a raw submission.

    The ``name`` key is tried first, then ``id`` for submissions produced by
    older clients. A key holding None counts as absent.
    """
    value = submission.get(definition.name)
    if value is None and definition.id != definition.name:
        value = submission.get(definition.id)
    return value


def is_blank(value: Any) -> bool:
    """None and strings that are empty after stripping count as blank."""
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    return False


@dataclass
class FieldValidation:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)


@dataclass
class PopulatedField:
    """A field definition paired with the value found in one submission."""

    id: str
    name: str
    label: str
    type: ValueType
    value: Any
    display_value: Any
    is_required: bool
    validation: FieldValidation = field(default_factory=FieldValidation)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "label": self.label,
            "type": self.type.value,
            "value": self.value,
            "displayValue": self.display_value,
            "isRequired": self.is_required,
            "validation": {
                "isValid": self.validation.is_valid,
                "errors": list(self.validation.errors),
            },
        }


@dataclass
class Section:
    """A titled group of populated fields, ready for display."""

    id: str
    title: str
    description: str
    fields: List[PopulatedField]
    order: int
    is_required: bool
    default_expanded: bool

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "fields": [f.to_dict() for f in self.fields],
            "order": self.order,
            "isRequired": self.is_required,
            "defaultExpanded": self.default_expanded,
        }


@dataclass
class FieldCoverage:
    """How much of a completed record carries real data."""

    total_fields: int = 0
    populated_fields: int = 0
    defaulted_fields: int = 0
    coverage_percentage: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "totalFields": self.total_fields,
            "populatedFields": self.populated_fields,
            "defaultedFields": self.defaulted_fields,
            "coveragePercentage": self.coverage_percentage,
        }


@dataclass
class ValidationResult:
    """Outcome of a required-field check. Warnings never affect validity."""

    missing_fields: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    coverage: Optional[FieldCoverage] = None

    @property
    def is_valid(self) -> bool:
        return not self.missing_fields

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "isValid": self.is_valid,
            "missingFields": list(self.missing_fields),
            "warnings": list(self.warnings),
        }
        if self.coverage is not None:
            result["fieldCoverage"] = self.coverage.to_dict()
        return result
