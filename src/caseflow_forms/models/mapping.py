"""
Mapping tables and per-verification-type schema bundles.

Every incoming key resolves to exactly one of three entries:

- ``Mapped(column, kind)``: store under ``column``, optionally pinning the
  coercion kind used for the value.
- ``Ignored``: drop the key (UI state, images, ids, derived flags).
- ``Passthrough``: store under the key's own name.

A ``VerificationSchema`` bundles everything the engine knows about one
verification type. ``FormSchemaConfig`` is the immutable set of schemas the
engine is constructed with.
"""

import math
import operator
from dataclasses import dataclass
from datetime import date, datetime
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple, Union

from caseflow_forms.models.enums import (
    VALUE_TYPE_COERCION,
    CoercionKind,
    FormType,
    VerificationType,
)
from caseflow_forms.models.fields import FieldDefinition, is_blank


class SchemaConfigurationError(ValueError):
    """Raised when a schema table is internally inconsistent."""


# ============================================================================
# MAPPING ENTRIES
# ============================================================================

@dataclass(frozen=True)
class Mapped:
    column: str
    kind: Optional[CoercionKind] = None


@dataclass(frozen=True)
class Ignored:
    pass


@dataclass(frozen=True)
class Passthrough:
    pass


MappingEntry = Union[Mapped, Ignored, Passthrough]

IGNORED = Ignored()
PASSTHROUGH = Passthrough()


class FieldMappingTable:
    """
    Incoming key -> mapping entry.

    Keys with no entry pass through under their own name, unless the table is
    strict, in which case they are ignored.
    """

    def __init__(self, entries: Mapping[str, MappingEntry], strict: bool = False):
        for key, entry in entries.items():
            if not isinstance(entry, (Mapped, Ignored, Passthrough)):
                raise SchemaConfigurationError(
                    f"Mapping entry for '{key}' must be Mapped, Ignored or Passthrough, "
                    f"got {entry!r}"
                )
        self._entries: Mapping[str, MappingEntry] = MappingProxyType(dict(entries))
        self.strict = strict

    def resolve(self, key: str) -> MappingEntry:
        entry = self._entries.get(key)
        if entry is not None:
            return entry
        return IGNORED if self.strict else PASSTHROUGH

    def is_known(self, key: str) -> bool:
        return key in self._entries

    def column_for(self, key: str) -> Optional[str]:
        """Destination column for ``key``, or None when the key is dropped."""
        entry = self.resolve(key)
        if isinstance(entry, Mapped):
            return entry.column
        if isinstance(entry, Passthrough):
            return key
        return None

    def destination_columns(self) -> List[str]:
        """Distinct destination columns in table order."""
        seen: Dict[str, None] = {}
        for entry in self._entries.values():
            if isinstance(entry, Mapped):
                seen.setdefault(entry.column, None)
        return list(seen)

    def mapped_keys(self) -> List[str]:
        """Incoming keys with an explicit destination column, sorted."""
        return sorted(k for k, e in self._entries.items() if isinstance(e, Mapped))

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


# ============================================================================
# CONDITIONAL RULES
# ============================================================================

class _ScopedRule:
    """Shared form-type scoping: a rule with ``form_type=None`` applies to every form type."""

    form_type: Optional[FormType]

    def applies_to(self, form_type: Optional[FormType]) -> bool:
        return self.form_type is None or self.form_type is form_type


def _comparable(value: Any) -> Union[float, date, None]:
    """Numeric or date view of a submitted value, or None when it has neither."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, (int, float)):
        return float(value)
    if not isinstance(value, str) or is_blank(value):
        return None
    text = value.strip()
    try:
        return float(text.replace(",", ""))
    except ValueError:
        pass
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def _format_number(value: float) -> str:
    return f"{value:g}"


@dataclass(frozen=True)
class ConditionalRule(_ScopedRule):
    """
    "If ``when`` has value ``equals`` then ``then`` should be present."

    With ``equals`` left as None the rule fires whenever ``when`` is present.
    Keys listed in ``requires`` must also be present for the rule to fire.
    """

    when: str
    then: str
    equals: Optional[str] = None
    form_type: Optional[FormType] = FormType.POSITIVE
    message: Optional[str] = None
    requires: Tuple[str, ...] = ()

    def triggered(self, submission: Mapping[str, Any]) -> bool:
        if any(is_blank(submission.get(key)) for key in self.requires):
            return False
        value = submission.get(self.when)
        if self.equals is None:
            return not is_blank(value)
        return value == self.equals

    def check(self, submission: Mapping[str, Any]) -> Optional[str]:
        """Return the warning text when the rule is violated, else None."""
        if not self.triggered(submission) or not is_blank(submission.get(self.then)):
            return None
        if self.message:
            return self.message
        if self.equals is None:
            return f"{self.then} should be specified when {self.when} is provided"
        return f"{self.then} should be specified when {self.when} is {self.equals}"


@dataclass(frozen=True)
class RangeRule(_ScopedRule):
    """A present numeric value must lie within ``[minimum, maximum]``."""

    field: str
    minimum: float
    maximum: float
    form_type: Optional[FormType] = FormType.POSITIVE
    message: Optional[str] = None

    def check(self, submission: Mapping[str, Any]) -> Optional[str]:
        value = _comparable(submission.get(self.field))
        if not isinstance(value, float) or self.minimum <= value <= self.maximum:
            return None
        return self.message or (
            f"{self.field} should be between "
            f"{_format_number(self.minimum)} and {_format_number(self.maximum)}"
        )


@dataclass(frozen=True)
class ComparisonRule(_ScopedRule):
    """
    Warn when ``left * left_factor <op> right * right_factor`` holds.

    Both sides must be present and of the same kind (numbers or dates);
    otherwise the rule is skipped. Factors only scale numbers.
    """

    OPERATORS = {
        ">": operator.gt,
        ">=": operator.ge,
        "<": operator.lt,
        "<=": operator.le,
        "!=": lambda a, b: not math.isclose(a, b) if isinstance(a, float) else a != b,
    }

    left: str
    right: str
    op: str
    left_factor: float = 1
    right_factor: float = 1
    form_type: Optional[FormType] = FormType.POSITIVE
    message: Optional[str] = None

    def __post_init__(self):
        if self.op not in self.OPERATORS:
            raise SchemaConfigurationError(
                f"Comparison {self.left} {self.op} {self.right} uses an unknown operator"
            )

    def check(self, submission: Mapping[str, Any]) -> Optional[str]:
        left = _comparable(submission.get(self.left))
        right = _comparable(submission.get(self.right))
        if left is None or right is None or type(left) is not type(right):
            return None
        if isinstance(left, float):
            left, right = left * self.left_factor, right * self.right_factor
        if not self.OPERATORS[self.op](left, right):
            return None
        return self.message or f"{self.left} is inconsistent with {self.right}"


@dataclass(frozen=True)
class LengthRule(_ScopedRule):
    """A present value must be exactly ``length`` characters long."""

    field: str
    length: int
    form_type: Optional[FormType] = FormType.POSITIVE
    message: Optional[str] = None

    def check(self, submission: Mapping[str, Any]) -> Optional[str]:
        value = submission.get(self.field)
        if is_blank(value) or isinstance(value, bool) or len(str(value).strip()) == self.length:
            return None
        return self.message or f"{self.field} should be {self.length} characters"


Rule = Union[ConditionalRule, RangeRule, ComparisonRule, LengthRule]


# ============================================================================
# PER-TYPE SCHEMA
# ============================================================================

def _freeze_lists(value: Optional[Mapping[FormType, Iterable[str]]]) -> Mapping[FormType, Tuple[str, ...]]:
    return MappingProxyType({k: tuple(v) for k, v in (value or {}).items()})


@dataclass(frozen=True, eq=False)
class VerificationSchema:
    """Static tables for one verification type."""

    verification_type: VerificationType
    table_name: str
    fields: Tuple[FieldDefinition, ...]
    mapping: FieldMappingTable
    required_fields: Mapping[FormType, Tuple[str, ...]]
    conditional_rules: Tuple[ConditionalRule, ...] = ()
    extra_columns: Tuple[str, ...] = ()
    relevant_columns: Optional[Mapping[FormType, Tuple[str, ...]]] = None
    detection_indicators: Optional[Mapping[FormType, Tuple[str, ...]]] = None
    aliases: Tuple[str, ...] = ()
    # Warning rules for validate-and-prepare; None reuses conditional_rules
    prepare_rules: Optional[Tuple[Rule, ...]] = None

    def __post_init__(self):
        # Normalize to immutable containers
        object.__setattr__(self, "fields", tuple(self.fields))
        object.__setattr__(self, "conditional_rules", tuple(self.conditional_rules))
        object.__setattr__(self, "extra_columns", tuple(self.extra_columns))
        object.__setattr__(self, "aliases", tuple(self.aliases))
        object.__setattr__(self, "required_fields", _freeze_lists(self.required_fields))
        if self.relevant_columns is not None:
            object.__setattr__(self, "relevant_columns", _freeze_lists(self.relevant_columns))
        object.__setattr__(self, "detection_indicators", _freeze_lists(self.detection_indicators))
        if self.prepare_rules is not None:
            object.__setattr__(self, "prepare_rules", tuple(self.prepare_rules))
        self._check()

    def _check(self) -> None:
        name = self.verification_type.value
        for form_type in self.required_fields:
            if not isinstance(form_type, FormType):
                raise SchemaConfigurationError(
                    f"{name}: required-field key {form_type!r} is not a FormType"
                )
        for rule in (*self.conditional_rules, *(self.prepare_rules or ())):
            if rule.form_type is not None and not isinstance(rule.form_type, FormType):
                raise SchemaConfigurationError(
                    f"{name}: {type(rule).__name__} {rule!r} has unknown form type "
                    f"{rule.form_type!r}"
                )
        for definition in self.fields:
            if definition.applicable_form_types is not None and not definition.applicable_form_types:
                raise SchemaConfigurationError(
                    f"{name}: field '{definition.name}' applies to no form type"
                )

    # --- derived views ---

    @property
    def all_columns(self) -> List[str]:
        """Every known destination column: mapping targets, then the table's extra columns."""
        columns: Dict[str, None] = dict.fromkeys(self.mapping.destination_columns())
        for column in self.extra_columns:
            columns.setdefault(column, None)
        return list(columns)

    def relevant_columns_for(self, form_type: FormType) -> List[str]:
        """
        Destination columns expected to be filled for ``form_type``.

        Uses the explicit relevance list when the type ships one, otherwise
        the required fields translated through the mapping table.
        """
        if self.relevant_columns is not None:
            return list(self.relevant_columns.get(form_type, ()))
        columns: Dict[str, None] = {}
        for key in self.required_fields.get(form_type, ()):
            column = self.mapping.column_for(key)
            if column:
                columns.setdefault(column, None)
        return list(columns)

    def definition_for(self, key: str) -> Optional[FieldDefinition]:
        for definition in self.fields:
            if definition.name == key or definition.id == key:
                return definition
        return None

    def coercion_kind(self, key: str) -> CoercionKind:
        """
        Storage kind for an incoming key.

        A kind pinned on the mapping entry wins, then the declared value type
        of the field definition, then plain text.
        """
        entry = self.mapping.resolve(key)
        if isinstance(entry, Mapped) and entry.kind is not None:
            return entry.kind
        definition = self.definition_for(key)
        if definition is not None:
            return VALUE_TYPE_COERCION[definition.value_type]
        return CoercionKind.TEXT


# ============================================================================
# ENGINE CONFIGURATION
# ============================================================================

def normalize_type_key(value: str) -> str:
    return " ".join(str(value).strip().upper().split())


class FormSchemaConfig:
    """Immutable set of verification schemas, addressed by type or alias."""

    def __init__(
        self,
        schemas: Iterable[VerificationSchema],
        default_verification_type: VerificationType = VerificationType.RESIDENCE,
    ):
        by_type: Dict[VerificationType, VerificationSchema] = {}
        keys: Dict[str, VerificationType] = {}

        for schema in schemas:
            vtype = schema.verification_type
            if vtype in by_type:
                raise SchemaConfigurationError(f"Duplicate schema for {vtype.value}")
            by_type[vtype] = schema
            for key in (vtype.value, *schema.aliases):
                normalized = normalize_type_key(key)
                if normalized in keys and keys[normalized] is not vtype:
                    raise SchemaConfigurationError(
                        f"Alias '{key}' registered for both {keys[normalized].value} and {vtype.value}"
                    )
                keys[normalized] = vtype

        if default_verification_type not in by_type:
            raise SchemaConfigurationError(
                f"Default verification type {default_verification_type.value} has no schema"
            )

        self._schemas: Mapping[VerificationType, VerificationSchema] = MappingProxyType(by_type)
        self._keys: Mapping[str, VerificationType] = MappingProxyType(keys)
        self.default_verification_type = default_verification_type

    def resolve_type(self, value: Union[str, VerificationType, None]) -> Optional[VerificationType]:
        """Case-insensitive lookup of a verification type or one of its aliases."""
        if value is None:
            return None
        if isinstance(value, VerificationType):
            return value if value in self._schemas else None
        return self._keys.get(normalize_type_key(value))

    def schema_for(self, value: Union[str, VerificationType, None]) -> Optional[VerificationSchema]:
        vtype = self.resolve_type(value)
        return self._schemas[vtype] if vtype is not None else None

    @property
    def default_schema(self) -> VerificationSchema:
        return self._schemas[self.default_verification_type]

    def __iter__(self) -> Iterator[VerificationSchema]:
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)

    def __contains__(self, value: object) -> bool:
        if isinstance(value, (str, VerificationType)):
            return self.resolve_type(value) is not None
        return False
