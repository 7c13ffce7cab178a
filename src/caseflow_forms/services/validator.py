"""
Required-field and conditional validation.

Missing required fields make a submission invalid. Conditional rules only
produce advisory warnings.
"""

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple, Union

from caseflow_forms.config import Settings
from caseflow_forms.models.enums import FormType
from caseflow_forms.models.fields import ValidationResult, is_blank
from caseflow_forms.models.mapping import Rule, VerificationSchema
from caseflow_forms.services.completeness import CompletenessPopulator, compute_coverage
from caseflow_forms.services.field_mapper import FieldMapper

logger = logging.getLogger(__name__)


class FormValidator:
    """Validates raw submissions for one verification type."""

    def __init__(self, schema: VerificationSchema):
        self.schema = schema

    def required_fields(self, form_type: Optional[FormType]) -> List[str]:
        if form_type is None:
            return []
        return list(self.schema.required_fields.get(form_type, ()))

    def validate(
        self,
        submission: Mapping[str, Any],
        form_type: Union[str, FormType, None],
        rules: Optional[Iterable[Rule]] = None,
    ) -> ValidationResult:
        """
        Check required fields and conditional rules.

        Only None, absent keys and blank strings count as missing; 0 and
        False are present values. An unknown form type has no required
        fields and only triggers rules scoped to every form type.
        ``rules`` replaces the schema's conditional rules when given.
        """
        parsed = form_type if isinstance(form_type, FormType) else FormType.parse(form_type)

        missing = [
            name for name in self.required_fields(parsed)
            if is_blank(submission.get(name))
        ]

        warnings: List[str] = []
        for rule in self.schema.conditional_rules if rules is None else rules:
            if not rule.applies_to(parsed):
                continue
            message = rule.check(submission)
            if message:
                warnings.append(message)

        if missing:
            logger.debug(
                f"{self.schema.verification_type.value} {form_type} submission missing: {', '.join(missing)}"
            )
        return ValidationResult(missing_fields=missing, warnings=warnings)


def validate_and_prepare(
    schema: VerificationSchema,
    submission: Mapping[str, Any],
    form_type: Union[str, FormType, None],
    settings: Optional[Settings] = None,
) -> Tuple[ValidationResult, Dict[str, Any]]:
    """
    Validate a submission and build its complete storage record.

    Warnings come from the schema's prepare rules when it has them, which
    include range and consistency checks. The returned result carries field
    coverage of the completed record.
    """
    result = FormValidator(schema).validate(submission, form_type, schema.prepare_rules)
    mapped = FieldMapper(schema).map_to_storage(submission)
    complete = CompletenessPopulator(schema, settings).populate(mapped, form_type)
    result.coverage = compute_coverage(complete)
    return result, complete
