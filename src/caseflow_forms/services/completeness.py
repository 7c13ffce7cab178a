"""
Destination-completeness population and coverage statistics.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from caseflow_forms.config import Settings, get_settings
from caseflow_forms.models.enums import FormType
from caseflow_forms.models.fields import FieldCoverage
from caseflow_forms.models.mapping import VerificationSchema

logger = logging.getLogger(__name__)


class CompletenessPopulator:
    """Guarantees every known destination column of a table is present."""

    def __init__(self, schema: VerificationSchema, settings: Optional[Settings] = None):
        self.schema = schema
        self.settings = settings or get_settings()

    def resolve_form_type(self, form_type: Union[str, FormType, None]) -> FormType:
        """Unknown form types fall back to the configured default relevance list."""
        if isinstance(form_type, FormType):
            return form_type
        parsed = FormType.parse(form_type)
        if parsed is None:
            return FormType(self.settings.default_form_type.upper())
        return parsed

    def populate(self, record: Mapping[str, Any], form_type: Union[str, FormType, None]) -> Dict[str, Any]:
        """
        Return a copy of ``record`` with every known column present.

        Missing columns default to None. Columns relevant to the form type
        that are still empty are logged; the data is never changed by that
        check.
        """
        complete = dict(record)
        for column in self.schema.all_columns:
            if column not in complete:
                complete[column] = None

        if self.settings.warn_on_missing_relevant_columns:
            self._warn_missing_relevant(complete, self.resolve_form_type(form_type))

        return complete

    def missing_relevant_columns(self, record: Mapping[str, Any], form_type: Union[str, FormType, None]) -> List[str]:
        relevant = self.schema.relevant_columns_for(self.resolve_form_type(form_type))
        return [column for column in relevant if record.get(column) is None]

    def _warn_missing_relevant(self, record: Mapping[str, Any], form_type: FormType) -> None:
        vtype = self.schema.verification_type.value
        for column in self.missing_relevant_columns(record, form_type):
            logger.warning(f"Missing relevant field for {form_type.value} {vtype} form: {column}")


# ============================================================================
# COVERAGE
# ============================================================================

def compute_coverage(record: Mapping[str, Any]) -> FieldCoverage:
    """Count how many columns of a completed record carry a value."""
    total = len(record)
    populated = sum(1 for value in record.values() if value is not None)
    percentage = round(populated / total * 100) if total else 0
    return FieldCoverage(
        total_fields=total,
        populated_fields=populated,
        defaulted_fields=total - populated,
        coverage_percentage=percentage,
    )


def coverage_report(
    record: Mapping[str, Any],
    verification_type: str,
    form_type: str,
) -> str:
    """Render a plain-text coverage summary for a completed record."""
    coverage = compute_coverage(record)
    populated = sorted(column for column, value in record.items() if value is not None)
    defaulted = sorted(column for column, value in record.items() if value is None)

    lines = [
        f"Field coverage report - {verification_type} / {form_type}",
        f"Total fields: {coverage.total_fields}",
        f"Populated fields: {coverage.populated_fields}",
        f"Defaulted fields: {coverage.defaulted_fields}",
        f"Coverage: {coverage.coverage_percentage}%",
        "",
        "Populated:",
        *(f"  - {column}" for column in populated),
        "",
        "Defaulted to null:",
        *(f"  - {column}" for column in defaulted),
    ]
    return "\n".join(lines)
