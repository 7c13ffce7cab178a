"""
Submission section builder.

Combines the projected schema with one raw submission to produce the
sections a reviewer sees. Every applicable field is shown, filled or not.
"""

import re
from typing import Any, List, Mapping, Optional

from caseflow_forms.config import Settings, get_settings
from caseflow_forms.models.fields import (
    FieldDefinition,
    PopulatedField,
    Section,
    read_field_value,
)
from caseflow_forms.services.registry import FieldSchemaRegistry, FormTypeKey, TypeKey

BASIC_INFORMATION = "Basic Information"


def section_id(title: str) -> str:
    return re.sub(r"\s+", "_", title.strip().lower())


class SectionBuilder:
    """Builds display sections for a submission."""

    def __init__(self, registry: FieldSchemaRegistry, settings: Optional[Settings] = None):
        self.registry = registry
        self.settings = settings or get_settings()

    def build(
        self,
        submission: Mapping[str, Any],
        verification_type: TypeKey,
        form_type: FormTypeKey,
    ) -> List[Section]:
        sections: List[Section] = []
        form_label = form_type.value if hasattr(form_type, "value") else form_type

        # One projection per build
        projected = self.registry.get_field_definitions(verification_type, form_type)
        for title, definitions in self.registry.group_by_section(projected).items():
            order = len(sections) + 1
            sections.append(Section(
                id=section_id(title),
                title=title,
                description=f"{title} fields for {form_label} verification",
                fields=[self.populate_field(definition, submission) for definition in definitions],
                order=order,
                is_required=title == BASIC_INFORMATION,
                default_expanded=order <= self.settings.expanded_section_count,
            ))

        return sections

    def populate_field(self, definition: FieldDefinition, submission: Mapping[str, Any]) -> PopulatedField:
        value = read_field_value(submission, definition)
        if value == "":
            value = None
        return PopulatedField(
            id=definition.id,
            name=definition.name,
            label=definition.label,
            type=definition.value_type,
            value=value,
            display_value=value if value is not None else self.settings.not_provided_text,
            is_required=definition.is_required,
        )
