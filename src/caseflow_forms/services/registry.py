"""
Field schema registry and section projection.

Looks up the field definitions of a verification type, filters them for one
form type and derives the ordered section list the forms render with.
"""

import logging
from typing import Dict, List, Optional, Union

from caseflow_forms.models.enums import FormType, VerificationType
from caseflow_forms.models.fields import FieldDefinition
from caseflow_forms.models.mapping import FormSchemaConfig, VerificationSchema

logger = logging.getLogger(__name__)

TypeKey = Union[str, VerificationType, None]
FormTypeKey = Union[str, FormType, None]


def resolve_form_type(form_type: FormTypeKey) -> Optional[FormType]:
    if isinstance(form_type, FormType):
        return form_type
    return FormType.parse(form_type)


class FieldSchemaRegistry:
    """Read-only view over the configured field schemas."""

    def __init__(self, config: FormSchemaConfig):
        self.config = config

    def schema_for(self, verification_type: TypeKey) -> Optional[VerificationSchema]:
        return self.config.schema_for(verification_type)

    def get_field_definitions(
        self,
        verification_type: TypeKey,
        form_type: FormTypeKey = None,
    ) -> List[FieldDefinition]:
        """
        Field definitions of a verification type in schema order.

        Without a form type every definition is returned. With one, only the
        unrestricted fields and those applicable to it are kept; an unknown
        form type keeps the unrestricted fields only. Unknown verification
        types give an empty list.
        """
        schema = self.schema_for(verification_type)
        if schema is None:
            return []
        if form_type is None:
            return list(schema.fields)

        parsed = resolve_form_type(form_type)
        view = parsed.value if parsed is not None else str(form_type)
        fields: List[FieldDefinition] = []
        seen: Dict[str, FieldDefinition] = {}
        for definition in schema.fields:
            if not definition.applies_to(parsed):
                continue
            if definition.name in seen:
                logger.warning(
                    f"Duplicate field '{definition.name}' in {schema.verification_type.value} "
                    f"{view} view: keeping the '{seen[definition.name].section}' definition, "
                    f"dropping the '{definition.section}' one"
                )
                continue
            seen[definition.name] = definition
            fields.append(definition)
        return fields

    @staticmethod
    def group_by_section(definitions: List[FieldDefinition]) -> Dict[str, List[FieldDefinition]]:
        """
        Group projected definitions by section title.

        Titles keep first-seen order; each group is sorted by ``order`` and
        ties keep schema order.
        """
        groups: Dict[str, List[FieldDefinition]] = {}
        for definition in definitions:
            groups.setdefault(definition.section, []).append(definition)
        return {
            title: sorted(group, key=lambda definition: definition.order)
            for title, group in groups.items()
        }

    def get_sections(self, verification_type: TypeKey, form_type: FormTypeKey = None) -> List[str]:
        """Section titles in first-seen order."""
        return list(self.group_by_section(self.get_field_definitions(verification_type, form_type)))

    def get_fields_for_section(
        self,
        verification_type: TypeKey,
        section: str,
        form_type: FormTypeKey = None,
    ) -> List[FieldDefinition]:
        groups = self.group_by_section(self.get_field_definitions(verification_type, form_type))
        return groups.get(section, [])
