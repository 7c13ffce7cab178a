"""
Mobile-to-storage field mapping.

Translates the keys a mobile client submits into destination column names
and coerces every value on the way.
"""

import logging
from typing import Any, Dict, Mapping

from caseflow_forms.models.mapping import Ignored, Mapped, VerificationSchema
from caseflow_forms.services.coercion import SchemaCoercer

logger = logging.getLogger(__name__)


class FieldMapper:
    """Maps raw submissions for one verification type to storage columns."""

    def __init__(self, schema: VerificationSchema):
        self.schema = schema
        self.mapping = schema.mapping
        self.coercer = SchemaCoercer(schema)

    def map_to_storage(self, submission: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Build the mapped record for a submission.

        Ignored keys are dropped. Keys without an entry keep their own name,
        unless the table is strict. When a legacy key and its canonical key
        are both present, the one iterated last wins.
        """
        record: Dict[str, Any] = {}

        for key, value in submission.items():
            entry = self.mapping.resolve(key)

            if isinstance(entry, Ignored):
                if self.mapping.strict and not self.mapping.is_known(key):
                    logger.warning(
                        f"Unmapped {self._type_label()} field: {key} - skipping"
                    )
                continue

            column = entry.column if isinstance(entry, Mapped) else key
            record[column] = self.coercer.coerce(key, value)

        return record

    def _type_label(self) -> str:
        return self.schema.verification_type.value.lower().replace("_", "-")
