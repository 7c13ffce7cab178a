"""
Static schema tables, one module per verification type.

``load_default_config()`` assembles them into the immutable
``FormSchemaConfig`` the engine is built with.
"""

from functools import lru_cache

from caseflow_forms.config import get_settings
from caseflow_forms.models.enums import VerificationType
from caseflow_forms.models.mapping import FormSchemaConfig
from caseflow_forms.schemas import (
    builder,
    business,
    dsa_connector,
    noc,
    office,
    property_apf,
    property_individual,
    residence,
    residence_cum_office,
)

ALL_SCHEMAS = (
    residence.SCHEMA,
    office.SCHEMA,
    business.SCHEMA,
    builder.SCHEMA,
    residence_cum_office.SCHEMA,
    noc.SCHEMA,
    property_apf.SCHEMA,
    property_individual.SCHEMA,
    dsa_connector.SCHEMA,
)


@lru_cache(maxsize=1)
def load_default_config() -> FormSchemaConfig:
    """Build the shipped schema configuration once per process."""
    settings = get_settings()
    return FormSchemaConfig(
        ALL_SCHEMAS,
        default_verification_type=VerificationType(settings.default_verification_type.upper()),
    )


__all__ = ["ALL_SCHEMAS", "load_default_config"]
