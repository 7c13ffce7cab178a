"""
Value Coercion
==============

Turns loosely-typed submitted values into their storage representation.
Coercion never raises: a value that cannot be parsed for its kind becomes
None and the rest of the record is unaffected.
"""

import enum
import json
import logging
import math
import re
from datetime import date, datetime
from typing import Any, Optional

from caseflow_forms.models.enums import CoercionKind
from caseflow_forms.models.mapping import VerificationSchema

logger = logging.getLogger(__name__)


# ============================================================================
# KIND-LEVEL COERCION
# ============================================================================

class ValueCoercer:
    """Coerce raw values to a storage kind."""

    # Final status vocabulary, keyed by lower-case spelling
    STATUS_VALUES = {
        "positive": "Positive",
        "negative": "Negative",
        "refer": "Refer",
        "fraud": "Fraud",
        "hold": "Hold",
    }
    DEFAULT_STATUS = "Refer"

    TRUE_VALUES = {"true", "yes", "y", "1"}
    FALSE_VALUES = {"false", "no", "n", "0"}

    DATE_FORMATS = [
        "%m/%d/%Y",      # 1/15/2025
        "%m/%d/%y",      # 1/15/25
        "%m-%d-%Y",      # 1-15-2025
        "%B %d, %Y",     # January 15, 2025
        "%b %d, %Y",     # Jan 15, 2025
        "%Y-%m-%d",      # 2025-01-15
        "%d %B %Y",      # 15 January 2025
        "%d %b %Y",      # 15 Jan 2025
    ]

    ISO_DATE_PREFIX = re.compile(r"^\d{4}-\d{2}-\d{2}")

    @classmethod
    def coerce_value(cls, value: Any, kind: CoercionKind) -> Any:
        """
        Coerce ``value`` for storage as ``kind``.

        Checks run in a fixed order: blanks, booleans, enum members, mappings
        and lists are handled before the kind is consulted, so a boolean or
        an object is never parsed as a number or a date.
        """
        if value is None:
            return None
        if isinstance(value, str) and not value.strip():
            return None
        if isinstance(value, bool):
            return value
        if isinstance(value, enum.Enum):
            value = value.value
            if isinstance(value, bool):
                return value
        if isinstance(value, dict):
            return json.dumps(value, sort_keys=True, default=str)
        if isinstance(value, (list, tuple, set)):
            value = ",".join(str(item) for item in value if item is not None)

        if kind is CoercionKind.INTEGER:
            return cls.to_integer(value)
        if kind is CoercionKind.DECIMAL:
            return cls.to_decimal(value)
        if kind is CoercionKind.DATE:
            return cls.to_date(value)
        if kind is CoercionKind.BOOLEAN:
            return cls.to_boolean(value)
        if kind is CoercionKind.STATUS:
            return cls.to_status(value)
        return cls.to_text(value)

    @staticmethod
    def to_text(value: Any) -> Optional[str]:
        text = str(value).strip()
        return text or None

    @staticmethod
    def to_integer(value: Any) -> Optional[int]:
        """
        Parse a whole number.

        "12", "12.0" and 12.0 all give 12. Fractional values and text that
        is not a number give None.
        """
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            if math.isfinite(value) and value.is_integer():
                return int(value)
            logger.debug(f"Not a whole number: {value!r}")
            return None
        text = str(value).strip()
        try:
            return int(text)
        except ValueError:
            pass
        try:
            number = float(text)
        except ValueError:
            logger.debug(f"Could not parse integer: {value!r}")
            return None
        if math.isfinite(number) and number.is_integer():
            return int(number)
        logger.debug(f"Not a whole number: {value!r}")
        return None

    @staticmethod
    def to_decimal(value: Any) -> Optional[float]:
        """Parse an amount or area. Thousands separators are ignored."""
        if isinstance(value, (int, float)):
            number = float(value)
        else:
            text = str(value).strip().replace(",", "")
            try:
                number = float(text)
            except ValueError:
                logger.debug(f"Could not parse decimal: {value!r}")
                return None
        if not math.isfinite(number):
            return None
        return number

    @classmethod
    def to_date(cls, value: Any) -> Optional[str]:
        """
        Convert a calendar date to YYYY-MM-DD.

        Handles:
        - 2025-01-15 and 2025-01-15T10:30:00Z -> 2025-01-15
        - 1/15/2025, 1/15/25, 01-15-2025 -> 2025-01-15
        - January 15, 2025 / 15 Jan 2025 -> 2025-01-15
        """
        if isinstance(value, datetime):
            return value.date().isoformat()
        if isinstance(value, date):
            return value.isoformat()
        if not isinstance(value, str):
            logger.debug(f"Could not parse date: {value!r}")
            return None

        text = value.strip()
        if cls.ISO_DATE_PREFIX.match(text):
            try:
                return date.fromisoformat(text[:10]).isoformat()
            except ValueError:
                logger.debug(f"Could not parse date: {value!r}")
                return None

        for fmt in cls.DATE_FORMATS:
            try:
                return datetime.strptime(text, fmt).strftime("%Y-%m-%d")
            except ValueError:
                continue

        logger.debug(f"Could not parse date: {value!r}")
        return None

    @classmethod
    def to_boolean(cls, value: Any) -> Optional[bool]:
        if isinstance(value, (int, float)) and value in (0, 1):
            return bool(value)
        text = str(value).strip().lower()
        if text in cls.TRUE_VALUES:
            return True
        if text in cls.FALSE_VALUES:
            return False
        logger.debug(f"Could not parse boolean: {value!r}")
        return None

    @classmethod
    def to_status(cls, value: Any) -> str:
        """Normalise a final status; unknown values fall back to Refer."""
        status = cls.STATUS_VALUES.get(str(value).strip().lower())
        if status is None:
            logger.warning(f"Unknown status value {value!r} - defaulting to {cls.DEFAULT_STATUS}")
            return cls.DEFAULT_STATUS
        return status


def coerce_value(value: Any, kind: CoercionKind) -> Any:
    """Module-level shortcut for ``ValueCoercer.coerce_value``."""
    return ValueCoercer.coerce_value(value, kind)


# ============================================================================
# KEY-LEVEL COERCION
# ============================================================================

class SchemaCoercer:
    """Coerces values by incoming field key for one verification type."""

    def __init__(self, schema: VerificationSchema):
        self.schema = schema

    def kind_for(self, key: str) -> CoercionKind:
        return self.schema.coercion_kind(key)

    def coerce(self, key: str, value: Any) -> Any:
        return ValueCoercer.coerce_value(value, self.kind_for(key))
