"""
Form Type Detection
===================

Infers which sub-form (POSITIVE, SHIFTED, NSP, ENTRY_RESTRICTED,
UNTRACEABLE) an agent filled when the client did not say so explicitly.

Detection runs in four stages and stops at the first confident answer:

1. The submitted outcome looked up in the universal outcome table.
2. Per-verification-type indicator fields, weighted by form type.
3. Hand-written patterns over common field combinations.
4. A POSITIVE fallback.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from caseflow_forms.models.enums import FORM_TYPE_OUTCOMES, DetectionMethod, FormType
from caseflow_forms.models.mapping import VerificationSchema

logger = logging.getLogger(__name__)


# ============================================================================
# OUTCOME TABLE
# ============================================================================

# Submitted outcome string -> (form type, confidence). Keys are matched exactly.
UNIVERSAL_OUTCOME_MAPPING: Dict[str, Tuple[FormType, int]] = {
    # Positive outcomes
    "VERIFIED": (FormType.POSITIVE, 95),
    "POSITIVE": (FormType.POSITIVE, 95),
    "Positive & Door Locked": (FormType.POSITIVE, 100),
    "SUCCESSFUL": (FormType.POSITIVE, 90),
    "COMPLETED": (FormType.POSITIVE, 85),

    # Shifted outcomes
    "SHIFTED": (FormType.SHIFTED, 95),
    "Shifted & Door Lock": (FormType.SHIFTED, 100),
    "Shifted & Door Locked": (FormType.SHIFTED, 100),
    "RELOCATED": (FormType.SHIFTED, 90),
    "MOVED": (FormType.SHIFTED, 85),

    # Not staying permanently
    "NSP": (FormType.NSP, 95),
    "NSP & Door Lock": (FormType.NSP, 100),
    "NSP & NSP Door Locked": (FormType.NSP, 100),
    "NOT_STAYING_PERMANENTLY": (FormType.NSP, 90),

    # Entry restricted
    "ERT": (FormType.ENTRY_RESTRICTED, 95),
    "ENTRY_RESTRICTED": (FormType.ENTRY_RESTRICTED, 95),
    "Entry Restricted": (FormType.ENTRY_RESTRICTED, 100),
    "ACCESS_DENIED": (FormType.ENTRY_RESTRICTED, 90),
    "RESTRICTED": (FormType.ENTRY_RESTRICTED, 85),

    # Untraceable
    "UNTRACEABLE": (FormType.UNTRACEABLE, 95),
    "Untraceable": (FormType.UNTRACEABLE, 100),
    "NOT_FOUND": (FormType.UNTRACEABLE, 90),
    "UNREACHABLE": (FormType.UNTRACEABLE, 85),

    # Legacy outcomes
    "NOT_VERIFIED": (FormType.NSP, 80),
    "NEGATIVE": (FormType.NSP, 75),
    "FRAUD": (FormType.NSP, 85),
    "REFER": (FormType.ENTRY_RESTRICTED, 70),
    "HOLD": (FormType.ENTRY_RESTRICTED, 70),
    "PARTIAL": (FormType.ENTRY_RESTRICTED, 75),
}

LEGACY_OUTCOMES = {"NOT_VERIFIED", "NEGATIVE", "FRAUD", "REFER", "HOLD", "PARTIAL"}

# Score added per present indicator field; dict order breaks ties
INDICATOR_WEIGHTS: Dict[FormType, int] = {
    FormType.POSITIVE: 10,
    FormType.SHIFTED: 15,
    FormType.NSP: 12,
    FormType.ENTRY_RESTRICTED: 15,
    FormType.UNTRACEABLE: 20,
}

INDICATOR_THRESHOLD = 70
PATTERN_THRESHOLD = 60
FALLBACK_CONFIDENCE = 50


@dataclass
class FormTypeResult:
    """Detected form type with the evidence it came from."""

    form_type: FormType
    verification_outcome: str
    confidence: int
    detection_method: DetectionMethod

    @classmethod
    def for_type(cls, form_type: FormType, confidence: int, method: DetectionMethod) -> "FormTypeResult":
        return cls(
            form_type=form_type,
            verification_outcome=FORM_TYPE_OUTCOMES[form_type],
            confidence=confidence,
            detection_method=method,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "formType": self.form_type.value,
            "verificationOutcome": self.verification_outcome,
            "confidence": self.confidence,
            "detectionMethod": self.detection_method.value,
        }


def _present(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return bool(value)


def _contains(submission: Mapping[str, Any], key: str, needle: str) -> bool:
    value = submission.get(key)
    return isinstance(value, str) and needle in value.lower()


def submitted_outcome(submission: Mapping[str, Any]) -> Optional[str]:
    for key in ("outcome", "finalStatus", "verificationOutcome"):
        value = submission.get(key)
        if _present(value):
            return str(value)
    return None


# ============================================================================
# DETECTOR
# ============================================================================

class FormTypeDetector:
    """Form-type detection for one verification type (or none)."""

    def __init__(self, schema: Optional[VerificationSchema] = None):
        self.schema = schema

    @property
    def indicators(self) -> Mapping[FormType, Tuple[str, ...]]:
        if self.schema is None or not self.schema.detection_indicators:
            return {}
        return self.schema.detection_indicators

    def detect(self, submission: Mapping[str, Any]) -> FormTypeResult:
        result = (
            self.detect_by_outcome(submission)
            or self.detect_by_indicators(submission)
            or self.detect_by_patterns(submission)
        )
        if result is None:
            result = FormTypeResult.for_type(
                FormType.POSITIVE, FALLBACK_CONFIDENCE, DetectionMethod.DEFAULT_FALLBACK
            )
        logger.debug(
            f"Detected {result.form_type.value} ({result.confidence}%) "
            f"via {result.detection_method.value}"
        )
        return result

    # --- stage 1 ---

    def detect_by_outcome(self, submission: Mapping[str, Any]) -> Optional[FormTypeResult]:
        outcome = submitted_outcome(submission)
        if outcome is None or outcome not in UNIVERSAL_OUTCOME_MAPPING:
            return None
        form_type, confidence = UNIVERSAL_OUTCOME_MAPPING[outcome]
        method = (
            DetectionMethod.LEGACY_MAPPING if outcome in LEGACY_OUTCOMES
            else DetectionMethod.OUTCOME_MAPPING
        )
        return FormTypeResult.for_type(form_type, confidence, method)

    # --- stage 2 ---

    def indicator_scores(self, submission: Mapping[str, Any]) -> Dict[FormType, int]:
        scores = {form_type: 0 for form_type in INDICATOR_WEIGHTS}
        for form_type, fields in self.indicators.items():
            weight = INDICATOR_WEIGHTS[form_type]
            scores[form_type] += weight * sum(1 for name in fields if _present(submission.get(name)))
        return scores

    def detect_by_indicators(self, submission: Mapping[str, Any]) -> Optional[FormTypeResult]:
        if not self.indicators or not submission:
            return None
        scores = self.indicator_scores(submission)
        best = max(scores.values())
        winner = next(form_type for form_type, score in scores.items() if score == best)
        confidence = round(min(95, max(30, best / len(submission) * 100)))
        if confidence <= INDICATOR_THRESHOLD:
            return None
        return FormTypeResult.for_type(winner, confidence, DetectionMethod.FIELD_INDICATORS)

    # --- stage 3 ---

    def detect_by_patterns(self, submission: Mapping[str, Any]) -> Optional[FormTypeResult]:
        met_person = _present(submission.get("metPersonName"))

        if (
            _contains(submission, "callRemark", "not reachable")
            or (_present(submission.get("contactPerson")) and not met_person)
            or _contains(submission, "phoneStatus", "switched off")
        ):
            form_type, confidence = FormType.UNTRACEABLE, 85
        elif (
            (_present(submission.get("currentLocation")) and _present(submission.get("shiftedPeriod")))
            or _contains(submission, "premisesStatus", "vacant")
            or _contains(submission, "addressStatus", "shifted")
        ):
            form_type, confidence = FormType.SHIFTED, 80
        elif (
            _present(submission.get("entryRestrictionReason"))
            or (_present(submission.get("securityPersonName")) and not met_person)
            or _contains(submission, "accessStatus", "denied")
        ):
            form_type, confidence = FormType.ENTRY_RESTRICTED, 75
        elif (
            any(_present(submission.get(key)) for key in ("temporaryStay", "temporaryBusiness", "temporaryOffice"))
            or _contains(submission, "stayingStatus", "temporary")
            or _contains(submission, "businessStatus", "closed")
        ):
            form_type, confidence = FormType.NSP, 70
        else:
            form_type, confidence = FormType.POSITIVE, 40

        if confidence <= PATTERN_THRESHOLD:
            return None
        return FormTypeResult.for_type(form_type, confidence, DetectionMethod.PATTERN_ANALYSIS)

    # --- diagnostics ---

    def analyze(self, submission: Mapping[str, Any]) -> Dict[str, Any]:
        """Detection result plus the evidence that went into it."""
        outcome = submitted_outcome(submission)
        scores = self.indicator_scores(submission)

        patterns: List[str] = []
        if _contains(submission, "callRemark", "not reachable"):
            patterns.append("phone_unreachable")
        if _present(submission.get("shiftedPeriod")) and _present(submission.get("currentLocation")):
            patterns.append("location_shifted")
        if _present(submission.get("entryRestrictionReason")):
            patterns.append("access_restricted")

        outcome_found = outcome is not None and outcome in UNIVERSAL_OUTCOME_MAPPING
        factors: List[str] = []
        if outcome_found:
            factors.append("direct_outcome_mapping")
        if max(scores.values()) > 20:
            factors.append("strong_field_indicators")
        if patterns:
            factors.append("pattern_matches")
        if len(submission) > 10:
            factors.append("comprehensive_data")

        return {
            "result": self.detect(submission).to_dict(),
            "analysis": {
                "outcomeFound": outcome_found,
                "fieldIndicators": {form_type.value: score for form_type, score in scores.items()},
                "patternMatches": patterns,
                "totalFields": len(submission),
                "confidenceFactors": factors,
            },
        }
