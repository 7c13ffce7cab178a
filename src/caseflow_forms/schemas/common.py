"""
Building blocks shared by the per-verification-type schema tables.

Most verification forms share the same location, third-party confirmation,
outcome-specific and area-assessment blocks. They are defined once here and
assembled by each schema module.
"""

from typing import Dict, Iterable, List, Optional

from caseflow_forms.models.enums import CoercionKind, FormType, ValueType
from caseflow_forms.models.fields import FieldDefinition
from caseflow_forms.models.mapping import (
    IGNORED,
    ComparisonRule,
    ConditionalRule,
    LengthRule,
    Mapped,
    MappingEntry,
    RangeRule,
)


# Short aliases keep the tables readable
TEXT = ValueType.TEXT
NUMBER = ValueType.NUMBER
SELECT = ValueType.SELECT
MULTISELECT = ValueType.MULTISELECT
DATE = ValueType.DATE
BOOLEAN = ValueType.BOOLEAN
TEXTAREA = ValueType.TEXTAREA

INTEGER = CoercionKind.INTEGER
DECIMAL = CoercionKind.DECIMAL
DATE_KIND = CoercionKind.DATE
STATUS = CoercionKind.STATUS

POSITIVE = FormType.POSITIVE
SHIFTED = FormType.SHIFTED
NSP = FormType.NSP
ENTRY_RESTRICTED = FormType.ENTRY_RESTRICTED
UNTRACEABLE = FormType.UNTRACEABLE

# Every outcome where the agent actually reached the address
TRACED = (POSITIVE, SHIFTED, NSP, ENTRY_RESTRICTED)


def field(
    name: str,
    label: str,
    value_type: ValueType,
    section: str,
    order: int,
    required: bool = False,
    form_types: Optional[Iterable[FormType]] = None,
) -> FieldDefinition:
    """Define a field whose id and name are the same key."""
    return FieldDefinition(
        id=name,
        name=name,
        label=label,
        value_type=value_type,
        is_required=required,
        section=section,
        order=order,
        applicable_form_types=frozenset(form_types) if form_types is not None else None,
    )


# =============================================================================
# SHARED FIELD BLOCKS
# =============================================================================

def location_fields(restrict_rating: bool = False) -> List[FieldDefinition]:
    """Address & location block. Untraceable forms never rate the address."""
    rated = TRACED if restrict_rating else None
    return [
        field("addressLocatable", "Address Locatable", SELECT, "Location Details", 1, True, rated),
        field("addressRating", "Address Rating", SELECT, "Location Details", 2, True, rated),
        field("locality", "Locality Type", SELECT, "Location Details", 3),
        field("addressStructure", "Address Structure", SELECT, "Location Details", 4),
        field("addressFloor", "Address Floor", TEXT, "Location Details", 5, form_types=TRACED),
        field("addressStructureColor", "Address Structure Color", TEXT, "Location Details", 6, form_types=TRACED),
        field("doorColor", "Door Color", TEXT, "Location Details", 7, form_types=TRACED),
        field("landmark1", "Landmark 1", TEXT, "Location Details", 8),
        field("landmark2", "Landmark 2", TEXT, "Location Details", 9),
        field("landmark3", "Landmark 3", TEXT, "Location Details", 10, form_types=[UNTRACEABLE]),
        field("landmark4", "Landmark 4", TEXT, "Location Details", 11, form_types=[UNTRACEABLE]),
    ]


def tpc_fields(name_key: str = "nameOfTpc1", second_name_key: str = "nameOfTpc2") -> List[FieldDefinition]:
    section = "Third Party Confirmation"
    shown = [POSITIVE, SHIFTED]
    return [
        field("tpcMetPerson1", "TPC Met Person 1", SELECT, section, 1, form_types=shown),
        field(name_key, "TPC Name 1", TEXT, section, 2, form_types=shown),
        field("tpcConfirmation1", "TPC Confirmation 1", SELECT, section, 3, form_types=shown),
        field("tpcMetPerson2", "TPC Met Person 2", SELECT, section, 4, form_types=shown),
        field(second_name_key, "TPC Name 2", TEXT, section, 5, form_types=shown),
        field("tpcConfirmation2", "TPC Confirmation 2", SELECT, section, 6, form_types=shown),
    ]


def security_entry_fields() -> List[FieldDefinition]:
    """Entry-restricted block for forms that record the security desk."""
    section = "Entry Restriction Details"
    ert = [ENTRY_RESTRICTED]
    return [
        field("entryRestrictionReason", "Entry Restriction Reason", TEXT, section, 1, form_types=ert),
        field("securityPersonName", "Security Person Name", TEXT, section, 2, form_types=ert),
        field("securityConfirmation", "Security Confirmation", SELECT, section, 3, form_types=ert),
    ]


def met_person_entry_fields(working_status: bool = True) -> List[FieldDefinition]:
    """Entry-restricted block for forms that record who was met at the gate."""
    section = "Entry Restriction Details"
    ert = [ENTRY_RESTRICTED]
    fields = [
        field("nameOfMetPerson", "Name of Met Person", TEXT, section, 1, form_types=ert),
        field("metPersonType", "Met Person Type", SELECT, section, 2, form_types=ert),
        field("metPersonConfirmation", "Met Person Confirmation", SELECT, section, 3, form_types=ert),
    ]
    if working_status:
        fields.append(
            field("applicantWorkingStatus", "Applicant Working Status", SELECT, section, 4, form_types=ert)
        )
    return fields


def untraceable_fields() -> List[FieldDefinition]:
    section = "Contact Details"
    untraceable = [UNTRACEABLE]
    return [
        field("contactPerson", "Contact Person", TEXT, section, 1, form_types=untraceable),
        field("callRemark", "Call Remark", SELECT, section, 2, form_types=untraceable),
    ]


def area_assessment_fields() -> List[FieldDefinition]:
    section = "Area Assessment"
    return [
        field("politicalConnection", "Political Connection", SELECT, section, 1),
        field("dominatedArea", "Dominated Area", SELECT, section, 2),
        field("feedbackFromNeighbour", "Feedback From Neighbour", SELECT, section, 3),
        field("otherObservation", "Other Observations", TEXTAREA, section, 4),
        field("holdReason", "Hold Reason", TEXT, section, 5, form_types=TRACED),
        field("finalStatus", "Final Status", SELECT, section, 6, True),
    ]


# =============================================================================
# SHARED MAPPING ENTRIES
# =============================================================================

# UI state and server-derived keys every form drops
UI_STATE_IGNORED: Dict[str, MappingEntry] = {
    "outcome": IGNORED,  # stored separately as verification_outcome
    "images": IGNORED,
    "selfieImages": IGNORED,
    "id": IGNORED,
    "caseId": IGNORED,
    "timestamp": IGNORED,
    "isValid": IGNORED,
    "errors": IGNORED,
}

# Derived server-side on every form except RESIDENCE, which stores the submitted value
DERIVED_IGNORED: Dict[str, MappingEntry] = {
    "verificationMethod": IGNORED,
}

BASE_MAPPING: Dict[str, MappingEntry] = {
    "remarks": Mapped("remarks"),
    "finalStatus": Mapped("final_status"),
    "addressLocatable": Mapped("address_locatable"),
    "addressRating": Mapped("address_rating"),
    "locality": Mapped("locality"),
    "addressStructure": Mapped("address_structure"),
    "addressFloor": Mapped("address_floor"),
    "addressStructureColor": Mapped("address_structure_color"),
    "doorColor": Mapped("door_color"),
    "landmark1": Mapped("landmark1"),
    "landmark2": Mapped("landmark2"),
}

# Untraceable forms record two extra landmarks
EXTRA_LANDMARK_MAPPING: Dict[str, MappingEntry] = {
    "landmark3": Mapped("landmark3"),
    "landmark4": Mapped("landmark4"),
}

TPC_MAPPING: Dict[str, MappingEntry] = {
    "tpcMetPerson1": Mapped("tpc_met_person1"),
    "nameOfTpc1": Mapped("tpc_name1"),
    "tpcConfirmation1": Mapped("tpc_confirmation1"),
    "tpcMetPerson2": Mapped("tpc_met_person2"),
    "nameOfTpc2": Mapped("tpc_name2"),
    "tpcConfirmation2": Mapped("tpc_confirmation2"),
}

AREA_MAPPING: Dict[str, MappingEntry] = {
    "politicalConnection": Mapped("political_connection"),
    "dominatedArea": Mapped("dominated_area"),
    "feedbackFromNeighbour": Mapped("feedback_from_neighbour"),
    "otherObservation": Mapped("other_observation"),
    "holdReason": Mapped("hold_reason"),
    "recommendationStatus": Mapped("recommendation_status"),
}

UNTRACEABLE_MAPPING: Dict[str, MappingEntry] = {
    "contactPerson": Mapped("contact_person"),
    "callRemark": Mapped("call_remark"),
}


# =============================================================================
# SHARED REQUIRED LISTS AND RULES
# =============================================================================

AREA_REQUIRED = [
    "politicalConnection", "dominatedArea", "feedbackFromNeighbour",
    "otherObservation", "finalStatus",
]

UNTRACEABLE_REQUIRED = [
    "contactPerson", "callRemark", "locality", "landmark1", "landmark2",
    "dominatedArea", "otherObservation", "finalStatus",
]

TPC_RULE = ConditionalRule(when="tpcMetPerson1", equals="Yes", then="nameOfTpc1")

# Prepare-time rules repeated across the validator tables
HOLD_RULE = ConditionalRule(
    when="finalStatus", equals="Hold", then="holdReason", form_type=None,
    message="holdReason should be specified when finalStatus is Hold",
)
TPC_SELECTED_RULE = ConditionalRule(
    when="tpcMetPerson1", then="nameOfTpc1",
    message="nameOfTpc1 should be specified when tpcMetPerson1 is selected",
)
PROPERTY_AREA_RULE = RangeRule(
    field="propertyArea", minimum=1, maximum=100000,
    message="propertyArea should be between 1 and 100000 sq ft",
)
PROPERTY_VALUE_RULE = ComparisonRule(
    left="propertyValue", op=">", right="marketValue", right_factor=1.5,
    message="propertyValue seems significantly higher than marketValue",
)
CONTACT_NUMBER_RULE = LengthRule(
    field="contactNumber", length=10, message="contactNumber should be 10 digits",
)
PROPERTY_NOT_FOUND_RULE = ConditionalRule(
    when="propertyStatus", equals="Not Found", then="otherObservation", form_type=NSP,
    message="otherObservation should be specified when property status is Not Found",
)


def indicators(
    positive: Iterable[str],
    shifted: Iterable[str],
    nsp: Iterable[str],
    entry_restricted: Iterable[str],
    untraceable: Iterable[str],
) -> Dict[FormType, List[str]]:
    """Form-type detection indicator lists, one per form type."""
    return {
        POSITIVE: list(positive),
        SHIFTED: list(shifted),
        NSP: list(nsp),
        ENTRY_RESTRICTED: list(entry_restricted),
        UNTRACEABLE: list(untraceable),
    }
