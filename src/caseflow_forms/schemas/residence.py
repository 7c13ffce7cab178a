"""
Residence verification: the applicant's home address.
"""

from caseflow_forms.models.enums import VerificationType
from caseflow_forms.models.mapping import (
    IGNORED,
    ConditionalRule,
    FieldMappingTable,
    Mapped,
    RangeRule,
    VerificationSchema,
)
from caseflow_forms.schemas.common import (
    AREA_MAPPING,
    AREA_REQUIRED,
    BASE_MAPPING,
    BOOLEAN,
    DATE_KIND,
    DECIMAL,
    ENTRY_RESTRICTED,
    EXTRA_LANDMARK_MAPPING,
    HOLD_RULE,
    INTEGER,
    NSP,
    NUMBER,
    POSITIVE,
    SELECT,
    SHIFTED,
    TEXT,
    TRACED,
    UI_STATE_IGNORED,
    UNTRACEABLE,
    area_assessment_fields,
    field,
    indicators,
    tpc_fields,
)


FIELDS = [
    # --- Basic Information ---
    field("customerName", "Customer Name", TEXT, "Basic Information", 1, True),
    field("outcome", "Verification Outcome", SELECT, "Basic Information", 2, True),
    field("metPersonName", "Met Person Name", TEXT, "Basic Information", 3),
    field("callRemark", "Call Remark", SELECT, "Basic Information", 4),

    # --- Location Details ---
    field("addressLocatable", "Address Locatable", SELECT, "Location Details", 1, True, TRACED),
    field("addressRating", "Address Rating", SELECT, "Location Details", 2, True, TRACED),
    field("locality", "Locality Type", SELECT, "Location Details", 3),
    field("addressStructure", "Address Structure", SELECT, "Location Details", 4),
    field("landmark1", "Landmark 1", TEXT, "Location Details", 5),
    field("landmark2", "Landmark 2", TEXT, "Location Details", 6),
    field("landmark3", "Landmark 3", TEXT, "Location Details", 7),
    field("landmark4", "Landmark 4", TEXT, "Location Details", 8),

    # --- Personal Details (POSITIVE) ---
    field("metPersonRelation", "Met Person Relation", SELECT, "Personal Details", 1, form_types=[POSITIVE]),
    field("metPersonStatus", "Met Person Status", SELECT, "Personal Details", 2),
    field("totalFamilyMembers", "Total Family Members", NUMBER, "Personal Details", 3, form_types=[POSITIVE]),
    field("workingStatus", "Working Status", SELECT, "Personal Details", 4, form_types=[POSITIVE]),
    field("stayingPeriod", "Staying Period", TEXT, "Personal Details", 5, form_types=[POSITIVE]),
    field("stayingStatus", "Staying Status", SELECT, "Personal Details", 6, form_types=[POSITIVE]),

    # --- Document Verification (POSITIVE) ---
    field("documentShownStatus", "Document Shown Status", SELECT, "Document Verification", 1, form_types=[POSITIVE]),
    field("documentType", "Document Type", SELECT, "Document Verification", 2, form_types=[POSITIVE]),

    # --- Property Details ---
    field("houseStatus", "House Status", SELECT, "Property Details", 1, form_types=[POSITIVE, NSP]),
    field("doorColor", "Door Color", TEXT, "Property Details", 2, form_types=[POSITIVE]),
    field("doorNamePlateStatus", "Door Name Plate Status", SELECT, "Property Details", 3, form_types=[POSITIVE]),
    field("nameOnDoorPlate", "Name on Door Plate", TEXT, "Property Details", 4, form_types=[POSITIVE]),

    # --- Third Party Confirmation ---
    *tpc_fields("tpcName1", "tpcName2"),

    # --- Shifting Details (SHIFTED) ---
    field("shiftedPeriod", "Shifted Period", TEXT, "Shifting Details", 1, form_types=[SHIFTED]),
    field("currentLocation", "Current Location", TEXT, "Shifting Details", 2, form_types=[SHIFTED]),
    field("premisesStatus", "Premises Status", SELECT, "Shifting Details", 3, form_types=[SHIFTED]),
    field("roomStatus", "Room Status", SELECT, "Shifting Details", 4, form_types=[SHIFTED]),

    # --- NSP Details ---
    field("stayingPersonName", "Staying Person Name", TEXT, "NSP Details", 1, form_types=[NSP]),
    field("temporaryStay", "Temporary Stay", BOOLEAN, "NSP Details", 2, form_types=[NSP]),

    # --- Entry Restriction Details ---
    field("entryRestrictionReason", "Entry Restriction Reason", TEXT, "Entry Restriction Details", 1, form_types=[ENTRY_RESTRICTED]),
    field("securityPersonName", "Security Person Name", TEXT, "Entry Restriction Details", 2, form_types=[ENTRY_RESTRICTED]),
    field("accessDenied", "Access Denied", BOOLEAN, "Entry Restriction Details", 3, form_types=[ENTRY_RESTRICTED]),
    field("nameOfMetPerson", "Name of Met Person", TEXT, "Entry Restriction Details", 4, form_types=[ENTRY_RESTRICTED]),
    field("metPersonType", "Met Person Type", SELECT, "Entry Restriction Details", 5, form_types=[ENTRY_RESTRICTED]),
    field("applicantStayingStatus", "Applicant Staying Status", SELECT, "Entry Restriction Details", 6, form_types=[ENTRY_RESTRICTED]),

    # --- Contact Details (UNTRACEABLE) ---
    field("contactPerson", "Contact Person", TEXT, "Contact Details", 1, form_types=[UNTRACEABLE]),
    field("alternateContact", "Alternate Contact", TEXT, "Contact Details", 2, form_types=[UNTRACEABLE]),

    # --- Area Assessment ---
    *area_assessment_fields(),
]


MAPPING = FieldMappingTable({
    **UI_STATE_IGNORED,
    **BASE_MAPPING,
    **EXTRA_LANDMARK_MAPPING,
    **AREA_MAPPING,
    "addressFloor": Mapped("address_floor", INTEGER),
    "applicantStayingFloor": Mapped("address_floor", INTEGER),
    "doorNamePlateStatus": Mapped("door_nameplate_status"),
    "nameOnDoorPlate": Mapped("name_on_door_plate"),
    "societyNamePlateStatus": Mapped("society_nameplate_status"),
    "nameOnSocietyBoard": Mapped("name_on_society_board"),
    "companyNamePlateStatus": Mapped("company_nameplate_status"),
    "nameOnCompanyBoard": Mapped("name_on_company_board"),

    # House and person details
    "houseStatus": Mapped("house_status"),
    "roomStatus": Mapped("room_status"),
    "metPersonName": Mapped("met_person_name"),
    "metPersonRelation": Mapped("met_person_relation"),
    "metPersonStatus": Mapped("met_person_status"),
    "stayingPersonName": Mapped("staying_person_name"),
    "totalFamilyMembers": Mapped("total_family_members", INTEGER),
    "totalEarning": Mapped("total_earning", DECIMAL),
    "applicantDob": Mapped("applicant_dob", DATE_KIND),
    "applicantAge": Mapped("applicant_age", INTEGER),
    "workingStatus": Mapped("working_status"),
    "companyName": Mapped("company_name"),
    "stayingPeriod": Mapped("staying_period"),
    "stayingStatus": Mapped("staying_status"),
    "approxArea": Mapped("approx_area", DECIMAL),

    # Documents
    "documentShownStatus": Mapped("document_shown_status"),
    "documentType": Mapped("document_type"),

    # Third party confirmation (residence forms use the tpcName spelling)
    "tpcMetPerson1": Mapped("tpc_met_person1"),
    "tpcName1": Mapped("tpc_name1"),
    "tpcConfirmation1": Mapped("tpc_confirmation1"),
    "tpcMetPerson2": Mapped("tpc_met_person2"),
    "tpcName2": Mapped("tpc_name2"),
    "tpcConfirmation2": Mapped("tpc_confirmation2"),

    # Shifted / entry restricted / untraceable
    "shiftedPeriod": Mapped("shifted_period"),
    "premisesStatus": Mapped("premises_status"),
    "nameOfMetPerson": Mapped("name_of_met_person"),
    "metPersonType": Mapped("met_person_type"),
    "metPerson": Mapped("met_person_type"),
    "metPersonConfirmation": Mapped("met_person_confirmation"),
    "applicantStayingStatus": Mapped("applicant_staying_status"),
    "callRemark": Mapped("call_remark"),

    # Legacy names
    "applicantName": Mapped("met_person_name"),
    "residenceType": Mapped("house_status"),
    "familyMembers": Mapped("total_family_members", INTEGER),
    "addressConfirmed": IGNORED,
    "neighborVerification": IGNORED,
})


REQUIRED_FIELDS = {
    POSITIVE: [
        "addressLocatable", "addressRating", "houseStatus", "metPersonName",
        "metPersonRelation", "totalFamilyMembers", "workingStatus", "stayingPeriod",
        "stayingStatus", "documentShownStatus", "tpcMetPerson1", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    SHIFTED: [
        "addressLocatable", "addressRating", "roomStatus", "metPersonName",
        "metPersonStatus", "shiftedPeriod", "tpcMetPerson1", "premisesStatus",
        "locality", "addressStructure", *AREA_REQUIRED,
    ],
    NSP: [
        "addressLocatable", "addressRating", "houseStatus", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    ENTRY_RESTRICTED: [
        "addressLocatable", "addressRating", "nameOfMetPerson", "metPersonType",
        "metPersonConfirmation", "applicantStayingStatus", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    UNTRACEABLE: [
        "callRemark", "locality", "landmark1", "landmark2", "dominatedArea",
        "otherObservation", "finalStatus",
    ],
}


CONDITIONAL_RULES = [
    ConditionalRule(when="documentShownStatus", equals="Yes", then="documentType"),
    ConditionalRule(when="tpcMetPerson1", equals="Yes", then="tpcName1"),
]

# Warnings raised while preparing a submission for storage
PREPARE_RULES = [
    ConditionalRule(
        when="documentShownStatus", equals="Showed", then="documentType",
        message="documentType should be specified when documentShownStatus is Showed",
    ),
    ConditionalRule(
        when="tpcMetPerson1", then="tpcName1",
        message="tpcName1 should be specified when tpcMetPerson1 is selected",
    ),
    ConditionalRule(
        when="tpcMetPerson1", then="tpcConfirmation1", requires=("tpcName1",),
        message="tpcConfirmation1 should be specified when TPC person 1 is provided",
    ),
    ConditionalRule(
        when="tpcMetPerson2", then="tpcName2",
        message="tpcName2 should be specified when tpcMetPerson2 is selected",
    ),
    RangeRule(field="totalFamilyMembers", minimum=1, maximum=50),
    ConditionalRule(
        when="tpcMetPerson1", then="tpcName1", form_type=SHIFTED,
        message="tpcName1 should be specified when tpcMetPerson1 is selected",
    ),
    ConditionalRule(
        when="houseStatus", equals="Closed", then="stayingPersonName", form_type=NSP,
        message="stayingPersonName should be specified when house status is Closed",
    ),
    ConditionalRule(
        when="houseStatus", equals="Opened", then="metPersonName", form_type=NSP,
        message="metPersonName should be specified when house status is Opened",
    ),
    HOLD_RULE,
    ConditionalRule(when="societyNamePlateStatus", equals="Sighted", then="nameOnSocietyBoard", form_type=None),
    ConditionalRule(when="doorNamePlateStatus", equals="Sighted", then="nameOnDoorPlate", form_type=None),
]


SCHEMA = VerificationSchema(
    verification_type=VerificationType.RESIDENCE,
    table_name="residenceVerificationReports",
    fields=FIELDS,
    mapping=MAPPING,
    required_fields=REQUIRED_FIELDS,
    conditional_rules=CONDITIONAL_RULES,
    prepare_rules=PREPARE_RULES,
    detection_indicators=indicators(
        positive=["applicantName", "familyMembers", "yearsOfStay", "ownershipStatus", "rentAmount",
                  "houseStatus", "totalFamilyMembers", "workingStatus", "stayingStatus",
                  "documentShownStatus"],
        shifted=["shiftedPeriod", "roomStatus", "premisesStatus", "currentLocation",
                 "previousAddress", "metPersonStatus"],
        nsp=["stayingPersonName", "houseStatus", "temporaryStay"],
        entry_restricted=["nameOfMetPerson", "metPersonType", "applicantStayingStatus",
                          "entryRestrictionReason"],
        untraceable=["callRemark", "landmark3", "landmark4", "contactPerson", "alternateContact"],
    ),
)
