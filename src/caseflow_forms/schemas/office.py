"""
Office verification: the applicant's place of employment.
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
    DECIMAL,
    DERIVED_IGNORED,
    ENTRY_RESTRICTED,
    EXTRA_LANDMARK_MAPPING,
    HOLD_RULE,
    INTEGER,
    NSP,
    NUMBER,
    POSITIVE,
    SELECT,
    SHIFTED,
    STATUS,
    TEXT,
    TPC_MAPPING,
    TPC_RULE,
    TPC_SELECTED_RULE,
    UI_STATE_IGNORED,
    UNTRACEABLE,
    UNTRACEABLE_MAPPING,
    UNTRACEABLE_REQUIRED,
    area_assessment_fields,
    field,
    indicators,
    met_person_entry_fields,
    tpc_fields,
    untraceable_fields,
)


FIELDS = [
    # --- Basic Information ---
    field("customerName", "Customer Name", TEXT, "Basic Information", 1, True),
    field("outcome", "Verification Outcome", SELECT, "Basic Information", 2, True),
    field("metPersonName", "Met Person Name", TEXT, "Basic Information", 3),
    field("designation", "Designation", TEXT, "Basic Information", 4),

    # --- Office Details ---
    field("officeStatus", "Office Status", SELECT, "Office Details", 1),
    field("officeType", "Office Type", SELECT, "Office Details", 2),
    field("companyNatureOfBusiness", "Company Nature of Business", TEXT, "Office Details", 3),
    field("businessPeriod", "Business Period", TEXT, "Office Details", 4),
    field("staffStrength", "Staff Strength", NUMBER, "Office Details", 5),
    field("workingPeriod", "Working Period", TEXT, "Office Details", 6),
    field("staffSeen", "Staff Seen", NUMBER, "Office Details", 7, form_types=[POSITIVE]),
    field("applicantDesignation", "Applicant Designation", TEXT, "Office Details", 8, form_types=[POSITIVE]),
    field("workingStatus", "Working Status", SELECT, "Office Details", 9, form_types=[POSITIVE]),

    # --- Location Details ---
    field("addressLocatable", "Address Locatable", SELECT, "Location Details", 1, True),
    field("addressRating", "Address Rating", SELECT, "Location Details", 2, True),
    field("locality", "Locality Type", SELECT, "Location Details", 3),
    field("addressStructure", "Address Structure", SELECT, "Location Details", 4),
    field("companyNamePlateStatus", "Company Name Plate Status", SELECT, "Location Details", 5),
    field("nameOnCompanyBoard", "Name on Company Board", TEXT, "Location Details", 6),
    field("landmark1", "Landmark 1", TEXT, "Location Details", 7),
    field("landmark2", "Landmark 2", TEXT, "Location Details", 8),

    # --- Third Party Confirmation ---
    *tpc_fields(),

    # --- Shifting Details (SHIFTED) ---
    field("currentCompanyName", "Current Company Name", TEXT, "Shifting Details", 1, form_types=[SHIFTED]),
    field("oldOfficeShiftedPeriod", "Old Office Shifted Period", TEXT, "Shifting Details", 2, form_types=[SHIFTED]),
    field("currentCompanyPeriod", "Current Company Period", TEXT, "Shifting Details", 3, form_types=[SHIFTED]),
    field("premisesStatus", "Premises Status", SELECT, "Shifting Details", 4, form_types=[SHIFTED]),

    # --- NSP Details ---
    field("officeExistence", "Office Existence", SELECT, "NSP Details", 1, form_types=[NSP]),

    # --- Entry Restriction / Contact ---
    *met_person_entry_fields(),
    *untraceable_fields(),

    # --- Area Assessment ---
    *area_assessment_fields(),
]


MAPPING = FieldMappingTable({
    **UI_STATE_IGNORED,
    **DERIVED_IGNORED,
    **BASE_MAPPING,
    **EXTRA_LANDMARK_MAPPING,
    **TPC_MAPPING,
    **UNTRACEABLE_MAPPING,
    **AREA_MAPPING,
    "companyNamePlateStatus": Mapped("company_nameplate_status"),
    "nameOnBoard": Mapped("name_on_company_board"),
    "nameOnCompanyBoard": Mapped("name_on_company_board"),

    # Office status and details
    "officeStatus": Mapped("office_status"),
    "officeExistence": Mapped("office_existence"),
    "officeType": Mapped("office_type"),
    "companyNatureOfBusiness": Mapped("company_nature_of_business"),
    "businessPeriod": Mapped("business_period"),
    "establishmentPeriod": Mapped("establishment_period"),
    "officeApproxArea": Mapped("office_approx_area", DECIMAL),
    "staffStrength": Mapped("staff_strength", INTEGER),
    "staffSeen": Mapped("staff_seen", INTEGER),

    # Person details
    "metPerson": Mapped("met_person_name"),
    "metPersonName": Mapped("met_person_name"),
    "designation": Mapped("designation"),
    "applicantDesignation": Mapped("applicant_designation"),
    "workingPeriod": Mapped("working_period"),
    "workingStatus": Mapped("working_status"),
    "applicantWorkingPremises": Mapped("applicant_working_premises"),
    "sittingLocation": Mapped("sitting_location"),
    "currentCompanyName": Mapped("current_company_name"),
    "documentShown": Mapped("document_shown"),

    # Shifted / entry restricted
    "shiftedPeriod": Mapped("shifted_period"),
    "oldOfficeShiftedPeriod": Mapped("old_office_shifted_period"),
    "currentCompanyPeriod": Mapped("current_company_period"),
    "premisesStatus": Mapped("premises_status"),
    "nameOfMetPerson": Mapped("name_of_met_person"),
    "metPersonType": Mapped("met_person_type"),
    "metPersonConfirmation": Mapped("met_person_confirmation"),
    "applicantWorkingStatus": Mapped("applicant_working_status"),
    "otherExtraRemark": Mapped("other_extra_remark"),

    # Legacy names from older HR-style office forms
    "companyName": Mapped("company_nature_of_business"),
    "employeeId": Mapped("met_person_name"),
    "workingHours": Mapped("working_period"),
    "department": Mapped("applicant_designation"),
    "joiningDate": Mapped("establishment_period"),
    "monthlySalary": Mapped("working_status"),
    "hrContactName": Mapped("tpc_name1"),
    "hrContactPhone": Mapped("tpc_name2"),
    "officeAddress": Mapped("address_structure"),
    "totalEmployees": Mapped("staff_strength", INTEGER),
    "businessNature": Mapped("company_nature_of_business"),
    "documentsSeen": Mapped("document_shown"),
    "verificationNotes": Mapped("other_observation"),
    "recommendationStatus": Mapped("final_status", STATUS),
    "hrVerification": IGNORED,
    "salaryConfirmed": IGNORED,
})


REQUIRED_FIELDS = {
    POSITIVE: [
        "addressLocatable", "addressRating", "officeStatus", "metPerson",
        "designation", "workingPeriod", "applicantDesignation", "workingStatus",
        "officeType", "companyNatureOfBusiness", "staffStrength", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    SHIFTED: [
        "addressLocatable", "addressRating", "officeStatus", "metPerson",
        "designation", "currentCompanyName", "oldOfficeShiftedPeriod", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    NSP: [
        "addressLocatable", "addressRating", "officeStatus", "officeExistence",
        "metPerson", "designation", "locality", "addressStructure", *AREA_REQUIRED,
    ],
    ENTRY_RESTRICTED: [
        "addressLocatable", "addressRating", "nameOfMetPerson", "metPersonType",
        "metPersonConfirmation", "applicantWorkingStatus", "locality",
        "addressStructure", *AREA_REQUIRED,
    ],
    UNTRACEABLE: UNTRACEABLE_REQUIRED,
}


CONDITIONAL_RULES = [
    ConditionalRule(
        when="officeStatus", equals="Opened", then="staffSeen",
        message="staffSeen should be specified when office is opened",
    ),
    TPC_RULE,
]

PREPARE_RULES = [
    ConditionalRule(
        when="officeStatus", equals="Opened", then="staffSeen",
        message="staffSeen should be specified when office status is Opened",
    ),
    TPC_SELECTED_RULE,
    ConditionalRule(
        when="tpcMetPerson1", then="tpcConfirmation1", requires=("nameOfTpc1",),
        message="tpcConfirmation1 should be specified when TPC person 1 is provided",
    ),
    RangeRule(field="staffStrength", minimum=1, maximum=10000),
    ConditionalRule(
        when="officeStatus", equals="Closed", then="officeExistence", form_type=NSP,
        message="officeExistence should be specified when office status is Closed",
    ),
    HOLD_RULE,
    ConditionalRule(when="companyNamePlateStatus", equals="Sighted", then="nameOnCompanyBoard", form_type=None),
]


SCHEMA = VerificationSchema(
    verification_type=VerificationType.OFFICE,
    table_name="officeVerificationReports",
    fields=FIELDS,
    mapping=MAPPING,
    required_fields=REQUIRED_FIELDS,
    conditional_rules=CONDITIONAL_RULES,
    prepare_rules=PREPARE_RULES,
    detection_indicators=indicators(
        positive=["companyName", "businessType", "numberOfEmployees", "officeArea", "businessHours"],
        shifted=["shiftedPeriod", "currentLocation", "premisesStatus", "previousOfficeAddress"],
        nsp=["temporaryOffice", "businessStatus", "operationalStatus"],
        entry_restricted=["entryRestrictionReason", "securityPersonName", "accessDenied"],
        untraceable=["callRemark", "contactPerson", "businessClosed", "noResponse"],
    ),
)
